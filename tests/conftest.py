from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from ehds_explorer.api.dependencies import get_content_service
from ehds_explorer.main import app


@pytest.fixture
def mock_content_service():
    """Мок сервиса контента вместо реальной БД"""
    return AsyncMock()


@pytest_asyncio.fixture
async def test_client(mock_content_service):
    """Тестовый HTTP клиент с переопределенными зависимостями"""
    app.dependency_overrides[get_content_service] = lambda: mock_content_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def long_text():
    """Текст длиной 200 символов с совпадением у конца"""
    return "x" * 190 + "target" + "yyyy"
