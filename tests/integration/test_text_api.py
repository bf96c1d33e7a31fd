import pytest
from httpx import AsyncClient


@pytest.mark.integration
class TestHighlightEndpoint:
    """Интеграционные тесты для эндпоинта подсветки"""

    @pytest.mark.asyncio
    async def test_highlight(self, test_client: AsyncClient):
        """Тест подсветки двух слов"""
        response = await test_client.post(
            "/api/v1/text/highlight",
            json={"text": "The quick brown fox", "query": "quick fox"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "success"
        assert data["segments"] == [
            {"kind": "plain", "text": "The "},
            {"kind": "highlighted", "text": "quick"},
            {"kind": "plain", "text": " brown "},
            {"kind": "highlighted", "text": "fox"},
        ]
        assert data["prefix_truncated"] is False
        assert data["suffix_truncated"] is False
        assert data["display_text"] == "The quick brown fox"

    @pytest.mark.asyncio
    async def test_highlight_with_window(self, test_client: AsyncClient, long_text):
        """Тест усечения длинного текста вокруг совпадения"""
        response = await test_client.post(
            "/api/v1/text/highlight",
            json={"text": long_text, "query": "target", "max_length": 50},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["display_text"] == long_text[-50:]
        assert data["offset"] == 150
        assert data["prefix_truncated"] is True
        assert data["suffix_truncated"] is False

    @pytest.mark.asyncio
    async def test_highlight_non_positive_max_length(
        self, test_client: AsyncClient, long_text
    ):
        """Тест: неположительная длина окна не усекает текст"""
        response = await test_client.post(
            "/api/v1/text/highlight",
            json={"text": long_text, "query": "target", "max_length": -1},
        )

        assert response.status_code == 200
        assert response.json()["display_text"] == long_text

    @pytest.mark.asyncio
    async def test_highlight_empty_query(self, test_client: AsyncClient):
        """Тест пустого запроса"""
        response = await test_client.post(
            "/api/v1/text/highlight", json={"text": "word"}
        )

        assert response.status_code == 200
        assert response.json()["segments"] == [{"kind": "plain", "text": "word"}]

    @pytest.mark.asyncio
    async def test_highlight_requires_text(self, test_client: AsyncClient):
        """Тест: без текста запрос некорректен"""
        response = await test_client.post(
            "/api/v1/text/highlight", json={"query": "health"}
        )
        assert response.status_code == 422


@pytest.mark.integration
class TestRomanEndpoints:
    """Интеграционные тесты для преобразования римских чисел"""

    @pytest.mark.asyncio
    async def test_number_to_roman(self, test_client: AsyncClient):
        response = await test_client.get("/api/v1/text/roman", params={"number": 42})
        assert response.status_code == 200
        assert response.json() == {"number": 42, "roman": "XLII"}

    @pytest.mark.asyncio
    async def test_number_out_of_range(self, test_client: AsyncClient):
        response = await test_client.get("/api/v1/text/roman", params={"number": 0})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_number_not_integer(self, test_client: AsyncClient):
        response = await test_client.get("/api/v1/text/roman", params={"number": "abc"})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_roman_to_number(self, test_client: AsyncClient):
        """Тест: ответ содержит каноническую запись"""
        response = await test_client.get("/api/v1/text/roman/xlii")
        assert response.status_code == 200
        assert response.json() == {"number": 42, "roman": "XLII"}

        response = await test_client.get("/api/v1/text/roman/IIII")
        assert response.json() == {"number": 4, "roman": "IV"}

    @pytest.mark.asyncio
    async def test_invalid_roman(self, test_client: AsyncClient):
        response = await test_client.get("/api/v1/text/roman/ABC")
        assert response.status_code == 400


@pytest.mark.integration
class TestServiceEndpoints:

    @pytest.mark.asyncio
    async def test_health(self, test_client: AsyncClient):
        response = await test_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    @pytest.mark.asyncio
    async def test_root(self, test_client: AsyncClient):
        response = await test_client.get("/")
        assert response.status_code == 200
        assert response.json()["message"] == "EHDS Explorer API"
