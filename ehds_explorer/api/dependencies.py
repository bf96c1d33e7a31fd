from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ehds_explorer.core.database import get_async_session
from ehds_explorer.repositories.content_repository import ContentRepository
from ehds_explorer.services.content_service import ContentService


def get_content_service(
    session: AsyncSession = Depends(get_async_session),
) -> ContentService:
    """Dependency для получения сервиса контента с автоматическим управлением сессией"""
    return ContentService(repository=ContentRepository(session=session))
