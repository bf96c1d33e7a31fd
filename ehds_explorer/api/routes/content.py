from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from ehds_explorer.api.dependencies import get_content_service
from ehds_explorer.core.exceptions.content import (
    ContentDatabaseError,
    ContentError,
    ContentNotFoundError,
    ContentValidationError,
)
from ehds_explorer.core.logger import logger
from ehds_explorer.core.models.content import Annex, Article, Chapter, Recital
from ehds_explorer.core.utils.text_normalizer import MAX_REFERENCE_NUMBER
from ehds_explorer.schemas.common import ProcessingStatus
from ehds_explorer.schemas.content import ContentSearchResponse, SearchMeta
from ehds_explorer.services.content_service import ContentService

router = APIRouter(prefix="/api/v1/content", tags=["content"])


def _to_http_error(e: ContentError) -> HTTPException:
    """Преобразует доменную ошибку в HTTP-ответ"""
    if isinstance(e, ContentNotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, ContentValidationError):
        return HTTPException(status_code=400, detail=str(e))
    if isinstance(e, ContentDatabaseError):
        logger.error(f"Ошибка БД: {e}")
        return HTTPException(status_code=500, detail="Внутренняя ошибка сервера")
    return HTTPException(status_code=400, detail=str(e))


@router.get("/search", response_model=ContentSearchResponse)
async def search_content(
    query: str = Query(..., description="Строка поиска", min_length=1),
    limit: Optional[int] = Query(
        None, description="Максимум результатов на тип контента", ge=1, le=100
    ),
    content_service: ContentService = Depends(get_content_service),
) -> ContentSearchResponse:
    """
    Поиск по статьям, соображениям, главам, приложениям и определениям

    Args:
    - query: Строка поиска или прямая ссылка ("article 5", "annex II")
    - limit: Максимум результатов на тип контента (опционально)

    Returns:
    - ContentSearchResponse: Результаты с фрагментами текста и подсветкой

    Raises:
    - HTTPException: 500 - Внутренняя ошибка сервера
    """
    try:
        results = await content_service.search(query, limit)
        return ContentSearchResponse(
            status=ProcessingStatus.SUCCESS,
            meta=SearchMeta(
                query=query,
                direct_match=results.direct_match,
                total_results=results.total,
            ),
            results=results,
        )
    except ContentError as e:
        raise _to_http_error(e)


@router.get("/articles/{article_number}", response_model=Article)
async def get_article(
    article_number: int = Path(..., ge=1, le=MAX_REFERENCE_NUMBER),
    content_service: ContentService = Depends(get_content_service),
) -> Article:
    """
    Получение статьи по номеру

    Raises:
    - HTTPException: 404 - Статья не найдена
    - HTTPException: 500 - Внутренняя ошибка сервера
    """
    try:
        return await content_service.get_article(article_number)
    except ContentError as e:
        raise _to_http_error(e)


@router.get("/recitals/{recital_number}", response_model=Recital)
async def get_recital(
    recital_number: int = Path(..., ge=1, le=MAX_REFERENCE_NUMBER),
    content_service: ContentService = Depends(get_content_service),
) -> Recital:
    """Получение соображения по номеру"""
    try:
        return await content_service.get_recital(recital_number)
    except ContentError as e:
        raise _to_http_error(e)


@router.get("/chapters/{chapter_number}", response_model=Chapter)
async def get_chapter(
    chapter_number: int = Path(..., ge=1, le=MAX_REFERENCE_NUMBER),
    content_service: ContentService = Depends(get_content_service),
) -> Chapter:
    """Получение главы по номеру"""
    try:
        return await content_service.get_chapter(chapter_number)
    except ContentError as e:
        raise _to_http_error(e)


@router.get("/annexes/{annex_id}", response_model=Annex)
async def get_annex(
    annex_id: str,
    content_service: ContentService = Depends(get_content_service),
) -> Annex:
    """
    Получение приложения по римскому номеру ("II") или арабскому ("2")

    Raises:
    - HTTPException: 400 - Некорректный идентификатор
    - HTTPException: 404 - Приложение не найдено
    - HTTPException: 500 - Внутренняя ошибка сервера
    """
    try:
        return await content_service.get_annex(annex_id)
    except ContentError as e:
        raise _to_http_error(e)
