from pydantic import BaseModel, Field

from ehds_explorer.core.models.search import SearchResults
from ehds_explorer.schemas.common import ProcessingStatus


class SearchMeta(BaseModel):
    """Метаинформация о поиске"""

    query: str = Field(..., description="Поисковый запрос")
    direct_match: bool = Field(..., description="Запрос распознан как прямая ссылка")
    total_results: int = Field(..., description="Общее количество результатов")


class ContentSearchResponse(BaseModel):
    """Ответ на запрос поиска по регламенту"""

    status: ProcessingStatus = Field(..., description="Статус обработки")
    meta: SearchMeta = Field(..., description="Метаинформация о поиске")
    results: SearchResults = Field(..., description="Результаты по типам контента")

    class Config:
        use_enum_values = True
