from dataclasses import dataclass, field
from typing import List, Optional

from ehds_explorer.core.models.content import ContentType
from ehds_explorer.core.models.highlight import HighlightResult


@dataclass
class SearchHit:
    """Найденный элемент регламента с фрагментом текста"""

    content_type: ContentType
    key: str  # Номер элемента или идентификатор приложения
    title: Optional[str]
    snippet: HighlightResult  # Фрагмент текста с подсветкой запроса
    rank: float = 0.0


@dataclass
class SearchResults:
    """Результаты поиска, сгруппированные по типам контента"""

    articles: List[SearchHit] = field(default_factory=list)
    recitals: List[SearchHit] = field(default_factory=list)
    chapters: List[SearchHit] = field(default_factory=list)
    annexes: List[SearchHit] = field(default_factory=list)
    definitions: List[SearchHit] = field(default_factory=list)
    direct_match: bool = False  # Запрос распознан как прямая ссылка

    @property
    def total(self) -> int:
        return (
            len(self.articles)
            + len(self.recitals)
            + len(self.chapters)
            + len(self.annexes)
            + len(self.definitions)
        )
