from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, computed_field

from ehds_explorer.core.exceptions.roman import RomanNumeralError
from ehds_explorer.core.utils.roman_numerals import from_roman, to_roman


class ContentType(str, Enum):
    ARTICLE = "article"
    RECITAL = "recital"
    CHAPTER = "chapter"
    ANNEX = "annex"
    DEFINITION = "definition"


@dataclass(frozen=True)
class ContentReference:
    """Прямая ссылка на элемент регламента ("article 5", "annex II")"""

    content_type: ContentType
    key: str  # Номер статьи/соображения/главы или римский идентификатор приложения


class Chapter(BaseModel):
    """Глава регламента"""

    id: int
    chapter_number: int
    title: str
    description: Optional[str] = None

    class Config:
        from_attributes = True

    @computed_field
    @property
    def numeral(self) -> str:
        """Номер главы римскими цифрами"""
        return to_roman(self.chapter_number)


class Article(BaseModel):
    """Статья регламента"""

    id: int
    article_number: int
    title: str
    content: str
    chapter_id: Optional[int] = None

    class Config:
        from_attributes = True


class Recital(BaseModel):
    """Соображение (преамбула) регламента"""

    id: int
    recital_number: int
    content: str
    related_articles: Optional[List[int]] = None

    class Config:
        from_attributes = True


class Definition(BaseModel):
    """Определение термина из статьи 2"""

    id: int
    term: str
    definition: str
    source_article: Optional[int] = None

    class Config:
        from_attributes = True


class Annex(BaseModel):
    """Приложение к регламенту, идентификатор - римское число"""

    id: str
    title: str
    content: str

    class Config:
        from_attributes = True

    @computed_field
    @property
    def number(self) -> Optional[int]:
        """Номер приложения арабскими цифрами, None для нечислового id"""
        try:
            return from_roman(self.id)
        except RomanNumeralError:
            return None
