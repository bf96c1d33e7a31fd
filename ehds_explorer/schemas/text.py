from typing import List, Optional

from pydantic import BaseModel, Field

from ehds_explorer.core.models.highlight import Segment
from ehds_explorer.schemas.common import ProcessingStatus


class HighlightRequest(BaseModel):
    """Запрос на подсветку слов в тексте"""

    text: str = Field(..., description="Исходный текст")
    query: str = Field("", description="Поисковый запрос")
    max_length: Optional[int] = Field(
        None,
        description="Максимальная длина окна, неположительное значение - без усечения",
    )


class HighlightResponse(BaseModel):
    """Ответ с сегментами текста"""

    status: ProcessingStatus = Field(..., description="Статус обработки")
    display_text: str = Field(..., description="Отображаемый текст окна")
    offset: int = Field(..., description="Смещение окна в исходном тексте")
    prefix_truncated: bool = Field(..., description="Текст усечен в начале")
    suffix_truncated: bool = Field(..., description="Текст усечен в конце")
    segments: List[Segment] = Field(..., description="Обычные и выделенные сегменты")

    class Config:
        use_enum_values = True


class RomanNumeralResponse(BaseModel):
    """Число в арабской и римской записи"""

    number: int = Field(..., description="Арабская запись")
    roman: str = Field(..., description="Каноническая римская запись")
