from dataclasses import asdict

from fastapi import APIRouter, HTTPException, Query

from ehds_explorer.core.exceptions.roman import RomanNumeralError
from ehds_explorer.core.logger import logger
from ehds_explorer.core.utils.highlighter import highlight
from ehds_explorer.core.utils.roman_numerals import from_roman, to_roman
from ehds_explorer.schemas.common import ProcessingStatus
from ehds_explorer.schemas.text import (
    HighlightRequest,
    HighlightResponse,
    RomanNumeralResponse,
)

router = APIRouter(prefix="/api/v1/text", tags=["text"])


@router.post("/highlight", response_model=HighlightResponse)
async def highlight_text(request: HighlightRequest) -> HighlightResponse:
    """
    Подсветка слов запроса в тексте

    Args:
    - text: Исходный текст
    - query: Поисковый запрос, слова из одного символа игнорируются
    - max_length: Максимальная длина окна (опционально)

    Returns:
    - HighlightResponse: Окно текста, разбитое на обычные и выделенные сегменты
    """
    result = highlight(request.text, request.query, request.max_length)
    logger.debug(
        f"Подсветка: {len(result.segments)} сегментов, окно {len(result.display_text)} символов"
    )
    return HighlightResponse(status=ProcessingStatus.SUCCESS, **asdict(result))


@router.get("/roman", response_model=RomanNumeralResponse)
async def number_to_roman(
    number: int = Query(..., description="Число от 1 до 3999"),
) -> RomanNumeralResponse:
    """
    Преобразование числа в римскую запись

    Raises:
    - HTTPException: 400 - Число вне допустимого диапазона
    """
    try:
        return RomanNumeralResponse(number=number, roman=to_roman(number))
    except RomanNumeralError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/roman/{roman}", response_model=RomanNumeralResponse)
async def roman_to_number(roman: str) -> RomanNumeralResponse:
    """
    Преобразование римской записи в число

    Raises:
    - HTTPException: 400 - Некорректное римское число
    """
    try:
        number = from_roman(roman)
        return RomanNumeralResponse(number=number, roman=to_roman(number))
    except RomanNumeralError as e:
        raise HTTPException(status_code=400, detail=str(e))
