"""
Нормализация текста регламента и распознавание прямых ссылок в запросе
"""

import re
from typing import Optional

from ehds_explorer.core.models.content import ContentReference, ContentType
from ehds_explorer.core.utils.roman_numerals import (
    MAX_ROMAN,
    MIN_ROMAN,
    is_roman_numeral,
    to_roman,
)

# Номера хранятся в колонках Integer (int4)
MAX_REFERENCE_NUMBER = 2**31 - 1

_MARKDOWN_RE = re.compile(r"[#*`_]")
_WHITESPACE_RE = re.compile(r"\s+")

_REFERENCE_PATTERNS = (
    (ContentType.ARTICLE, re.compile(r"^(?:article|art\.?)\s*(\d+)$", re.IGNORECASE)),
    (ContentType.RECITAL, re.compile(r"^(?:recital|rec\.?)\s*(\d+)$", re.IGNORECASE)),
    (ContentType.CHAPTER, re.compile(r"^(?:chapter|ch\.?)\s*(\d+)$", re.IGNORECASE)),
    (ContentType.ANNEX, re.compile(r"^annex\s*([IVXLCDM]+|\d+)$", re.IGNORECASE)),
)

# Отдельное число считаем номером статьи
_NUMBER_RE = re.compile(r"^(\d+)$")


def normalize_text(text: Optional[str]) -> str:
    """Убирает markdown-разметку и лишние пробелы"""
    if not text:
        return ""
    without_markdown = _MARKDOWN_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", without_markdown).strip()


def _annex_key(raw: str) -> Optional[str]:
    """Идентификатор приложения: римское число в верхнем регистре"""
    if raw.isdecimal():
        number = int(raw)
        if not MIN_ROMAN <= number <= MAX_ROMAN:
            return None
        return to_roman(number)
    upper = raw.upper()
    return upper if is_roman_numeral(upper) else None


def _numbered_reference(content_type: ContentType, raw: str) -> Optional[ContentReference]:
    number = int(raw)
    if number > MAX_REFERENCE_NUMBER:
        return None
    return ContentReference(content_type, str(number))


def parse_reference(query: str) -> Optional[ContentReference]:
    """
    Распознает прямую ссылку на элемент регламента

    Args:
        query: str - поисковый запрос ("article 5", "rec. 12", "annex II", "42")

    Returns:
        Optional[ContentReference]: Ссылка или None, если запрос - обычный текст
            или номер не помещается в колонку БД
    """
    trimmed = (query or "").strip()
    if not trimmed:
        return None

    for content_type, pattern in _REFERENCE_PATTERNS:
        match = pattern.match(trimmed)
        if not match:
            continue
        if content_type == ContentType.ANNEX:
            key = _annex_key(match.group(1))
            return ContentReference(content_type, key) if key else None
        return _numbered_reference(content_type, match.group(1))

    number_match = _NUMBER_RE.match(trimmed)
    if number_match:
        return _numbered_reference(ContentType.ARTICLE, number_match.group(1))

    return None
