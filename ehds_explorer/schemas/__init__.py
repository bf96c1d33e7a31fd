from .common import ProcessingStatus
from .content import ContentSearchResponse, SearchMeta
from .text import HighlightRequest, HighlightResponse, RomanNumeralResponse

__all__ = [
    "ProcessingStatus",
    "ContentSearchResponse",
    "SearchMeta",
    "HighlightRequest",
    "HighlightResponse",
    "RomanNumeralResponse",
]
