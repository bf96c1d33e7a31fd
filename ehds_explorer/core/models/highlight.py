from dataclasses import dataclass, field
from enum import Enum
from typing import List


class SegmentKind(str, Enum):
    PLAIN = "plain"
    HIGHLIGHTED = "highlighted"


@dataclass(frozen=True)
class TextRange:
    """Полуоткрытый диапазон символов [start, end) в исходном тексте"""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class DisplayWindow:
    """Отображаемая часть текста"""

    text: str  # Подстрока исходного текста
    offset: int  # Смещение начала окна в исходном тексте
    has_prefix_ellipsis: bool = False  # Окно не доходит до начала текста
    has_suffix_ellipsis: bool = False  # Окно не доходит до конца текста


@dataclass(frozen=True)
class Segment:
    """Непрерывный участок обычного или выделенного текста"""

    kind: SegmentKind
    text: str

    @property
    def is_highlighted(self) -> bool:
        return self.kind == SegmentKind.HIGHLIGHTED


@dataclass(frozen=True)
class HighlightResult:
    """Результат подсветки: сегменты окна и признаки усечения"""

    display_text: str
    offset: int = 0
    prefix_truncated: bool = False
    suffix_truncated: bool = False
    segments: List[Segment] = field(default_factory=list)
