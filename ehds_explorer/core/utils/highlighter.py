"""
Подсветка слов запроса в тексте с выбором окна отображения
"""

from typing import Iterable, List, Optional

from ehds_explorer.core.models.highlight import (
    DisplayWindow,
    HighlightResult,
    Segment,
    SegmentKind,
    TextRange,
)


def _fold_case(text: str) -> str:
    """
    Приводит текст к нижнему регистру посимвольно, сохраняя длину строки.

    Символы, у которых нижний регистр имеет другую длину (например "İ"),
    остаются как есть, чтобы позиции совпадений совпадали с исходным текстом.
    """
    folded = []
    for char in text:
        lower = char.lower()
        folded.append(lower if len(lower) == 1 else char)
    return "".join(folded)


def normalize_max_length(max_length: Optional[int]) -> Optional[int]:
    """Неположительная длина окна означает отсутствие усечения"""
    if max_length is None or max_length <= 0:
        return None
    return max_length


def extract_query_words(query: str) -> List[str]:
    """Уникальные слова запроса длиннее одного символа в порядке появления"""
    words: List[str] = []
    for word in _fold_case(query).split():
        if len(word) > 1 and word not in words:
            words.append(word)
    return words


def find_matches(text: str, query: str) -> List[TextRange]:
    """
    Находит все вхождения каждого слова запроса без учета регистра

    Курсор сдвигается на один символ после каждого вхождения, поэтому
    перекрывающиеся вхождения тоже находятся ("aa" в "aaa" дает 0 и 1).

    Args:
        text: str - исходный текст
        query: str - поисковый запрос

    Returns:
        List[TextRange]: Диапазоны совпадений (без гарантии порядка)
    """
    if not text:
        return []

    lower_text = _fold_case(text)
    matches: List[TextRange] = []
    for word in extract_query_words(query):
        position = lower_text.find(word)
        while position != -1:
            matches.append(TextRange(position, position + len(word)))
            position = lower_text.find(word, position + 1)
    return matches


def merge_ranges(ranges: Iterable[TextRange]) -> List[TextRange]:
    """
    Объединяет пересекающиеся и соприкасающиеся диапазоны

    Args:
        ranges: Iterable[TextRange] - диапазоны в произвольном порядке

    Returns:
        List[TextRange]: Непересекающиеся диапазоны по возрастанию start
    """
    merged: List[TextRange] = []
    for current in sorted(ranges, key=lambda r: r.start):
        if not merged or current.start > merged[-1].end:
            merged.append(current)
        elif current.end > merged[-1].end:
            merged[-1] = TextRange(merged[-1].start, current.end)
    return merged


def select_window(
    text: str, ranges: List[TextRange], max_length: Optional[int] = None
) -> DisplayWindow:
    """
    Выбирает окно отображения вокруг первого совпадения

    Args:
        text: str - исходный текст
        ranges: List[TextRange] - объединенные диапазоны по возрастанию
        max_length: Optional[int] - максимальная длина окна

    Returns:
        DisplayWindow: Окно с признаками усечения слева и справа
    """
    max_length = normalize_max_length(max_length)
    if max_length is None or len(text) <= max_length:
        return DisplayWindow(text=text, offset=0)

    if not ranges:
        return DisplayWindow(
            text=text[:max_length], offset=0, has_suffix_ellipsis=True
        )

    first = ranges[0]
    context_padding = (max_length - first.length) // 2
    start = max(0, first.start - context_padding)
    end = min(len(text), start + max_length)

    # У конца текста сдвигаем окно влево, чтобы показать хвост
    if end == len(text):
        start = max(0, end - max_length)

    return DisplayWindow(
        text=text[start:end],
        offset=start,
        has_prefix_ellipsis=start > 0,
        has_suffix_ellipsis=end < len(text),
    )


def render_segments(
    display_text: str, offset: int, ranges: List[TextRange]
) -> List[Segment]:
    """
    Разбивает окно на обычные и выделенные сегменты

    Конкатенация текстов сегментов в точности равна display_text.

    Args:
        display_text: str - текст окна
        offset: int - смещение окна в исходном тексте
        ranges: List[TextRange] - объединенные диапазоны в координатах исходного текста

    Returns:
        List[Segment]: Сегменты слева направо
    """
    segments: List[Segment] = []
    window_length = len(display_text)
    cursor = 0

    for text_range in ranges:
        adjusted_start = text_range.start - offset
        adjusted_end = text_range.end - offset

        # Диапазон целиком вне окна
        if adjusted_end <= 0 or adjusted_start >= window_length:
            continue

        clamped_start = max(0, adjusted_start)
        clamped_end = min(window_length, adjusted_end)

        if clamped_start > cursor:
            segments.append(
                Segment(SegmentKind.PLAIN, display_text[cursor:clamped_start])
            )
        segments.append(
            Segment(SegmentKind.HIGHLIGHTED, display_text[clamped_start:clamped_end])
        )
        cursor = clamped_end

    if cursor < window_length:
        segments.append(Segment(SegmentKind.PLAIN, display_text[cursor:]))

    return segments


def highlight(
    text: str, query: str, max_length: Optional[int] = None
) -> HighlightResult:
    """
    Подсвечивает слова запроса в тексте

    Если совпадений нет, возвращается текст (или его начало длиной max_length)
    одним обычным сегментом. Функция чистая и не бросает исключений.

    Args:
        text: str - исходный текст
        query: str - поисковый запрос
        max_length: Optional[int] - максимальная длина окна, None - без усечения

    Returns:
        HighlightResult: Сегменты окна и признаки усечения
    """
    text = text or ""
    merged = merge_ranges(find_matches(text, query or ""))
    window = select_window(text, merged, max_length)

    return HighlightResult(
        display_text=window.text,
        offset=window.offset,
        prefix_truncated=window.has_prefix_ellipsis,
        suffix_truncated=window.has_suffix_ellipsis,
        segments=render_segments(window.text, window.offset, merged),
    )
