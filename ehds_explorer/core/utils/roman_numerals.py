"""
Преобразование целых чисел в римские и обратно (1..3999)
"""

import re

from ehds_explorer.core.exceptions.roman import RomanNumeralError

MIN_ROMAN = 1
MAX_ROMAN = 3999

_ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_CANONICAL_ROMAN_RE = re.compile(
    r"^M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})$"
)


def to_roman(number: int) -> str:
    """
    Преобразует целое число в римскую запись

    Args:
        number: int - число от 1 до 3999

    Returns:
        str: Римское число в верхнем регистре

    Raises:
        RomanNumeralError: Если число вне диапазона или не целое
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise RomanNumeralError(number, "ожидается целое число")
    if not MIN_ROMAN <= number <= MAX_ROMAN:
        raise RomanNumeralError(
            number, f"допустимый диапазон {MIN_ROMAN}..{MAX_ROMAN}"
        )

    result = []
    remaining = number
    for value, numeral in _ROMAN_NUMERALS:
        while remaining >= value:
            result.append(numeral)
            remaining -= value
    return "".join(result)


def from_roman(roman: str) -> int:
    """
    Преобразует римскую запись в целое число (регистр не важен)

    Args:
        roman: str - римское число

    Returns:
        int: Значение числа

    Raises:
        RomanNumeralError: Если строка пуста или содержит посторонние символы
    """
    upper_roman = (roman or "").strip().upper()
    if not upper_roman:
        raise RomanNumeralError(roman, "пустая строка")

    unknown = [char for char in upper_roman if char not in _ROMAN_VALUES]
    if unknown:
        raise RomanNumeralError(roman, f"недопустимые символы {''.join(unknown)}")

    result = 0
    for index, char in enumerate(upper_roman):
        current = _ROMAN_VALUES[char]
        following = (
            _ROMAN_VALUES[upper_roman[index + 1]]
            if index + 1 < len(upper_roman)
            else 0
        )
        if current < following:
            result -= current
        else:
            result += current
    return result


def is_roman_numeral(value: str) -> bool:
    """Проверяет, что строка - каноническое римское число от 1 до 3999"""
    candidate = (value or "").strip().upper()
    if not candidate:
        return False
    return bool(_CANONICAL_ROMAN_RE.match(candidate))
