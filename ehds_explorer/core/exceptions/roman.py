class RomanNumeralError(ValueError):
    """Ошибка преобразования римского числа"""

    def __init__(self, value, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Некорректное римское число {value!r}: {reason}")
