class ContentError(Exception):
    """Ошибка при работе с контентом регламента"""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Ошибка при работе с контентом: {reason}")


class ContentNotFoundError(ContentError):
    """Элемент регламента не найден"""

    def __init__(self, content_type: str, key: str):
        self.content_type = content_type
        self.key = key
        super().__init__(f"{content_type} {key} не найден(а)")


class ContentValidationError(ContentError):
    """Некорректный идентификатор или параметр запроса"""

    def __init__(self, reason: str):
        super().__init__(f"Некорректный запрос: {reason}")


class ContentDatabaseError(ContentError):
    """Ошибка базы данных при работе с контентом"""

    def __init__(self, reason: str):
        super().__init__(f"Ошибка базы данных: {reason}")
