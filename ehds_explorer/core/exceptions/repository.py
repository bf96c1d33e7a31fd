class RepositoryError(Exception):
    """Ошибка выполнения запроса к базе данных"""
