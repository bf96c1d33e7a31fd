from typing import Optional

from ehds_explorer.core.config import settings
from ehds_explorer.core.exceptions.content import (
    ContentDatabaseError,
    ContentNotFoundError,
    ContentValidationError,
)
from ehds_explorer.core.exceptions.repository import RepositoryError
from ehds_explorer.core.exceptions.roman import RomanNumeralError
from ehds_explorer.core.interfaces.content_repository import IContentRepository
from ehds_explorer.core.logger import logger
from ehds_explorer.core.models.content import Annex, Article, Chapter, Recital
from ehds_explorer.core.models.search import SearchResults
from ehds_explorer.core.utils.roman_numerals import from_roman, to_roman


class ContentService:
    """Сервис для чтения контента регламента и поиска по нему"""

    def __init__(self, repository: IContentRepository):
        self.repository = repository

    async def search(self, query: str, limit: Optional[int] = None) -> SearchResults:
        """
        Поиск по статьям, соображениям, главам, приложениям и определениям

        Args:
            query: str - поисковый запрос
            limit: Optional[int] - максимум результатов на тип контента

        Returns:
            SearchResults: Результаты поиска с фрагментами

        Raises:
            ContentDatabaseError: При ошибке поиска
        """
        limit = limit or settings.SEARCH_RESULTS_LIMIT
        logger.info(f"Поиск по контенту: '{query}', limit: {limit}")
        try:
            results = await self.repository.search(
                query, limit, settings.SNIPPET_MAX_LENGTH
            )
        except RepositoryError as e:
            logger.error(f"Критическая ошибка БД при поиске по контенту: {e}")
            raise ContentDatabaseError(str(e))

        logger.info(
            f"Найдено {results.total} результатов (прямая ссылка: {results.direct_match})"
        )
        return results

    async def get_article(self, article_number: int) -> Article:
        """
        Получение статьи по номеру

        Raises:
            ContentNotFoundError: Если статья не найдена
            ContentDatabaseError: При ошибке БД
        """
        logger.info(f"Получение статьи {article_number}")
        try:
            article = await self.repository.get_article(article_number)
        except RepositoryError as e:
            logger.error(f"Ошибка БД при получении статьи {article_number}: {e}")
            raise ContentDatabaseError(str(e))
        if article is None:
            raise ContentNotFoundError("Статья", str(article_number))
        return article

    async def get_recital(self, recital_number: int) -> Recital:
        """
        Получение соображения по номеру

        Raises:
            ContentNotFoundError: Если соображение не найдено
            ContentDatabaseError: При ошибке БД
        """
        logger.info(f"Получение соображения {recital_number}")
        try:
            recital = await self.repository.get_recital(recital_number)
        except RepositoryError as e:
            logger.error(f"Ошибка БД при получении соображения {recital_number}: {e}")
            raise ContentDatabaseError(str(e))
        if recital is None:
            raise ContentNotFoundError("Соображение", str(recital_number))
        return recital

    async def get_chapter(self, chapter_number: int) -> Chapter:
        """
        Получение главы по номеру

        Raises:
            ContentNotFoundError: Если глава не найдена
            ContentDatabaseError: При ошибке БД
        """
        logger.info(f"Получение главы {chapter_number}")
        try:
            chapter = await self.repository.get_chapter(chapter_number)
        except RepositoryError as e:
            logger.error(f"Ошибка БД при получении главы {chapter_number}: {e}")
            raise ContentDatabaseError(str(e))
        if chapter is None:
            raise ContentNotFoundError("Глава", str(chapter_number))
        return chapter

    async def get_annex(self, annex_id: str) -> Annex:
        """
        Получение приложения по идентификатору

        Args:
            annex_id: str - римское число ("II") или номер ("2")

        Raises:
            ContentValidationError: Если идентификатор некорректен
            ContentNotFoundError: Если приложение не найдено
            ContentDatabaseError: При ошибке БД
        """
        try:
            # isdigit() пропускает "²", который int() не принимает
            if annex_id.isdecimal():
                key = to_roman(int(annex_id))
            else:
                # Приводим к канонической записи: "iiii" -> "IV"
                key = to_roman(from_roman(annex_id))
        except RomanNumeralError as e:
            raise ContentValidationError(str(e))

        logger.info(f"Получение приложения {key}")
        try:
            annex = await self.repository.get_annex(key)
        except RepositoryError as e:
            logger.error(f"Ошибка БД при получении приложения {key}: {e}")
            raise ContentDatabaseError(str(e))
        if annex is None:
            raise ContentNotFoundError("Приложение", key)
        return annex
