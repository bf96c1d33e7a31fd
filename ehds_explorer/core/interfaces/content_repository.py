from abc import ABC, abstractmethod
from typing import Optional

from ehds_explorer.core.models.content import Annex, Article, Chapter, Recital
from ehds_explorer.core.models.search import SearchResults


class IContentRepository(ABC):
    @abstractmethod
    async def get_article(self, article_number: int) -> Optional[Article]:
        """
        Получение статьи по номеру

        Args:
            article_number: int - номер статьи

        Returns:
            Optional[Article]: Доменная модель статьи или None если не найдена

        Raises:
            RepositoryError: При ошибке выполнения запроса к БД
        """
        raise NotImplementedError

    @abstractmethod
    async def get_recital(self, recital_number: int) -> Optional[Recital]:
        """
        Получение соображения по номеру

        Args:
            recital_number: int - номер соображения

        Returns:
            Optional[Recital]: Доменная модель соображения или None если не найдено

        Raises:
            RepositoryError: При ошибке выполнения запроса к БД
        """
        raise NotImplementedError

    @abstractmethod
    async def get_chapter(self, chapter_number: int) -> Optional[Chapter]:
        """
        Получение главы по номеру

        Args:
            chapter_number: int - номер главы

        Returns:
            Optional[Chapter]: Доменная модель главы или None если не найдена

        Raises:
            RepositoryError: При ошибке выполнения запроса к БД
        """
        raise NotImplementedError

    @abstractmethod
    async def get_annex(self, annex_id: str) -> Optional[Annex]:
        """
        Получение приложения по идентификатору

        Args:
            annex_id: str - римский идентификатор приложения (I, II, ...)

        Returns:
            Optional[Annex]: Доменная модель приложения или None если не найдено

        Raises:
            RepositoryError: При ошибке выполнения запроса к БД
        """
        raise NotImplementedError

    @abstractmethod
    async def search(
        self, query: str, limit: int = 10, snippet_length: Optional[int] = 200
    ) -> SearchResults:
        """
        Поиск по контенту регламента

        Args:
            query: str - поисковый запрос
            limit: int - максимум результатов на тип контента
            snippet_length: Optional[int] - длина фрагмента с подсветкой

        Returns:
            SearchResults: Результаты поиска по типам контента

        Raises:
            RepositoryError: При ошибке выполнения поиска
        """
        raise NotImplementedError
