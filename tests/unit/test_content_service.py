from unittest.mock import AsyncMock

import pytest

from ehds_explorer.core.config import settings
from ehds_explorer.core.exceptions.content import (
    ContentDatabaseError,
    ContentNotFoundError,
    ContentValidationError,
)
from ehds_explorer.core.exceptions.repository import RepositoryError
from ehds_explorer.core.models.content import Annex, Article, Chapter, Recital
from ehds_explorer.core.models.search import SearchResults
from ehds_explorer.services.content_service import ContentService


@pytest.mark.unit
class TestContentService:
    """Unit тесты для ContentService"""

    @pytest.fixture
    def mock_repository(self):
        """Мок репозитория контента"""
        return AsyncMock()

    @pytest.fixture
    def content_service(self, mock_repository):
        return ContentService(mock_repository)

    @pytest.mark.asyncio
    async def test_search_uses_default_limits(self, content_service, mock_repository):
        """Тест: лимиты по умолчанию берутся из настроек"""
        mock_repository.search.return_value = SearchResults()

        results = await content_service.search("health data")

        assert results.total == 0
        mock_repository.search.assert_awaited_once_with(
            "health data", settings.SEARCH_RESULTS_LIMIT, settings.SNIPPET_MAX_LENGTH
        )

    @pytest.mark.asyncio
    async def test_search_with_limit(self, content_service, mock_repository):
        """Тест поиска с явным лимитом"""
        mock_repository.search.return_value = SearchResults(direct_match=True)

        results = await content_service.search("article 5", 3)

        assert results.direct_match is True
        mock_repository.search.assert_awaited_once_with(
            "article 5", 3, settings.SNIPPET_MAX_LENGTH
        )

    @pytest.mark.asyncio
    async def test_search_database_error(self, content_service, mock_repository):
        """Тест: ошибка репозитория превращается в ContentDatabaseError"""
        mock_repository.search.side_effect = RepositoryError("db is down")

        with pytest.raises(ContentDatabaseError):
            await content_service.search("health")

    @pytest.mark.asyncio
    async def test_get_article(self, content_service, mock_repository):
        """Тест получения статьи"""
        article = Article(id=1, article_number=5, title="Definitions", content="...")
        mock_repository.get_article.return_value = article

        assert await content_service.get_article(5) == article
        mock_repository.get_article.assert_awaited_once_with(5)

    @pytest.mark.asyncio
    async def test_get_article_not_found(self, content_service, mock_repository):
        """Тест: отсутствующая статья"""
        mock_repository.get_article.return_value = None

        with pytest.raises(ContentNotFoundError) as exc_info:
            await content_service.get_article(999)
        assert exc_info.value.key == "999"

    @pytest.mark.asyncio
    async def test_get_article_database_error(self, content_service, mock_repository):
        """Тест: ошибка БД при получении статьи"""
        mock_repository.get_article.side_effect = RepositoryError("boom")

        with pytest.raises(ContentDatabaseError):
            await content_service.get_article(5)

    @pytest.mark.asyncio
    async def test_get_recital_not_found(self, content_service, mock_repository):
        """Тест: отсутствующее соображение"""
        mock_repository.get_recital.return_value = None

        with pytest.raises(ContentNotFoundError):
            await content_service.get_recital(1000)

    @pytest.mark.asyncio
    async def test_get_recital(self, content_service, mock_repository):
        """Тест получения соображения"""
        recital = Recital(id=2, recital_number=12, content="...", related_articles=[3, 4])
        mock_repository.get_recital.return_value = recital

        assert await content_service.get_recital(12) == recital

    @pytest.mark.asyncio
    async def test_get_chapter_has_numeral(self, content_service, mock_repository):
        """Тест: у главы есть номер римскими цифрами"""
        mock_repository.get_chapter.return_value = Chapter(
            id=4, chapter_number=4, title="Secondary use"
        )

        chapter = await content_service.get_chapter(4)

        assert chapter.numeral == "IV"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "annex_id, expected_key",
        [("II", "II"), ("ii", "II"), ("2", "II"), ("iiii", "IV")],
    )
    async def test_get_annex_normalizes_id(
        self, content_service, mock_repository, annex_id, expected_key
    ):
        """Тест приведения идентификатора приложения к канонической форме"""
        mock_repository.get_annex.return_value = Annex(
            id=expected_key, title="Annex", content="..."
        )

        await content_service.get_annex(annex_id)

        mock_repository.get_annex.assert_awaited_once_with(expected_key)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("annex_id", ["abc", "0", "4000", "²", ""])
    async def test_get_annex_invalid_id(self, content_service, mock_repository, annex_id):
        """Тест: некорректный идентификатор приложения"""
        with pytest.raises(ContentValidationError):
            await content_service.get_annex(annex_id)
        mock_repository.get_annex.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_get_annex_not_found(self, content_service, mock_repository):
        """Тест: отсутствующее приложение"""
        mock_repository.get_annex.return_value = None

        with pytest.raises(ContentNotFoundError):
            await content_service.get_annex("V")
