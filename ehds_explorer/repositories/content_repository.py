import re
from typing import Callable, List, NamedTuple, Optional, Tuple

from sqlalchemy import Text, cast, desc, func, literal_column, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ehds_explorer.core.exceptions.repository import RepositoryError
from ehds_explorer.core.interfaces.content_repository import IContentRepository
from ehds_explorer.core.logger import logger
from ehds_explorer.core.models.content import (
    Annex,
    Article,
    Chapter,
    ContentReference,
    ContentType,
    Definition,
    Recital,
)
from ehds_explorer.core.models.search import SearchHit, SearchResults
from ehds_explorer.core.utils.highlighter import extract_query_words, highlight
from ehds_explorer.core.utils.text_normalizer import normalize_text, parse_reference
from ehds_explorer.models.content import Annex as SQLAnnex
from ehds_explorer.models.content import Article as SQLArticle
from ehds_explorer.models.content import Chapter as SQLChapter
from ehds_explorer.models.content import Definition as SQLDefinition
from ehds_explorer.models.content import Recital as SQLRecital

# Конфигурация полнотекстового поиска PostgreSQL
TS_CONFIG = "english"

# Веса полей при ранжировании
SEARCH_TERMS_WEIGHT = 2.0
TITLE_WEIGHT = 1.5
BODY_WEIGHT = 1.0

# ts_rank принимает веса в порядке {D, C, B, A}, значения не больше 1
_RANK_WEIGHTS = literal_column(
    f"'{{0, {BODY_WEIGHT / SEARCH_TERMS_WEIGHT}, "
    f"{TITLE_WEIGHT / SEARCH_TERMS_WEIGHT}, 1}}'::real[]"
)

# Минимальное значение word_similarity (pg_trgm), при котором опечатка
# в запросе ("helth") все еще находит строку
FUZZY_THRESHOLD = 0.6

_TSQUERY_TOKEN_RE = re.compile(r"[^\W_]+")


class _Searchable(NamedTuple):
    """Строка таблицы, подготовленная к выдаче"""

    content_type: ContentType
    key: str
    title: Optional[str]
    body: str


class _SearchSource(NamedTuple):
    """Таблица и SQL-выражения ее полей для полнотекстового поиска"""

    model: type
    terms: object  # Поисковые термины (вес A)
    title: object  # Заголовок (вес B) или None
    body: object  # Текст (вес C)
    describe: Callable[[object], _Searchable]


def _word(value: str):
    # Аргументы concat/concat_ws имеют тип "any", тип параметра задаем явно
    return cast(value, Text)


def _numbered_terms(prefix: str, short: str, number_column, *extra):
    """SQL-выражение "article 5 art 5 Article5" для колонки с номером"""
    return func.concat_ws(
        " ",
        _word(prefix),
        number_column,
        _word(short),
        number_column,
        func.concat(_word(prefix.capitalize()), number_column),
        *extra,
    )


class ContentRepository(IContentRepository):
    """Реализация репозитория контента регламента в PostgreSQL"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_one(self, statement, description: str):
        try:
            result = await self.session.execute(statement)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Ошибка при получении {description}: {str(e)}")

    async def get_article(self, article_number: int) -> Optional[Article]:
        row = await self._get_one(
            select(SQLArticle).where(SQLArticle.article_number == article_number),
            f"статьи {article_number}",
        )
        return Article.model_validate(row) if row else None

    async def get_recital(self, recital_number: int) -> Optional[Recital]:
        row = await self._get_one(
            select(SQLRecital).where(SQLRecital.recital_number == recital_number),
            f"соображения {recital_number}",
        )
        return Recital.model_validate(row) if row else None

    async def get_chapter(self, chapter_number: int) -> Optional[Chapter]:
        row = await self._get_one(
            select(SQLChapter).where(SQLChapter.chapter_number == chapter_number),
            f"главы {chapter_number}",
        )
        return Chapter.model_validate(row) if row else None

    async def get_annex(self, annex_id: str) -> Optional[Annex]:
        row = await self._get_one(
            select(SQLAnnex).where(SQLAnnex.id == annex_id.upper()),
            f"приложения {annex_id}",
        )
        return Annex.model_validate(row) if row else None

    async def search(
        self, query: str, limit: int = 10, snippet_length: Optional[int] = 200
    ) -> SearchResults:
        """
        Поиск по контенту регламента.
        Сначала проверяется прямая ссылка ("article 5", "annex II"), затем
        выполняется поиск по словам запроса с ранжированием по полям.
        """
        if not query or not query.strip():
            return SearchResults()

        reference = parse_reference(query)
        if reference is not None:
            direct = await self._search_direct(reference, snippet_length)
            if direct is not None:
                return direct

        words = extract_query_words(query)
        if not words:
            return SearchResults()

        try:
            found = {}
            for name, source in self._search_sources():
                found[name] = await self._search_model(
                    source, query, words, limit, snippet_length
                )
        except SQLAlchemyError as e:
            raise RepositoryError(f"Ошибка при поиске по контенту: {str(e)}")
        return SearchResults(**found)

    def _search_sources(self) -> List[Tuple[str, _SearchSource]]:
        """Таблицы поиска в порядке полей SearchResults"""
        return [
            (
                "articles",
                _SearchSource(
                    SQLArticle,
                    _numbered_terms("article", "art", SQLArticle.article_number),
                    SQLArticle.title,
                    SQLArticle.content,
                    self._describe_article,
                ),
            ),
            (
                "recitals",
                _SearchSource(
                    SQLRecital,
                    _numbered_terms("recital", "rec", SQLRecital.recital_number),
                    None,
                    SQLRecital.content,
                    self._describe_recital,
                ),
            ),
            (
                "chapters",
                _SearchSource(
                    SQLChapter,
                    _numbered_terms(
                        "chapter",
                        "ch",
                        SQLChapter.chapter_number,
                        func.to_char(SQLChapter.chapter_number, "FMRN"),
                    ),
                    SQLChapter.title,
                    SQLChapter.description,
                    self._describe_chapter,
                ),
            ),
            (
                "annexes",
                _SearchSource(
                    SQLAnnex,
                    func.concat_ws(
                        " ",
                        _word("annex"),
                        SQLAnnex.id,
                        func.concat(_word("Annex"), SQLAnnex.id),
                    ),
                    SQLAnnex.title,
                    SQLAnnex.content,
                    self._describe_annex,
                ),
            ),
            (
                "definitions",
                _SearchSource(
                    SQLDefinition,
                    SQLDefinition.term,
                    None,
                    SQLDefinition.definition,
                    self._describe_definition,
                ),
            ),
        ]

    async def _search_direct(
        self, reference: ContentReference, snippet_length: Optional[int]
    ) -> Optional[SearchResults]:
        """
        Поиск элемента по прямой ссылке

        Returns:
            Optional[SearchResults]: Один результат или None, если элемента нет
        """
        results = SearchResults(direct_match=True)
        if reference.content_type == ContentType.ARTICLE:
            item = await self.get_article(int(reference.key))
            if item is None:
                return None
            searchable = self._describe_article(item)
            results.articles.append(self._direct_hit(searchable, snippet_length))
        elif reference.content_type == ContentType.RECITAL:
            item = await self.get_recital(int(reference.key))
            if item is None:
                return None
            searchable = self._describe_recital(item)
            results.recitals.append(self._direct_hit(searchable, snippet_length))
        elif reference.content_type == ContentType.CHAPTER:
            item = await self.get_chapter(int(reference.key))
            if item is None:
                return None
            searchable = self._describe_chapter(item)
            results.chapters.append(self._direct_hit(searchable, snippet_length))
        elif reference.content_type == ContentType.ANNEX:
            item = await self.get_annex(reference.key)
            if item is None:
                return None
            searchable = self._describe_annex(item)
            results.annexes.append(self._direct_hit(searchable, snippet_length))
        else:
            return None

        logger.debug(
            f"Прямая ссылка: {reference.content_type.value} {reference.key}"
        )
        return results

    @staticmethod
    def _direct_hit(searchable: _Searchable, snippet_length: Optional[int]) -> SearchHit:
        return SearchHit(
            content_type=searchable.content_type,
            key=searchable.key,
            title=searchable.title,
            snippet=highlight(searchable.body, "", snippet_length),
            rank=1.0,
        )

    async def _search_model(
        self,
        source: _SearchSource,
        query: str,
        words: List[str],
        limit: int,
        snippet_length: Optional[int],
    ) -> List[SearchHit]:
        """
        Полнотекстовый поиск по одной таблице с ранжированием в БД

        Args:
            source: _SearchSource - таблица и ее поля поиска
            query: str - исходный запрос (для подсветки)
            words: List[str] - слова запроса
            limit: int - максимум результатов
            snippet_length: Optional[int] - длина фрагмента

        Returns:
            List[SearchHit]: Результаты по убыванию ранга
        """
        result = await self.session.execute(
            self._search_statement(source, words, limit)
        )

        hits = []
        for row, rank in result.all():
            searchable = source.describe(row)
            hits.append(
                SearchHit(
                    content_type=searchable.content_type,
                    key=searchable.key,
                    title=searchable.title,
                    snippet=highlight(searchable.body, query, snippet_length),
                    rank=round(float(rank), 4),
                )
            )
        return hits

    @classmethod
    def _search_statement(cls, source: _SearchSource, words: List[str], limit: int):
        """
        Запрос: совпадение по tsvector или нечеткое совпадение pg_trgm,
        сортировка по рангу и ограничение количества строк
        """
        vector = cls._weighted_vector(source)
        tsquery = func.to_tsquery(TS_CONFIG, cls._tsquery_text(words))
        columns = [column for column in (source.title, source.body) if column is not None]
        searchable_text = func.concat_ws(" ", *columns)
        similarity = func.word_similarity(" ".join(words), searchable_text)
        rank = (func.ts_rank(_RANK_WEIGHTS, vector, tsquery) + similarity).label("rank")

        return (
            select(source.model, rank)
            .where(or_(vector.op("@@")(tsquery), similarity >= FUZZY_THRESHOLD))
            .order_by(desc("rank"))
            .limit(limit)
        )

    @staticmethod
    def _weighted_vector(source: _SearchSource):
        """tsvector с весами: поисковые термины A, заголовок B, текст C"""
        parts = [
            func.setweight(
                func.to_tsvector(TS_CONFIG, func.coalesce(column, "")),
                literal_column(f"'{weight}'"),
            )
            for column, weight in (
                (source.terms, "A"),
                (source.title, "B"),
                (source.body, "C"),
            )
            if column is not None
        ]
        vector = parts[0]
        for part in parts[1:]:
            vector = vector.op("||")(part)
        return vector

    @staticmethod
    def _tsquery_text(words: List[str]) -> str:
        """Слова запроса через ИЛИ с поиском по префиксу: "health:* | data:*" """
        tokens: List[str] = []
        for token in _TSQUERY_TOKEN_RE.findall(" ".join(words)):
            if token not in tokens:
                tokens.append(token)
        return " | ".join(f"{token}:*" for token in tokens)

    @staticmethod
    def _describe_article(row) -> _Searchable:
        return _Searchable(
            ContentType.ARTICLE,
            str(row.article_number),
            row.title,
            normalize_text(row.content),
        )

    @staticmethod
    def _describe_recital(row) -> _Searchable:
        return _Searchable(
            ContentType.RECITAL,
            str(row.recital_number),
            None,
            normalize_text(row.content),
        )

    @staticmethod
    def _describe_chapter(row) -> _Searchable:
        return _Searchable(
            ContentType.CHAPTER,
            str(row.chapter_number),
            row.title,
            normalize_text(row.description),
        )

    @staticmethod
    def _describe_annex(row) -> _Searchable:
        return _Searchable(
            ContentType.ANNEX,
            row.id,
            row.title,
            normalize_text(row.content),
        )

    @staticmethod
    def _describe_definition(row) -> _Searchable:
        definition = Definition.model_validate(row)
        return _Searchable(
            ContentType.DEFINITION,
            str(definition.id),
            definition.term,
            normalize_text(definition.definition),
        )
