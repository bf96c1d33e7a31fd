from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from ehds_explorer.core.config import settings

# Создание базового класса для моделей
Base = declarative_base()

# Переменные для ленивой инициализации
_engine = None
_async_session_maker = None


def get_engine():
    """Получить асинхронный движок (создается при первом вызове)"""
    global _engine
    if _engine is None:
        _engine = create_async_engine(
            settings.DATABASE_URL,
            echo=settings.DEBUG,
            future=True,
            pool_pre_ping=True,
            pool_size=10,
            max_overflow=20,
            pool_recycle=3600,  # 1 час для стабильности
            pool_timeout=30,
            connect_args={
                "server_settings": {
                    "application_name": "ehds_explorer",
                    "statement_timeout": "30000",  # 30 секунд
                },
                "command_timeout": 60,
            },
        )
    return _engine


# Расширения PostgreSQL, без которых не работает поиск по контенту
REQUIRED_EXTENSIONS = ("pg_trgm",)


async def init_db() -> None:
    """Подключает расширения PostgreSQL (word_similarity для нечеткого поиска)"""
    async with get_engine().begin() as connection:
        for extension in REQUIRED_EXTENSIONS:
            await connection.execute(text(f"CREATE EXTENSION IF NOT EXISTS {extension}"))


async def dispose_engine() -> None:
    """Закрыть соединения, если движок был создан"""
    global _engine, _async_session_maker
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _async_session_maker = None


def get_async_session_maker():
    """Получить фабрику асинхронных сессий (создается при первом вызове)"""
    global _async_session_maker
    if _async_session_maker is None:
        _async_session_maker = async_sessionmaker(
            bind=get_engine(), class_=AsyncSession, expire_on_commit=False
        )
    return _async_session_maker


async def get_async_session() -> AsyncSession:
    """
    Dependency для получения асинхронной сессии базы данных.
    Автоматически закрывает сессию после использования.
    """
    async with get_async_session_maker()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
