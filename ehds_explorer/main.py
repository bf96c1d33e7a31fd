from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ehds_explorer.api.routes.content import router as content_router
from ehds_explorer.api.routes.text import router as text_router
from ehds_explorer.core.config import settings
from ehds_explorer.core.database import dispose_engine, init_db
from ehds_explorer.core.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Управление жизненным циклом приложения"""
    logger.info("Запуск EHDS Explorer API...")
    await init_db()
    yield
    logger.info("Закрытие соединений с базой данных...")
    await dispose_engine()
    logger.info("EHDS Explorer API остановлен.")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="API для чтения регламента EHDS, поиска и подсветки текста",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Подключение роутеров
app.include_router(content_router)
app.include_router(text_router)


@app.get("/")
async def root():
    """Корневой эндпоинт API"""
    return {
        "message": "EHDS Explorer API",
        "version": "1.0.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Проверка состояния API"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
