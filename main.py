from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from loguru import logger
from framework.config import settings
from framework.database.manager import DatabaseManager
from framework.response import ResponseModel
from framework.middleware.logging_md import LoggingMiddleware
from framework.logging.logger import LogConfig
from framework.exceptions.handler import BusinessException, global_exception_handler
from apps.authors.api.router import router as author_router
from apps.genres.api.router import router as genre_router
from apps.books.api.router import router as book_router

# Initialize logging configuration
LogConfig.setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    manager = DatabaseManager.get_instance()
    await manager.sql.connect()
    if settings.DB_AUTO_CREATE:
        await manager.sql.create_all()
        logger.warning("DB_AUTO_CREATE is on: tables created from models, Alembic bypassed")
    logger.info(f"{settings.APP_NAME} started ({settings.APP_ENV})")
    yield
    await manager.sql.disconnect()
    DatabaseManager.reset_instance()
    logger.info(f"{settings.APP_NAME} stopped")


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Register global exception handlers
app.add_exception_handler(BusinessException, global_exception_handler)
app.add_exception_handler(RequestValidationError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(LoggingMiddleware)

# Mount routers (prefix from config)
app.include_router(author_router, prefix=settings.API_V1_AUTHORS_PREFIX, tags=["Authors"])
app.include_router(genre_router, prefix=settings.API_V1_GENRES_PREFIX, tags=["Genres"])
app.include_router(book_router, prefix=settings.API_V1_BOOKS_PREFIX, tags=["Books"])


@app.get("/health", tags=["Health"])
async def health():
    return ResponseModel.success(data={"status": "ok", "version": settings.APP_VERSION})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
