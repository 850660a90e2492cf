"""QuizFlip API - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from quizflip.core.config import get_settings
from quizflip.core.errors import register_error_handlers
from quizflip.core.logs import configure_logging
from quizflip.db.base import Base
from quizflip.db.session import engine
from quizflip.routers import auth, categories, flashcards, quizzes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database ready")

    yield

    await engine.dispose()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Personal categories, flashcards and quizzes",
    lifespan=lifespan,
)

register_error_handlers(app)

app.include_router(auth.router)
app.include_router(categories.router)
app.include_router(flashcards.router)
app.include_router(quizzes.router)


@app.get("/")
async def root():
    return {"msg": "Welcome to QuizFlip API"}


@app.get("/health")
async def health():
    return {"status": "ok"}
