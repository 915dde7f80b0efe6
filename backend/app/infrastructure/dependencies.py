"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import MarkdownRenderer
from app.application.services import ArticleService
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.repositories import SQLAlchemyArticleRepository
from app.infrastructure.rendering import RegexMarkdownRenderer


@lru_cache
def get_markdown_renderer() -> MarkdownRenderer:
    """Shared, stateless Markdown renderer."""
    return RegexMarkdownRenderer()


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
    renderer: MarkdownRenderer = Depends(get_markdown_renderer),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService bound to the request's session."""
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(repository, renderer)
