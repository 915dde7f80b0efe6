"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import ArticleRepository
from app.domain.entities import Article
from app.domain.exceptions import DuplicateSlugError
from app.infrastructure.database.models import ArticleModel


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            slug=model.slug,
            content=model.content,
            parent_id=model.parent_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            id=entity.id,
            title=entity.title,
            slug=entity.slug,
            content=entity.content,
            parent_id=entity.parent_id,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def _flush(self, slug: str) -> None:
        # The unique index on slug is the last line of defence when two writers race.
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            if "slug" in str(exc.orig).lower():
                raise DuplicateSlugError(slug) from exc
            raise

    async def get_by_id(self, article_id: str) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def get_by_slug(self, slug: str, exclude_id: str | None = None) -> Article | None:
        stmt = select(ArticleModel).where(ArticleModel.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(ArticleModel.id != exclude_id)
        result = await self._session.execute(stmt)
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.created_at.asc(), ArticleModel.id.asc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_children(self, parent_id: str) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .where(ArticleModel.parent_id == parent_id)
            .order_by(ArticleModel.created_at.asc(), ArticleModel.id.asc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._flush(article.slug)
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise ValueError(f"Article {article.id} not found in database")
        model.title = article.title
        model.slug = article.slug
        model.content = article.content
        model.parent_id = article.parent_id
        model.updated_at = article.updated_at
        await self._flush(article.slug)
        return self._to_entity(model)

    async def delete(self, article_id: str) -> bool:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
