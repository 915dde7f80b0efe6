"""Application service (use case) for Article operations."""

import logging

from app.application.interfaces import ArticleRepository, MarkdownRenderer
from app.application.schemas import ArticleCreate, ArticleUpdate
from app.application.schemas.article import TreeOrder
from app.domain.entities import Article, ArticleListing, ArticleNode, ArticleView
from app.domain.exceptions import (
    DanglingParentError,
    DuplicateSlugError,
    EntityNotFoundError,
    HasChildrenError,
    InvalidParentError,
    ValidationError,
)
from app.domain.hierarchy import ancestors, build_forest, count_nodes, descendant_ids, would_create_cycle
from app.domain.slug import derive_slug, is_valid_slug
from app.domain.tree_state import TreeRow, TreeViewState

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository and renderer ports (DI)."""

    def __init__(self, repository: ArticleRepository, renderer: MarkdownRenderer):
        self._repository = repository
        self._renderer = renderer

    # ── Reads ────────────────────────────────────────────────────────

    async def get_article(self, article_id: str) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def get_article_by_slug(self, slug: str) -> Article:
        article = await self._repository.get_by_slug(slug)
        if article is None:
            raise EntityNotFoundError("Article", slug, field="slug")
        return article

    async def list_articles(self, search: str | None = None) -> list[ArticleListing]:
        """All articles newest first, each paired with its parent.

        ``search`` matches case-insensitively against the article title and
        the parent title.
        """
        articles = await self._repository.get_all()
        by_id = {a.id: a for a in articles}
        listings = [
            ArticleListing(article=a, parent=by_id.get(a.parent_id) if a.parent_id else None)
            for a in reversed(articles)
        ]
        term = (search or "").strip().lower()
        if not term:
            return listings
        return [
            item
            for item in listings
            if term in item.article.title.lower()
            or (item.parent is not None and term in item.parent.title.lower())
        ]

    async def get_forest(self, order: TreeOrder = "created") -> list[ArticleNode]:
        """Rebuild the article forest from a fresh read of the flat collection.

        ``order="title"`` sorts the records by title before building, which
        orders roots and every child list alphabetically.
        """
        articles = await self._repository.get_all()
        if order == "title":
            articles = sorted(articles, key=lambda a: a.title.lower())
        forest = build_forest(articles)
        reachable = count_nodes(forest)
        if reachable != len(articles):
            logger.warning(
                "Article hierarchy contains a parent cycle: %d of %d articles are unreachable from any root",
                len(articles) - reachable,
                len(articles),
            )
        return forest

    async def get_tree_view(
        self,
        collapsed: list[str] | None = None,
        selected_id: str | None = None,
        order: TreeOrder = "created",
    ) -> list[TreeRow]:
        """Visible rows of the tree for the given collapse/selection state."""
        state = TreeViewState(collapsed=set(collapsed or []))
        if selected_id:
            state.select(selected_id)
        forest = await self.get_forest(order)
        return state.visible_rows(forest)

    async def get_article_view(self, article_id: str) -> ArticleView:
        articles = await self._repository.get_all()
        by_id = {a.id: a for a in articles}
        article = by_id.get(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return ArticleView(
            article=article,
            parent=by_id.get(article.parent_id) if article.parent_id else None,
            breadcrumbs=ancestors(articles, article_id),
            content_html=self._renderer.render(article.content),
        )

    async def list_parent_options(self, article_id: str | None = None) -> list[Article]:
        """Articles that may become the parent of ``article_id``, ordered by title.

        Excludes the article itself and all of its descendants. Without an
        ``article_id`` (new article) every article is eligible.
        """
        articles = await self._repository.get_all()
        excluded: set[str] = set()
        if article_id is not None:
            if not any(a.id == article_id for a in articles):
                raise EntityNotFoundError("Article", article_id)
            excluded = descendant_ids(articles, article_id) | {article_id}
        options = [a for a in articles if a.id not in excluded]
        return sorted(options, key=lambda a: a.title.lower())

    def render_preview(self, content: str) -> str:
        return self._renderer.render(content)

    # ── Writes ───────────────────────────────────────────────────────

    async def create_article(self, data: ArticleCreate) -> Article:
        title = self._require("title", data.title).strip()
        content = self._require("content", data.content)
        slug = self._check_slug(data.slug if data.slug is not None else derive_slug(title))

        if data.parent_id is not None:
            await self._require_parent(data.parent_id)
        await self._ensure_slug_available(slug)

        article = Article(title=title, slug=slug, content=content, parent_id=data.parent_id)
        created = await self._repository.create(article)
        logger.info("Created article %s (slug=%s, parent=%s)", created.id, created.slug, created.parent_id)
        return created

    async def update_article(self, article_id: str, data: ArticleUpdate) -> Article:
        article = await self.get_article(article_id)

        title = self._require("title", data.title).strip() if data.title is not None else None
        content = self._require("content", data.content) if data.content is not None else None
        slug = self._check_slug(data.slug) if data.slug is not None else None

        if data.parent_id_given and data.parent_id is not None:
            await self._require_parent(data.parent_id)
            articles = await self._repository.get_all()
            if would_create_cycle(articles, article_id, data.parent_id):
                logger.info("Rejected move of article %s under %s: cycle", article_id, data.parent_id)
                raise InvalidParentError(article_id, data.parent_id)

        if slug is not None and slug != article.slug:
            await self._ensure_slug_available(slug, exclude_id=article_id)

        if data.parent_id_given:
            article.update(title=title, slug=slug, content=content, parent_id=data.parent_id)
        else:
            article.update(title=title, slug=slug, content=content)
        updated = await self._repository.update(article)
        logger.info("Updated article %s (slug=%s, parent=%s)", updated.id, updated.slug, updated.parent_id)
        return updated

    async def delete_article(self, article_id: str) -> bool:
        exists = await self._repository.get_by_id(article_id)
        if exists is None:
            raise EntityNotFoundError("Article", article_id)
        children = await self._repository.get_children(article_id)
        if children:
            logger.info("Rejected delete of article %s: %d child article(s)", article_id, len(children))
            raise HasChildrenError(article_id, len(children))
        deleted = await self._repository.delete(article_id)
        logger.info("Deleted article %s", article_id)
        return deleted

    # ── Helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _require(field: str, value: str) -> str:
        if not value or not value.strip():
            raise ValidationError(field, "is required")
        return value

    @staticmethod
    def _check_slug(slug: str) -> str:
        if not slug:
            raise ValidationError("slug", "is required (the title has no characters usable in a slug)")
        if not is_valid_slug(slug):
            raise ValidationError(
                "slug",
                f"'{slug}' is not URL-safe; use lowercase letters, digits and single hyphens "
                f"(e.g. '{derive_slug(slug)}')",
            )
        return slug

    async def _require_parent(self, parent_id: str) -> Article:
        parent = await self._repository.get_by_id(parent_id)
        if parent is None:
            raise DanglingParentError(parent_id)
        return parent

    async def _ensure_slug_available(self, slug: str, exclude_id: str | None = None) -> None:
        existing = await self._repository.get_by_slug(slug, exclude_id=exclude_id)
        if existing is not None:
            logger.info("Rejected slug '%s': already used by article %s", slug, existing.id)
            raise DuplicateSlugError(slug)
