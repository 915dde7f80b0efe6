"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Article:
    """Core domain entity — one node of the self-referencing article hierarchy."""

    title: str
    slug: str
    content: str
    parent_id: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        title: str | None = None,
        slug: str | None = None,
        content: str | None = None,
        parent_id: str | None = ...,  # type: ignore[assignment]
    ) -> None:
        """Update mutable fields and refresh the updated_at timestamp.

        ``parent_id=None`` moves the article to the root level; leaving it out
        keeps the current parent.
        """
        if title is not None:
            self.title = title
        if slug is not None:
            self.slug = slug
        if content is not None:
            self.content = content
        if parent_id is not ...:
            self.parent_id = parent_id
        self.updated_at = datetime.now(timezone.utc)


@dataclass
class ArticleNode:
    """An article plus its ordered children. Rebuilt on every read, never persisted."""

    article: Article
    children: list["ArticleNode"] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.article.id

    @property
    def parent_id(self) -> str | None:
        return self.article.parent_id

    @property
    def title(self) -> str:
        return self.article.title

    @property
    def slug(self) -> str:
        return self.article.slug

    @property
    def has_children(self) -> bool:
        return bool(self.children)


@dataclass
class ArticleListing:
    """An article paired with its parent, as shown in the article index."""

    article: Article
    parent: Article | None = None


@dataclass
class ArticleView:
    """Read model for the article page: breadcrumbs and rendered content."""

    article: Article
    parent: Article | None
    breadcrumbs: list[Article]
    content_html: str
