"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from app.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Each call is atomic from the caller's point of view; no lock is held
    between calls.
    """

    @abstractmethod
    async def get_by_id(self, article_id: str) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_by_slug(self, slug: str, exclude_id: str | None = None) -> Article | None:
        """Find the article using ``slug``, optionally ignoring one article ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Retrieve every article, oldest first (ties broken by ID)."""
        ...

    @abstractmethod
    async def get_children(self, parent_id: str) -> list[Article]:
        """Retrieve the direct children of an article, oldest first."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Update an existing article."""
        ...

    @abstractmethod
    async def delete(self, article_id: str) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...
