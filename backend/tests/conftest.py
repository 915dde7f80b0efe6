"""Shared fixtures: an in-memory article repository and a service wired to it."""

from dataclasses import replace

import pytest

from app.application.interfaces import ArticleRepository
from app.application.services import ArticleService
from app.domain.entities import Article
from app.infrastructure.rendering import RegexMarkdownRenderer


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing.

    Stores copies so callers cannot change "persisted" state without
    going through create/update.
    """

    def __init__(self):
        self._articles: dict[str, Article] = {}

    def add(self, article: Article) -> Article:
        """Seed an article directly, bypassing the service rules."""
        self._articles[article.id] = replace(article)
        return article

    async def get_by_id(self, article_id: str) -> Article | None:
        article = self._articles.get(article_id)
        return replace(article) if article else None

    async def get_by_slug(self, slug: str, exclude_id: str | None = None) -> Article | None:
        for article in self._articles.values():
            if article.slug == slug and article.id != exclude_id:
                return replace(article)
        return None

    async def get_all(self) -> list[Article]:
        return [replace(a) for a in self._articles.values()]

    async def get_children(self, parent_id: str) -> list[Article]:
        return [replace(a) for a in self._articles.values() if a.parent_id == parent_id]

    async def create(self, article: Article) -> Article:
        self._articles[article.id] = replace(article)
        return replace(article)

    async def update(self, article: Article) -> Article:
        if article.id not in self._articles:
            raise ValueError(f"Article {article.id} not found")
        self._articles[article.id] = replace(article)
        return replace(article)

    async def delete(self, article_id: str) -> bool:
        if article_id in self._articles:
            del self._articles[article_id]
            return True
        return False

    def snapshot(self) -> dict[str, Article]:
        return {k: replace(v) for k, v in self._articles.items()}


@pytest.fixture
def repository() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def service(repository: FakeArticleRepository) -> ArticleService:
    return ArticleService(repository, RegexMarkdownRenderer())


@pytest.fixture
def tech_tree(repository: FakeArticleRepository) -> dict[str, Article]:
    """Tech → Programming → Web Dev, plus a second root."""
    tech = repository.add(Article(id="1", title="Tech", slug="tech", content="# Tech"))
    programming = repository.add(
        Article(id="2", title="Programming", slug="programming", content="# Programming", parent_id="1")
    )
    web = repository.add(
        Article(id="3", title="Web Dev", slug="web-dev", content="# Web Dev", parent_id="2")
    )
    cooking = repository.add(Article(id="4", title="Cooking", slug="cooking", content="Recipes"))
    return {"tech": tech, "programming": programming, "web": web, "cooking": cooking}
