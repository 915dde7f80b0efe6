from .article_repository import ArticleRepository
from .markdown_renderer import MarkdownRenderer

__all__ = [
    "ArticleRepository",
    "MarkdownRenderer",
]
