from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    ArticleSummaryResponse,
    ArticleListItemResponse,
    ArticleNodeResponse,
    ArticleViewResponse,
    TreeRowResponse,
    SlugPreviewResponse,
    MarkdownPreviewRequest,
    MarkdownPreviewResponse,
)

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticleSummaryResponse",
    "ArticleListItemResponse",
    "ArticleNodeResponse",
    "ArticleViewResponse",
    "TreeRowResponse",
    "SlugPreviewResponse",
    "MarkdownPreviewRequest",
    "MarkdownPreviewResponse",
]
