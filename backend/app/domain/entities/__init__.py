from .article import Article, ArticleListing, ArticleNode, ArticleView

__all__ = [
    "Article",
    "ArticleListing",
    "ArticleNode",
    "ArticleView",
]
