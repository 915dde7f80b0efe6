from .base import Base
from .session import engine, async_session_factory, build_engine, get_db_session
from .models import ArticleModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "build_engine",
    "get_db_session",
    "ArticleModel",
]
