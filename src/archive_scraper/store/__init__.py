"""Local article storage."""

from .article_store import ArticleStore, PathVariant

__all__ = ["ArticleStore", "PathVariant"]
