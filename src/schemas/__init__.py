"""Schema definitions for Archive Scraper."""

from .article_result import ArticleResult
from .extraction import ExtractedArticle
from .run_config import RunConfig, ScraperMode
from .sentiment import SENTINEL_SENTENCES, SENTINEL_TOTAL, SentimentOutcome
from .summary import RunSummary

__all__ = [
    "ArticleResult",
    "ExtractedArticle",
    "RunConfig",
    "RunSummary",
    "ScraperMode",
    "SentimentOutcome",
    "SENTINEL_SENTENCES",
    "SENTINEL_TOTAL",
]
