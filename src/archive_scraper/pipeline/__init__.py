"""Per-article pipeline."""

from .orchestrator import ArticleOrchestrator

__all__ = ["ArticleOrchestrator"]
