"""Transformers for turning archived pages into article text and metadata."""

from .metadata_extractor import MetadataExtractor
from .text_cleaner import (
    ARTICLE_SUBSTITUTIONS,
    CLEAN_SUBSTITUTIONS,
    DECODED_SUBSTITUTIONS,
    clean,
)

__all__ = [
    "MetadataExtractor",
    "ARTICLE_SUBSTITUTIONS",
    "CLEAN_SUBSTITUTIONS",
    "DECODED_SUBSTITUTIONS",
    "clean",
]
