"""Per-article result record.

An ArticleResult is built fresh for each id, populated by whichever steps
the run mode enables, consumed once to build a summary row and then
discarded.
"""

from pydantic import BaseModel


class ArticleResult(BaseModel):
    """Fields gathered for one article during a run.

    Fields a mode does not populate stay None.

    Attributes:
        article_id: Numeric archive identifier
        date: Publication date with commas stripped
        title: Article title
        author: Author name with any leading "by " removed
        length: Character count of the stored body text
        sentiment_total: Sum (or mean) of per-sentence sentiment scores
        sentences: Number of sentence elements in the annotation artifact
        sentiment_error: Why sentiment could not be computed, if it failed
    """

    article_id: int
    date: str | None = None
    title: str | None = None
    author: str | None = None
    length: int | None = None
    sentiment_total: float | None = None
    sentences: int | None = None
    sentiment_error: str | None = None

    def has_fields(self, *names: str) -> bool:
        """Return True if every named field is populated."""
        return all(getattr(self, name) is not None for name in names)
