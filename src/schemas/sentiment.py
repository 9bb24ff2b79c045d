"""Sentiment annotation outcome."""

from pydantic import BaseModel

SENTINEL_TOTAL = -1.0
SENTINEL_SENTENCES = 0


class SentimentOutcome(BaseModel):
    """Result of annotating one stored article.

    A failed outcome still carries the legacy sentinel pair (-1.0, 0), but
    callers should check `succeeded` rather than compare the total, since
    -1.0 is also a legitimate computed sum.

    Attributes:
        total: Sum of parsed per-sentence sentiment values
        sentences: Number of sentence elements seen
        error: Failure description, None on success
    """

    total: float
    sentences: int
    error: str | None = None

    @classmethod
    def failed(cls, error: str) -> "SentimentOutcome":
        return cls(total=SENTINEL_TOTAL, sentences=SENTINEL_SENTENCES, error=error)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def average(self) -> float:
        """Mean sentiment per sentence, 0.0 when there are no sentences."""
        if self.sentences == 0:
            return 0.0
        return self.total / self.sentences

    def as_pair(self) -> tuple[float, int]:
        return (self.total, self.sentences)
