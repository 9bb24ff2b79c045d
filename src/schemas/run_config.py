"""Run configuration schema.

A RunConfig is decided once per process invocation and passed into the
SummaryAggregator. It is the only process-wide state of a scraping run.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class ScraperMode(str, Enum):
    """Processing mode for a run.

    Each mode is a separate run over an id range. Fetching and sentiment
    annotation never happen in the same pass; the stored article bodies
    are the hand-off point between them.
    """

    OFFLINE_METADATA = "offline-metadata"
    ALL_METADATA = "all-metadata"
    SENTIMENT = "sentiment"


class RunConfig(BaseModel):
    """Immutable parameters for one scraping run.

    Attributes:
        mode: Which per-article steps run
        start_id: First article id to process (inclusive)
        end_id: Last article id to process (inclusive)
        persist_bodies: Write extracted article bodies to the article store
        average_sentiment: Report the per-sentence mean instead of the sum
        isolate_fetch_errors: Log and skip ids whose fetch fails instead of
            aborting the whole run
    """

    mode: ScraperMode = ScraperMode.ALL_METADATA
    start_id: int = Field(gt=0)
    end_id: int = Field(gt=0)
    persist_bodies: bool = False
    average_sentiment: bool = False
    isolate_fetch_errors: bool = True

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_range(self) -> "RunConfig":
        if self.end_id < self.start_id:
            raise ValueError(
                f"end_id ({self.end_id}) must not be less than start_id ({self.start_id})"
            )
        return self

    def article_ids(self) -> range:
        """Ids to process, in ascending order."""
        return range(self.start_id, self.end_id + 1)
