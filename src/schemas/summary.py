"""Run summary schema."""

from pydantic import BaseModel

from .run_config import ScraperMode


class RunSummary(BaseModel):
    """Outcome of one aggregation run.

    Attributes:
        mode: Mode the run was executed in
        start_id: First id processed
        end_id: Last id processed
        summary_path: Path of the CSV summary for this mode and range
        written: False when the summary already existed and was left untouched
        row_count: Number of article rows written to the CSV
        processed_ids: Ids visited, in processing order
        failed_ids: Ids whose fetch failed and were skipped
    """

    mode: ScraperMode
    start_id: int
    end_id: int
    summary_path: str
    written: bool = False
    row_count: int = 0
    processed_ids: list[int] = []
    failed_ids: list[int] = []
