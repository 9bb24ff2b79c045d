"""Summary aggregator for writing per-run CSV summaries."""

import csv
import logging
from pathlib import Path

from archive_scraper.clients import APIError, ClientError
from archive_scraper.pipeline import ArticleOrchestrator
from archive_scraper.store import ArticleStore
from schemas.article_result import ArticleResult
from schemas.run_config import RunConfig, ScraperMode
from schemas.summary import RunSummary

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS: dict[ScraperMode, tuple[str, ...]] = {
    ScraperMode.OFFLINE_METADATA: ("Id", "Length"),
    ScraperMode.ALL_METADATA: ("Id", "Date", "Title", "Author", "Length"),
    ScraperMode.SENTIMENT: ("Id", "Sentiment", "Sentences"),
}

REQUIRED_FIELDS: dict[ScraperMode, tuple[str, ...]] = {
    ScraperMode.OFFLINE_METADATA: ("length",),
    ScraperMode.ALL_METADATA: ("date", "title", "author", "length"),
    ScraperMode.SENTIMENT: ("sentiment_total", "sentences"),
}


def format_score(value: float) -> str:
    """Format a sentiment score, dropping the fraction for whole numbers."""
    if value.is_integer():
        return str(int(value))
    return str(value)


class SummaryAggregator:
    """Runs the orchestrator over an id range and writes a CSV summary.

    Summaries are write-once: if the summary for a mode and range already
    exists, the computed results are discarded and nothing is written.

    Example:
        store = ArticleStore(Path("./workspace"))
        with ArchiveClient({"base_url": DEFAULT_ARCHIVE_BASE_URL}) as client:
            orchestrator = ArticleOrchestrator(store, client=client)
            aggregator = SummaryAggregator(orchestrator, store)
            summary = aggregator.run(RunConfig(start_id=9901, end_id=9910))
    """

    def __init__(self, orchestrator: ArticleOrchestrator, store: ArticleStore):
        """Initialize the summary aggregator.

        Args:
            orchestrator: Builds the result for each article id
            store: ArticleStore that locates the summary file
        """
        self.orchestrator = orchestrator
        self.store = store

    def run(self, config: RunConfig) -> RunSummary:
        """Process every id in the configured range and write the summary.

        Args:
            config: Mode, id range and per-run flags

        Returns:
            RunSummary describing what was processed and written

        Raises:
            ClientError: If a fetch fails and config.isolate_fetch_errors is False
        """
        summary_path = self.store.summary_path(config.mode, config.start_id, config.end_id)
        summary = RunSummary(
            mode=config.mode,
            start_id=config.start_id,
            end_id=config.end_id,
            summary_path=str(summary_path),
        )

        results = self.collect(config, summary)

        if summary_path.exists():
            logger.info(f"Summary {summary_path} already exists; not overwriting")
            return summary

        summary.row_count = self.write_summary(summary_path, config.mode, results)
        summary.written = True
        logger.info(f"Wrote {summary.row_count} rows to {summary_path}")
        return summary

    def collect(self, config: RunConfig, summary: RunSummary) -> list[ArticleResult]:
        """Build one result per id, in ascending id order."""
        results: list[ArticleResult] = []

        for article_id in config.article_ids():
            logger.info(f"Processing article {article_id}")
            try:
                result = self.orchestrator.process(article_id, config.mode)
            except ClientError as e:
                if not config.isolate_fetch_errors:
                    raise
                if isinstance(e, APIError) and e.not_found:
                    logger.info(f"No such article {article_id}")
                else:
                    logger.error(f"Failed to fetch article {article_id}: {e}")
                summary.failed_ids.append(article_id)
                result = ArticleResult(article_id=article_id)

            summary.processed_ids.append(article_id)
            results.append(result)

        return results

    def write_summary(
        self,
        summary_path: Path,
        mode: ScraperMode,
        results: list[ArticleResult],
    ) -> int:
        """Write the header and one row per complete result.

        Args:
            summary_path: CSV file to create
            mode: Run mode, selects columns and required fields
            results: Results in processing order

        Returns:
            Number of article rows written
        """
        summary_path.parent.mkdir(parents=True, exist_ok=True)
        row_count = 0

        with open(summary_path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(SUMMARY_COLUMNS[mode])

            for result in results:
                row = self.build_row(mode, result)
                if row is None:
                    logger.debug(f"Omitting incomplete article {result.article_id}")
                    continue
                writer.writerow(row)
                row_count += 1

        return row_count

    def build_row(self, mode: ScraperMode, result: ArticleResult) -> list[str] | None:
        """CSV row for a result, or None if it lacks a required field."""
        if not result.has_fields(*REQUIRED_FIELDS[mode]):
            return None

        article_id = str(result.article_id)
        if mode == ScraperMode.OFFLINE_METADATA:
            return [article_id, str(result.length)]
        if mode == ScraperMode.ALL_METADATA:
            return [article_id, result.date, result.title, result.author, str(result.length)]

        if result.sentiment_error is not None:
            return None
        return [article_id, format_score(result.sentiment_total), str(result.sentences)]
