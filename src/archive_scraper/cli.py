"""Command-line interface for archive-scraper."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from archive_scraper.aggregators import SummaryAggregator
from archive_scraper.clients import DEFAULT_ARCHIVE_BASE_URL, ArchiveClient
from archive_scraper.pipeline import ArticleOrchestrator
from archive_scraper.sentiment import SentimentInvoker
from archive_scraper.store import ArticleStore
from archive_scraper.transformers import MetadataExtractor
from schemas.run_config import RunConfig, ScraperMode

DEFAULT_ROOT = Path("./workspace")
DEFAULT_HEAP_SIZE = "2g"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def run_scraper(args: argparse.Namespace) -> int:
    """Execute the run command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = RunConfig(
            mode=args.mode,
            start_id=args.start,
            end_id=args.end,
            persist_bodies=args.persist_bodies,
            average_sentiment=args.average,
            isolate_fetch_errors=not args.stop_on_fetch_error,
        )
    except ValidationError as e:
        logger.error(f"Invalid run configuration: {e}")
        return 1

    store = ArticleStore(args.root, annotator_dir=args.annotator_dir)
    invoker = SentimentInvoker(
        store,
        java=args.java,
        heap_size=args.heap,
        timeout=args.timeout,
    )

    client_config = {
        "base_url": args.base_url,
        "headers": {
            "User-Agent": "archive-scraper/0.1",
        },
    }

    try:
        with ArchiveClient(client_config) as client:
            orchestrator = ArticleOrchestrator(
                store,
                client=client,
                extractor=MetadataExtractor(scope_to_article=args.scope_to_article),
                invoker=invoker,
                persist_bodies=config.persist_bodies,
                average_sentiment=config.average_sentiment,
            )
            aggregator = SummaryAggregator(orchestrator, store)
            logger.info(
                f"Running {config.mode.value} for articles {config.start_id} to {config.end_id}"
            )
            summary = aggregator.run(config)

        logger.info(f"Run complete: {config.mode.value}")
        logger.info(f"  Articles: {len(summary.processed_ids)}")
        if summary.written:
            logger.info(f"  Rows: {summary.row_count}")
            logger.info(f"  Output: {summary.summary_path}")
        else:
            logger.info(f"  Summary already existed, left untouched: {summary.summary_path}")

        if summary.failed_ids:
            logger.warning(f"  Fetch failures: {len(summary.failed_ids)}")
            for article_id in summary.failed_ids:
                logger.warning(f"    - {article_id}")

        return 0

    except Exception as e:
        logger.error(f"Run failed: {e}")
        return 1


def extract_file(args: argparse.Namespace) -> int:
    """Execute the extract command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    html_path = args.html.resolve()
    if not html_path.exists():
        logger.error(f"HTML file not found: {html_path}")
        return 1

    extractor = MetadataExtractor(scope_to_article=args.scope_to_article)
    extracted = extractor.extract(html_path.read_bytes())

    report = extracted.model_dump(exclude={"body"})
    report["length"] = len(extracted.body) if extracted.body is not None else None
    print(json.dumps(report, indent=2, ensure_ascii=False))

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="archive-scraper",
        description="Scrape archived articles and summarize their metadata and sentiment",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    run_parser = subparsers.add_parser(
        "run",
        help="Process an article id range and write a CSV summary",
        description="Process every article id in an inclusive range in the selected mode and write a write-once CSV summary.",
    )
    run_parser.add_argument(
        "--mode",
        type=str,
        choices=[mode.value for mode in ScraperMode],
        default=ScraperMode.ALL_METADATA.value,
        help=f"Processing mode (default: {ScraperMode.ALL_METADATA.value})",
    )
    run_parser.add_argument(
        "--start",
        type=int,
        required=True,
        help="First article id (inclusive)",
    )
    run_parser.add_argument(
        "--end",
        type=int,
        required=True,
        help="Last article id (inclusive)",
    )
    run_parser.add_argument(
        "--persist-bodies",
        action="store_true",
        help="Write extracted article bodies to the workspace",
    )
    run_parser.add_argument(
        "--average",
        action="store_true",
        help="Report mean sentiment per sentence instead of the sum",
    )
    run_parser.add_argument(
        "--stop-on-fetch-error",
        action="store_true",
        help="Abort the run on the first failed fetch instead of skipping the article",
    )
    run_parser.add_argument(
        "--scope-to-article",
        action="store_true",
        help="Match date/title/author regions inside the article region only",
    )
    run_parser.add_argument(
        "--root",
        type=Path,
        default=DEFAULT_ROOT,
        help=f"Workspace root directory (default: {DEFAULT_ROOT})",
    )
    run_parser.add_argument(
        "--base-url",
        type=str,
        default=DEFAULT_ARCHIVE_BASE_URL,
        help=f"Archive base URL (default: {DEFAULT_ARCHIVE_BASE_URL})",
    )
    run_parser.add_argument(
        "--annotator-dir",
        type=Path,
        default=None,
        help="Stanford CoreNLP directory (default: <root>/StanfordCoreNLP)",
    )
    run_parser.add_argument(
        "--java",
        type=str,
        default="java",
        help="Java executable used to run the annotator (default: java)",
    )
    run_parser.add_argument(
        "--heap",
        type=str,
        default=DEFAULT_HEAP_SIZE,
        help=f"Annotator JVM max heap (default: {DEFAULT_HEAP_SIZE})",
    )
    run_parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for the annotator per article (default: no limit)",
    )
    run_parser.set_defaults(func=run_scraper)

    extract_parser = subparsers.add_parser(
        "extract",
        help="Extract metadata from a saved article page",
        description="Run metadata extraction on a saved print-view HTML file and print the fields as JSON.",
    )
    extract_parser.add_argument(
        "--html",
        type=Path,
        required=True,
        help="Path to the saved HTML file",
    )
    extract_parser.add_argument(
        "--scope-to-article",
        action="store_true",
        help="Match date/title/author regions inside the article region only",
    )
    extract_parser.set_defaults(func=extract_file)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
