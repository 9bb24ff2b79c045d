"""Local storage for article bodies and sentiment annotation artifacts.

Directory structure:
    {root}/
    ├── ScrapedFiles/
    │   ├── {article_id}.txt          # cleaned body text
    │   ├── {article_id}.txt.xml      # canonical annotation artifact
    │   └── Summary/
    │       └── {MODE}SUMMARY_{start}_{end}.csv
    └── StanfordCoreNLP/              # annotator working directory
        └── {article_id}.txt.xml      # staged annotation artifact
"""

import logging
from enum import Enum
from pathlib import Path

from schemas.run_config import ScraperMode

logger = logging.getLogger(__name__)

SCRAPED_DIR_NAME = "ScrapedFiles"
ANNOTATOR_DIR_NAME = "StanfordCoreNLP"
SUMMARY_DIR_NAME = "Summary"

SUMMARY_PREFIXES = {
    ScraperMode.OFFLINE_METADATA: "OFFLINEMETADATA",
    ScraperMode.ALL_METADATA: "METADATA",
    ScraperMode.SENTIMENT: "SENTIMENT",
}


class PathVariant(str, Enum):
    """Which per-article file a path refers to."""

    BODY = "body"
    ANNOTATION = "annotation"
    STAGED_ANNOTATION = "staged_annotation"


class ArticleStore:
    """Reads and writes per-article files under a workspace root.

    Example:
        store = ArticleStore(Path("./workspace"))
        store.write(11839, "It was a dark and stormy night...")
        store.read_length(11839)
    """

    def __init__(self, root: Path, annotator_dir: Path | None = None):
        """Initialize the article store.

        Both directories are resolved to absolute paths; the annotator runs
        in its own working directory and must still find stored bodies.

        Args:
            root: Workspace root directory
            annotator_dir: Working directory of the sentiment annotator, where
                it writes its output (default: {root}/StanfordCoreNLP)
        """
        self.root = Path(root).resolve()
        self.scraped_dir = self.root / SCRAPED_DIR_NAME
        self.summary_dir = self.scraped_dir / SUMMARY_DIR_NAME
        if annotator_dir is None:
            self.annotator_dir = self.root / ANNOTATOR_DIR_NAME
        else:
            self.annotator_dir = Path(annotator_dir).resolve()

    def path(self, article_id: int, variant: PathVariant = PathVariant.BODY) -> Path:
        """Deterministic path of one article's file."""
        body_name = f"{article_id}.txt"
        if variant == PathVariant.BODY:
            return self.scraped_dir / body_name
        if variant == PathVariant.ANNOTATION:
            return self.scraped_dir / f"{body_name}.xml"
        return self.annotator_dir / f"{body_name}.xml"

    def summary_path(self, mode: ScraperMode, start_id: int, end_id: int) -> Path:
        """Path of the CSV summary for a mode and id range."""
        return self.summary_dir / f"{SUMMARY_PREFIXES[mode]}SUMMARY_{start_id}_{end_id}.csv"

    def exists(self, article_id: int, variant: PathVariant = PathVariant.BODY) -> bool:
        return self.path(article_id, variant).exists()

    def write(self, article_id: int, body: str) -> Path:
        """Write an article body, replacing any previous copy.

        Args:
            article_id: Numeric archive identifier
            body: Cleaned body text

        Returns:
            Path of the written file
        """
        body_path = self.path(article_id)
        body_path.parent.mkdir(parents=True, exist_ok=True)
        body_path.write_text(body, encoding="utf-8")
        logger.debug(f"Wrote body for article {article_id} to {body_path}")
        return body_path

    def read_length(self, article_id: int) -> int:
        """Character count of the stored body, 0 if none is stored."""
        body_path = self.path(article_id)
        if not body_path.exists():
            logger.debug(f"No stored body for article {article_id}")
            return 0
        return len(body_path.read_bytes().decode("utf-8"))
