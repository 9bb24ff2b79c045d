"""Sentiment annotation of stored article bodies.

Runs the Stanford CoreNLP pipeline as a blocking subprocess over one
stored body, moves its XML output from the annotator's working directory
into the article store, and sums the per-sentence sentiment values.

The annotator writes sentences as

    <sentence id="1" sentimentValue="1" sentiment="Neutral">

and scores are read positionally: a sentence counts toward the total only
when it has exactly three attributes and the second is sentimentValue.
Any other shape scores zero without raising.
"""

import logging
import shutil
import subprocess
from pathlib import Path

from lxml import etree

from archive_scraper.store import ArticleStore, PathVariant
from schemas.sentiment import SentimentOutcome

logger = logging.getLogger(__name__)

CORENLP_MAIN_CLASS = "edu.stanford.nlp.pipeline.StanfordCoreNLP"
ANNOTATORS = ("tokenize", "ssplit", "pos", "parse", "sentiment")
SENTENCE_TAG = "sentence"
SENTIMENT_ATTRIBUTE = "sentimentValue"
SENTIMENT_ATTRIBUTE_INDEX = 1
EXPECTED_ATTRIBUTE_COUNT = 3


class SentimentInvoker:
    """Annotate a stored article and compute its aggregate sentiment.

    Example:
        store = ArticleStore(Path("./workspace"))
        invoker = SentimentInvoker(store)
        outcome = invoker.invoke(11839)
        total, sentences = outcome.as_pair()

    Attributes:
        store: ArticleStore that holds bodies and annotation artifacts
        java: Java executable used to launch the annotator
        heap_size: JVM maximum heap hint, e.g. "2g"
        timeout: Seconds to wait for the annotator, None to wait indefinitely
    """

    def __init__(
        self,
        store: ArticleStore,
        java: str = "java",
        heap_size: str = "2g",
        timeout: float | None = None,
    ):
        self.store = store
        self.java = java
        self.heap_size = heap_size
        self.timeout = timeout

    @property
    def working_directory(self) -> Path:
        return self.store.annotator_dir

    def invoke(self, article_id: int) -> SentimentOutcome:
        """Annotate one article and sum its sentence sentiment values.

        Never raises; failures produce SentimentOutcome.failed().

        Args:
            article_id: Numeric archive identifier of a stored article

        Returns:
            SentimentOutcome with total and sentence count
        """
        self.run_annotator(article_id)

        staged_path = self.store.path(article_id, PathVariant.STAGED_ANNOTATION)
        target_path = self.store.path(article_id, PathVariant.ANNOTATION)
        self.relocate(staged_path, target_path)

        return self.parse(target_path)

    def build_command(self, article_id: int) -> list[str]:
        """Build the annotator command line for one stored body."""
        body_path = self.store.path(article_id, PathVariant.BODY)
        return [
            self.java,
            "-cp",
            "*",
            f"-Xmx{self.heap_size}",
            CORENLP_MAIN_CLASS,
            "-annotators",
            ",".join(ANNOTATORS),
            "-file",
            str(body_path),
        ]

    def run_annotator(self, article_id: int) -> bool:
        """Run the annotator and wait for it to exit.

        Exit status and output are not interpreted. A launch failure or
        timeout is logged and reported as False; callers carry on and let
        the missing artifact surface downstream.

        Args:
            article_id: Numeric archive identifier

        Returns:
            True if the process ran to completion
        """
        command = self.build_command(article_id)
        logger.debug(f"Running annotator in {self.working_directory}: {' '.join(command)}")

        try:
            completed = subprocess.run(
                command,
                cwd=self.working_directory,
                capture_output=True,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.error(f"Annotator failed for article {article_id}: {e}")
            return False

        logger.debug(f"Annotator exited with status {completed.returncode} for article {article_id}")
        return True

    def relocate(self, source_path: Path, target_path: Path) -> bool:
        """Move the staged artifact to its canonical location.

        A missing source is replaced by an empty placeholder so the move
        always has something to move; an existing target is deleted first.

        Args:
            source_path: Where the annotator wrote its output
            target_path: Canonical artifact path in the article store

        Returns:
            True if the source no longer exists after the move
        """
        try:
            if not source_path.exists():
                source_path.touch()

            if target_path.exists():
                target_path.unlink()

            target_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(source_path), str(target_path))
            logger.info(f"{source_path} was moved to {target_path}")
        except OSError as e:
            logger.error(f"Moving {source_path} to {target_path} failed: {e}")
            return False

        if source_path.exists():
            logger.error(f"Original file {source_path} still exists after move")
            return False
        return True

    def parse(self, artifact_path: Path) -> SentimentOutcome:
        """Parse an annotation artifact into a sentiment outcome.

        Args:
            artifact_path: Path to the annotator's XML output

        Returns:
            SentimentOutcome, failed if the artifact is unreadable or malformed
        """
        try:
            tree = etree.parse(str(artifact_path))
        except etree.XMLSyntaxError as e:
            logger.error(f"Malformed annotation artifact {artifact_path}: {e}")
            return SentimentOutcome.failed(f"malformed annotation artifact: {e}")
        except OSError as e:
            logger.error(f"Unreadable annotation artifact {artifact_path}: {e}")
            return SentimentOutcome.failed(f"unreadable annotation artifact: {e}")

        return score_sentences(tree.getroot())


def score_sentences(root: etree._Element) -> SentimentOutcome:
    """Sum sentiment values over every sentence element under root.

    Every sentence is counted; only sentences with the expected attribute
    shape and an integer value contribute to the total.
    """
    total = 0.0
    count = 0
    for sentence in root.iter(SENTENCE_TAG):
        count += 1
        attributes = list(sentence.attrib.items())
        if len(attributes) != EXPECTED_ATTRIBUTE_COUNT:
            continue

        name, value = attributes[SENTIMENT_ATTRIBUTE_INDEX]
        if name != SENTIMENT_ATTRIBUTE:
            continue

        try:
            total += int(value)
        except ValueError:
            continue

    return SentimentOutcome(total=total, sentences=count)
