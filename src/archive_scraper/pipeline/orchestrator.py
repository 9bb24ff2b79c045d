"""Per-article orchestration.

Composes fetching, extraction, storage and sentiment annotation into a
single ArticleResult for one id. The run mode decides which steps run:

- offline-metadata: length of the already-stored body only
- all-metadata: fetch, extract, optionally store the body, then length
- sentiment: annotate the stored body only
"""

import logging

from archive_scraper.clients import ArchiveClient
from archive_scraper.sentiment import SentimentInvoker
from archive_scraper.store import ArticleStore
from archive_scraper.transformers import MetadataExtractor
from schemas.article_result import ArticleResult
from schemas.run_config import ScraperMode

logger = logging.getLogger(__name__)


class ArticleOrchestrator:
    """Build the ArticleResult for one article id.

    Fetch errors from the client propagate to the caller.

    Attributes:
        store: ArticleStore holding bodies and annotation artifacts
        client: ArchiveClient, required for all-metadata mode
        extractor: MetadataExtractor applied to fetched pages
        invoker: SentimentInvoker used in sentiment mode
        persist_bodies: Write extracted bodies to the store
        average_sentiment: Report the per-sentence mean instead of the sum
    """

    def __init__(
        self,
        store: ArticleStore,
        client: ArchiveClient | None = None,
        extractor: MetadataExtractor | None = None,
        invoker: SentimentInvoker | None = None,
        persist_bodies: bool = False,
        average_sentiment: bool = False,
    ):
        self.store = store
        self.client = client
        self.extractor = extractor or MetadataExtractor()
        self.invoker = invoker or SentimentInvoker(store)
        self.persist_bodies = persist_bodies
        self.average_sentiment = average_sentiment

    def process(self, article_id: int, mode: ScraperMode) -> ArticleResult:
        """Run the steps enabled by mode for one article.

        Args:
            article_id: Numeric archive identifier
            mode: Run mode

        Returns:
            ArticleResult populated with the mode's fields

        Raises:
            ValueError: If mode is all-metadata and no client was given
            ClientError: If fetching the article fails
        """
        result = ArticleResult(article_id=article_id)

        if mode == ScraperMode.ALL_METADATA:
            self._fetch_metadata(result)
            result.length = self.store.read_length(article_id)
        elif mode == ScraperMode.OFFLINE_METADATA:
            result.length = self.store.read_length(article_id)
        elif mode == ScraperMode.SENTIMENT:
            self._annotate(result)
        else:
            raise ValueError(f"Unexpected execution mode: {mode}")

        return result

    def _fetch_metadata(self, result: ArticleResult) -> None:
        """Fetch, extract and optionally store one article."""
        if self.client is None:
            raise ValueError("all-metadata mode requires an ArchiveClient")

        logger.debug(f"Fetching {self.client.article_url(result.article_id)}")
        raw_document = self.client.fetch(result.article_id)
        extracted = self.extractor.extract(raw_document)
        if extracted.is_empty:
            logger.warning(f"Nothing extracted from article {result.article_id}")

        result.date = extracted.date
        result.title = extracted.title
        result.author = extracted.author

        if self.persist_bodies and extracted.body is not None:
            self.store.write(result.article_id, extracted.body)

    def _annotate(self, result: ArticleResult) -> None:
        """Annotate the stored body and record the outcome."""
        outcome = self.invoker.invoke(result.article_id)
        total, sentences = outcome.as_pair()

        result.sentences = sentences
        if outcome.succeeded:
            result.sentiment_total = outcome.average if self.average_sentiment else total
        else:
            result.sentiment_total = total
            result.sentiment_error = outcome.error
            logger.warning(
                f"No sentiment for article {result.article_id}: {outcome.error}"
            )
