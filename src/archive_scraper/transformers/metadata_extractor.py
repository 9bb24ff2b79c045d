"""Metadata extraction from archived article print views.

The print view of an article looks like:

    <div class="article">
      <div class="tools">...</div>
      <p class="date">August 25, 2010</p>
      <h1 class="title">Manufactured Runs</h1>
      <h2 class="subtitle">Support Group</h2>
      <p class="author">by <a class="author" href="...">Colin Wyers</a></p>
      <table class="freeweek">...</table>
      <p>First paragraph...</p>
      ...
    </div>

Regions are matched by exact class attribute value.
"""

import logging

from lxml import etree
from lxml import html as lxml_html

from schemas.extraction import ExtractedArticle

from .text_cleaner import ARTICLE_SUBSTITUTIONS, DECODED_SUBSTITUTIONS, clean

logger = logging.getLogger(__name__)

ARTICLE_CLASS = "article"
AUXILIARY_CLASSES = ("tools", "subtitle", "freeweek")
DATE_CLASS = "date"
TITLE_CLASS = "title"
AUTHOR_CLASS = "author"
AUTHOR_PREFIX = "by "


class MetadataExtractor:
    """Extract date, title, author and body text from an article page.

    Extraction fails softly: structural anomalies are logged and the
    affected fields are left unset.

    By default the region selectors are evaluated against the whole
    document, so same-class regions outside the article are matched and
    removed too. Set scope_to_article to evaluate them inside the article
    region only.

    Attributes:
        substitutions: Ordered cleaning table applied to the body text
        scope_to_article: Evaluate region selectors inside the article only
    """

    def __init__(
        self,
        substitutions: dict[str, str] | None = None,
        scope_to_article: bool = False,
    ):
        self.substitutions = substitutions or ARTICLE_SUBSTITUTIONS
        self.scope_to_article = scope_to_article

    def extract(self, raw_document: str | bytes) -> ExtractedArticle:
        """Extract metadata and body text from a raw article page.

        Args:
            raw_document: Full HTML of the article print view

        Returns:
            ExtractedArticle with whichever fields could be located
        """
        document = self._parse(raw_document)
        if document is None:
            return ExtractedArticle()

        article_nodes = self._select(document, ARTICLE_CLASS)
        if len(article_nodes) != 1:
            logger.warning(f"Unexpected article node count: {len(article_nodes)}")
            return ExtractedArticle()

        article = article_nodes[0]
        scope = article if self.scope_to_article else document

        for class_name in AUXILIARY_CLASSES:
            for node in self._select(scope, class_name):
                node.drop_tree()

        date = self._take_first(scope, DATE_CLASS)
        if date is not None and "," in date:
            date = date.replace(",", "")

        title = self._take_first(scope, TITLE_CLASS)

        author = self._take_first(scope, AUTHOR_CLASS)
        if author is not None and author.startswith(AUTHOR_PREFIX):
            author = author[len(AUTHOR_PREFIX):]

        body = self._body_text(article)

        return ExtractedArticle(date=date, title=title, author=author, body=body)

    def _parse(self, raw_document: str | bytes) -> lxml_html.HtmlElement | None:
        """Parse raw markup into an element tree, or None if it is unusable."""
        if not raw_document or not raw_document.strip():
            logger.warning("Empty document; nothing to extract")
            return None
        try:
            return lxml_html.document_fromstring(raw_document)
        except (etree.ParserError, ValueError) as e:
            logger.warning(f"Could not parse document: {e}")
            return None

    def _select(self, root: lxml_html.HtmlElement, class_name: str) -> list:
        """All elements under root whose class is exactly class_name, in document order."""
        return root.xpath(f'.//*[@class="{class_name}"]')

    def _take_first(self, root: lxml_html.HtmlElement, class_name: str) -> str | None:
        """Return the text of the first matching region and remove it from the tree.

        The parser has already decoded entities, so the text is normalized
        with the decoded-character table the body gets.
        """
        nodes = self._select(root, class_name)
        if not nodes:
            logger.warning(f"Unexpected {class_name} node count: 0")
            return None

        node = nodes[0]
        text = node.text_content()
        node.drop_tree()
        return clean(text, DECODED_SUBSTITUTIONS)

    def _body_text(self, article: lxml_html.HtmlElement) -> str:
        """Concatenate remaining paragraph text in document order and clean it."""
        text = "".join(p.text_content() for p in article.iterdescendants("p"))
        return clean(text, self.substitutions)
