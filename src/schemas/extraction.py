"""Metadata extraction output."""

from pydantic import BaseModel


class ExtractedArticle(BaseModel):
    """Metadata and body text pulled from one archived article page.

    Extraction is best-effort: any field whose region was missing is None,
    and body is None when the article region itself could not be isolated.

    Attributes:
        date: Text of the date region with commas removed
        title: Text of the title region
        author: Text of the author region without a leading "by "
        body: Cleaned concatenation of paragraph text
    """

    date: str | None = None
    title: str | None = None
    author: str | None = None
    body: str | None = None

    @property
    def is_empty(self) -> bool:
        return (
            self.date is None
            and self.title is None
            and self.author is None
            and self.body is None
        )
