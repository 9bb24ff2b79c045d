"""Pytest fixtures for Archive Scraper tests."""

import pytest

from archive_scraper.store import ArticleStore

# 21 characters; two paragraphs make a 42-character body.
PARAGRAPH = "Twenty-one characters"


def make_article_page(
    date: str | None = "August 25, 2010",
    title: str | None = "Manufactured Runs",
    author: str | None = "by Colin Wyers",
    paragraphs: list[str] | None = None,
    article_count: int = 1,
    preamble: str = "",
) -> str:
    """Build a print-view page shaped like the archive's markup."""
    if paragraphs is None:
        paragraphs = [PARAGRAPH, PARAGRAPH]

    header = ['<div class="tools">Print | Mail</div>']
    if date is not None:
        header.append(f'<p class="date">{date}</p>')
    if title is not None:
        header.append(f'<h1 class="title">{title}</h1>')
    header.append('<h2 class="subtitle">Support Group</h2>')
    if author is not None:
        if author.startswith("by "):
            name = author[len("by "):]
            header.append(
                f'<p class="author">by <a class="author" href="/author/x/">{name}</a></p>'
            )
        else:
            header.append(f'<p class="author">{author}</p>')
    header.append(
        '<table width="700" class="freeweek"><tr><td>Archives are free</td></tr></table>'
    )

    body = "\n".join(f"<p>{text}</p>" for text in paragraphs)
    article = '<div class="article">\n' + "\n".join(header) + "\n" + body + "\n</div>"

    return (
        "<html><head><title>Baseball Prospectus</title></head><body>\n"
        + preamble
        + "\n".join([article] * article_count)
        + "\n</body></html>"
    )


def make_annotation(sentences: list[str]) -> str:
    """Build a CoreNLP-style XML artifact from raw sentence start tags."""
    body = "\n".join(f"{tag}<tokens/></sentence>" for tag in sentences)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        "<root><document><sentences>\n"
        f"{body}\n"
        "</sentences></document></root>\n"
    )


@pytest.fixture
def sample_article_page():
    """A well-formed article page with all regions present."""
    return make_article_page()


@pytest.fixture
def sample_annotation():
    """Annotation artifact with sentiment values 1, -2 and 0."""
    return make_annotation([
        '<sentence id="1" sentimentValue="1" sentiment="Neutral">',
        '<sentence id="2" sentimentValue="-2" sentiment="Negative">',
        '<sentence id="3" sentimentValue="0" sentiment="Verynegative">',
    ])


@pytest.fixture
def store(tmp_path):
    """ArticleStore rooted in a temporary workspace with the annotator directory present."""
    article_store = ArticleStore(tmp_path / "workspace")
    article_store.annotator_dir.mkdir(parents=True)
    return article_store


@pytest.fixture
def make_page():
    """Factory for article pages with chosen regions."""
    return make_article_page


@pytest.fixture
def make_artifact():
    """Factory for annotation artifacts from sentence start tags."""
    return make_annotation
