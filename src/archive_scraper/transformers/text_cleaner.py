"""Text cleaning substitutions for extracted article text.

Archived pages carry typographic HTML entities that are noise for the
sentiment annotator. Cleaning is plain literal replacement, applied in
table order.
"""

# Ordered: each substitution sees the output of the previous one.
CLEAN_SUBSTITUTIONS: dict[str, str] = {
    "&lsquo;": "'",
    "&rsquo;": "'",
    "&#39;": "'",
    "&ldquo;": '"',
    "&rdquo;": '"',
    "&quot;": '"',
    "&nbsp;": " ",
    "&mdash;": ", ",
    "&amp;": "&",
    "&hellip;": "...",
    "&frac12;": ".5",
}

# The same replacements for text whose entities the HTML parser already decoded.
DECODED_SUBSTITUTIONS: dict[str, str] = {
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
    "\u00a0": " ",
    "\u2014": ", ",
    "\u2026": "...",
    "\u00bd": ".5",
}

ARTICLE_SUBSTITUTIONS: dict[str, str] = {**CLEAN_SUBSTITUTIONS, **DECODED_SUBSTITUTIONS}


def clean(text: str, substitutions: dict[str, str] | None = None) -> str:
    """Replace entity sequences in text with readable equivalents.

    Args:
        text: Text to be cleaned
        substitutions: Ordered mapping of literal sequence to replacement
            (default: CLEAN_SUBSTITUTIONS)

    Returns:
        The text with every substitution applied in order

    Examples:
        >>> clean("Bob&rsquo;s hit&mdash;a home run")
        "Bob's hit, a home run"
    """
    if substitutions is None:
        substitutions = CLEAN_SUBSTITUTIONS
    for sequence, replacement in substitutions.items():
        text = text.replace(sequence, replacement)
    return text
