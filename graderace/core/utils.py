"""
Core utility functions for GradeRace
"""


def normalize_whitespace(text: str) -> str:
    """
    Collapse every whitespace run into a single space.

    Scraped pages indent their markup heavily and mix in full-width
    (U+3000) spaces, e.g.:

        "  1着　 ディープ\n   インパクト "  ->  "1着 ディープ インパクト"

    str.split() with no separator treats any Unicode whitespace as a
    delimiter and drops leading/trailing runs, so the result is idempotent.

    Args:
        text: Raw text content

    Returns:
        Text with single spaces between words
    """
    return " ".join(text.split())
