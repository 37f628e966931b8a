from __future__ import annotations

from bs4 import BeautifulSoup

# Most box-score tables ship inside HTML comments and are only revealed
# client-side. Dropping the delimiters makes them visible to the parser.
COMMENT_OPEN = "\n<!--"
COMMENT_CLOSE = "\n-->"

PARSER = "html.parser"


def uncomment_tables(text: str) -> str:
    return text.replace(COMMENT_OPEN, "").replace(COMMENT_CLOSE, "")


def parse_html(text: str, uncomment: bool = True) -> BeautifulSoup:
    """Parse a page; by default comment-hidden tables are revealed first."""
    if uncomment:
        text = uncomment_tables(text)
    return BeautifulSoup(text, PARSER)
