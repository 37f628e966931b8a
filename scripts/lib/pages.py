from __future__ import annotations

import re
from typing import List, Optional

from bs4 import BeautifulSoup

from scripts.lib.tables import direct_text, first_child

GAME_ID_REGEX = re.compile(r".*/(\w+)\.htm")
WEEK_NUM_REGEX = re.compile(r".*/(\d{4})/week_(\d{1,2})\.htm")


def absolute_url(href: str, domain: str) -> str:
    if href.startswith("/"):
        return f"{domain}{href}"
    return href


def season_url(year: int, domain: str) -> str:
    return f"{domain}/years/{year}/"


def _week_match(week_url: str) -> re.Match:
    m = WEEK_NUM_REGEX.match(week_url)
    if not m:
        raise ValueError(f"not a week page url: {week_url}")
    return m


def parse_year(week_url: str) -> int:
    return int(_week_match(week_url).group(1))


def parse_week_num(week_url: str) -> int:
    return int(_week_match(week_url).group(2))


def _link_text(a) -> Optional[str]:
    return direct_text(first_child(a))


def _links(soup: BeautifulSoup, selector: str, keep, domain: str) -> List[str]:
    out = []
    for a in soup.select(selector):
        text = _link_text(a)
        href = a.get("href")
        if text is None or not href or not keep(text):
            continue
        out.append(absolute_url(href, domain))
    return out


def parse_season_page(soup: BeautifulSoup, domain: str) -> List[str]:
    """Week page urls from a season page, in page order."""
    return _links(soup, "#div_week_games a", lambda t: t.startswith("Week"), domain)


def parse_season_week_page(soup: BeautifulSoup, domain: str) -> List[str]:
    """Box-score urls of finished ("F") games on a week page, in page order."""
    return _links(soup, ".gamelink a", lambda t: t == "F", domain)


def parse_game_id(soup: BeautifulSoup) -> str:
    link = soup.select_one("link[rel=canonical]")
    href = link.get("href") if link is not None else None
    if not href:
        raise ValueError("game page has no canonical link")
    m = GAME_ID_REGEX.match(href)
    if not m:
        raise ValueError(f"cannot read game id from canonical link {href!r}")
    return m.group(1)
