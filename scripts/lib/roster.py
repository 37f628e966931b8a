"""
Player roster from the alphabetical player index.

Each letter page lists one player per paragraph:
  <p><a href="/players/A/AaitIs00.htm">Isaako Aaitui</a> (NT-DT) 2013-2014</p>
  <p><b><a href="/players/A/AbduAm00.htm">Ameer Abdullah</a> (RB)</b> 2015-2024</p>
A bold wrapper marks an active player, written with an empty end_year.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd
from bs4 import BeautifulSoup
from bs4.element import Tag

from scripts.lib.config import Settings
from scripts.lib.fetch import fetch_text
from scripts.lib.markup import parse_html
from scripts.lib.pages import absolute_url
from scripts.lib.tables import direct_text, first_child, is_cell
from utils.log import log

PLAYER_YEARS_REGEX = re.compile(r"(\d{4})-(\d{4})")
PLAYER_POS_REGEX = re.compile(r"\((.*)\)")
PLAYER_ID_REGEX = re.compile(r".*/(.+)\.htm")

ROSTER_COLUMNS = ["player_id", "player_name", "positions", "begin_year", "end_year"]


def players_index_url(domain: str) -> str:
    return f"{domain}/players/"


def parse_players_index(soup: BeautifulSoup, domain: str) -> List[str]:
    return [absolute_url(a["href"], domain) for a in soup.select("ul.page_index li > a") if a.get("href")]


def _position(text: Optional[str]) -> Optional[str]:
    m = PLAYER_POS_REGEX.search(text or "")
    return m.group(1).strip() if m else None


def parse_player_paragraph(p: Tag) -> Optional[Dict[str, str]]:
    row = {c: "" for c in ROSTER_COLUMNS}
    active = False
    for child in p.children:
        if is_cell(child):
            bolded = child.get("href") is None
            link = first_child(child) if bolded else child
            if not is_cell(link) or not link.get("href"):
                continue
            m = PLAYER_ID_REGEX.match(link["href"])
            if not m:
                continue
            active = bolded
            row["player_id"] = m.group(1)
            row["player_name"] = direct_text(first_child(link)) or ""
            if bolded:
                pos = _position(direct_text(link.next_sibling))
                if pos is not None:
                    row["positions"] = pos
            continue

        text = direct_text(child)
        if not text:
            continue
        pos = _position(text)
        if pos is not None:
            row["positions"] = pos
        years = PLAYER_YEARS_REGEX.search(text)
        if years:
            row["begin_year"] = years.group(1)
            row["end_year"] = "" if active else years.group(2)

    return row if row["player_id"] else None


def parse_letter_page(soup: BeautifulSoup) -> List[Dict[str, str]]:
    rows = []
    for p in soup.select("#div_players p"):
        row = parse_player_paragraph(p)
        if row is not None:
            rows.append(row)
    return rows


def process_players(output_dir: Union[str, Path], settings: Settings) -> Path:
    log("Processing player roster")
    index = parse_html(fetch_text(players_index_url(settings.domain), settings), uncomment=False)
    letter_links = parse_players_index(index, settings.domain)

    rows: List[Dict[str, str]] = []
    for link in letter_links:
        log(f"Downloading player data from {link}")
        page = parse_html(fetch_text(link, settings), uncomment=False)
        rows.extend(parse_letter_page(page))

    out = Path(output_dir) / "players.csv"
    out.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(rows, columns=ROSTER_COLUMNS, dtype=str).to_csv(out, index=False)
    log(f"✓ Wrote {out} ({len(rows)} rows)")
    return out
