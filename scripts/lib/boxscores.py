"""
Week and season drivers for box-score extraction.

A week is one batch: every finished game of the week is fetched in parallel,
parsed in page order, and only when all games parsed cleanly are the records
folded into a CategoryAggregator and written as
  <output_dir>/<year>/<week>/<category>.csv
A game missing a mandatory table aborts the whole week.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Union

from scripts.lib.aggregate import CategoryAggregator
from scripts.lib.config import Settings
from scripts.lib.fetch import fetch_all, fetch_text
from scripts.lib.markup import parse_html
from scripts.lib.pages import (
    parse_game_id,
    parse_season_page,
    parse_season_week_page,
    parse_week_num,
    parse_year,
    season_url,
)
from scripts.lib.render import write_category_csv
from scripts.lib.tables import Coordinate, Record, SectionMissing, extract, locate
from utils.log import log


class GameParseError(RuntimeError):
    def __init__(self, url: str, cause: Exception):
        super().__init__(f"Failed to parse game log at {url}: {cause}")
        self.url = url


@dataclass
class GameStats:
    game_id: str
    records: List[Record] = field(default_factory=list)


@dataclass
class WeekSummary:
    year: int
    week: int
    games: int
    rows: Dict[str, int] = field(default_factory=dict)


def parse_game_log(text: str, settings: Settings, year: int, week: int) -> GameStats:
    soup = parse_html(text)
    game_id = parse_game_id(soup)
    coord = Coordinate(year, week, game_id)

    records: List[Record] = []
    for section in settings.sections:
        try:
            body = locate(soup, section.anchor)
        except SectionMissing:
            if section.mandatory:
                raise
            continue
        records.extend(extract(body, section.category, coord))
    return GameStats(game_id, records)


def write_week(agg: CategoryAggregator, out_dir: Path) -> Dict[str, int]:
    rows: Dict[str, int] = {}
    for category in agg.categories():
        path = out_dir / f"{category}.csv"
        n = write_category_csv(path, category, agg.schema(category), agg.records(category))
        rows[str(category)] = n
        log(f"✓ Wrote {path} ({n} rows)")
    return rows


def process_week(week_url: str, output_dir: Union[str, Path], settings: Settings) -> WeekSummary:
    year = parse_year(week_url)
    week = parse_week_num(week_url)

    week_page = parse_html(fetch_text(week_url, settings), uncomment=False)
    game_links = parse_season_week_page(week_page, settings.domain)
    game_texts = fetch_all(game_links, settings)

    games: List[GameStats] = []
    for url, text in zip(game_links, game_texts):
        try:
            games.append(parse_game_log(text, settings, year, week))
        except (SectionMissing, ValueError) as e:
            raise GameParseError(url, e) from e

    agg = CategoryAggregator()
    for game in games:
        agg.extend(game.records)

    if not len(agg):
        log(f"[warn] {year} week {week}: no player rows in {len(games)} games")
    rows = write_week(agg, Path(output_dir) / str(year) / str(week))
    log(f"Finished processing {year} week {week}")
    return WeekSummary(year, week, len(games), rows)


def process_year(year: int, output_dir: Union[str, Path], settings: Settings) -> List[WeekSummary]:
    log(f"Fetching data for {year}")
    season_page = parse_html(fetch_text(season_url(year, settings.domain), settings))
    week_urls = parse_season_page(season_page, settings.domain)
    if not week_urls:
        log(f"[warn] no week links found for {year}")
        return []

    with ThreadPoolExecutor(max_workers=len(week_urls)) as pool:
        return list(pool.map(lambda u: process_week(u, output_dir, settings), week_urls))
