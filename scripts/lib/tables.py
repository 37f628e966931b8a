"""
Locate box-score tables and turn their rows into flat stat records.

Row layout (one <tr> per player):
  <th data-stat="player" data-append-csv="BradTo00"><a href="...">Tom Brady</a></th>
  <td data-stat="pass_cmp">25</td> ...

Rules:
  - a cell with data-append-csv carries the player id
  - every cell must carry data-stat; a cell without it means the row is a
    header/separator row and the whole row is dropped
  - the player name sits two levels down (cell -> link -> text), every other
    value one level down (cell -> text); anything that is not a direct text
    node yields no value
  - rows without both player id and player name are dropped
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from scripts.lib.config import StatsType

ID_ATTR = "data-append-csv"
STAT_ATTR = "data-stat"

ID_FIELD = "player_id"
NAME_FIELD = "player"


class SectionMissing(LookupError):
    def __init__(self, anchor: str):
        super().__init__(f"no table element for anchor '#{anchor}' found")
        self.anchor = anchor


@dataclass(frozen=True)
class Coordinate:
    year: int
    week: int
    game_id: str


@dataclass
class Record:
    category: StatsType
    player_id: str
    player_name: str
    fields: Dict[str, str] = field(default_factory=dict)
    coordinate: Optional[Coordinate] = None


def is_cell(node) -> bool:
    return isinstance(node, Tag)


def first_child(node):
    if not is_cell(node) or not node.contents:
        return None
    return node.contents[0]


def direct_text(node) -> Optional[str]:
    """Trimmed text of a bare text node; None for tags, comments or nothing."""
    if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
        return str(node).strip()
    return None


def locate(soup: BeautifulSoup, anchor: str) -> Tag:
    """
    Return the row container of the table with id=anchor.
    Raises SectionMissing when the page has no such element. A table
    without <tbody> is its own row container.
    """
    table = soup.find(id=anchor)
    if table is None:
        raise SectionMissing(anchor)
    body = table.find("tbody")
    return body if body is not None else table


def extract_row(row: Tag) -> Optional[Dict[str, str]]:
    """Fields of one data row in cell order, or None for a non-data row."""
    data: Dict[str, str] = {}
    for cell in row.children:
        if not is_cell(cell):
            continue

        player_id = cell.get(ID_ATTR)
        if player_id is not None:
            data[ID_FIELD] = player_id.strip()

        stat = cell.get(STAT_ATTR)
        if stat is None:
            return None
        stat = stat.strip()

        if stat == NAME_FIELD:
            value = direct_text(first_child(first_child(cell)))
        else:
            value = direct_text(first_child(cell))
        if value is not None:
            data[stat] = value
    return data


def extract(body: Tag, category: StatsType, coordinate: Optional[Coordinate] = None) -> List[Record]:
    records: List[Record] = []
    for row in body.children:
        if not is_cell(row):
            continue
        data = extract_row(row)
        if not data:
            continue
        player_id = data.pop(ID_FIELD, None)
        player_name = data.pop(NAME_FIELD, None)
        if player_id is None or player_name is None:
            continue
        records.append(Record(category, player_id, player_name, data, coordinate))
    return records
