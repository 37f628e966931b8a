from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence, Union

import pandas as pd

from scripts.lib.config import StatsType
from scripts.lib.tables import Record

COORDINATE_COLUMNS = ["year", "week", "game_id"]
IDENTITY_COLUMNS = ["player_id", "player"]
EMPTY = ""


def header(schema: Sequence[str]) -> List[str]:
    return COORDINATE_COLUMNS + IDENTITY_COLUMNS + list(schema)


def render_row(record: Record, schema: Sequence[str]) -> List[str]:
    c = record.coordinate
    if c is None:
        raise ValueError(f"record for {record.player_id} has no game coordinate")
    vals = [str(c.year), str(c.week), c.game_id, record.player_id, record.player_name]
    vals.extend(record.fields.get(col, EMPTY) for col in schema)
    return vals


def render(category: StatsType, schema: Sequence[str], records: Iterable[Record]) -> List[List[str]]:
    """
    Dense rows for one category: coordinate, identity, then one value per
    schema column ("" when the record lacks it). Fields outside the schema
    are left out.
    """
    rows = []
    for r in records:
        if r.category != category:
            raise ValueError(f"{r.category} record passed to {category} renderer")
        rows.append(render_row(r, schema))
    return rows


def to_frame(category: StatsType, schema: Sequence[str], records: Iterable[Record]) -> pd.DataFrame:
    return pd.DataFrame(render(category, schema, records), columns=header(schema), dtype=str)


def write_category_csv(path: Union[str, Path], category: StatsType, schema: Sequence[str],
                       records: Iterable[Record]) -> int:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df = to_frame(category, schema, records)
    df.to_csv(path, index=False)
    return len(df)
