from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import pandas as pd

LOG_FILE = os.getenv("PFR_LOG_FILE", "")


def log(msg: str, err: bool = False, log_file: Optional[str] = None) -> None:
    """Print a progress line; mirror it, timestamped, to PFR_LOG_FILE when set."""
    target = log_file if log_file is not None else LOG_FILE
    if target:
        ts = pd.Timestamp.now(tz="UTC").isoformat()
        path = Path(target)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as f:
            f.write(f"{ts} {msg}\n")
    print(msg, file=sys.stderr if err else sys.stdout, flush=True)
