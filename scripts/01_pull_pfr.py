#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
01_pull_pfr.py

Scrapes pro-football-reference.com into per-category CSVs.

Modes:
  game    one season of box scores -> <output-dir>/<year>/<week>/<category>.csv
          categories: offense, defense, returns, kicking (required on every game
          page) and adv_passing, adv_rushing, adv_receiving, adv_defense (when the
          page has them)
  player  the full player index -> <output-dir>/players.csv

Usage examples:
  python scripts/01_pull_pfr.py --year 2021
  python scripts/01_pull_pfr.py --mode player --output-dir data/raw/pfr
  SEASON=2019 python scripts/01_pull_pfr.py --sections config/sections.yml

Environment (all optional):
  SEASON           fallback for --year
  PFR_DOMAIN       default https://www.pro-football-reference.com
  PFR_TIMEOUT      request timeout in seconds (default 30)
  PFR_ENCODING     page text encoding (default latin-1)
  PFR_USER_AGENT
  PFR_LOG_FILE     mirror progress lines to this file

Notes:
- No retries. Any failed request or any game page missing a required table
  aborts the run with a non-zero exit.
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

import requests

sys.path.append(str(Path(__file__).resolve().parents[1]))

from scripts.lib.boxscores import GameParseError, process_year  # noqa: E402
from scripts.lib.config import load_settings  # noqa: E402
from scripts.lib.roster import process_players  # noqa: E402
from utils.log import log  # noqa: E402

MODES = ["game", "player"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Download player roster or game box-score stats.")
    ap.add_argument("-m", "--mode", default="game", type=str.lower, choices=MODES,
                    help="whether to download player roster or game data")
    ap.add_argument("-y", "--year", type=int, default=None,
                    help="season to download game level stats for (required in game mode)")
    ap.add_argument("-o", "--output-dir", default="output", help="directory to write data files to")
    ap.add_argument("--sections", default=None, help="sections YAML (default config/sections.yml)")
    args = ap.parse_args(argv)

    if args.year is None and os.getenv("SEASON"):
        args.year = int(os.getenv("SEASON"))
    if args.mode == "game" and args.year is None:
        ap.error("--year is required when --mode is game")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings(args.sections)
        if args.mode == "player":
            process_players(args.output_dir, settings)
        else:
            weeks = process_year(args.year, args.output_dir, settings)
            games = sum(w.games for w in weeks)
            log(f"Done: {args.year} weeks={len(weeks)} games={games} -> {args.output_dir}")
    except (GameParseError, ValueError, FileNotFoundError, requests.RequestException) as e:
        log(f"ERROR: {e}", err=True)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
