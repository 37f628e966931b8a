"""
Section table and runtime settings for the box-score scraper.

The category -> anchor table lives in config/sections.yml; network knobs come
from the environment. Both are read once into a frozen Settings object that is
passed into every call.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from utils.paths import SECTIONS_YML

DEFAULT_DOMAIN = "https://www.pro-football-reference.com"
DEFAULT_TIMEOUT = 30.0  # seconds
# Pages claim UTF-8 but only decode cleanly as ISO-8859-1.
DEFAULT_ENCODING = "latin-1"
DEFAULT_USER_AGENT = "Mozilla/5.0 (PFRBoxscores/1.0)"


class StatsType(str, Enum):
    OFFENSE = "offense"
    DEFENSE = "defense"
    RETURNS = "returns"
    KICKING = "kicking"
    ADV_PASSING = "adv_passing"
    ADV_RUSHING = "adv_rushing"
    ADV_RECEIVING = "adv_receiving"
    ADV_DEFENSE = "adv_defense"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Section:
    category: StatsType
    anchor: str
    mandatory: bool


@dataclass(frozen=True)
class Settings:
    sections: Tuple[Section, ...]
    domain: str = DEFAULT_DOMAIN
    timeout: float = DEFAULT_TIMEOUT
    encoding: str = DEFAULT_ENCODING
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def headers(self) -> Dict[str, str]:
        return {"User-Agent": self.user_agent}


def env(k: str, default: str) -> str:
    return os.getenv(k, default) or default


def parse_sections(cfg: Dict[str, Any]) -> Tuple[Section, ...]:
    """
    Validate the raw `sections` list from YAML.
    Rules:
      - category must be one of StatsType, at most once
      - anchor must be a non-empty string
      - mandatory defaults to False
    """
    raw = (cfg or {}).get("sections")
    if not isinstance(raw, list) or not raw:
        raise ValueError("sections config must contain a non-empty 'sections' list")

    out = []
    seen = set()
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ValueError(f"sections[{i}] must be a mapping, got {item!r}")
        name = str(item.get("category", "")).strip().lower()
        try:
            category = StatsType(name)
        except ValueError:
            raise ValueError(f"sections[{i}]: unknown category {name!r}") from None
        if category in seen:
            raise ValueError(f"sections[{i}]: duplicate category {name!r}")
        anchor = str(item.get("anchor") or "").strip().lstrip("#")
        if not anchor:
            raise ValueError(f"sections[{i}]: missing anchor for {name!r}")
        seen.add(category)
        out.append(Section(category, anchor, bool(item.get("mandatory", False))))
    return tuple(out)


def load_sections(path: Union[str, Path] = SECTIONS_YML) -> Tuple[Section, ...]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Sections file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        return parse_sections(yaml.safe_load(f) or {})


def load_settings(sections_path: Optional[Union[str, Path]] = None) -> Settings:
    sections = load_sections(sections_path or SECTIONS_YML)
    return Settings(
        sections=sections,
        domain=env("PFR_DOMAIN", DEFAULT_DOMAIN).rstrip("/"),
        timeout=float(env("PFR_TIMEOUT", str(DEFAULT_TIMEOUT))),
        encoding=env("PFR_ENCODING", DEFAULT_ENCODING),
        user_agent=env("PFR_USER_AGENT", DEFAULT_USER_AGENT),
    )
