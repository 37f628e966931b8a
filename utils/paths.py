from pathlib import Path

BASE = Path(__file__).resolve().parents[1]

CONFIG_DIR      = BASE / "config"
SECTIONS_YML    = CONFIG_DIR / "sections.yml"
