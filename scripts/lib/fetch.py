from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List

import requests

from scripts.lib.config import Settings
from utils.log import log


def fetch_text(url: str, settings: Settings) -> str:
    log(f"→ GET {url}")
    r = requests.get(url, headers=settings.headers, timeout=settings.timeout)
    r.raise_for_status()
    return r.content.decode(settings.encoding, errors="replace")


def fetch_all(urls: Iterable[str], settings: Settings) -> List[str]:
    """
    Fetch every url at once (one worker per url). Results come back in the
    order the urls were given, not completion order; the first failure is
    raised.
    """
    urls = list(urls)
    if not urls:
        return []
    with ThreadPoolExecutor(max_workers=len(urls)) as pool:
        return list(pool.map(lambda u: fetch_text(u, settings), urls))
