"""
Daily puzzle source. Downloads the JSON document for a given date.
"""

from __future__ import annotations

from datetime import date as date_type
from typing import Any, Dict, Optional

import orjson
import requests

from .core.env import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .core.errors import FetchError
from .puzzle import Puzzle


def puzzle_url(day: date_type, base_url: str = DEFAULT_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/{day.strftime('%Y-%m-%d')}.json"


def fetch_daily_puzzle(
    day: Optional[date_type] = None,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> Dict[str, Any]:
    """
    Fetch the raw puzzle document for a day (defaults to today, local time).

    Raises:
        FetchError: On any HTTP failure or a body that is not JSON
    """
    url = puzzle_url(day or date_type.today(), base_url)
    try:
        response = requests.get(url, timeout=timeout, headers={"Accept": "application/json"})
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Could not fetch {url}: {e}")

    try:
        return orjson.loads(response.content)
    except orjson.JSONDecodeError as e:
        raise FetchError(f"Response from {url} is not JSON: {e}")


def load_daily_puzzle(day: Optional[date_type] = None, **kwargs) -> Puzzle:
    """Fetch and validate. Raises FetchError or MalformedPuzzle."""
    return Puzzle.from_dict(fetch_daily_puzzle(day, **kwargs))
