"""
Catalogue client — the one-shot fetch of the upstream ``bodies`` array.

Every failure mode (network error, timeout, non-2xx status, malformed JSON,
missing ``bodies`` array) is reported as a single FetchError.  The client
does not retry and does not cache.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

import requests

from catalog.constants import DEFAULT_CATALOG_URL
from catalog.errors import FetchError
from utils.http import SessionManager

logger = logging.getLogger(__name__)


def fetch_bodies(
    url: str = DEFAULT_CATALOG_URL,
    session: requests.Session | None = None,
    timeout: float = 30.0,
) -> list[dict[str, Any]]:
    """GET the catalogue and return its ``bodies`` array.

    Args:
        url:     Catalogue endpoint.
        session: Optional requests.Session (default: new session).
        timeout: Request timeout in seconds.

    Returns:
        The raw ``bodies`` list, unvalidated.

    Raises:
        FetchError: the request failed or the body is not a catalogue.
    """
    if session is None:
        session = requests.Session()

    start = time.monotonic()
    try:
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else None
        logger.warning("catalogue fetch failed url=%s status=%s", url, status)
        raise FetchError(
            f"Network response was not ok (HTTP {status})",
            status_code=status, url=url,
        ) from exc
    except requests.RequestException as exc:
        logger.warning("catalogue fetch failed url=%s error=%s", url, exc)
        raise FetchError(str(exc) or exc.__class__.__name__, url=url) from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        logger.warning("catalogue response is not JSON url=%s", url)
        raise FetchError("Response body is not valid JSON",
                         status_code=resp.status_code, url=url) from exc

    bodies = payload.get("bodies") if isinstance(payload, dict) else None
    if not isinstance(bodies, list):
        raise FetchError("Response JSON has no 'bodies' array",
                         status_code=resp.status_code, url=url)

    duration_ms = (time.monotonic() - start) * 1000
    logger.info("catalogue fetched url=%s bodies=%d duration_ms=%.1f",
                url, len(bodies), duration_ms)
    return bodies


def make_fetcher(url: str = DEFAULT_CATALOG_URL,
                 timeout: float = 30.0) -> Callable[[], list[dict[str, Any]]]:
    """Return a zero-argument callable that fetches the catalogue once.

    Each call opens and closes its own pooled session.
    """
    def _fetch() -> list[dict[str, Any]]:
        with SessionManager() as sessions:
            return fetch_bodies(url, session=sessions.session, timeout=timeout)

    return _fetch
