"""Load stylesheet text from a filesystem path or an HTTP(S) URL."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from csspalette.errors import SourceError

log = logging.getLogger(__name__)

_URL_PREFIXES = ("http://", "https://")


def is_url(location: str) -> bool:
    return location.lower().startswith(_URL_PREFIXES)


def _fetch(location: str, timeout: float, client: httpx.Client | None) -> str:
    owned = client is None
    http = client or httpx.Client(timeout=timeout, follow_redirects=True)
    try:
        resp = http.get(location)
    except httpx.TimeoutException as exc:
        raise SourceError(
            f"Timed out fetching {location}", location=location, cause=exc
        ) from exc
    except httpx.HTTPError as exc:
        raise SourceError(
            f"Could not fetch {location}: {exc}", location=location, cause=exc
        ) from exc
    finally:
        if owned:
            http.close()

    if resp.status_code >= 300:
        raise SourceError(
            f"Fetching {location} returned HTTP {resp.status_code}", location=location
        )
    return resp.text


def load_stylesheet(
    location: str,
    *,
    timeout: float = 10.0,
    client: httpx.Client | None = None,
) -> str:
    """Return the text of the stylesheet at *location*.

    Raises SourceError when the file cannot be read or the URL cannot be
    fetched.
    """
    if is_url(location):
        log.info("Fetching stylesheet %s", location)
        return _fetch(location, timeout, client)

    log.info("Reading stylesheet %s", location)
    try:
        return Path(location).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError(
            f"Could not read {location}: {exc}", location=location, cause=exc
        ) from exc
