"""HTTP download of the page to cite."""

from __future__ import annotations

import codecs
import contextlib
import logging
from typing import Iterator, Optional, Tuple
from urllib.parse import urlparse

import requests

from .config import CiteConfig

logger = logging.getLogger("webcite.fetch")


class FetchError(RuntimeError):
    """Raised when the page cannot be downloaded."""

    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f"error while trying to get the content of page {url}: {reason}")
        self.url = url
        self.reason = reason


def validate_url(url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise FetchError(url, "only absolute http(s) URLs are supported")
    return url


def _declared_encoding(response: requests.Response, fallback: str) -> str:
    """Use the charset from Content-Type when present and known."""
    content_type = response.headers.get("Content-Type", "")
    encoding: Optional[str] = None
    if "charset" in content_type.lower():
        encoding = response.encoding
    if not encoding:
        return fallback
    try:
        codecs.lookup(encoding)
    except LookupError:
        logger.warning("Unknown charset %r for %s; using %s", encoding, response.url, fallback)
        return fallback
    return encoding


def _iter_body(response: requests.Response, url: str, chunk_size: int) -> Iterator[bytes]:
    try:
        for chunk in response.iter_content(chunk_size=chunk_size):
            yield chunk
    except requests.RequestException as exc:
        raise FetchError(url, exc) from exc


@contextlib.contextmanager
def open_document(
    url: str,
    config: Optional[CiteConfig] = None,
    session: Optional[requests.Session] = None,
) -> Iterator[Tuple[Iterator[bytes], str]]:
    """Stream a page, yielding its body chunks and their text encoding.

    The response is closed when the block exits, whether or not the body
    was read to the end.
    """
    config = config or CiteConfig()
    validate_url(url)
    headers = {"User-Agent": config.user_agent}
    logger.debug("Fetching %s", url)
    with contextlib.ExitStack() as stack:
        http = session or stack.enter_context(requests.Session())
        try:
            response = http.get(url, headers=headers, timeout=config.timeout, stream=True)
        except requests.RequestException as exc:
            raise FetchError(url, exc) from exc
        stack.enter_context(contextlib.closing(response))
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            logger.warning("HTTP fetch failed (%s): %s", response.status_code, url)
            raise FetchError(url, exc) from exc
        encoding = _declared_encoding(response, config.encoding)
        yield _iter_body(response, url, config.chunk_size), encoding
