"""Configuration objects and constants for fetching and citing pages."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TIMEOUT = 30.0
DEFAULT_CHUNK_SIZE = 8192
DEFAULT_ENCODING = "utf-8"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/127.0.0.0 Safari/537.36"
)


@dataclass
class CiteConfig:
    """Settings that control how a page is downloaded and scanned."""

    timeout: float = DEFAULT_TIMEOUT
    chunk_size: int = DEFAULT_CHUNK_SIZE
    user_agent: str = DEFAULT_USER_AGENT
    encoding: str = DEFAULT_ENCODING
