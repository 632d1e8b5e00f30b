"""High-level orchestration: download, scan, resolve and render."""

from __future__ import annotations

import datetime as dt
import logging
import time
from typing import Iterable, Optional, Union

import requests

from .config import CiteConfig, DEFAULT_ENCODING
from .fetch import open_document
from .render import CitationStyle, coerce_style, render_reference
from .resolver import resolve_reference
from .scanner import Chunk, scan_meta

logger = logging.getLogger("webcite.pipeline")


def cite_document(
    chunks: Iterable[Chunk],
    url: str,
    style: Union[CitationStyle, str],
    now: Optional[dt.datetime] = None,
    encoding: str = DEFAULT_ENCODING,
) -> str:
    """Build a citation for an already opened document stream."""
    citation_style = coerce_style(style)
    meta = scan_meta(chunks, encoding=encoding)
    logger.debug("Scanned metadata for %s: %s", url, meta)
    reference = resolve_reference(meta, url, now=now)
    return render_reference(reference, citation_style)


def cite_url(
    url: str,
    style: Union[CitationStyle, str],
    config: Optional[CiteConfig] = None,
    now: Optional[dt.datetime] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """Download ``url`` and return its citation in the requested style."""
    config = config or CiteConfig()
    citation_style = coerce_style(style)
    start = time.perf_counter()
    with open_document(url, config, session=session) as (chunks, encoding):
        citation = cite_document(chunks, url, citation_style, now=now, encoding=encoding)
    logger.info(
        "Built %s reference for %s in %.2fs",
        citation_style.value,
        url,
        time.perf_counter() - start,
    )
    return citation
