"""Streaming extraction of citation metadata from HTML markup."""

from __future__ import annotations

import codecs
import enum
import html
import logging
from html.parser import HTMLParser
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .models import RawMeta

logger = logging.getLogger("webcite.scanner")

Chunk = Union[str, bytes]
Attributes = List[Tuple[str, Optional[str]]]

# (field, discriminator attribute, discriminator value)
META_RULES: Tuple[Tuple[str, str, str], ...] = (
    ("author", "name", "author"),
    ("article_author", "property", "article:author"),
    ("title", "property", "og:title"),
    ("article_published_time", "property", "article:published_time"),
    ("article_modified_time", "property", "article:modified_time"),
    ("og_updated_time", "property", "og:updated_time"),
)


class ScanState(enum.Enum):
    """Whether the next text event belongs to an open ``title`` element."""

    OUTSIDE_TITLE = "outside-title"
    TITLE_PENDING = "title-pending"


class _BodyReached(Exception):
    """Raised from the parser callbacks to stop at the document body."""


def _meta_content(attrs: Attributes, key: str, value: str) -> Optional[str]:
    """Return the tag's content if it carries ``key="value"``, else ``None``."""
    if not any(name == key and attr_value == value for name, attr_value in attrs):
        return None
    for name, attr_value in attrs:
        if name == "content":
            return attr_value or ""
    return ""


class MetaScanner(HTMLParser):
    """Collect head metadata tag by tag, without building a document tree.

    ``title`` content is read as raw text up to ``</title>``, so markup
    inside it is kept verbatim and only character references are decoded.
    Text may arrive in several pieces when the stream is split mid-run; the
    pieces are joined and committed on the next tag.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.fields: Dict[str, str] = {}
        self.state = ScanState.OUTSIDE_TITLE
        self._title_parts: List[str] = []
        self._title_raw = False
        self._og_title_seen = False

    def set_cdata_mode(self, elem, **kwargs) -> None:
        # newer parsers switch title to escapable raw text on their own
        super().set_cdata_mode(elem, **kwargs)
        if elem == "title":
            self._title_raw = not kwargs.get("escapable", False)

    def handle_starttag(self, tag: str, attrs: Attributes) -> None:
        self._arm_or_dispatch(tag, attrs)
        if tag == "title":
            self.set_cdata_mode(tag)

    def handle_startendtag(self, tag: str, attrs: Attributes) -> None:
        # <title/> arms the title state without opening a raw text element
        self._arm_or_dispatch(tag, attrs)

    def handle_endtag(self, tag: str) -> None:
        self._commit_title()
        if tag == "title":
            self.state = ScanState.OUTSIDE_TITLE

    def handle_data(self, data: str) -> None:
        if self.state is ScanState.TITLE_PENDING:
            self._title_parts.append(data)

    def _arm_or_dispatch(self, tag: str, attrs: Attributes) -> None:
        self._commit_title()
        if tag == "body":
            raise _BodyReached()
        if tag == "title":
            self.state = ScanState.TITLE_PENDING
            self._title_raw = False
        elif tag == "meta":
            self._handle_meta(attrs)

    def _commit_title(self) -> None:
        if not self._title_parts:
            return
        title = "".join(self._title_parts)
        if self._title_raw:
            title = html.unescape(title)
        if not self._og_title_seen:
            self.fields["title"] = title
        self._title_parts = []
        self._title_raw = False
        self.state = ScanState.OUTSIDE_TITLE

    def _handle_meta(self, attrs: Attributes) -> None:
        for field, key, value in META_RULES:
            content = _meta_content(attrs, key, value)
            if content is None:
                continue
            if field == "title":
                self._og_title_seen = True
            self.fields[field] = content

    def result(self) -> RawMeta:
        self._commit_title()
        return RawMeta(**self.fields)


def _decoded(chunks: Iterable[Chunk], encoding: str) -> Iterable[str]:
    decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
    for chunk in chunks:
        if isinstance(chunk, bytes):
            chunk = decoder.decode(chunk)
        if chunk:
            yield chunk
    tail = decoder.decode(b"", final=True)
    if tail:
        yield tail


def scan_meta(chunks: Iterable[Chunk], encoding: str = "utf-8") -> RawMeta:
    """Scan a document stream and return the metadata seen before ``body``.

    Malformed markup never raises: the scan stops and whatever was
    collected so far is returned. The chunk iterator is closed on return
    when it supports ``close()``.
    """
    scanner = MetaScanner()
    iterator = iter(chunks)
    try:
        for text in _decoded(iterator, encoding):
            scanner.feed(text)
        scanner.close()
        logger.debug("Reached end of stream without a body tag")
    except _BodyReached:
        logger.debug("Stopped scanning at the body tag")
    except AssertionError as exc:
        # _markupbase raises on unknown marked sections such as "<![foo["
        logger.debug("Stopped scanning on malformed markup: %s", exc)
    finally:
        close = getattr(iterator, "close", None)
        if callable(close):
            close()
    return scanner.result()
