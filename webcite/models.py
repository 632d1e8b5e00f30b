"""Data models shared by the scanner, resolver and renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawMeta:
    """Metadata candidates found before the document body.

    Every field is either empty or the verbatim ``content`` of one tag.
    """

    title: str = ""
    author: str = ""
    article_author: str = ""
    og_updated_time: str = ""
    article_published_time: str = ""
    article_modified_time: str = ""


@dataclass(frozen=True)
class ResolvedReference:
    """Values substituted into a citation template."""

    slug: str
    author: str
    title: str
    year: str
    month: str
    url: str
    today: str
