"""Resolve raw metadata candidates into citation values."""

from __future__ import annotations

import datetime as dt
import logging
from typing import Optional, Tuple

from .dates import format_today, french_month, parse_timestamp
from .models import RawMeta, ResolvedReference
from .utils import first_non_empty, slugify

logger = logging.getLogger("webcite.resolver")

# Candidate fields per resolved value, highest priority first.
TITLE_SOURCES: Tuple[str, ...] = ("title",)
AUTHOR_SOURCES: Tuple[str, ...] = ("author", "article_author")
DATE_SOURCES: Tuple[str, ...] = (
    "article_published_time",
    "og_updated_time",
    "article_modified_time",
)


def resolve_field(meta: RawMeta, sources: Tuple[str, ...]) -> str:
    """Return the first non-empty value among ``sources``."""
    return first_non_empty(getattr(meta, source) for source in sources)


def resolve_reference(
    meta: RawMeta,
    url: str,
    now: Optional[dt.datetime] = None,
) -> ResolvedReference:
    """Apply the fallback priorities and derive the slug and date fields.

    Raises :class:`~webcite.dates.DateParseError` when the chosen date
    candidate is present but malformed.
    """
    title = resolve_field(meta, TITLE_SOURCES)
    author = resolve_field(meta, AUTHOR_SOURCES)
    date_value = resolve_field(meta, DATE_SOURCES)

    slug = slugify(title)
    year = month = ""
    if date_value:
        logger.debug("Using %r as publication date", date_value)
        published = parse_timestamp(date_value)
        year = f"{published.year:04d}"
        month = french_month(published.month)
        slug = f"{year}-{published.month:02d}-{slug}"

    return ResolvedReference(
        slug=slug,
        author=author,
        title=title,
        year=year,
        month=month,
        url=url,
        today=format_today(now),
    )
