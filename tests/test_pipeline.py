"""End-to-end tests from markup to citation text."""

from __future__ import annotations

import datetime as dt
import logging
from unittest.mock import MagicMock, Mock

import pytest
import requests

from webcite.dates import DateParseError
from webcite.pipeline import cite_document, cite_url
from webcite.render import CitationStyle, UnknownDialectError


def test_article_bibtex(article_html: str, fixed_now: dt.datetime) -> None:
    text = cite_document([article_html], "https://example.com/a", "bibtex", now=fixed_now)

    assert text.startswith("@misc{ 2023-04-les-miserables,\n")
    assert '  author = "Victor Hugo",\n' in text
    assert '  year = "2023",\n' in text
    assert '  month = "Avril",\n' in text
    assert '  howpublished = "\\url{ https://example.com/a }",\n' in text


def test_empty_page_biblatex(fixed_now: dt.datetime) -> None:
    text = cite_document(
        ["<html><head></head><body></body></html>"],
        "https://example.com/a",
        CitationStyle.BIBLATEX,
        now=fixed_now,
    )

    assert text == (
        "@online{ ,\n"
        '  author = "",\n'
        '  title = "",\n'
        '  year = "",\n'
        '  month = "",\n'
        '  url = "https://example.com/a",\n'
        '  note = "[En ligne, accédée le 05 Avril 2023]"\n'
        "}"
    )


def test_malformed_date_produces_no_citation(fixed_now: dt.datetime) -> None:
    document = '<head><meta property="article:published_time" content="not-a-date"></head>'

    with pytest.raises(DateParseError) as excinfo:
        cite_document([document], "https://example.com/a", "bibtex", now=fixed_now)

    assert excinfo.value.value == "not-a-date"


def test_unknown_style_is_rejected_before_scanning(recording_stream) -> None:
    stream = recording_stream(["<title>T</title>"])

    with pytest.raises(UnknownDialectError):
        cite_document(stream, "https://example.com/a", "ris")

    assert stream.consumed == 0


def test_cite_url_streams_response(article_html: str, fixed_now: dt.datetime, chunked, caplog) -> None:
    response = MagicMock(spec=requests.Response)
    response.headers = {"Content-Type": "text/html; charset=utf-8"}
    response.encoding = "utf-8"
    response.status_code = 200
    response.url = "https://example.com/a"
    response.iter_content.return_value = iter(chunked(article_html.encode("utf-8"), 64))
    session = Mock(spec=requests.Session)
    session.get.return_value = response

    with caplog.at_level(logging.INFO, logger="webcite.pipeline"):
        text = cite_url("https://example.com/a", "biblatex", now=fixed_now, session=session)

    assert text.startswith("@online{ 2023-04-les-miserables,\n")
    assert '  title = "Les Misérables",\n' in text
    response.close.assert_called_once()
    assert [record.name for record in caplog.records if "reference for" in record.getMessage()] == ["webcite.pipeline"]
