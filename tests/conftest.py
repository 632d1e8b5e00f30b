"""
Shared pytest fixtures for webcite tests.

Fixtures
--------
- **fixed_now**: a fixed wall-clock time so ``today`` is predictable
- **article_html**: a small article page with every supported meta tag
- **chunked**: helper splitting a document into small stream chunks
"""

import datetime as dt
from typing import Callable, Iterator, List, Union

import pytest


ARTICLE_HTML = """<!DOCTYPE html>
<html lang="fr">
<head>
  <meta charset="utf-8">
  <title>Les Misérables</title>
  <meta name="author" content="Victor Hugo">
  <meta property="article:author" content="https://example.com/authors/hugo">
  <meta property="article:published_time" content="2023-04-05T10:00:00+02:00">
  <meta property="article:modified_time" content="2024-01-02T08:00:00Z">
  <meta property="og:updated_time" content="2023-11-20T12:30:00.123456789-05:00">
</head>
<body>
  <meta name="author" content="Someone Else">
  <p>Body text</p>
</body>
</html>
"""


@pytest.fixture
def fixed_now() -> dt.datetime:
    """Wall-clock time used to compute the access date."""
    return dt.datetime(2023, 4, 5, 9, 30)


@pytest.fixture
def article_html() -> str:
    return ARTICLE_HTML


@pytest.fixture
def chunked() -> Callable[[Union[str, bytes], int], List[Union[str, bytes]]]:
    """Split text or bytes into fixed-size chunks, as a network stream would."""

    def _split(document: Union[str, bytes], size: int = 7) -> List[Union[str, bytes]]:
        return [document[i : i + size] for i in range(0, len(document), size)]

    return _split


class RecordingStream:
    """Chunk iterator that remembers how far it was read and whether it was closed."""

    def __init__(self, chunks: List[str]) -> None:
        self._chunks = chunks
        self.consumed = 0
        self.closed = False

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self.consumed >= len(self._chunks):
            raise StopIteration
        chunk = self._chunks[self.consumed]
        self.consumed += 1
        return chunk

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def recording_stream() -> Callable[[List[str]], RecordingStream]:
    return RecordingStream
