"""MCP server exposing the webcite reference builder."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from .config import CiteConfig
from .pipeline import cite_url

logger = logging.getLogger("webcite.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="webcite")


@mcp.tool()
def cite(
    url: str,
    style: str = "bibtex",
) -> str:
    """Fetch a web page and return a BibTeX ("bibtex") or BibLaTeX ("biblatex") reference."""

    return cite_url(url, style, CiteConfig())


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
