"""Citation templates for the BibTeX and BibLaTeX record styles."""

from __future__ import annotations

import dataclasses
import enum
from typing import Dict, Union

from jinja2 import Environment, StrictUndefined

from .models import ResolvedReference


class CitationStyle(enum.Enum):
    """Supported citation record styles."""

    BIBTEX = "bibtex"
    BIBLATEX = "biblatex"


class UnknownDialectError(ValueError):
    """Raised when a citation style is not one of :class:`CitationStyle`."""

    def __init__(self, style: object) -> None:
        choices = " or ".join(item.value for item in CitationStyle)
        super().__init__(f"citation style must be {choices}, got {style!r}")
        self.style = style


# Field values are substituted verbatim; a double quote in a value breaks the record.
TEMPLATES: Dict[CitationStyle, str] = {
    CitationStyle.BIBTEX: """@misc{ {{ slug }},
  author = "{{ author }}",
  title = "{{ title }}",
  year = "{{ year }}",
  month = "{{ month }}",
  howpublished = "\\url{ {{ url }} }",
  note = "[En ligne, accédée le {{ today }}]"
}""",
    CitationStyle.BIBLATEX: """@online{ {{ slug }},
  author = "{{ author }}",
  title = "{{ title }}",
  year = "{{ year }}",
  month = "{{ month }}",
  url = "{{ url }}",
  note = "[En ligne, accédée le {{ today }}]"
}""",
}

_ENVIRONMENT = Environment(undefined=StrictUndefined, autoescape=False)


def coerce_style(style: Union[CitationStyle, str]) -> CitationStyle:
    """Accept a :class:`CitationStyle` or its string value."""
    if isinstance(style, CitationStyle):
        return style
    try:
        return CitationStyle(style)
    except ValueError as exc:
        raise UnknownDialectError(style) from exc


def render_reference(
    reference: ResolvedReference,
    style: Union[CitationStyle, str],
) -> str:
    """Render a resolved reference as a citation record."""
    template = _ENVIRONMENT.from_string(TEMPLATES[coerce_style(style)])
    return template.render(**dataclasses.asdict(reference))
