"""Rule and ScopeBlock dataclasses produced while rewriting a stylesheet."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rule:
    """One CSS statement: a selector list and its brace-delimited body.

    ``body`` keeps the surrounding ``{`` and ``}`` and any nested blocks
    verbatim.
    """

    selectors: tuple[str, ...]
    body: str


@dataclass(frozen=True)
class ScopeBlock:
    """A ``SCOPE <name>`` ... ``END`` region found in the source text.

    Attributes:
        prefix_name: The bareword captured from the opening marker.
        inner_text: Everything between the two markers.
        source_start: Offset of the first character of the opening marker.
        source_end: Offset just past the closing marker.
    """

    prefix_name: str
    inner_text: str
    source_start: int
    source_end: int
