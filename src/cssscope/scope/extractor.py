"""Scope extractor: find ``SCOPE``/``END`` marker pairs and rewrite them.

Marker syntax:
    /* SCOPE my-component */
    root { display: flex; }
    .title { font-weight: bold; }
    /* END */

Everything between the markers is prefixed with ``.my-component``; text
outside marker pairs is left untouched.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from cssscope.config import DEFAULT_CONFIG, ScopeConfig
from cssscope.model.rule import ScopeBlock
from cssscope.parser.errors import UnclosedScopeBlock, UnterminatedComment, line_col
from cssscope.prefixer.prefixer import apply_prefix

__all__ = ["OPEN_MARKER_RE", "CLOSE_MARKER_RE", "iter_scope_blocks", "extract_and_rewrite"]

logger = logging.getLogger(__name__)

OPEN_MARKER_RE = re.compile(r"/\*\s*SCOPE\s+(?P<name>\S+?)\s*\*/")
CLOSE_MARKER_RE = re.compile(r"/\*\s*END\s*\*/")


def iter_scope_blocks(code: str) -> Iterator[ScopeBlock]:
    """Yield every scope block of *code* in source order.

    Raises :class:`UnclosedScopeBlock` on an opening marker without a
    following ``END`` marker.
    """
    pos = 0
    while True:
        opening = OPEN_MARKER_RE.search(code, pos)
        if opening is None:
            return
        closing = CLOSE_MARKER_RE.search(code, opening.end())
        if closing is None:
            raise UnclosedScopeBlock(opening.group("name"), opening.start(), code)
        yield ScopeBlock(
            prefix_name=opening.group("name"),
            inner_text=code[opening.end():closing.start()],
            source_start=opening.start(),
            source_end=closing.end(),
        )
        pos = closing.end()


def extract_and_rewrite(code: str, config: ScopeConfig | None = None) -> str:
    """Rewrite every scope block of *code* and return the whole text.

    The blocks are collected before any output is built, so an unclosed
    block fails the call without producing partial output.
    """
    config = config or DEFAULT_CONFIG
    blocks = list(iter_scope_blocks(code))

    parts: list[str] = []
    cursor = 0
    for block in blocks:
        parts.append(code[cursor:block.source_start])
        prefix = config.class_prefix + block.prefix_name
        logger.debug(
            "rewriting scope %s at line %d",
            prefix,
            line_col(code, block.source_start)[0],
        )
        try:
            parts.append(apply_prefix(block.inner_text, prefix, config))
        except UnterminatedComment as exc:
            inner_start = OPEN_MARKER_RE.match(code, block.source_start).end()
            raise UnterminatedComment(inner_start + exc.offset, code) from exc
        cursor = block.source_end
    parts.append(code[cursor:])

    logger.info("rewrote %d scope block(s)", len(blocks))
    return "".join(parts)
