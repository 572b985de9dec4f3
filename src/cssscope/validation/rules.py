"""Validation rules for scoped stylesheets.

Each rule is a function taking the stylesheet source and returning a list of
Diagnostic objects describing any issues found. Nothing is rewritten.
"""

from __future__ import annotations

import logging

from cssscope.model.diagnostic import Diagnostic, Severity
from cssscope.model.rule import Rule, ScopeBlock
from cssscope.parser.errors import UnclosedScopeBlock, line_col
from cssscope.parser.rules import parse_rules
from cssscope.scope.extractor import CLOSE_MARKER_RE, OPEN_MARKER_RE, iter_scope_blocks

# Standalone logger that never emits: anomalies found while parsing here are
# reported as diagnostics instead.
_PARSE_LOG = logging.Logger("cssscope.validation.parse", logging.CRITICAL + 1)


def _blocks(code: str) -> list[ScopeBlock]:
    """Scope blocks up to the first unclosed one."""
    blocks: list[ScopeBlock] = []
    try:
        for block in iter_scope_blocks(code):
            blocks.append(block)
    except UnclosedScopeBlock:
        pass  # reported by check_scope_markers
    return blocks


def _all_rules(text: str) -> list[Rule]:
    """Parse *text*, including the rules of nested at-rule bodies."""
    rules: list[Rule] = []

    def _nested(inner: str) -> str:
        rules.extend(_all_rules(inner))
        return inner

    rules.extend(parse_rules(text, _nested, log=_PARSE_LOG))
    return rules


# ---------------------------------------------------------------------------
# Marker rules
# ---------------------------------------------------------------------------


def check_scope_markers(code: str) -> list[Diagnostic]:
    """Every SCOPE marker needs an END marker; END markers need a SCOPE."""
    diagnostics: list[Diagnostic] = []
    closers: set[int] = set()
    pos = 0
    while True:
        opening = OPEN_MARKER_RE.search(code, pos)
        if opening is None:
            break
        closing = CLOSE_MARKER_RE.search(code, opening.end())
        if closing is None:
            line, column = line_col(code, opening.start())
            diagnostics.append(
                Diagnostic(
                    rule="unclosed_scope",
                    severity=Severity.ERROR,
                    message=f"Scope '{opening.group('name')}' has no END marker",
                    line=line,
                    column=column,
                    fix="Add /* END */ after the last rule of the scope",
                )
            )
            break
        closers.add(closing.start())
        pos = closing.end()

    for match in CLOSE_MARKER_RE.finditer(code):
        if match.start() in closers:
            continue
        line, column = line_col(code, match.start())
        diagnostics.append(
            Diagnostic(
                rule="stray_end",
                severity=Severity.WARNING,
                message="END marker does not close any scope",
                line=line,
                column=column,
            )
        )
    return diagnostics


def check_empty_scopes(code: str) -> list[Diagnostic]:
    """A scope block without any rule is probably a mistake."""
    diagnostics: list[Diagnostic] = []
    for block in _blocks(code):
        if _all_rules(block.inner_text):
            continue
        line, column = line_col(code, block.source_start)
        diagnostics.append(
            Diagnostic(
                rule="empty_scope",
                severity=Severity.INFO,
                message=f"Scope '{block.prefix_name}' contains no rules",
                line=line,
                column=column,
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Content rules (WARNING severity)
# ---------------------------------------------------------------------------


def _segments(code: str) -> list[tuple[int, str]]:
    """Split *code* into (offset, text) pieces scanned independently.

    Each scope block's inner text is one piece, as the rewriter parses it on
    its own; the text around the blocks forms the other pieces.
    """
    segments: list[tuple[int, str]] = []
    cursor = 0
    for block in _blocks(code):
        inner_start = OPEN_MARKER_RE.match(code, block.source_start).end()
        segments.append((cursor, code[cursor:block.source_start]))
        segments.append((inner_start, block.inner_text))
        cursor = block.source_end
    segments.append((cursor, code[cursor:]))
    return segments


def check_comments(code: str) -> list[Diagnostic]:
    """A ``/*`` that never closes is kept as literal text by the rewriter."""
    diagnostics: list[Diagnostic] = []
    for offset, text in _segments(code):
        start = text.find("/*")
        while start >= 0:
            end = text.find("*/", start + 2)
            if end < 0:
                line, column = line_col(code, offset + start)
                diagnostics.append(
                    Diagnostic(
                        rule="unterminated_comment",
                        severity=Severity.WARNING,
                        message="Comment is never closed and will be kept as text",
                        line=line,
                        column=column,
                        fix="Close the comment with */",
                    )
                )
                break
            start = text.find("/*", end + 2)
    return diagnostics


def check_empty_selectors(code: str) -> list[Diagnostic]:
    """Empty selectors inside a scope are prefixed to a bare ``.name ``."""
    diagnostics: list[Diagnostic] = []
    for block in _blocks(code):
        line, column = line_col(code, block.source_start)
        for index, rule in enumerate(_all_rules(block.inner_text), start=1):
            if "" not in rule.selectors:
                continue
            diagnostics.append(
                Diagnostic(
                    rule="empty_selector",
                    severity=Severity.WARNING,
                    message=(
                        f"Rule {index} of scope '{block.prefix_name}' "
                        "has an empty selector"
                    ),
                    line=line,
                    column=column,
                    fix="Remove the stray comma or add a selector before '{'",
                )
            )
    return diagnostics


ALL_RULES = [
    check_scope_markers,
    check_comments,
    check_empty_selectors,
    check_empty_scopes,
]
