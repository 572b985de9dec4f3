"""Single-pass rule parser for the CSS inside a scope block.

The parser does not build a CSS syntax tree. It only knows enough structure
to split top-level selector lists on commas and to find the true closing
brace of every rule, even when the body holds further braced blocks:

    a, b { color: red; }
    @media (max-width: 600px) { .x { y: 1; } }

Bodies of configured at-rules (``@media`` by default) are handed to an
``on_nested`` callback so their inner rules can be rewritten too.
"""

from __future__ import annotations

import logging
from typing import Callable

from cssscope.config import DEFAULT_CONFIG, ScopeConfig
from cssscope.model.rule import Rule
from cssscope.parser.errors import UnterminatedComment

__all__ = ["parse_rules"]

logger = logging.getLogger(__name__)

_SELECTOR_STRIP = "\n \t"


def _close_selector(buf: list[str], selectors: list[str], log: logging.Logger) -> str:
    selector = "".join(buf).strip(_SELECTOR_STRIP)
    if not selector:
        log.warning("empty selector in rule %d", len(selectors) + 1)
    selectors.append(selector)
    return selector


def parse_rules(
    code: str,
    on_nested: Callable[[str], str] | None = None,
    *,
    config: ScopeConfig | None = None,
    log: logging.Logger | None = None,
) -> list[Rule]:
    """Parse *code* into rules, in source order.

    Comments are dropped from both selectors and bodies. An unterminated
    ``/*`` is kept as literal text unless ``config.strict_comments`` is set,
    in which case :class:`UnterminatedComment` is raised.

    When *on_nested* is given it receives the raw content of every nested
    at-rule body and its return value replaces that content in the rule.

    Anomalies are reported as warnings on *log*, the module logger by default.
    """
    config = config or DEFAULT_CONFIG
    log = log or logger
    rules: list[Rule] = []
    selectors: list[str] = []
    buf: list[str] = []
    in_body = False
    nested_brackets = 0
    media_rule_start = -1

    i = 0
    n = len(code)
    while i < n:
        c = code[i]

        if c == "/" and i + 1 < n and code[i + 1] == "*":
            end = code.find("*/", i + 2)
            if end >= 0:
                i = end + 2
                continue
            if config.strict_comments:
                raise UnterminatedComment(i, code)
            log.warning("unterminated comment at offset %d kept as text", i)

        if c == ",":
            if in_body:
                buf.append(c)
            else:
                _close_selector(buf, selectors, log)
                buf = []

        elif c == "{":
            if in_body:
                buf.append(c)
                nested_brackets += 1
            else:
                selector = _close_selector(buf, selectors, log)
                buf = [c]
                in_body = True
                if selector.startswith(config.nested_at_rules):
                    media_rule_start = len(buf)

        elif c == "}":
            if nested_brackets:
                buf.append(c)
                nested_brackets -= 1
            else:
                if not in_body:
                    log.warning("unbalanced '}' at offset %d closes no rule", i)
                if media_rule_start >= 0 and on_nested is not None:
                    nested = on_nested("".join(buf[media_rule_start:]))
                    nested = nested.removesuffix("\n")
                    del buf[media_rule_start:]
                    buf.append(config.indent)
                    buf.append(nested)
                media_rule_start = -1
                buf.append(c)
                rules.append(Rule(selectors=tuple(selectors), body="".join(buf)))
                in_body = False
                buf = []
                selectors = []

        else:
            buf.append(c)

        i += 1

    leftover = "".join(buf).strip()
    if leftover or selectors:
        log.warning(
            "discarding %d trailing character(s) after the last rule",
            len(leftover),
        )
    return rules
