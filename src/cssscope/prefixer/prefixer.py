"""Reassemble parsed rules with every selector scoped under a prefix."""

from __future__ import annotations

from cssscope.config import DEFAULT_CONFIG, ScopeConfig
from cssscope.parser.rules import parse_rules
from cssscope.prefixer.policy import prefix_selector

__all__ = ["apply_prefix"]


def apply_prefix(code: str, prefix: str, config: ScopeConfig | None = None) -> str:
    """Prefix every rule in *code* with *prefix* (e.g. ``".card"``).

    Each rule is emitted as its rewritten selectors joined by
    ``config.selector_separator``, a space, the original body and a blank
    line. Bodies of nested at-rules such as ``@media`` are prefixed
    recursively with the same prefix.
    """
    config = config or DEFAULT_CONFIG

    def _nested(inner: str) -> str:
        return apply_prefix(inner, prefix, config)

    parts: list[str] = []
    for rule in parse_rules(code, _nested, config=config):
        parts.append(
            config.selector_separator.join(prefix_selector(prefix, s) for s in rule.selectors)
        )
        parts.append(" ")
        parts.append(rule.body)
        parts.append("\n\n")
    return "".join(parts)
