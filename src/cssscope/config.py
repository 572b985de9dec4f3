from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScopeConfig:
    class_prefix: str = "."
    indent: str = "\n    "  # inserted before a re-prefixed @media body
    selector_separator: str = ",\n"
    nested_at_rules: tuple[str, ...] = ("@media",)
    strict_comments: bool = False  # raise on "/*" without "*/"


DEFAULT_CONFIG = ScopeConfig()
