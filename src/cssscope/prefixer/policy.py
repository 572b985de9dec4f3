"""Selector prefixing policy.

Each entry pairs a predicate with a transform. The first entry whose
predicate accepts the selector decides the result:

    root            -> .card
    root:hover      -> .card:hover
    directory.open  -> .nav.open        (prefix ".nav-item")
    .btn            -> .card .btn
"""

from __future__ import annotations

from typing import Callable, NamedTuple

__all__ = ["PrefixPolicy", "PREFIX_POLICIES", "prefix_selector", "directory_prefix"]


class PrefixPolicy(NamedTuple):
    name: str
    matches: Callable[[str], bool]
    rewrite: Callable[[str, str], str]


def directory_prefix(prefix: str) -> str:
    """Drop the last ``-``-separated segment of *prefix*.

    ``.nav-item`` becomes ``.nav``; empty segments are ignored.
    """
    parts = [p for p in prefix.split("-") if p]
    return "-".join(parts[:-1])


def _keep(prefix: str, selector: str) -> str:
    return selector


def _strip_root(prefix: str, selector: str) -> str:
    return prefix + selector[len("root"):]


PREFIX_POLICIES: tuple[PrefixPolicy, ...] = (
    PrefixPolicy("comment", lambda s: s.startswith("/*"), _keep),
    PrefixPolicy("at_rule", lambda s: s.startswith("@"), _keep),
    PrefixPolicy("root", lambda s: s == "root", lambda prefix, s: prefix),
    PrefixPolicy("root_compound", lambda s: s.startswith(("root.", "root:")), _strip_root),
    PrefixPolicy("root_descendant", lambda s: s.startswith("root "), _strip_root),
    PrefixPolicy(
        "directory",
        lambda s: s.startswith("directory"),
        lambda prefix, s: directory_prefix(prefix) + s[len("directory"):],
    ),
    PrefixPolicy("descendant", lambda s: True, lambda prefix, s: f"{prefix} {s}"),
)


def prefix_selector(prefix: str, selector: str) -> str:
    """Rewrite a single *selector* so it is scoped under *prefix*."""
    for policy in PREFIX_POLICIES:
        if policy.matches(selector):
            return policy.rewrite(prefix, selector)
    return selector
