"""Stylesheet validator: runs all validation rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from cssscope.model.diagnostic import Diagnostic
from cssscope.validation.rules import ALL_RULES


class ValidationError(Exception):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[str], list[Diagnostic]]


def validate(code: str, extra_rules: list[RuleFunc] | None = None) -> list[Diagnostic]:
    """Run all validation rules against the stylesheet *code*.

    Returns the full list of diagnostics (errors, warnings, info).
    """
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(code))
    return diagnostics


def validate_or_raise(
    code: str, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate(code, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
