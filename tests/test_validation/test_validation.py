"""Tests for stylesheet validation rules."""

import logging

import pytest

from cssscope.model.diagnostic import Diagnostic, Severity
from cssscope.validation import ValidationError, validate, validate_or_raise
from cssscope.validation.rules import (
    check_comments,
    check_empty_scopes,
    check_empty_selectors,
    check_scope_markers,
)


CLEAN = "a { x: 1; }\n/* SCOPE card */\nroot { y: 2; }\n/* END */\n"


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------


class TestScopeMarkers:
    def test_clean(self):
        assert check_scope_markers(CLEAN) == []

    def test_unclosed(self):
        diags = check_scope_markers("a {}\n/* SCOPE card */ root {}")
        assert len(diags) == 1
        assert diags[0].rule == "unclosed_scope"
        assert diags[0].severity is Severity.ERROR
        assert diags[0].line == 2
        assert "card" in diags[0].message

    def test_stray_end(self):
        diags = check_scope_markers("a {}\n/* END */\n")
        assert [d.rule for d in diags] == ["stray_end"]
        assert diags[0].is_warning

    def test_second_end_is_stray(self):
        diags = check_scope_markers("/* SCOPE a */ x {} /* END */ /* END */")
        assert [d.rule for d in diags] == ["stray_end"]


class TestComments:
    def test_closed_comments(self):
        assert check_comments("/* a */ b { /* c */ }") == []

    def test_unterminated(self):
        diags = check_comments("a { x: 1; }\n/* oops")
        assert len(diags) == 1
        assert diags[0].rule == "unterminated_comment"
        assert diags[0].line == 2
        assert diags[0].column == 1

    def test_unterminated_inside_scope(self):
        diags = check_comments("/* SCOPE c */\na /* b { x: 1; }\n/* END */")
        assert [d.rule for d in diags] == ["unterminated_comment"]
        assert diags[0].line == 2
        assert diags[0].column == 3

    def test_scope_markers_close_nothing_across_blocks(self):
        code = "a {}\n/* SCOPE c */\nb {}\n/* END */\n/* tail"
        diags = check_comments(code)
        assert len(diags) == 1
        assert diags[0].line == 5


class TestEmptySelectors:
    def test_leading_comma(self):
        diags = check_empty_selectors("/* SCOPE a */\n, b { x: 1; }\n/* END */")
        assert len(diags) == 1
        assert diags[0].rule == "empty_selector"
        assert "Rule 1" in diags[0].message

    def test_inside_media(self):
        code = "/* SCOPE a */ @media print { { x: 1; } } /* END */"
        assert [d.rule for d in check_empty_selectors(code)] == ["empty_selector"]

    def test_outside_scope_ignored(self):
        assert check_empty_selectors("{ x: 1; }") == []


class TestEmptyScopes:
    def test_empty_scope(self):
        diags = check_empty_scopes("/* SCOPE a */\n/* END */")
        assert len(diags) == 1
        assert diags[0].severity is Severity.INFO

    def test_non_empty(self):
        assert check_empty_scopes(CLEAN) == []


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


class TestValidator:
    def test_clean_has_no_diagnostics(self):
        assert validate(CLEAN) == []

    def test_unclosed_is_only_diagnostic(self):
        diags = validate("/* SCOPE a */ a {}")
        assert [d.rule for d in diags] == ["unclosed_scope"]

    def test_extra_rules(self):
        def no_important(code: str) -> list[Diagnostic]:
            if "!important" not in code:
                return []
            return [Diagnostic(rule="important", severity=Severity.WARNING, message="!important")]

        diags = validate("a { x: 1 !important; }", extra_rules=[no_important])
        assert [d.rule for d in diags] == ["important"]

    def test_validate_or_raise(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_or_raise("/* SCOPE a */ a {}")
        assert len(exc_info.value.diagnostics) == 1
        assert "1 error(s)" in str(exc_info.value)

    def test_validate_or_raise_returns_warnings(self):
        diags = validate_or_raise("/* END */")
        assert [d.rule for d in diags] == ["stray_end"]


class TestDiagnosticStr:
    def test_with_location(self):
        diag = Diagnostic(rule="r", severity=Severity.ERROR, message="bad", line=2, column=5)
        assert str(diag) == "ERROR [line 2, col 5]: bad"

    def test_without_location(self):
        diag = Diagnostic(rule="r", severity=Severity.INFO, message="note")
        assert str(diag) == "INFO: note"


class TestValidationLogging:
    def test_parse_warnings_not_logged(self, caplog: pytest.LogCaptureFixture):
        code = "/* SCOPE c */\n, a /* b { x: 1; }\n/* END */"
        with caplog.at_level(logging.DEBUG):
            diags = validate(code)
        assert {d.rule for d in diags} == {"unterminated_comment", "empty_selector"}
        assert caplog.records == []
