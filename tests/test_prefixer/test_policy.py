"""Tests for the selector prefixing policy table."""

import pytest

from cssscope.prefixer.policy import PREFIX_POLICIES, directory_prefix, prefix_selector


class TestPassThrough:
    def test_comment_unchanged(self):
        assert prefix_selector(".card", "/* stray") == "/* stray"

    def test_at_rule_unchanged(self):
        assert prefix_selector(".card", "@font-face") == "@font-face"

    def test_media_header_unchanged(self):
        assert prefix_selector(".card", "@media (min-width: 1px)") == "@media (min-width: 1px)"


class TestRoot:
    def test_bare_root(self):
        assert prefix_selector(".card", "root") == ".card"

    @pytest.mark.parametrize(
        "selector, expected",
        [
            ("root.active", ".card.active"),
            ("root:hover", ".card:hover"),
            ("root::before", ".card::before"),
            ("root .title", ".card .title"),
            ("root > .title", ".card > .title"),
        ],
    )
    def test_root_forms(self, selector, expected):
        assert prefix_selector(".card", selector) == expected

    def test_root_prefixed_word_is_not_root(self):
        assert prefix_selector(".card", "rooty") == ".card rooty"


class TestDirectory:
    def test_two_segments(self):
        assert prefix_selector(".nav-item", "directory.active") == ".nav.active"

    def test_three_segments(self):
        assert prefix_selector(".app-nav-item", "directory .x") == ".app-nav .x"

    def test_card_item(self):
        assert prefix_selector(".card-item", "directory.active") == ".card.active"

    def test_directory_prefix_without_dash(self):
        assert directory_prefix(".card") == ""

    def test_directory_prefix_ignores_empty_segments(self):
        assert directory_prefix(".nav--item") == ".nav"


class TestDefault:
    def test_descendant(self):
        assert prefix_selector(".card", ".btn") == ".card .btn"

    def test_element(self):
        assert prefix_selector(".card", "h1") == ".card h1"

    def test_empty_selector(self):
        assert prefix_selector(".card", "") == ".card "


class TestPolicyTable:
    def test_order(self):
        assert [p.name for p in PREFIX_POLICIES] == [
            "comment",
            "at_rule",
            "root",
            "root_compound",
            "root_descendant",
            "directory",
            "descendant",
        ]

    def test_last_policy_matches_everything(self):
        assert PREFIX_POLICIES[-1].matches("anything")
