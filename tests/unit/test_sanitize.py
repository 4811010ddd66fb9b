"""Unit tests for the text sanitisation helpers."""

from __future__ import annotations

import pytest

from rtuk_licenses.scraper.sanitize import (
    clean_text,
    replace_literal,
    strip_comment_markers,
    strip_parentheses,
)

_SAMPLES = [
    "",
    "   ",
    "plain",
    "  leading and trailing  ",
    "a    b",
    "a \n b",
    "tab\tseparated\tvalues",
    "\r\nwindows\r\nlines\r\n",
    "     https://www.beinconnect.com.tr/    https://www.digiturkplay.com.tr/ ",
    "\t(İNTERNET)                ",
    " \t \n \r ",
    "AGENA TELEVİZYON  YAYINCILIK   ANONİM ŞİRKETİ",
]


class TestCleanText:
    def test_trims_and_collapses(self) -> None:
        assert clean_text("  Platform   Lisansı  ") == "Platform Lisansı"

    def test_removes_control_characters(self) -> None:
        assert clean_text("İstanbul\n\t\rKadıköy") == "İstanbulKadıköy"

    def test_removal_does_not_leave_double_spaces(self) -> None:
        assert clean_text("a \n b") == "a b"

    def test_empty_string(self) -> None:
        assert clean_text("") == ""

    @pytest.mark.parametrize("value", _SAMPLES)
    def test_idempotent(self, value: str) -> None:
        once = clean_text(value)
        assert clean_text(once) == once

    @pytest.mark.parametrize("value", _SAMPLES)
    def test_output_has_no_control_chars_or_space_runs(self, value: str) -> None:
        result = clean_text(value)
        assert "\t" not in result
        assert "\n" not in result
        assert "\r" not in result
        assert "  " not in result
        assert result == result.strip()


class TestReplaceLiteral:
    def test_parentheses_are_matched_literally(self) -> None:
        assert replace_literal("Tür (İNTERNET) yayın", "(İNTERNET)", "") == "Tür  yayın"

    def test_single_parenthesis(self) -> None:
        assert replace_literal("(a)(b)", "(", "") == "a)b)"

    def test_other_metacharacters(self) -> None:
        assert replace_literal("a.b.c", ".", "-") == "a-b-c"
        assert replace_literal("1+1=2", "1+1", "two") == "two=2"

    def test_replacement_is_not_a_template(self) -> None:
        assert replace_literal("x", "x", r"\1") == r"\1"

    def test_empty_pattern_returns_input(self) -> None:
        assert replace_literal("unchanged", "", "X") == "unchanged"


class TestStripParentheses:
    def test_license_type(self) -> None:
        assert strip_parentheses("(İNTERNET)") == "İNTERNET"

    def test_no_parentheses(self) -> None:
        assert strip_parentheses("Platform") == "Platform"


class TestStripCommentMarkers:
    def test_markers_removed_content_kept(self) -> None:
        body = "<div><!--<table><tr><td>1</td></tr></table>--></div>"
        result = strip_comment_markers(body)
        assert "<!--" not in result
        assert "-->" not in result
        assert "<table><tr><td>1</td></tr></table>" in result

    def test_body_without_markers_unchanged(self) -> None:
        assert strip_comment_markers("<p>x</p>") == "<p>x</p>"
