"""Unit tests for terminal layout helpers."""

import pytest
import typer

from termresume.contexts.rendering.layout import (
    gap_between,
    pad_visible,
    right_align,
    section_header,
    visible_length,
    word_wrap,
)


@pytest.mark.unit
class TestWordWrap:
    def test_wraps_at_width(self):
        lines = word_wrap("one two three four five", 9)
        assert lines == ["one two", "three", "four five"]
        assert all(len(line) <= 9 for line in lines)

    def test_collapses_whitespace(self):
        assert word_wrap("  a \n\n b\tc  ", 80) == ["a b c"]

    def test_long_word_kept_whole(self):
        assert word_wrap("tiny supercalifragilistic end", 8) == ["tiny", "supercalifragilistic", "end"]

    def test_blank_text(self):
        assert word_wrap("   ", 10) == []


@pytest.mark.unit
class TestAlignment:
    def test_right_align(self):
        assert right_align("left", "right", 15) == "left      right"

    def test_right_align_minimum_gap(self):
        assert right_align("a long left side", "right", 10) == "a long left side  right"

    def test_styles_do_not_count_toward_width(self):
        styled = typer.style("left", fg="cyan", bold=True)
        assert visible_length(styled) == 4
        assert gap_between(styled, "right", 15) == " " * 6
        assert visible_length(pad_visible(styled, 10)) == 10

    def test_section_header_fills_width(self):
        header = section_header("Skills", 76)
        plain = typer.unstyle(header)
        assert plain.startswith(" SKILLS ")
        assert len(plain) == 76 - 1

    def test_section_header_rule_stays_bold(self):
        header = section_header("Skills", 76)
        rule = header[header.index(" SKILLS ") + len(" SKILLS "):]
        assert "\x1b[1m" in rule
        assert "\x1b[2m" in rule
