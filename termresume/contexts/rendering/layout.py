"""
Terminal Layout Helpers

Fixed-width text primitives used by the formatter: margins, word wrapping,
alignment, rules and section headers. Widths are always computed on the
visible text, never on styled strings.
"""

import textwrap
from typing import List

import typer

RULE_CHARACTER = "─"
MIN_GAP = 2


def indent(text: str = "", padding: int = 2) -> str:
    """Prefix a line with the left margin."""
    return " " * padding + text


def visible_length(text: str) -> int:
    """Length of text as displayed, ignoring ANSI style codes."""
    return len(typer.unstyle(text))


def word_wrap(text: str, width: int) -> List[str]:
    """
    Wrap text greedily at width, collapsing runs of whitespace.

    Words longer than width are kept whole on their own line.

    Args:
        text: Text to wrap
        width: Maximum line width

    Returns:
        Wrapped lines (empty list for blank text)
    """
    return textwrap.wrap(
        " ".join(text.split()),
        width=width,
        break_long_words=False,
        break_on_hyphens=False,
    )


def gap_between(left: str, right: str, width: int) -> str:
    """Spaces that push right to the end of width after left (never fewer than MIN_GAP)."""
    return " " * max(MIN_GAP, width - visible_length(left) - visible_length(right))


def right_align(left: str, right: str, width: int) -> str:
    """
    Place left at the start and right at the end of a width-wide line.

    Example:
        >>> right_align("Engineer", "2020–Present", 24)
        'Engineer    2020–Present'
    """
    return left + gap_between(left, right, width) + right


def pad_visible(text: str, width: int) -> str:
    """Right-pad text with spaces to a visible width."""
    return text + " " * max(0, width - visible_length(text))


def horizontal_rule(width: int, char: str = RULE_CHARACTER) -> str:
    """Dim horizontal rule across width columns."""
    return typer.style(char * width, dim=True)


def section_header(title: str, width: int) -> str:
    """
    Bold cyan section title followed by a bold dim rule filling the rest of width.

    Example: " EXPERIENCE ──────────...".
    """
    label = f" {title.upper()} "
    rule = RULE_CHARACTER * max(0, width - len(title) - 3)
    return typer.style(label, fg="cyan", bold=True) + typer.style(rule, fg="cyan", bold=True, dim=True)
