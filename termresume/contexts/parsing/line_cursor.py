"""
Line Cursor

Index-addressable view over a document's physical lines with a single
forward-only read position. One cursor belongs to one parse; every reader
receives the same instance so consumption stays synchronized.
"""

from dataclasses import dataclass
from typing import List, Optional

SEQUENCE_MARKER = "-"
COMMENT_MARKER = "#"


@dataclass(frozen=True)
class Line:
    """
    Read-only view of one physical source line.

    Attributes:
        number: 1-based line number in the source document
        raw: Line text with any trailing carriage return removed
        indent: Column of the first non-whitespace character (-1 for blank lines)
        content: Trimmed line text
    """

    number: int
    raw: str
    indent: int
    content: str

    @classmethod
    def from_source(cls, number: int, text: str) -> "Line":
        raw = text[:-1] if text.endswith("\r") else text
        content = raw.strip()
        indent = len(raw) - len(raw.lstrip()) if content else -1
        return cls(number=number, raw=raw, indent=indent, content=content)

    @property
    def is_blank(self) -> bool:
        return not self.content

    @property
    def is_comment(self) -> bool:
        return self.content.startswith(COMMENT_MARKER)

    @property
    def is_transparent(self) -> bool:
        """Blank and comment lines carry no structure and are skipped everywhere."""
        return self.is_blank or self.is_comment

    @property
    def is_sequence_item(self) -> bool:
        return self.content == SEQUENCE_MARKER or self.content.startswith(SEQUENCE_MARKER + " ")

    @property
    def item_body(self) -> str:
        """Text after the sequence marker, trimmed."""
        return self.content[len(SEQUENCE_MARKER):].strip()

    @property
    def item_body_column(self) -> int:
        """Column where the item body starts (the column of an inline key)."""
        after_marker = self.content[len(SEQUENCE_MARKER):]
        return self.indent + len(SEQUENCE_MARKER) + len(after_marker) - len(after_marker.lstrip())


class LineCursor:
    """
    Shared read position over the document lines.

    The position only moves forward. Readers leave it on the first line they
    did not consume.
    """

    def __init__(self, lines: List[Line]):
        self.lines = lines
        self.position = 0

    @classmethod
    def split(cls, text: str) -> "LineCursor":
        """
        Build a cursor over every physical line of text, trailing empty lines included.

        Splits on "\\n" only; a trailing "\\r" on each line is stripped by Line.
        """
        return cls([Line.from_source(number, raw) for number, raw in enumerate(text.split("\n"), 1)])

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.lines)

    @property
    def current(self) -> Optional[Line]:
        """Line at the read position, or None at end of input."""
        if self.at_end:
            return None
        return self.lines[self.position]

    def advance(self) -> Line:
        """Consume the current line and return it."""
        line = self.lines[self.position]
        self.position += 1
        return line

    def skip_transparent(self) -> None:
        """Consume blank and comment lines up to the next structural line."""
        while not self.at_end and self.lines[self.position].is_transparent:
            self.position += 1

    def peek_significant(self) -> Optional[Line]:
        """Next non-blank, non-comment line at or after the read position, without consuming."""
        index = self.position
        while index < len(self.lines):
            line = self.lines[index]
            if not line.is_transparent:
                return line
            index += 1
        return None
