"""Custom exceptions for parsing context with source line references."""

from typing import Optional


class DocumentParsingError(ValueError):
    """
    Exception raised by strict-mode parsing when markup is malformed.

    Lenient parsing (the default) never raises this; it skips what it can't read.

    Attributes:
        message: Error description
        line_number: 1-based line number in the source document
        line: The offending source line
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ):
        self.message = message
        self.line_number = line_number
        self.line = line

        # Build enhanced error message
        parts = [message]

        if line_number is not None:
            parts.append(f"\nLine: {line_number}")

        if line:
            # Truncate snippet if too long
            snippet = line[:200] + "..." if len(line) > 200 else line
            parts.append(f"Source: {snippet}")

        super().__init__("\n".join(parts))
