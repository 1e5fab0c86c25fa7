"""
Document Parser

Recursive-descent reader for the indentation-delimited resume markup.

Converts line-oriented text into a Scalar/Mapping/Sequence tree without a
general-purpose YAML implementation. Supported subset:

    key: value                  scalar (quotes stripped, never type-coerced)
    key:                        nested mapping or sequence on deeper lines,
                                or an empty Mapping when nothing follows
    key: >  /  key: |           block literal, folded to one space-joined line
    - item                      sequence of scalars
    - key: value                sequence of mappings (inline first key)
    # comment                   ignored at every level, as are blank lines

Structure is decided greedily with one line of lookahead; the shared cursor
never moves backwards. Every reader stops, without consuming it, at the first
structural line whose indent is <= the parent indent it was given.

The parser is permissive by default: lines it can't interpret are skipped.
Pass strict=True to raise DocumentParsingError instead.
"""

from typing import Optional, Tuple

from termresume.contexts.parsing.document_tree import Mapping, Scalar, Sequence, Value
from termresume.contexts.parsing.exceptions import DocumentParsingError
from termresume.contexts.parsing.line_cursor import Line, LineCursor
from termresume.contexts.parsing.logger import log_parse_result, log_skipped_line

# Indent of the virtual parent of the root mapping; every real line (indent >= 0) nests under it
ROOT_INDENT = -1

# ">" (folded) and "|" (literal) are read identically
BLOCK_LITERAL_MARKERS = (">", "|")
QUOTE_CHARACTERS = ('"', "'")
KEY_SEPARATOR = ":"

# A sequence given at the same indent as its key is read as if nested one step deeper
SAME_INDENT_SEQUENCE_OFFSET = 2


def is_quoted(text: str) -> bool:
    """Check whether text is wrapped in one matching pair of single or double quotes."""
    return len(text) >= 2 and text[0] in QUOTE_CHARACTERS and text[-1] == text[0]


def normalize_scalar(fragment: str) -> str:
    """
    Trim a line fragment and strip one pair of matching surrounding quotes.

    Args:
        fragment: Raw text of a value

    Returns:
        Normalized scalar text

    Example:
        >>> normalize_scalar('  "Hello, World"  ')
        'Hello, World'
        >>> normalize_scalar("it's")
        "it's"
    """
    text = fragment.strip()
    if is_quoted(text):
        return text[1:-1]
    return text


def split_key_value(content: str) -> Tuple[str, str]:
    """Split "key: value" on the first separator into trimmed (key, value)."""
    key, _, value = content.partition(KEY_SEPARATOR)
    return key.strip(), value.strip()


class DocumentParser:
    """
    Single-use parser over one document.

    Holds the document lines and the one cursor shared by all readers.
    Reader methods are mutually recursive; each takes the parent indent that
    bounds what it may consume.

    Attributes:
        text: Full document text
        strict: Raise DocumentParsingError on malformed markup instead of skipping it
        cursor: Shared line cursor (created fresh by parse())
    """

    def __init__(self, text: str, strict: bool = False):
        self.text = text
        self.strict = strict
        self.cursor = LineCursor.split(text)

    def parse(self) -> Value:
        """
        Parse the whole document.

        Returns:
            Root value, ordinarily a Mapping (an empty Mapping for an empty document)

        Raises:
            DocumentParsingError: In strict mode, on malformed markup
        """
        self.cursor = LineCursor.split(self.text)
        root = self.read_mapping(ROOT_INDENT)

        log_parse_result(len(self.cursor), type(root).__name__, len(root), self.strict)
        return root

    # Readers

    def read_mapping(self, parent_indent: int) -> Value:
        """
        Read key/value lines nested deeper than parent_indent.

        A sequence item met while a key is pending (the last key read at this
        level) is bound to that key; a sequence item met before any key means
        this level is a sequence, and the sequence is returned instead of a
        Mapping.

        Args:
            parent_indent: Indent of the owning line (ROOT_INDENT for the document)

        Returns:
            Mapping of the keys read, or a Sequence when the level holds a bare sequence
        """
        cursor = self.cursor
        mapping = Mapping()
        pending_key: Optional[str] = None
        sibling_indent: Optional[int] = None

        while True:
            cursor.skip_transparent()
            if cursor.at_end:
                break
            line = cursor.current

            if line.indent <= parent_indent:
                break

            if line.is_sequence_item:
                if pending_key is None:
                    return self.read_sequence(parent_indent)
                self._check_sequence_binding(mapping, pending_key, line)
                mapping[pending_key] = self.read_sequence(line.indent - SAME_INDENT_SEQUENCE_OFFSET)
                continue

            if KEY_SEPARATOR not in line.content:
                self._skip_line(line, "no key separator")
                continue

            if sibling_indent is None:
                sibling_indent = line.indent
            elif line.indent != sibling_indent:
                self._fail(
                    f"Inconsistent indentation: expected {sibling_indent} spaces, found {line.indent}",
                    line,
                )

            key, candidate = split_key_value(line.content)
            cursor.advance()
            mapping[key] = self._read_value(candidate, line.indent, line)
            pending_key = key

        return mapping

    def read_sequence(self, parent_indent: int) -> Sequence:
        """
        Read consecutive sequence items nested deeper than parent_indent.

        Item forms:
            - text            scalar item (no separator, or the whole body quoted)
            - key: value      mapping item; continuation keys sit deeper than the dash
            -                 mapping item given entirely on the following lines

        Args:
            parent_indent: Indent of the owning line

        Returns:
            Sequence of the items read
        """
        cursor = self.cursor
        sequence = Sequence()

        while True:
            cursor.skip_transparent()
            if cursor.at_end:
                break
            line = cursor.current

            if line.indent <= parent_indent or not line.is_sequence_item:
                break

            cursor.advance()
            body = line.item_body

            if not body:
                sequence.append(self.read_mapping(line.indent))
            elif KEY_SEPARATOR not in body or is_quoted(body):
                self._check_quotes(body, line)
                sequence.append(Scalar(normalize_scalar(body)))
            else:
                sequence.append(self._read_keyed_item(line, body))

        return sequence

    def read_block_literal(self, parent_indent: int) -> Scalar:
        """
        Fold the lines nested deeper than parent_indent into one scalar.

        Trimmed lines are joined with single spaces; blank and comment lines
        are dropped whatever their indent. Blank and comment lines after the
        last folded line are left for the enclosing reader.

        Args:
            parent_indent: Indent of the line holding the block literal marker

        Returns:
            Folded scalar
        """
        cursor = self.cursor
        parts = []

        while not cursor.at_end:
            line = cursor.current

            if line.is_transparent:
                following = cursor.peek_significant()
                if following is None or following.indent <= parent_indent:
                    break
                cursor.advance()
                continue

            if line.indent <= parent_indent:
                break

            cursor.advance()
            parts.append(line.content)

        return Scalar(" ".join(parts))

    # Helpers

    def _read_value(
        self, candidate: str, key_column: int, line: Line, inline_is_final: bool = False
    ) -> Value:
        """
        Resolve the value of a key whose line has already been consumed.

        Args:
            candidate: Trimmed text right of the separator
            key_column: Column of the key; deeper lines belong to this value
            line: Source line of the key (for error reporting)
            inline_is_final: Keep a non-empty inline value without looking
                ahead for deeper lines (dash-line keys, whose deeper lines
                are fields of the item)

        Returns:
            Block literal Scalar, quoted Scalar, nested Mapping/Sequence,
            plain Scalar, or an empty Mapping for a blank value
        """
        if candidate in BLOCK_LITERAL_MARKERS:
            return self.read_block_literal(key_column)

        if is_quoted(candidate):
            return Scalar(candidate[1:-1])
        self._check_quotes(candidate, line)

        if candidate and inline_is_final:
            return Scalar(candidate)

        following = self.cursor.peek_significant()
        if following is not None and following.indent > key_column:
            if following.is_sequence_item:
                return self.read_sequence(key_column)
            return self.read_mapping(key_column)

        if candidate == "":
            return Mapping()
        return Scalar(candidate)

    def _read_keyed_item(self, line: Line, body: str) -> Mapping:
        """
        Read a sequence item whose first key sits on the dash line.

        The dash line's key stays first in the item regardless of how the
        continuation keys were read. A continuation key repeating it replaces
        its value but not its position. Lines deeper than the dash are fields
        of the item, unless the dash-line key has no inline value.
        """
        key, candidate = split_key_value(body)
        first_value = self._read_value(candidate, line.item_body_column, line, inline_is_final=True)
        item = Mapping({key: first_value})

        continuation = self.read_mapping(line.indent)
        if isinstance(continuation, Sequence):
            # Bare items under a keyed item have no key to bind to
            if continuation:
                self._fail("Sequence items nested under a mapping item without a key", line)
                log_skipped_line(line.number, line.content, f"{len(continuation)} orphaned items")
            return item

        for continuation_key, value in continuation.items():
            item[continuation_key] = value
        return item

    def _check_sequence_binding(self, mapping: Mapping, pending_key: str, line: Line) -> None:
        """In strict mode, refuse to let a same-indent sequence replace a scalar value."""
        existing = mapping.get(pending_key)
        if isinstance(existing, Scalar) and existing.text:
            self._fail(f"Sequence would replace the value of key '{pending_key}'", line)

    def _check_quotes(self, text: str, line: Line) -> None:
        """In strict mode, reject values opening a quote they don't close."""
        if text[:1] in QUOTE_CHARACTERS and not is_quoted(text):
            self._fail("Unmatched quote", line)

    def _skip_line(self, line: Line, reason: str) -> None:
        """Consume a line the parser can't interpret (raises in strict mode)."""
        self._fail(f"Unrecognized line ({reason})", line)
        log_skipped_line(line.number, line.content, reason)
        self.cursor.advance()

    def _fail(self, message: str, line: Line) -> None:
        if self.strict:
            raise DocumentParsingError(message, line_number=line.number, line=line.raw)


def parse_document(text: str, strict: bool = False) -> Value:
    """
    Parse resume markup into a value tree.

    Args:
        text: Full document text ("\\n" or "\\r\\n" line endings)
        strict: Raise DocumentParsingError on malformed markup instead of skipping it

    Returns:
        Root value (ordinarily a Mapping)

    Example:
        >>> from termresume.contexts.parsing.document_tree import to_python
        >>> to_python(parse_document("tags:\\n  - a\\n  - b"))
        {'tags': ['a', 'b']}
    """
    return DocumentParser(text, strict=strict).parse()
