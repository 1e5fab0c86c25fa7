"""Unit tests for the lenient document parser."""

import pytest

from termresume.contexts.parsing import (
    Mapping,
    Scalar,
    Sequence,
    normalize_scalar,
    parse_document,
    to_python,
)


def parse(text: str):
    return to_python(parse_document(text))


@pytest.mark.unit
class TestMappings:
    """Key/value lines and nested mappings."""

    def test_preserves_key_order(self):
        """Keys come out in source order."""
        result = parse("c: 3\na: 1\nb: 2")
        assert list(result) == ["c", "a", "b"]

    def test_indent_terminates_nested_mapping(self):
        """A dedented sibling is not swallowed by the nested mapping."""
        result = parse("key:\n  child: 1\nsibling: 2")
        assert result == {"key": {"child": "1"}, "sibling": "2"}
        assert list(result) == ["key", "sibling"]

    def test_deeply_nested_mapping(self):
        text = "a:\n  b:\n    c:\n      d: deep\n  e: shallow\nf: top"
        assert parse(text) == {"a": {"b": {"c": {"d": "deep"}}, "e": "shallow"}, "f": "top"}

    def test_duplicate_key_last_write_wins(self):
        """A repeated key keeps the last value (not an error)."""
        assert parse("a: 1\na: 2") == {"a": "2"}

    def test_value_split_on_first_colon(self):
        """URLs and times keep their colons."""
        result = parse("url: https://example.com:8080/path\ntime: 10:30")
        assert result == {"url": "https://example.com:8080/path", "time": "10:30"}

    def test_blank_value_without_children_is_empty_mapping(self):
        """A key with nothing after it marks an intentionally absent value."""
        result = parse_document("endDate:\nnext: x")
        assert result["endDate"] == Mapping()
        assert result.get_text("next") == "x"

    def test_scalars_are_never_coerced(self):
        result = parse("year: 2020\nflag: true\nnothing: null")
        assert result == {"year": "2020", "flag": "true", "nothing": "null"}

    def test_nested_value_replaces_inline_value(self):
        """Deeper lines after a key take precedence over text on the key's line."""
        assert parse("key: ignored\n  child: kept") == {"key": {"child": "kept"}}

    def test_line_without_separator_is_skipped(self):
        result = parse("a: 1\njust some words\nb: 2")
        assert result == {"a": "1", "b": "2"}


@pytest.mark.unit
class TestScalars:
    """Quote stripping and whitespace normalization."""

    def test_double_quotes_stripped(self):
        """Quotes are removed and the inner comma survives."""
        assert parse('title: "Hello, World"') == {"title": "Hello, World"}

    def test_single_quotes_stripped(self):
        assert parse("title: 'Hello'") == {"title": "Hello"}

    def test_quoted_colon_kept(self):
        assert parse('note: "a: b"') == {"note": "a: b"}

    def test_empty_quotes_give_empty_scalar(self):
        result = parse_document('phone: ""')
        assert result["phone"] == Scalar("")

    def test_mismatched_quotes_kept(self):
        assert parse("quote: \"it's'") == {"quote": "\"it's'"}

    def test_normalize_scalar(self):
        assert normalize_scalar('  "padded"  ') == "padded"
        assert normalize_scalar("plain  ") == "plain"
        assert normalize_scalar('"') == '"'
        assert normalize_scalar("it's") == "it's"


@pytest.mark.unit
class TestSequences:
    """Sequences of scalars and of mappings."""

    def test_sequence_of_scalars(self):
        assert parse("tags:\n  - a\n  - b\n  - c") == {"tags": ["a", "b", "c"]}

    def test_quoted_scalar_items(self):
        assert parse("tags:\n  - \"a, b\"\n  - 'c: d'") == {"tags": ["a, b", "c: d"]}

    def test_sequence_of_inline_keyed_objects(self):
        """The dash line's key stays first in each item."""
        text = "items:\n  - name: X\n    level: 2\n  - name: Y\n    level: 3"
        result = parse(text)
        assert result == {"items": [{"name": "X", "level": "2"}, {"name": "Y", "level": "3"}]}
        for item in result["items"]:
            assert list(item) == ["name", "level"]

    def test_dash_key_stays_first_when_repeated(self):
        """A continuation repeating the dash key replaces its value in place."""
        result = parse("items:\n  - name: X\n    level: 2\n    name: Z")
        assert result == {"items": [{"name": "Z", "level": "2"}]}
        assert list(result["items"][0]) == ["name", "level"]

    def test_nested_sequence_inside_item(self):
        text = (
            "skills:\n"
            "  - name: Languages\n"
            "    keywords:\n"
            "      - Python\n"
            "      - Go\n"
            "  - name: Tools\n"
            "    keywords:\n"
            "      - Git\n"
        )
        assert parse(text) == {
            "skills": [
                {"name": "Languages", "keywords": ["Python", "Go"]},
                {"name": "Tools", "keywords": ["Git"]},
            ]
        }

    def test_empty_dash_item_reads_following_mapping(self):
        text = "items:\n  -\n    name: X\n    level: 1\n  -\n    name: Y"
        assert parse(text) == {"items": [{"name": "X", "level": "1"}, {"name": "Y"}]}

    def test_same_indent_sequence_binds_to_pending_key(self):
        """A sequence at the key's own indent belongs to that key."""
        text = "work:\n- name: A\n  position: Dev\n- name: B\neducation:\n- name: C"
        assert parse(text) == {
            "work": [{"name": "A", "position": "Dev"}, {"name": "B"}],
            "education": [{"name": "C"}],
        }

    def test_same_indent_sequence_inside_item(self):
        text = "skills:\n  - name: A\n    keywords:\n    - x\n    - y\n  - name: B"
        assert parse(text) == {
            "skills": [{"name": "A", "keywords": ["x", "y"]}, {"name": "B"}]
        }

    def test_root_level_sequence(self):
        """A document starting with a sequence item is a sequence."""
        result = parse_document("- a\n- b")
        assert isinstance(result, Sequence)
        assert to_python(result) == ["a", "b"]

    def test_dash_value_with_nested_mapping(self):
        text = "people:\n  - name:\n      first: Ada\n      last: Lovelace\n    role: Analyst"
        assert parse(text) == {
            "people": [{"name": {"first": "Ada", "last": "Lovelace"}, "role": "Analyst"}]
        }

    def test_deeper_continuation_is_item_field(self):
        """Lines deeper than the dash key's column belong to the item, not the inline value."""
        result = parse("items:\n  - name: X\n      level: 2")
        assert result == {"items": [{"name": "X", "level": "2"}]}
        assert list(result["items"][0]) == ["name", "level"]

    def test_quoted_dash_value_keeps_continuation(self):
        assert parse('items:\n  - name: "X"\n      level: 2') == {"items": [{"name": "X", "level": "2"}]}

    def test_sequence_ends_at_dedent(self):
        assert parse("a:\n  - 1\n  - 2\nb: 3") == {"a": ["1", "2"], "b": "3"}


@pytest.mark.unit
class TestBlockLiterals:
    """Folded (>) and literal (|) blocks."""

    def test_folded_block(self):
        assert parse("desc: >\n  line one\n  line two") == {"desc": "line one line two"}

    def test_literal_block_is_folded_too(self):
        assert parse("desc: |\n  line one\n  line two") == {"desc": "line one line two"}

    def test_blank_lines_inside_block_dropped(self):
        text = "desc: >\n  para one\n\n  para two\n\nnext: x"
        assert parse(text) == {"desc": "para one para two", "next": "x"}

    def test_block_ends_at_dedent(self):
        text = "basics:\n  summary: >\n    first\n    second\n  name: Z\nother: y"
        assert parse(text) == {"basics": {"summary": "first second", "name": "Z"}, "other": "y"}

    def test_block_literal_in_sequence_item(self):
        text = (
            "work:\n"
            "  - name: A\n"
            "    summary: >\n"
            "      did things\n"
            "      and more\n"
            "    location: Remote\n"
            "  - summary: >\n"
            "      first key block\n"
            "    name: B\n"
        )
        assert parse(text) == {
            "work": [
                {"name": "A", "summary": "did things and more", "location": "Remote"},
                {"summary": "first key block", "name": "B"},
            ]
        }

    def test_shallow_comment_inside_block(self):
        """A comment at the marker's indent doesn't end the block."""
        text = "desc: >\n  line one\n# note\n  line two\nnext: x"
        assert parse(text) == {"desc": "line one line two", "next": "x"}

    def test_comment_after_block_left_to_mapping(self):
        text = "desc: >\n  line one\n# note\n\nnext: x"
        assert parse(text) == {"desc": "line one", "next": "x"}

    def test_empty_block_literal(self):
        assert parse("desc: >\nnext: x") == {"desc": "", "next": "x"}


@pytest.mark.unit
class TestTransparentLines:
    """Blank and comment lines never change the structure."""

    def test_comments_and_blanks_anywhere(self):
        plain = "a:\n  b: 1\n  c:\n    - x\n    - y\nd: 2"
        noisy = (
            "# header comment\n"
            "\n"
            "a:\n"
            "  # nested comment\n"
            "  b: 1\n"
            "\n"
            "  c:\n"
            "    # list comment\n"
            "    - x\n"
            "\n"
            "    - y\n"
            "# trailing comment\n"
            "d: 2\n"
            "\n"
        )
        assert parse(noisy) == parse(plain)

    def test_comment_between_key_and_children(self):
        """Lookahead skips comments when deciding whether a key has children."""
        assert parse("a:\n# note\n  b: 1") == {"a": {"b": "1"}}

    def test_crlf_line_endings(self):
        text = "a:\r\n  b: 1\r\n  tags:\r\n    - x\r\nc: \"q\"\r\n"
        assert parse(text) == {"a": {"b": "1", "tags": ["x"]}, "c": "q"}

    def test_empty_document(self):
        assert parse_document("") == Mapping()

    def test_comments_only_document(self):
        assert parse_document("# nothing\n\n   \n# here\n") == Mapping()
