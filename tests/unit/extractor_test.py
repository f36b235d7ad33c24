"""Unit tests for property entry extraction and name normalization."""

import pytest

from prop_konverter.core.extractor import extract_entries, normalize_name


def test_extracts_single_and_multi_line_comments() -> None:
    code = """
      /** multi-line comment */
      // single-line comment
      testProp: {
        type: String,
        required: true
      },
      anotherProp: 42
      """
    props = extract_entries(code)
    assert len(props) == 2
    assert props[0].name == "testProp"
    assert props[0].comment is not None
    assert "multi-line comment" in props[0].comment
    assert "single-line comment" in props[0].comment
    assert props[1].name == "anotherProp"
    assert props[1].value == "42"
    assert props[1].comment is None


def test_entry_count_and_order_preserved() -> None:
    body = "a: 1, b: { c: [1, 2, 3], d: fn(1, 2) }, c: 'x, y', d: () => ({ e: 1, f: 2 })"
    entries = extract_entries(body)
    assert [e.name for e in entries] == ["a", "b", "c", "d"]
    assert entries[1].value == "{ c: [1, 2, 3], d: fn(1, 2) }"
    assert entries[2].value == "'x, y'"
    assert entries[3].value == "() => ({ e: 1, f: 2 })"


def test_generic_type_arguments_do_not_split_entries() -> None:
    body = " type: Object as PropType<Record<string, number>>, default: () => ({}) "
    entries = extract_entries(body)
    assert [e.name for e in entries] == ["type", "default"]
    assert entries[0].value == "Object as PropType<Record<string, number>>"
    assert entries[1].value == "() => ({})"


def test_malformed_name_on_its_own_line_does_not_eat_next_entry() -> None:
    entries = extract_entries("first: String,\n  oops\n  second: Number")
    assert [e.name for e in entries] == ["first", "second"]


def test_malformed_entry_is_skipped() -> None:
    body = """
  first: String,
  oops String
  second: Number
"""
    entries = extract_entries(body)
    assert [e.name for e in entries] == ["first", "second"]


def test_spread_is_skipped() -> None:
    entries = extract_entries("...shared,\n  title: String")
    assert [e.name for e in entries] == ["title"]


def test_unterminated_block_comment_halts() -> None:
    entries = extract_entries("a: String,\n  /* never closed\n  b: Number")
    assert [e.name for e in entries] == ["a"]


def test_inline_comment_after_last_value() -> None:
    entries = extract_entries("count: Number // how many\n")
    assert entries[0].value == "Number"
    assert entries[0].comment == "// how many"


def test_trailing_comment_after_comma_belongs_to_entry() -> None:
    entries = extract_entries("a: String, // about a\n  b: Number")
    assert entries[0].comment == "// about a"
    assert entries[1].comment is None


def test_comment_inside_nested_value_stays_in_value() -> None:
    entries = extract_entries("a: {\n  // don't split\n  type: String\n}")
    assert entries[0].comment is None
    assert "// don't split" in entries[0].value


def test_quoted_names_are_normalized() -> None:
    entries = extract_entries("'weird-key': String, \"plain\": Number, 'it\\'s': Boolean")
    assert [e.name for e in entries] == ["weirdKey", "plain", "itS"]


def test_name_without_usable_characters_is_dropped() -> None:
    entries = extract_entries("'🔥': String, ok: Number")
    assert [e.name for e in entries] == ["ok"]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("weird-key", "weirdKey"),
        ("super🔥 value", "superValue"),
        ("some key here", "someKeyHere"),
        ("already_fine", "already_fine"),
        ("$ref", "$ref"),
        ("Upper Case", "upperCase"),
        ("data.url", "dataUrl"),
    ],
)
def test_normalize_name(raw: str, expected: str) -> None:
    assert normalize_name(raw) == expected


def test_multi_line_malformed_entry_is_skipped_whole() -> None:
    body = """
  first: String,
  broken {
    type: Number,
    default: 1
  },
  last: Boolean
"""
    entries = extract_entries(body)
    assert [e.name for e in entries] == ["first", "last"]
    assert entries[1].value == "Boolean"


def test_unclosed_malformed_group_ends_extraction() -> None:
    entries = extract_entries("first: String,\n  broken {\n    type: Number,\n")
    assert [e.name for e in entries] == ["first"]


def test_unmatched_closer_ends_the_value() -> None:
    entries = extract_entries("a: 1\n  }\n  b: 2")
    assert [(e.name, e.value) for e in entries] == [("a", "1"), ("b", "2")]


def test_block_comment_is_dedented_to_its_own_column() -> None:
    body = "\n    /**\n     * Doc line\n     */\n    a: String\n"
    [entry] = extract_entries(body)
    assert entry.comment == "/**\n * Doc line\n */"
