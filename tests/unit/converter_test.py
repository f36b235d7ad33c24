"""End-to-end tests of the conversion engine on source snippets."""

import pytest

from prop_konverter.core.converter import convert, convert_detailed
from prop_konverter.core.extractor import extract_entries
from prop_konverter.core.locator import find_call_sites
from tests.fixtures.props import PROP_FIXTURES


@pytest.mark.parametrize(("source", "expected"), list(PROP_FIXTURES.values()), ids=list(PROP_FIXTURES))
def test_converts_fixture(source: str, expected: str) -> None:
    assert convert(source) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "const a = 1",
        "defineProps(['a', 'b'])",
        "const props = defineProps<{ a: string }>()",
        "defineProps({ a: String",
    ],
)
def test_no_match_returns_input_unchanged(text: str) -> None:
    assert find_call_sites(text) == []
    assert convert(text) == text
    assert convert_detailed(text).changed is False


def test_required_and_default_entries() -> None:
    source = "defineProps({ test: { type: String, required: true }, count: { type: Number, default: 0 } })"
    result = convert(source)
    assert "  test: string\n" in result
    assert "  count?: number\n" in result
    assert result.startswith("const {\n  test,\n  count = 0\n} = defineProps<{")


def test_weird_key_is_renamed() -> None:
    result = convert("defineProps({ 'weird-key': { type: String, default: 'test' } })")
    assert result.startswith("const { weirdKey = 'test' } = defineProps<{")
    assert "weirdKey?: string" in result


def test_generic_array_with_closure_default() -> None:
    result = convert("defineProps({ values: { type: Array as PropType<number[]>, default: () => [1,2,3] } })")
    assert result == "const { values = [1, 2, 3] } = defineProps<{\n  values?: number[]\n}>()"


def test_generic_map_with_closure_object_default() -> None:
    source = """defineProps({
  data: {
    type: Object as PropType<Record<string, number>>,
    default: () => ({ a: 1, b: 2 })
  }
})"""
    result = convert(source)
    assert result == "const { data = { a: 1, b: 2 } } = defineProps<{\n  data?: Record<string, number>\n}>()"


def test_malformed_entry_between_good_entries_is_dropped() -> None:
    source = """defineProps({
  first: { type: String, default: 'a' },
  broken { type: Number },
  last: Boolean
})"""
    result = convert_detailed(source)
    assert [p.name for p in result.props] == ["first", "last"]
    assert "broken" not in result.text
    assert "first = 'a'" in result.text
    assert "last?: boolean" in result.text


def test_required_default_precedence() -> None:
    result = convert_detailed("defineProps({ a: { type: String, required: true, default: 'x' } })")
    [prop] = result.props
    assert prop.required is False
    assert prop.optional is True
    assert "a?: string" in result.text


def test_comments_round_trip() -> None:
    source = """defineProps({
  // leading
  a: String, // trailing
  /* block */
  b: { type: Number, default: 1 }
})"""
    entries = extract_entries(source[source.index("{") + 1 : source.rindex("}")])
    result = convert(source)
    for entry in entries:
        assert entry.comment is not None
        for line in entry.comment.split("\n"):
            assert line.strip() in result


def test_preserves_indentation_and_keyword() -> None:
    source = "  let props = defineProps({ a: { type: String, default: 'x' } })"
    assert convert(source) == "  let { a = 'x' } = defineProps<{\n    a?: string\n  }>()"


def test_acts_on_first_call_site_only() -> None:
    source = "defineProps({ a: String })\ndefineProps({ b: Number })"
    result = convert(source)
    assert "a?: string" in result
    assert "b?" not in result


def test_empty_object() -> None:
    assert convert("const p = defineProps({})") == "const p = defineProps<{}>()"


def test_shorthand_literal_default() -> None:
    result = convert("defineProps({ size: 42 })")
    assert result == "const { size = 42 } = defineProps<{\n  size?: number\n}>()"


def test_multi_line_malformed_entry_leaves_neighbours_intact() -> None:
    source = "defineProps({\n  first: String,\n  broken {\n    type: Number,\n    default: 1\n  },\n  last: Boolean\n})"
    assert convert(source) == "const props = defineProps<{\n  first?: string\n  last?: boolean\n}>()"


def test_jsdoc_follows_the_block_indentation() -> None:
    source = "  defineProps({\n    /**\n     * Doc line\n     */\n    a: String\n  })"
    assert convert(source) == "  const props = defineProps<{\n    /**\n     * Doc line\n     */\n    a?: string\n  }>()"


def test_closure_cast_type_uses_the_returned_type() -> None:
    result = convert("defineProps({ a: { type: Object as () => User }, b: Array as () => string[] })")
    assert result == "const props = defineProps<{\n  a?: User\n  b?: string[]\n}>()"
