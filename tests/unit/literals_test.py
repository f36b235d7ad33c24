"""Unit tests for the restricted literal evaluator."""

import pytest

from prop_konverter.core.literals import LiteralSyntaxError, dense_index_keys, evaluate_literal, render_literal


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("-1.5", -1.5),
        ("'it\\'s'", "it's"),
        ('"line\\nbreak"', "line\nbreak"),
        ("`plain`", "plain"),
        ("true", True),
        ("false", False),
        ("[1, 'a', [true]]", [1, "a", [True]]),
        ("{ a: 1, 'b c': [2], 3: 'x', }", {"a": 1, "b c": [2], "3": "x"}),
        ("[]", []),
        ("{}", {}),
    ],
)
def test_evaluate_literal(text: str, expected: object) -> None:
    assert evaluate_literal(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "someIdentifier",
        "fn()",
        "new Date()",
        "[1, foo]",
        "{ a: bar }",
        "`${x}`",
        "[1, 2",
        "{ a: 1 } extra",
        "{ [key]: 1 }",
        "// comment\n1",
    ],
)
def test_rejects_non_literals(text: str) -> None:
    with pytest.raises(LiteralSyntaxError):
        evaluate_literal(text)


def test_dense_index_keys() -> None:
    assert dense_index_keys(["2", "0", "1"]) == [0, 1, 2]
    assert dense_index_keys(["0", "2"]) is None
    assert dense_index_keys(["01", "1"]) is None
    assert dense_index_keys(["a"]) is None
    assert dense_index_keys([]) is None


def test_render_literal() -> None:
    value = {"name": "O'Brien", "tags": ["a", "b"], "on": True, "ratio": 2.0, "weird key": 1.5}
    assert render_literal(value) == "{ name: 'O\\'Brien', tags: ['a', 'b'], on: true, ratio: 2, 'weird key': 1.5 }"


def test_render_dense_object_as_array() -> None:
    assert render_literal({"1": "b", "0": "a"}) == "['a', 'b']"


def test_render_empty_containers() -> None:
    assert render_literal({}) == "{}"
    assert render_literal([]) == "[]"
