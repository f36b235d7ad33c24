"""A restricted evaluator for JavaScript literal values.

Only numbers, strings, booleans, arrays and objects built from them are
accepted. Identifiers, calls, ``new`` expressions, template substitutions and
comments are rejected with :class:`LiteralSyntaxError`; nothing is ever executed.
"""

import re
from typing import Any

_TOKEN_RE = re.compile(
    r"""
    (?P<space>\s+)
    | (?P<number>-?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
    | (?P<string>'(?:\\.|[^'\\])*'|"(?:\\.|[^"\\])*"|`(?:\\.|[^`\\$])*`)
    | (?P<punct>[\[\]{}:,])
    | (?P<word>[A-Za-z_$][\w$]*)
    """,
    re.VERBOSE | re.DOTALL,
)
_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][\w$]*\Z")
_INDEX_RE = re.compile(r"(?:0|[1-9]\d*)\Z")
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}


class LiteralSyntaxError(ValueError):
    pass


def _tokenize(text: str) -> list[tuple[str, str]]:
    tokens: list[tuple[str, str]] = []
    pos = 0
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if not m:
            raise LiteralSyntaxError(f"Unexpected character {text[pos]!r} at offset {pos}")
        kind = m.lastgroup
        assert kind is not None
        if kind != "space":
            tokens.append((kind, m.group(0)))
        pos = m.end()
    return tokens


def _decode_string(token: str) -> str:
    body = token[1:-1]
    out: list[str] = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        nxt = body[i + 1]
        if nxt == "u" and re.match(r"[0-9a-fA-F]{4}", body[i + 2 : i + 6]):
            out.append(chr(int(body[i + 2 : i + 6], 16)))
            i += 6
            continue
        if nxt == "x" and re.match(r"[0-9a-fA-F]{2}", body[i + 2 : i + 4]):
            out.append(chr(int(body[i + 2 : i + 4], 16)))
            i += 4
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def _parse_number(token: str) -> int | float:
    if re.fullmatch(r"-?\d+", token):
        return int(token)
    return float(token)


class _Parser:
    def __init__(self, tokens: list[tuple[str, str]]) -> None:
        self._tokens = tokens
        self._pos = 0

    def _peek(self) -> tuple[str, str] | None:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _next(self) -> tuple[str, str]:
        token = self._peek()
        if token is None:
            raise LiteralSyntaxError("Unexpected end of literal")
        self._pos += 1
        return token

    def _expect(self, punct: str) -> None:
        kind, text = self._next()
        if kind != "punct" or text != punct:
            raise LiteralSyntaxError(f"Expected {punct!r}, got {text!r}")

    def _at(self, punct: str) -> bool:
        token = self._peek()
        return token is not None and token == ("punct", punct)

    def parse(self) -> Any:
        value = self._value()
        if self._peek() is not None:
            raise LiteralSyntaxError(f"Trailing input after literal: {self._peek()[1]!r}")  # type: ignore[index]
        return value

    def _value(self) -> Any:
        kind, text = self._next()
        if kind == "number":
            return _parse_number(text)
        if kind == "string":
            return _decode_string(text)
        if kind == "word":
            if text == "true":
                return True
            if text == "false":
                return False
            raise LiteralSyntaxError(f"Identifier {text!r} is not a literal")
        if text == "[":
            return self._array()
        if text == "{":
            return self._object()
        raise LiteralSyntaxError(f"Unexpected token {text!r}")

    def _array(self) -> list[Any]:
        items: list[Any] = []
        while not self._at("]"):
            items.append(self._value())
            if self._at(","):
                self._next()
            elif not self._at("]"):
                raise LiteralSyntaxError("Expected ',' or ']' in array literal")
        self._expect("]")
        return items

    def _object(self) -> dict[str, Any]:
        obj: dict[str, Any] = {}
        while not self._at("}"):
            kind, text = self._next()
            if kind == "string":
                key = _decode_string(text)
            elif kind in ("word", "number"):
                key = text
            else:
                raise LiteralSyntaxError(f"Invalid object key {text!r}")
            self._expect(":")
            obj[key] = self._value()
            if self._at(","):
                self._next()
            elif not self._at("}"):
                raise LiteralSyntaxError("Expected ',' or '}' in object literal")
        self._expect("}")
        return obj


def evaluate_literal(text: str) -> Any:
    """Evaluate ``text`` as a JavaScript literal, or raise :class:`LiteralSyntaxError`."""
    return _Parser(_tokenize(text)).parse()


def dense_index_keys(keys: list[str]) -> list[int] | None:
    """Return the keys as ordered ints when they are exactly ``0..n-1`` in base 10, else ``None``."""
    if not keys or not all(_INDEX_RE.match(key) for key in keys):
        return None
    indexes = sorted(int(key) for key in keys)
    if indexes != list(range(len(indexes))):
        return None
    return indexes


def _quote(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
    )
    return f"'{escaped}'"


def _render_key(key: str) -> str:
    if _IDENTIFIER_RE.match(key) or _INDEX_RE.match(key):
        return key
    return _quote(key)


def render_literal(value: Any) -> str:
    """Render an evaluated literal back to single-line JavaScript with single-quoted strings."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, list):
        return "[" + ", ".join(render_literal(item) for item in value) + "]"
    if isinstance(value, dict):
        if not value:
            return "{}"
        indexes = dense_index_keys(list(value))
        if indexes is not None:
            return "[" + ", ".join(render_literal(value[str(i)]) for i in indexes) + "]"
        parts = [
            f"{_render_key(key)}: {render_literal(item)}" for key, item in value.items()
        ]
        return "{ " + ", ".join(parts) + " }"
    raise LiteralSyntaxError(f"Cannot render {type(value).__name__}")
