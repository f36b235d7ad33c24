import re

from prop_konverter.config import ConverterSettings
from prop_konverter.core.extractor import extract_entries
from prop_konverter.core.scanner import ESCAPE, QUOTES, is_wrapped

ANY = "any"
ANY_ARRAY = "any[]"
ANY_RECORD = "Record<string, any>"

_CONSTRUCTOR_TYPES = {
    "String": "string",
    "Number": "number",
    "Boolean": "boolean",
    "Array": ANY_ARRAY,
    "Object": ANY_RECORD,
    "Function": "(...args: any[]) => any",
    "Symbol": "symbol",
    "BigInt": "bigint",
}

_STRING_RE = re.compile(r"""^(["'`]).*\1$""", re.DOTALL)
_NUMBER_RE = re.compile(r"^-?\d+(\.\d+)?$")
_BOOLEAN_RE = re.compile(r"^(true|false)$")
_CAST_RE = re.compile(r"^(?P<name>[A-Za-z_$][\w$]*)\s+as\s+(?P<target>.+)$", re.DOTALL)
_FACTORY_RE = re.compile(r"^\(\s*\)\s*=>\s*(?P<type>.+)$", re.DOTALL)


def read_fields(value_block: str) -> dict[str, str] | None:
    """Parse ``{ type: ..., default: ... }`` into a field map; ``None`` for shorthand values."""
    block = value_block.strip()
    if not is_wrapped(block, "{", "}"):
        return None
    return {entry.name: entry.value for entry in extract_entries(block[1:-1])}


def is_literal(value: str) -> bool:
    """True for a primitive literal: a quoted string, a number or a boolean."""
    value = value.strip()
    return bool(_STRING_RE.match(value) or _NUMBER_RE.match(value) or _BOOLEAN_RE.match(value))


def is_required(value_block: str) -> bool:
    """A prop is required only when it says ``required: true`` and has no ``default``."""
    fields = read_fields(value_block)
    if fields is None:
        return False
    if "default" in fields:
        return False
    return fields.get("required", "").strip() == "true"


def split_top_level(text: str, separators: str) -> list[str]:
    """Split on any of ``separators`` outside quotes and ``{[(<`` nesting."""
    parts: list[str] = []
    depth = 0
    quote: str | None = None
    start = 0
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if quote:
            if ch == ESCAPE:
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in QUOTES:
            quote = ch
        elif ch in "{[(<":
            depth += 1
        elif ch in "}])" or (ch == ">" and text[i - 1 : i] != "="):
            depth = max(0, depth - 1)
        elif ch in separators and depth == 0:
            parts.append(text[start:i])
            start = i + 1
        i += 1
    parts.append(text[start:])
    return [part.strip() for part in parts if part.strip()]


def extract_generic(text: str, keyword: str) -> str | None:
    """Return the balanced ``<...>`` content following ``keyword``, e.g. ``PropType<number[]>``."""
    m = re.search(rf"\b{re.escape(keyword)}\s*<", text)
    if not m:
        return None
    i = m.end()
    depth = 1
    start = i
    while i < len(text):
        ch = text[i]
        if ch == "<":
            depth += 1
        elif ch == ">" and text[i - 1] != "=":
            depth -= 1
            if depth == 0:
                return text[start:i].strip() or None
        i += 1
    return None


def map_type_name(name: str) -> str:
    """Map a constructor to its TypeScript type.

    Legacy casts are unwrapped: ``Object as () => User`` gives ``User``, any
    other ``X as ...`` falls back to the mapping of ``X``.
    """
    name = name.strip()
    cast = _CAST_RE.match(name)
    if cast:
        factory = _FACTORY_RE.match(cast.group("target").strip())
        if factory:
            return format_type(factory.group("type"))
        name = cast.group("name")
    return _CONSTRUCTOR_TYPES.get(name, name)


def type_from_declaration(declaration: str) -> str:
    """Map a ``type:`` field (``String`` or ``[String, Number]``) to a TypeScript type."""
    declaration = declaration.strip()
    if is_wrapped(declaration, "[", "]"):
        names = split_top_level(declaration[1:-1], ",")
        return " | ".join(map_type_name(name) for name in names) or ANY_ARRAY
    return map_type_name(declaration)


def infer_from_default(value: str | None) -> str:
    if not value:
        return ANY
    value = value.strip()
    if _STRING_RE.match(value):
        return "string"
    if _NUMBER_RE.match(value):
        return "number"
    if _BOOLEAN_RE.match(value):
        return "boolean"
    inner = value[1:].strip() if value.startswith("(") else value
    if inner.startswith("["):
        return ANY_ARRAY
    if inner.startswith("{"):
        return ANY_RECORD
    return ANY


def infer_type(default_value: str | None, value_block: str, settings: ConverterSettings | None = None) -> str:
    """Derive the TypeScript type of a prop.

    Resolution order: a ``PropType<...>`` annotation, then the declared ``type``
    field (or a shorthand constructor such as ``title: String``), then the shape
    of the default value.
    """
    settings = settings or ConverterSettings()

    generic = extract_generic(value_block, settings.type_helper)
    if generic:
        return format_type(generic)

    fields = read_fields(value_block)
    if fields is None:
        declaration = None if is_literal(value_block) else value_block.strip()
    else:
        declaration = fields.get("type")
    if declaration:
        return type_from_declaration(declaration)

    return infer_from_default(default_value)


def _top_level_colon(member: str) -> int:
    depth = 0
    quote: str | None = None
    for i, ch in enumerate(member):
        if quote:
            if ch == quote and member[i - 1] != ESCAPE:
                quote = None
        elif ch in QUOTES:
            quote = ch
        elif ch in "{[(<":
            depth += 1
        elif ch in "}])" or (ch == ">" and member[i - 1 : i] != "="):
            depth = max(0, depth - 1)
        elif ch == ":" and depth == 0:
            return i
    return -1


def format_type(type_text: str, indent_unit: str = "  ") -> str:
    """Pretty-print an object type literal one member per line; other types are returned stripped.

    >>> print(format_type("{ a: number, b: string }"))
    {
      a: number;
      b: string;
    }
    """
    text = type_text.strip()
    if not is_wrapped(text, "{", "}"):
        return text

    members = split_top_level(text[1:-1], ",;\n")
    if not members:
        return "{}"

    lines = ["{"]
    for member in members:
        if member.startswith(("//", "/*")):
            lines.append(f"{indent_unit}{member}")
            continue
        colon = _top_level_colon(member)
        if colon == -1:
            rendered = member
        else:
            key = member[:colon].strip()
            rendered = f"{key}: {format_type(member[colon + 1 :], indent_unit)}"
        rendered_lines = rendered.split("\n")
        rendered_lines[-1] += ";"
        lines.extend(f"{indent_unit}{line}" for line in rendered_lines)
    lines.append("}")
    return "\n".join(lines)
