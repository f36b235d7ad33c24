import logging
import re
from typing import cast

from tree_sitter import Node
from tree_sitter_language_pack import SupportedLanguage, get_parser

from prop_konverter.core.inference import is_literal, read_fields
from prop_konverter.core.literals import LiteralSyntaxError, dense_index_keys, evaluate_literal, render_literal
from prop_konverter.core.scanner import is_wrapped

logger = logging.getLogger(__name__)

_PARSE_LANGUAGE = "typescript"
_ARROW_RE = re.compile(r"\(\s*\)\s*=>\s*")
_FUNCTION_RE = re.compile(r"function\s*\(\s*\)\s*")
_RETURN_RE = re.compile(r"return\b\s*(?P<expr>.*?)\s*;?\s*\Z", re.DOTALL)


def _block_return(block: str) -> str | None:
    """Return the expression of a ``{ return expr }`` body holding a single statement."""
    m = _RETURN_RE.match(block[1:-1].strip())
    if not m or not m.group("expr"):
        return None
    expr = m.group("expr")
    if ";" in expr and not is_literal(expr):
        return None
    return expr


def unwrap_closure(text: str) -> str:
    """Strip a no-argument closure wrapper, keeping the returned expression."""
    m = _ARROW_RE.match(text) or _FUNCTION_RE.match(text)
    if not m:
        return text
    rest = text[m.end() :].strip()
    if is_wrapped(rest, "{", "}"):
        expr = _block_return(rest)
        return expr if expr is not None else text
    if m.re is _FUNCTION_RE:
        return text
    return rest


def strip_redundant_parens(text: str) -> str:
    """Drop parentheses around a brace or bracket literal: ``({ a: 1 })`` -> ``{ a: 1 }``."""
    if not is_wrapped(text, "(", ")"):
        return text
    inner = text[1:-1].strip()
    if is_wrapped(inner, "{", "}") or is_wrapped(inner, "[", "]"):
        return inner
    return text


def parser_ready() -> bool:
    """True when the TypeScript grammar used for default restructuring can be loaded."""
    try:
        get_parser(cast(SupportedLanguage, _PARSE_LANGUAGE))
        return True
    except Exception:
        return False


def _node_text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8")


def _parse_expression(text: str) -> tuple[Node, bytes] | None:
    """Parse ``text`` as a single TypeScript expression; ``None`` when the parse has errors."""
    source = f"({text})".encode()
    parser = get_parser(cast(SupportedLanguage, _PARSE_LANGUAGE))
    tree = parser.parse(source)
    root = tree.root_node
    if root.has_error:
        return None
    statements = [child for child in root.named_children if child.type != "comment"]
    if len(statements) != 1 or statements[0].type != "expression_statement":
        return None
    expr = statements[0].named_children[0]
    while expr.type == "parenthesized_expression":
        inner = [child for child in expr.named_children if child.type != "comment"]
        if len(inner) != 1:
            return None
        expr = inner[0]
    return expr, source


def _pair_index(pair: Node, source: bytes) -> str | None:
    key = pair.child_by_field_name("key")
    if key is None:
        return None
    text = _node_text(key, source)
    if key.type == "string":
        return text[1:-1]
    if key.type == "number":
        return text
    return None


def _has_holes(node: Node) -> bool:
    """True for a sparse array such as ``[1, , 2]``."""
    previous = None
    for child in node.children:
        if child.type == "comment":
            continue
        if child.type == "," and previous in ("[", ","):
            return True
        previous = child.type
    return False


def _render_node(node: Node, source: bytes) -> str:
    if node.type == "parenthesized_expression":
        inner = [child for child in node.named_children if child.type != "comment"]
        if len(inner) == 1 and inner[0].type in ("array", "object"):
            return _render_node(inner[0], source)
        return _node_text(node, source)

    if node.type == "array":
        if _has_holes(node):
            return _node_text(node, source)
        elements = [child for child in node.named_children if child.type != "comment"]
        return "[" + ", ".join(_render_node(element, source) for element in elements) + "]"

    if node.type == "object":
        members = [child for child in node.named_children if child.type != "comment"]
        if members and all(member.type == "pair" for member in members):
            keys = [_pair_index(member, source) for member in members]
            if all(key is not None for key in keys):
                indexes = dense_index_keys(cast(list[str], keys))
                if indexes is not None:
                    by_key: dict[int, Node] = {}
                    for key, member in zip(keys, members, strict=True):
                        value = member.child_by_field_name("value")
                        if value is None:
                            return _node_text(node, source)
                        by_key[int(cast(str, key))] = value
                    return "[" + ", ".join(_render_node(by_key[i], source) for i in indexes) + "]"

    return _node_text(node, source)


def _evaluate_fallback(text: str) -> str:
    """Re-render a plain array or object literal without the grammar; anything else is kept as written."""
    try:
        value = evaluate_literal(text)
    except LiteralSyntaxError:
        return text
    if not isinstance(value, (list, dict)):
        return text
    return render_literal(value)


def _restructure(text: str) -> str:
    try:
        parsed = _parse_expression(text)
    except Exception:
        logger.debug("Structural parse unavailable for %r; using literal evaluation", text, exc_info=True)
        return _evaluate_fallback(text)
    if parsed is None:
        logger.debug("Structural parse failed for %r; trying literal evaluation", text)
        return _evaluate_fallback(text)
    node, source = parsed
    return _render_node(node, source)


def normalize_default(raw: str) -> str:
    """Clean a ``default`` expression for use in a destructuring binding.

    Unwraps ``() => expr`` closures, drops redundant parentheses and rewrites
    array-like literals canonically. Any failure falls back to the text of the
    previous step, so this never raises.
    """
    text = raw.strip()
    for step in (unwrap_closure, strip_redundant_parens, _restructure):
        try:
            text = step(text).strip() or text
        except Exception:
            logger.debug("Default normalization step %s failed for %r", step.__name__, text, exc_info=True)
            break
    return text


def extract_default(value_block: str) -> str | None:
    """Return the normalized default of a prop, or ``None`` when it has none."""
    fields = read_fields(value_block)
    if fields is None:
        return normalize_default(value_block) if is_literal(value_block) else None
    raw = fields.get("default")
    if raw is None or not raw.strip():
        return None
    return normalize_default(raw)
