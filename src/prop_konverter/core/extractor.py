import logging
import re
import string

from prop_konverter.core.scanner import ESCAPE, NOT_FOUND, QUOTES, match_bracket, skip_comment
from prop_konverter.models import PropertyEntry

logger = logging.getLogger(__name__)

_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][\w$]*\Z")
_NAME_CHARS = re.compile(r"[A-Za-z0-9_$]")
_OPENERS = "{[("
_CLOSERS = "}])"
# `<` opens type arguments only directly after a PascalCase name such as PropType or Record.
_GENERIC_NAME = re.compile(r"(?<![\w$])[A-Z][\w$]*$")


def is_identifier(name: str) -> bool:
    return bool(_IDENTIFIER_RE.match(name))


def normalize_name(raw: str) -> str:
    """Turn a quoted property key into a lower-camel-case identifier.

    Punctuation separates words; emoji and other symbols are dropped.
    """
    if is_identifier(raw):
        return raw
    cleaned = []
    for ch in raw:
        if ch.isalnum() or ch.isspace():
            cleaned.append(ch)
        elif ch in string.punctuation:
            cleaned.append(" ")
    tokens = "".join(cleaned).split()
    if not tokens:
        return ""
    return tokens[0].lower() + "".join(token.capitalize() for token in tokens[1:])


def _dedent_comment(comment: str, column: int) -> str:
    """Shift continuation lines left by the column the comment started at."""
    lines = comment.split("\n")
    for k in range(1, len(lines)):
        line = lines[k]
        width = len(line) - len(line.lstrip(" \t"))
        lines[k] = line[min(width, column) :].rstrip()
    return "\n".join(lines)


def _read_comment(body: str, i: int) -> tuple[str, int] | None:
    end = skip_comment(body, i)
    if end == i:
        return None
    column = i - (body.rfind("\n", 0, i) + 1)
    return _dedent_comment(body[i:end].strip(), column), end


def _skip_to_next_line(body: str, i: int) -> int:
    nl = body.find("\n", i)
    return len(body) if nl == -1 else nl + 1


def _skip_malformed(body: str, i: int, name_end: int) -> int:
    """Resume after an entry whose name is not followed by a colon.

    A bracketed group after the name is skipped whole, with its trailing comma.
    Otherwise extraction resumes on the next line.
    """
    n = len(body)
    if i < n and body[i] in _OPENERS:
        close = match_bracket(body, i, body[i], _CLOSERS[_OPENERS.index(body[i])])
        if close == NOT_FOUND:
            return n
        i = close + 1
        while i < n and body[i] in " \t":
            i += 1
        return i + 1 if i < n and body[i] == "," else i
    if "\n" in body[name_end:i]:
        return i
    return _skip_to_next_line(body, i)


def extract_entries(body: str) -> list[PropertyEntry]:
    """Split an object literal body into ordered ``name: value`` entries with their comments."""
    out: list[PropertyEntry] = []
    i = 0
    n = len(body)

    while i < n:
        while i < n and (body[i].isspace() or body[i] == ","):
            i += 1
        if i >= n:
            break

        comments: list[str] = []
        while i < n:
            if body.startswith("/*", i) and body.find("*/", i + 2) == -1:
                logger.debug("Unterminated block comment at %d; stopping extraction", i)
                return out
            found = _read_comment(body, i)
            if found is None:
                break
            comment, i = found
            comments.append(comment)
            while i < n and body[i].isspace():
                i += 1
        if i >= n:
            break

        if body[i] in "'\"":
            quote = body[i]
            i += 1
            start = i
            while i < n and body[i] != quote:
                if body[i] == ESCAPE:
                    i += 1
                i += 1
            raw_name = body[start:i]
            i += 1
            name = normalize_name(raw_name)
        else:
            start = i
            while i < n and _NAME_CHARS.match(body[i]):
                i += 1
            name = body[start:i]

        name_end = i
        while i < n and body[i].isspace():
            i += 1
        if i >= n or body[i] != ":":
            logger.debug("Skipping malformed entry near offset %d", start)
            i = _skip_malformed(body, i, name_end)
            continue
        i += 1

        value_start = i
        value_parts: list[str] = []
        depth = 0
        type_args = 0
        quote_char: str | None = None
        while i < n:
            ch = body[i]
            if quote_char:
                if ch == ESCAPE:
                    i += 2
                    continue
                if ch == quote_char:
                    quote_char = None
                i += 1
                continue

            if ch in QUOTES:
                quote_char = ch
            elif ch in _OPENERS:
                depth += 1
            elif ch in _CLOSERS:
                if depth == 0:
                    break
                depth -= 1
            elif ch == "<" and _GENERIC_NAME.search(body, max(0, i - 80), i):
                type_args += 1
            elif ch == ">" and type_args and body[i - 1] != "=":
                type_args -= 1
            elif body.startswith(("//", "/*"), i):
                comment_end = skip_comment(body, i)
                if depth == 0:
                    value_parts.append(body[value_start:i])
                    column = i - (body.rfind("\n", 0, i) + 1)
                    comments.append(_dedent_comment(body[i:comment_end].strip(), column))
                    value_start = comment_end
                i = comment_end
                continue
            elif ch == "," and depth == 0 and not type_args:
                break
            i += 1

        value_parts.append(body[value_start:i])
        value = "".join(value_parts).strip()

        if i < n and body[i] == ",":
            i += 1
            j = i
            while j < n and body[j] in " \t":
                j += 1
            trailing = _read_comment(body, j)
            if trailing is not None:
                comments.append(trailing[0])
                i = trailing[1]

        if not name:
            logger.debug("Dropping entry near offset %d: key has no usable name", start)
            continue
        out.append(PropertyEntry(name=name, value=value, comment="\n".join(comments) if comments else None))

    return out
