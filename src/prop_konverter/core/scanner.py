"""Quote- and comment-aware bracket matching over raw source text."""

NOT_FOUND = -1

QUOTES = "'\"`"
ESCAPE = "\\"


def skip_comment(text: str, index: int) -> int:
    """Return the index just past a comment starting at ``index``, or ``index`` if none starts there.

    A line comment ends before its newline; an unterminated block comment runs to the end of the text.
    """
    marker = text[index : index + 2]
    if marker == "//":
        end = text.find("\n", index)
        return len(text) if end == -1 else end
    if marker == "/*":
        end = text.find("*/", index + 2)
        return len(text) if end == -1 else end + 2
    return index


def match_bracket(text: str, open_index: int, open_char: str, close_char: str) -> int:
    """Find the index of the ``close_char`` that balances ``text[open_index]``.

    Characters inside quotes and comments are inert. Returns ``NOT_FOUND`` when
    ``open_index`` does not hold ``open_char`` or the text ends before depth returns to zero.
    """
    if open_index < 0 or open_index >= len(text) or text[open_index] != open_char:
        return NOT_FOUND

    depth = 0
    quote: str | None = None
    i = open_index
    n = len(text)
    while i < n:
        ch = text[i]
        if quote:
            if ch == ESCAPE:
                i += 2
                continue
            if ch == quote:
                quote = None
            i += 1
            continue

        if ch in QUOTES:
            quote = ch
            i += 1
            continue

        after_comment = skip_comment(text, i)
        if after_comment != i:
            i = after_comment
            continue

        if ch == open_char:
            depth += 1
        elif ch == close_char:
            depth -= 1
            if depth == 0:
                return i
        i += 1

    return NOT_FOUND


def find_top_level(text: str, char: str, start: int = 0, end: int | None = None) -> int:
    """Return the index of the first ``char`` in ``text[start:end]`` that is not inside a quote or comment."""
    stop = len(text) if end is None else min(end, len(text))
    quote: str | None = None
    i = start
    while i < stop:
        ch = text[i]
        if quote:
            if ch == ESCAPE:
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in QUOTES:
            quote = ch
        elif ch == char:
            return i
        else:
            after_comment = skip_comment(text, i)
            if after_comment != i:
                i = after_comment
                continue
        i += 1
    return NOT_FOUND


def is_wrapped(text: str, open_char: str, close_char: str) -> bool:
    """True when the whole of ``text`` is one balanced ``open_char ... close_char`` group."""
    return bool(text) and text[0] == open_char and match_bracket(text, 0, open_char, close_char) == len(text) - 1
