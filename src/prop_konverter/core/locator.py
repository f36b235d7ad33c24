import logging
import re

from prop_konverter.config import ConverterSettings
from prop_konverter.core.scanner import NOT_FOUND, find_top_level, match_bracket
from prop_konverter.models import CallSiteMatch, SourceSpan

logger = logging.getLogger(__name__)


def _call_pattern(call_name: str) -> re.Pattern[str]:
    return re.compile(rf"(?:\b(?:const|let|var)\s+[A-Za-z_$][\w$]*\s*=\s*)?\b{re.escape(call_name)}\s*\(")


def _line_indent(text: str, index: int) -> str:
    line_start = text.rfind("\n", 0, index) + 1
    m = re.match(r"[ \t]*", text[line_start:index])
    return m.group(0) if m else ""


def find_call_sites(text: str, settings: ConverterSettings | None = None) -> list[CallSiteMatch]:
    """Locate every call whose argument list contains an object literal, in source order."""
    settings = settings or ConverterSettings()
    results: list[CallSiteMatch] = []

    for m in _call_pattern(settings.call_name).finditer(text):
        start = m.start()
        open_paren = m.end() - 1

        close_paren = match_bracket(text, open_paren, "(", ")")
        if close_paren == NOT_FOUND:
            logger.debug("Discarding call at %d: unbalanced argument list", start)
            continue

        brace_open = find_top_level(text, "{", open_paren + 1, close_paren)
        if brace_open == NOT_FOUND:
            logger.debug("Discarding call at %d: no object literal argument", start)
            continue

        brace_close = match_bracket(text, brace_open, "{", "}")
        if brace_close == NOT_FOUND or brace_close > close_paren:
            logger.debug("Discarding call at %d: object literal is not closed inside the call", start)
            continue

        results.append(
            CallSiteMatch(
                span=SourceSpan(start=start, end=close_paren + 1),
                body=SourceSpan(start=brace_open, end=brace_close + 1),
                prefix=text[start:open_paren],
                indent=_line_indent(text, start),
            )
        )

    return results


locate_call_sites = find_call_sites
