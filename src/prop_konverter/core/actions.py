import logging
import re

from prop_konverter.config import ConverterSettings
from prop_konverter.core.converter import convert_detailed
from prop_konverter.core.diagnostics import DIAGNOSTIC_CODE, scan_document
from prop_konverter.core.extractor import is_identifier
from prop_konverter.models import CodeFix, Diagnostic, SourceSpan, TextEdit

logger = logging.getLogger(__name__)

FIX_TITLE = "Convert to type-safe defineProps()"


def _replacement_span(text: str, span: SourceSpan) -> SourceSpan:
    """Extend ``span`` back to its line start when only indentation precedes it."""
    line_start = text.rfind("\n", 0, span.start) + 1
    if text[line_start : span.start].strip():
        return span
    return SourceSpan(start=line_start, end=span.end)


def rename_edits(text: str, binding: str, name: str, exclude: SourceSpan | None = None) -> list[TextEdit]:
    """Replace every ``<binding>.<name>`` access with the bare ``name``."""
    pattern = re.compile(rf"(?<![\w$.]){re.escape(binding)}\.{re.escape(name)}(?![\w$])")
    edits: list[TextEdit] = []
    for m in pattern.finditer(text):
        span = SourceSpan(start=m.start(), end=m.end())
        if exclude is not None and exclude.overlaps(span):
            continue
        edits.append(TextEdit(span=span, new_text=name))
    return edits


def build_fix(text: str, diagnostic: Diagnostic, settings: ConverterSettings | None = None) -> CodeFix | None:
    """Build the quick fix for one diagnostic: the typed declaration plus the access renames."""
    if diagnostic.code != DIAGNOSTIC_CODE:
        return None
    settings = settings or ConverterSettings()
    span = _replacement_span(text, diagnostic.span)
    result = convert_detailed(span.slice(text), settings)
    if not result.changed or result.call_site is None:
        return None

    edits = [TextEdit(span=span, new_text=result.text)]
    if any(prop.default is not None for prop in result.props):
        binding = result.call_site.binding_name or settings.binding_name
        for prop in result.props:
            if is_identifier(prop.name):
                edits.extend(rename_edits(text, binding, prop.name, exclude=span))

    return CodeFix(title=FIX_TITLE, edits=sorted(edits, key=lambda edit: edit.span.start))


def apply_edits(text: str, edits: list[TextEdit]) -> str:
    """Apply non-overlapping edits in one pass; overlapping edits raise ``ValueError``."""
    ordered = sorted(edits, key=lambda edit: (edit.span.start, edit.span.end))
    for previous, current in zip(ordered, ordered[1:]):
        if previous.span.end > current.span.start:
            raise ValueError(
                f"Overlapping edits at {previous.span.start}-{previous.span.end} "
                f"and {current.span.start}-{current.span.end}"
            )

    parts: list[str] = []
    cursor = 0
    for edit in ordered:
        parts.append(text[cursor : edit.span.start])
        parts.append(edit.new_text)
        cursor = edit.span.end
    parts.append(text[cursor:])
    return "".join(parts)


def fix_document(text: str, language_id: str = "vue", settings: ConverterSettings | None = None) -> str:
    """Apply the quick fix to every flagged call site in a document."""
    remaining = len(scan_document(text, language_id, settings))
    while remaining > 0:
        diagnostics = scan_document(text, language_id, settings)
        fix = next((f for f in (build_fix(text, d, settings) for d in diagnostics) if f is not None), None)
        if fix is None:
            break
        text = apply_edits(text, fix.edits)
        remaining -= 1
    logger.debug("Fixed document; %d call site(s) left unconverted", remaining)
    return text
