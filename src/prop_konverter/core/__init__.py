from prop_konverter.core.actions import apply_edits, build_fix, fix_document
from prop_konverter.core.converter import convert, convert_detailed
from prop_konverter.core.defaults import extract_default, normalize_default
from prop_konverter.core.diagnostics import scan_document
from prop_konverter.core.extractor import extract_entries, normalize_name
from prop_konverter.core.inference import infer_type, is_required
from prop_konverter.core.locator import find_call_sites, locate_call_sites
from prop_konverter.core.scanner import NOT_FOUND, match_bracket

__all__ = [
    "NOT_FOUND",
    "apply_edits",
    "build_fix",
    "convert",
    "convert_detailed",
    "extract_default",
    "extract_entries",
    "find_call_sites",
    "fix_document",
    "infer_type",
    "is_required",
    "locate_call_sites",
    "match_bracket",
    "normalize_default",
    "normalize_name",
    "scan_document",
]
