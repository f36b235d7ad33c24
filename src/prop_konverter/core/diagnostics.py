from prop_konverter.config import ConverterSettings
from prop_konverter.core.languages import is_script_setup_ts, normalize_language
from prop_konverter.core.locator import find_call_sites
from prop_konverter.models import Diagnostic

DIAGNOSTIC_CODE = "props.TypeSyntax"
DIAGNOSTIC_MESSAGE = "Object-style defineProps() used. Convert to type-safe variant."


def scan_document(text: str, language_id: str = "vue", settings: ConverterSettings | None = None) -> list[Diagnostic]:
    """Flag every object-style call site in a Vue document with a TypeScript ``<script setup>``."""
    if normalize_language(language_id) != "vue":
        return []
    if not is_script_setup_ts(text):
        return []
    return [
        Diagnostic(span=match.span, message=DIAGNOSTIC_MESSAGE, code=DIAGNOSTIC_CODE)
        for match in find_call_sites(text, settings)
    ]
