import logging

from prop_konverter.config import ConverterSettings
from prop_konverter.core.defaults import extract_default
from prop_konverter.core.extractor import extract_entries
from prop_konverter.core.formatter import render
from prop_konverter.core.inference import infer_type, is_required
from prop_konverter.core.locator import find_call_sites
from prop_konverter.models import ConversionResult, PropDefinition, PropertyEntry

logger = logging.getLogger(__name__)


def build_prop(entry: PropertyEntry, settings: ConverterSettings | None = None) -> PropDefinition:
    default = extract_default(entry.value)
    return PropDefinition(
        name=entry.name,
        type=infer_type(default, entry.value, settings),
        required=is_required(entry.value),
        default=default,
        comment=entry.comment,
    )


def convert_detailed(text: str, settings: ConverterSettings | None = None) -> ConversionResult:
    """Convert the first object-style call site in ``text``, reporting what was done."""
    settings = settings or ConverterSettings()
    matches = find_call_sites(text, settings)
    if not matches:
        return ConversionResult(text=text)

    call_site = matches[0]
    entries = extract_entries(call_site.body_text(text))
    props = [build_prop(entry, settings) for entry in entries]
    logger.debug("Converting call at %d with %d prop(s)", call_site.span.start, len(props))

    return ConversionResult(
        text=render(call_site, props, settings),
        changed=True,
        call_site=call_site,
        props=props,
    )


def convert(text: str, settings: ConverterSettings | None = None) -> str:
    """Return the typed replacement for the first call site, or ``text`` unchanged when there is none."""
    return convert_detailed(text, settings).text
