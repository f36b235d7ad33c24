import os

from pydantic import BaseModel


class ConverterSettings(BaseModel):
    call_name: str = "defineProps"
    type_helper: str = "PropType"
    binding_name: str = "props"
    keyword: str = "const"
    multiline_threshold: int = 60


def load_settings() -> ConverterSettings:
    """Build settings from ``PROP_KONVERTER_*`` environment variables."""
    defaults = ConverterSettings()
    return ConverterSettings(
        call_name=os.getenv("PROP_KONVERTER_CALL_NAME", defaults.call_name),
        type_helper=os.getenv("PROP_KONVERTER_TYPE_HELPER", defaults.type_helper),
        binding_name=os.getenv("PROP_KONVERTER_BINDING_NAME", defaults.binding_name),
        keyword=os.getenv("PROP_KONVERTER_KEYWORD", defaults.keyword),
        multiline_threshold=int(
            os.getenv("PROP_KONVERTER_MULTILINE_THRESHOLD", str(defaults.multiline_threshold))
        ),
    )
