import re
from pathlib import Path

_LANGUAGE_ALIASES = {
    "vue": "vue",
    "ts": "typescript",
    "typescript": "typescript",
    "js": "javascript",
    "javascript": "javascript",
}

_EXTENSION_LANGUAGE_MAP = {
    ".vue": "vue",
    ".ts": "typescript",
    ".mts": "typescript",
    ".js": "javascript",
    ".mjs": "javascript",
}

# Documents that may carry a `<script setup lang="ts">` block.
_SFC_LANGUAGES = frozenset({"vue"})

_SCRIPT_SETUP_TS_RE = re.compile(r"""<script\b(?=[^>]*\bsetup\b)(?=[^>]*\blang=["']ts["'])""")


def normalize_language(language: str) -> str:
    normalized = language.strip().lower()
    resolved = _LANGUAGE_ALIASES.get(normalized)
    if resolved is None:
        raise ValueError(f"Unsupported language '{language}'. Supported: {sorted(set(_LANGUAGE_ALIASES.values()))}")
    return resolved


def detect_language_from_path(file_path: Path) -> str:
    suffix = file_path.suffix.lower()
    if suffix in _EXTENSION_LANGUAGE_MAP:
        return _EXTENSION_LANGUAGE_MAP[suffix]
    raise ValueError(f"Unsupported file extension: {suffix}")


def is_component_file(path: Path) -> bool:
    return _EXTENSION_LANGUAGE_MAP.get(path.suffix.lower()) in _SFC_LANGUAGES


def is_script_setup_ts(text: str) -> bool:
    """True when ``text`` has a ``<script setup lang="ts">`` block, attributes in any order."""
    return bool(_SCRIPT_SETUP_TS_RE.search(text))
