"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from prop_konverter.config import ConverterSettings

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------

SFC_TEMPLATE = """<template>
  <div>{{{{ props.title }}}}</div>
</template>

<script setup lang="ts">
{script}
</script>
"""


@pytest.fixture
def settings() -> ConverterSettings:
    return ConverterSettings()


@pytest.fixture
def make_sfc():
    """Wrap a script body in a Vue single-file component with ``<script setup lang="ts">``."""

    def _make(script: str) -> str:
        return SFC_TEMPLATE.format(script=script)

    return _make


@pytest.fixture
def component_file(tmp_path: Path, make_sfc) -> Path:
    path = tmp_path / "Card.vue"
    path.write_text(
        make_sfc(
            "const props = defineProps({\n"
            "  title: { type: String, default: 'Hello' },\n"
            "  size: Number\n"
            "})\n"
            "console.log(props.title, props.size)"
        ),
        encoding="utf-8",
    )
    return path
