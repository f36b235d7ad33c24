"""End-to-end: scan, convert in place, and rescan a component tree through the CLI."""

from pathlib import Path

from typer.testing import CliRunner

from prop_konverter.cli.app import app

runner = CliRunner()

COMPONENT = """<template>
  <button :class="props.variant">{{ props.label }} ({{ props.count }})</button>
</template>

<script lang="ts" setup>
import { computed } from 'vue'

/**
 * Button props.
 */
const props = defineProps({
  // Visible text
  label: { type: String, required: true },
  variant: { type: String, default: 'primary' }, // theme name
  count: { type: Number, default: 0 },
  'aria-label': { type: String, default: '' },
  items: { type: Array as PropType<string[]>, default: () => ['a', 'b'] }
})

const doubled = computed(() => props.count * 2)
</script>
"""

EXPECTED_SCRIPT = """const {
  label,
  variant = 'primary',
  count = 0,
  ariaLabel = '',
  items = ['a', 'b']
} = defineProps<{
  // Visible text
  label: string
  // theme name
  variant?: string
  count?: number
  ariaLabel?: string
  items?: string[]
}>()"""


def test_scan_convert_rescan(tmp_path: Path) -> None:
    components = tmp_path / "src" / "components"
    components.mkdir(parents=True)
    button = components / "Button.vue"
    button.write_text(COMPONENT, encoding="utf-8")

    result = runner.invoke(app, ["scan", str(tmp_path)])
    assert result.exit_code == 1
    assert "(1 diagnostics)" in result.output

    result = runner.invoke(app, ["convert", str(button), "--write"])
    assert result.exit_code == 0

    text = button.read_text(encoding="utf-8")
    assert EXPECTED_SCRIPT in text
    assert '<button :class="variant">{{ label }} ({{ count }})</button>' in text
    assert "computed(() => count * 2)" in text
    assert "import { computed } from 'vue'" in text
    assert " * Button props.\n */\n" in text

    result = runner.invoke(app, ["scan", str(tmp_path)])
    assert result.exit_code == 0

    result = runner.invoke(app, ["convert", str(button), "--write"])
    assert result.exit_code == 0
    assert "No object-style defineProps()" in result.output
    assert button.read_text(encoding="utf-8") == text
