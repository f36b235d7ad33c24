"""FastMCP server exposing prop-konverter tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from prop_konverter.config import ConverterSettings, load_settings
from prop_konverter.core.actions import fix_document as _fix_document
from prop_konverter.core.converter import convert as _convert
from prop_konverter.core.diagnostics import scan_document as _scan_document


def create_mcp_server(settings: ConverterSettings | None = None) -> FastMCP:
    """Create a FastMCP server using ``settings`` (or the environment's)."""
    settings = settings or load_settings()

    mcp = FastMCP("prop-konverter", instructions="Rewrite object-style Vue defineProps() into typed declarations.")

    @mcp.tool()
    def convert_props(code: str) -> str:
        """Convert the first object-style defineProps() call in a snippet."""
        return _convert(code, settings)

    @mcp.tool()
    def scan_document(code: str, language_id: str = "vue") -> list[dict[str, Any]]:
        """List object-style defineProps() calls in a Vue document."""
        return [d.model_dump() for d in _scan_document(code, language_id, settings)]

    @mcp.tool()
    def fix_document(code: str) -> str:
        """Convert every object-style defineProps() call in a Vue document."""
        return _fix_document(code, "vue", settings)

    return mcp
