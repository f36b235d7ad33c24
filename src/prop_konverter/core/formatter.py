from prop_konverter.config import ConverterSettings
from prop_konverter.core.extractor import is_identifier
from prop_konverter.models import CallSiteMatch, PropDefinition

INDENT_UNIT = "  "


def _comment_lines(comment: str) -> list[str]:
    # Continuation lines are already relative to the comment start column.
    lines = comment.split("\n")
    return [lines[0].strip(), *(line.rstrip() for line in lines[1:])]


def render_type_block(props: list[PropDefinition], indent: str) -> list[str]:
    """Render the ``name?: type`` lines of the type literal, comments included."""
    block_indent = indent + INDENT_UNIT
    lines: list[str] = []
    for prop in props:
        if prop.comment:
            lines.extend(f"{block_indent}{line}" for line in _comment_lines(prop.comment))
        marker = "?" if prop.optional else ""
        type_lines = prop.type.split("\n")
        lines.append(f"{block_indent}{prop.name}{marker}: {type_lines[0]}")
        lines.extend(f"{block_indent}{line}" for line in type_lines[1:])
    return lines


def binding_part(prop: PropDefinition) -> str:
    """Render one destructuring element, e.g. ``count = 0``."""
    target = prop.name if is_identifier(prop.name) else f"{prop.name}: _{prop.name}"
    if prop.default is None:
        return target
    return f"{target} = {prop.default}"


def render(call_site: CallSiteMatch, props: list[PropDefinition], settings: ConverterSettings | None = None) -> str:
    """Render the typed replacement for ``call_site``.

    Without any defaults the whole props object is bound to a single name (the
    one already declared, or the configured default). With at least one default
    every prop is destructured, defaulted or not.
    """
    settings = settings or ConverterSettings()
    indent = call_site.indent
    keyword = call_site.binding_keyword or settings.keyword
    call = settings.call_name

    if not props:
        name = call_site.binding_name or settings.binding_name
        return f"{indent}{keyword} {name} = {call}<{{}}>()"

    type_block = "\n".join(render_type_block(props, indent))
    typed_call = f"{call}<{{\n{type_block}\n{indent}}}>()"

    if all(prop.default is None for prop in props):
        name = call_site.binding_name or settings.binding_name
        return f"{indent}{keyword} {name} = {typed_call}"

    parts = [binding_part(prop) for prop in props]
    single_line = ", ".join(parts)
    if len(single_line) > settings.multiline_threshold or len(parts) > 1:
        destructured = ",\n".join(f"{indent}{INDENT_UNIT}{part}" for part in parts)
        return f"{indent}{keyword} {{\n{destructured}\n{indent}}} = {typed_call}"
    return f"{indent}{keyword} {{ {single_line} }} = {typed_call}"
