from fastapi import APIRouter, Depends, HTTPException

from prop_konverter.api.schemas import ConvertRequest, ConvertResponse, DiagnosticsRequest, DiagnosticsResponse
from prop_konverter.config import ConverterSettings, load_settings
from prop_konverter.core.actions import fix_document
from prop_konverter.core.converter import convert_detailed
from prop_konverter.core.diagnostics import scan_document

router = APIRouter(tags=["convert"])


@router.post("/convert", response_model=ConvertResponse)
async def convert(body: ConvertRequest, settings: ConverterSettings = Depends(load_settings)) -> ConvertResponse:
    """Convert the first object-style call site in a snippet."""
    result = convert_detailed(body.code, settings)
    return ConvertResponse(code=result.text, changed=result.changed)


@router.post("/diagnostics", response_model=DiagnosticsResponse)
async def diagnostics(
    body: DiagnosticsRequest, settings: ConverterSettings = Depends(load_settings)
) -> DiagnosticsResponse:
    try:
        found = scan_document(body.code, body.language_id, settings)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return DiagnosticsResponse(diagnostics=found)


@router.post("/fix", response_model=ConvertResponse)
async def fix(body: ConvertRequest, settings: ConverterSettings = Depends(load_settings)) -> ConvertResponse:
    """Apply the quick fix to every flagged call site of a Vue document."""
    fixed = fix_document(body.code, "vue", settings)
    return ConvertResponse(code=fixed, changed=fixed != body.code)
