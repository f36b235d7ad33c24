from __future__ import annotations

from pydantic import BaseModel

from prop_konverter.models import Diagnostic


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str
    parser: str


class ConvertRequest(BaseModel):
    code: str


class ConvertResponse(BaseModel):
    code: str
    changed: bool


class DiagnosticsRequest(BaseModel):
    code: str
    language_id: str = "vue"


class DiagnosticsResponse(BaseModel):
    diagnostics: list[Diagnostic]
