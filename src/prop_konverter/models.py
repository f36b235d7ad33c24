import re

from pydantic import BaseModel, model_validator

_BINDING_RE = re.compile(r"\b(const|let|var)\s+([A-Za-z_$][\w$]*)\s*=\s*")


class SourceSpan(BaseModel):
    start: int
    end: int

    @model_validator(mode="after")
    def _check_order(self) -> "SourceSpan":
        if self.start > self.end:
            raise ValueError(f"span start {self.start} is after end {self.end}")
        return self

    def slice(self, text: str) -> str:
        return text[self.start : self.end]

    def overlaps(self, other: "SourceSpan") -> bool:
        return self.start < other.end and other.start < self.end


class CallSiteMatch(BaseModel):
    """A located ``defineProps({...})`` call.

    ``span`` covers the optional binding prefix through the closing parenthesis,
    ``body`` covers the object literal including its braces.
    """

    span: SourceSpan
    body: SourceSpan
    prefix: str
    indent: str = ""

    @property
    def binding_keyword(self) -> str | None:
        m = _BINDING_RE.search(self.prefix)
        return m.group(1) if m else None

    @property
    def binding_name(self) -> str | None:
        m = _BINDING_RE.search(self.prefix)
        return m.group(2) if m else None

    def body_text(self, text: str) -> str:
        """Return the object literal body without its braces."""
        return text[self.body.start + 1 : self.body.end - 1]


class PropertyEntry(BaseModel):
    name: str
    value: str
    comment: str | None = None


class PropDefinition(BaseModel):
    name: str
    type: str
    required: bool = False
    default: str | None = None
    comment: str | None = None

    @property
    def optional(self) -> bool:
        return self.default is not None or not self.required


class ConversionResult(BaseModel):
    text: str
    changed: bool = False
    call_site: CallSiteMatch | None = None
    props: list[PropDefinition] = []


class Diagnostic(BaseModel):
    span: SourceSpan
    message: str
    code: str
    severity: str = "information"


class TextEdit(BaseModel):
    span: SourceSpan
    new_text: str


class CodeFix(BaseModel):
    title: str
    edits: list[TextEdit]
