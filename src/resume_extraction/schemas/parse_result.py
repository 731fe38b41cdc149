from pydantic import BaseModel, Field

from resume_extraction.schemas.profile import ExtractedProfile


class DroppedItem(BaseModel):
    """One value removed by provenance validation."""

    field: str
    value: str
    reason: str


class ParseResult(BaseModel):
    success: bool
    data: ExtractedProfile | None = None
    error: str | None = None

    # Diagnostics for logs; never serialized into the response body.
    error_code: str | None = Field(default=None, exclude=True)
    dropped: list[DroppedItem] = Field(default_factory=list, exclude=True)

    @classmethod
    def ok(cls, data: ExtractedProfile, dropped: list[DroppedItem] | None = None) -> "ParseResult":
        return cls(success=True, data=data, dropped=dropped or [])

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> "ParseResult":
        return cls(success=False, error=error, error_code=error_code)
