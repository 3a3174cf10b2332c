"""
Panel error payload.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ApiErrorDetail(BaseModel):
    """One ``{code, detail}`` entry of a panel error response."""

    code: str
    status: str | None = None
    detail: str = ""


class ApiErrorPayload(BaseModel):
    """Error body returned by the panel on non-200 responses."""

    errors: list[ApiErrorDetail] = Field(default_factory=list)
