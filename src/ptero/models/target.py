"""
Target panel descriptor.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PanelTarget(BaseModel):
    """Base URL and bearer credential of one panel.

    Immutable. Passed to every transport call; nothing is persisted.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(min_length=1)
    api_key: str = Field(min_length=1, repr=False)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
