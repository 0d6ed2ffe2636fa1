from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel


class HotelSchema(RootModel[dict[str, Any]]):
    model_config = ConfigDict(title="Hotel")


class FailedHotelSchema(BaseModel):
    id: str = Field(..., description="Hotel address")
    error: str = Field(..., description="Summary of the failure")
    originalError: str = Field(..., description="Underlying error message")


class HotelListSchema(BaseModel):
    """Listing envelope."""

    items: list[dict[str, Any]]
    errors: list[FailedHotelSchema]
    next: str | None = Field(
        default=None, description="Link to the next page, absent when exhausted"
    )


class ErrorSchema(BaseModel):
    status: int
    code: str
    short: str
    long: str


class RootInfoSchema(BaseModel):
    docs: str
    info: str
    version: str
