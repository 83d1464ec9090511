"""
bunny_app.api.schemas.rabbit

Purpose:
    Response schemas for the rabbit breed and Bunny header endpoints.

Notes:
    - BreedResponse is the public /api/rabbit contract: exactly one key, "breed".
    - HeadersResponse never contains null values; absent headers are dropped
      before the response is built.

Created:
    2026-10-19
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from bunny_app.shared.cdn_headers import HeaderEntry


class BreedResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    breed: str = Field(..., description="Randomly selected rabbit breed", examples=["Holland Lop"])


class HeaderEntryOut(BaseModel):
    name: str = Field(..., examples=["cdn-requestcountrycode"])
    value: str = Field(..., examples=["US"])

    @classmethod
    def from_entry(cls, entry: HeaderEntry) -> "HeaderEntryOut":
        return cls(name=entry.name, value=entry.value)


class HeadersResponse(BaseModel):
    headers: list[HeaderEntryOut] = Field(default_factory=list)


class GreetingResponse(BaseModel):
    greeting: str = Field(..., examples=["Hello from US!"])
