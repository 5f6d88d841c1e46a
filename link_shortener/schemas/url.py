from typing import Optional

from pydantic import BaseModel, Field


class ShortenRequest(BaseModel):
    # Optional so a missing url gets the structured 400 payload, not a 422
    url: Optional[str] = Field(None, description="The URL to be shortened")


class ShortenResponse(BaseModel):
    hash: str = Field(..., description="Short identifier for the URL")


class ErrorResponse(BaseModel):
    error: str
    code: int
