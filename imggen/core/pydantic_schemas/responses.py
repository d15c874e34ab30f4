"""Response models returned by the images API."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field


class ImageData(BaseModel):
    """Single generated image entry."""

    url: Optional[str] = None
    revised_prompt: Optional[str] = None
    b64_json: Optional[str] = None


class ImageGenerationResponse(BaseModel):
    """Successful (HTTP 200) response body."""

    created: Optional[int] = None
    data: List[ImageData] = Field(min_length=1)


class ErrorDetail(BaseModel):
    """The ``error`` object of a failed request."""

    code: Optional[Union[str, int]] = None
    message: Optional[str] = None
    param: Optional[str] = None
    type: Optional[str] = None


class ErrorResponse(BaseModel):
    """Non-200 response body."""

    error: ErrorDetail
