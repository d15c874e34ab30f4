"""Public pydantic schema exports for the images API wire format."""

from .requests import ImageGenerationRequest
from .responses import ErrorDetail, ErrorResponse, ImageData, ImageGenerationResponse

__all__ = [
    "ImageGenerationRequest",
    "ImageData",
    "ImageGenerationResponse",
    "ErrorDetail",
    "ErrorResponse",
]
