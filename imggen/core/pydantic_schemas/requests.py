"""Request models sent to the images API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ImageGenerationRequest(BaseModel):
    """Body of ``POST /images/generations``.

    ``style`` and ``quality`` stay ``None`` for models that reject them and are
    then left out of the serialized JSON entirely.
    """

    model_config = ConfigDict(frozen=True)

    model: str = Field(description="Image model identifier")
    prompt: str = Field(description="Text description of the image")
    size: str = Field(description="Output dimensions, e.g. 1024x1024")
    style: Optional[str] = Field(default=None, description="Rendering style (dall-e-3 only)")
    quality: Optional[str] = Field(default=None, description="Quality tier (dall-e-3 only)")

    def to_json(self) -> str:
        """Serialize with absent optional fields omitted."""

        return self.model_dump_json(exclude_none=True)
