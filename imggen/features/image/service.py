"""Business logic for one image generation round trip."""

from __future__ import annotations

import logging

from imggen.core.config import Settings
from imggen.core.providers.image import OpenAIImagesClient
from imggen.features.image.builder import build_request
from imggen.features.image.interpreter import interpret
from imggen.features.image.types import GenerationOptions, Outcome

logger = logging.getLogger(__name__)


class ImageGenerationService:
    """Coordinate request building, the images client and interpretation."""

    def __init__(self, settings: Settings, client: OpenAIImagesClient | None = None) -> None:
        self.settings = settings
        self._client = client or OpenAIImagesClient(settings)

    def generate(self, options: GenerationOptions, prompt: str) -> Outcome:
        """Send one generation request for already validated ``options``.

        Raises:
            TransportError: propagated from the client when the request could
                not be completed.
        """

        request = build_request(options, prompt)
        logger.info(
            "Generating image with model %s (%s) via %s",
            options.model,
            options.size,
            self.settings.api_endpoint,
        )

        response = self._client.send(request)

        return interpret(response.status_code, response.body, options.output_format)


__all__ = ["ImageGenerationService"]
