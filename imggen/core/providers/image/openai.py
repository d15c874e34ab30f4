"""OpenAI-compatible images API transport.

Sends exactly one ``POST {endpoint}/images/generations`` and hands back the
status code and raw body. Non-200 responses are not treated as failures here;
deciding between the success and error payloads is the interpreter's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from imggen.config.image import IMAGES_ENDPOINT
from imggen.core.config import Settings
from imggen.core.exceptions import TransportError
from imggen.core.pydantic_schemas import ImageGenerationRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderResponse:
    """Status code and undecoded body of a provider response."""

    status_code: int
    body: str


class OpenAIImagesClient:
    """Blocking client for the images generation endpoint."""

    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None) -> None:
        self.settings = settings
        self.url = f"{settings.api_endpoint}{IMAGES_ENDPOINT}"
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.api_key}",
        }

    def send(self, request: ImageGenerationRequest) -> ProviderResponse:
        """Submit ``request`` and return the provider's raw answer.

        Raises:
            TransportError: when the request cannot be built, sent or read.
        """

        content = request.to_json().encode("utf-8")

        with httpx.Client(timeout=self.settings.timeout, transport=self._transport) as client:
            try:
                http_request = client.build_request(
                    "POST",
                    self.url,
                    content=content,
                    headers=self._headers(),
                )
            except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
                logger.error("Could not build request for %s: %s", self.url, exc)
                raise TransportError("Failed to create a request.", original_error=exc) from exc

            logger.debug("POST %s (%d bytes)", self.url, len(content))
            try:
                response = client.send(http_request, stream=True)
            except httpx.HTTPError as exc:
                logger.error("Image request to %s failed: %s", self.url, exc)
                raise TransportError(
                    "Failed to send a request. Maybe the IMGGEN_API_ENDPOINT is invalid.",
                    original_error=exc,
                ) from exc

            # Body read failures are reported apart from send failures
            try:
                response.read()
            except httpx.HTTPError as exc:
                logger.error("Could not read image response body: %s", exc)
                raise TransportError("Failed to read response.", original_error=exc) from exc
            finally:
                response.close()
            body = response.text

        logger.debug("Image API answered with status %s", response.status_code)
        return ProviderResponse(status_code=response.status_code, body=body)


__all__ = ["OpenAIImagesClient", "ProviderResponse"]
