"""Image generation provider adapters."""

from .openai import OpenAIImagesClient, ProviderResponse

__all__ = ["OpenAIImagesClient", "ProviderResponse"]
