"""OpenAI image generation configuration.

The capability table is read-only: every per-model mapping is wrapped in
``MappingProxyType`` and every allow-list is a tuple, so nothing can mutate it
after import.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

DALL_E_2 = "dall-e-2"
DALL_E_3 = "dall-e-3"

SUPPORTED_MODELS: Tuple[str, ...] = (DALL_E_2, DALL_E_3)

SUPPORTED_SIZES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        DALL_E_2: ("256x256", "512x512", "1024x1024"),
        DALL_E_3: ("1024x1024", "1792x1024", "1024x1792"),
    }
)

SUPPORTED_STYLES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        DALL_E_2: ("vivid",),
        DALL_E_3: ("vivid", "natural"),
    }
)

SUPPORTED_QUALITIES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        DALL_E_2: ("standard",),
        DALL_E_3: ("standard", "hd"),
    }
)

# Models whose request payload carries style and quality
STYLE_QUALITY_MODELS: Tuple[str, ...] = (DALL_E_3,)

__all__ = [
    "DALL_E_2",
    "DALL_E_3",
    "SUPPORTED_MODELS",
    "SUPPORTED_SIZES",
    "SUPPORTED_STYLES",
    "SUPPORTED_QUALITIES",
    "STYLE_QUALITY_MODELS",
]
