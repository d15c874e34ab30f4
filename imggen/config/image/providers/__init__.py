"""Image provider-specific configuration exports."""

from . import openai
from .openai import *  # noqa: F401,F403

__all__ = [
    "openai",
    *openai.__all__,
]
