"""Image configuration exports."""

from . import defaults, providers
from .defaults import *  # noqa: F401,F403

__all__ = [
    *defaults.__all__,
    "providers",
]
