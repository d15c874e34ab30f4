"""Shared helpers."""

from .env import get_env

__all__ = ["get_env"]
