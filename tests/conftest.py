"""Test configuration helpers."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the repository root is importable so ``import imggen`` works when the
# tests run from a checkout without an editable install.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from imggen.config import environment  # noqa: E402


@pytest.fixture(autouse=True)
def clean_imggen_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without any IMGGEN_* variables from the host shell."""

    for key in (
        environment.API_KEY_ENV,
        environment.API_ENDPOINT_ENV,
        environment.TIMEOUT_ENV,
        environment.LOG_LEVEL_ENV,
    ):
        monkeypatch.delenv(key, raising=False)


SUCCESS_BODY = '{"created":1,"data":[{"url":"http://x","revised_prompt":"r"}]}'
ERROR_BODY = '{"error":{"message":"bad prompt"}}'


@pytest.fixture
def success_body() -> str:
    return SUCCESS_BODY


@pytest.fixture
def error_body() -> str:
    return ERROR_BODY
