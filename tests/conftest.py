"""Test configuration helpers."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure the repository root is importable so ``import jsend_payload`` works
# when tests are executed from arbitrary working directories.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from jsend_payload import ResponseBuilder  # noqa: E402


@pytest.fixture
def builder() -> ResponseBuilder:
    return ResponseBuilder()


@pytest.fixture
def decode():
    """Return a helper decoding a response body into Python objects."""

    def _decode(response) -> Any:
        return json.loads(bytes(response.body).decode("utf-8"))

    return _decode
