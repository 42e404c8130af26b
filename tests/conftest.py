"""Test setup for marpkit."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from marpkit.config import Settings  # noqa: E402

BASE_URL = "https://example.com/decks/"


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings isolated from the caller's MARPKIT_* environment."""

    for key in list(os.environ):
        if key.startswith("MARPKIT_"):
            monkeypatch.delenv(key, raising=False)
    return Settings(base_url=BASE_URL)
