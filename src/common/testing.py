"""Testing helpers for integration runs against the live Datadog API."""

from __future__ import annotations

import os
from uuid import uuid4

import pytest

from src.common.config import ConfigError, ScreenboardSettings, load_settings


def require_live_datadog() -> ScreenboardSettings:
    """Skip the test unless live Datadog credentials are configured."""
    if os.getenv("RUN_LIVE_TESTS") != "1":
        pytest.skip("Set RUN_LIVE_TESTS=1 to enable live integration tests.")
    try:
        return load_settings()
    except ConfigError as exc:
        pytest.skip(f"Live integration tests require valid configuration: {exc}")


def unique_board_title(label: str) -> str:
    """Board title that is easy to find and clean up in the Datadog UI."""
    return f"screenboard-client-test-{label}-{uuid4().hex[:8]}"
