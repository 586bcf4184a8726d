"""Pytest configuration and shared fixtures.

Loads a `.env` file if present so live integration tests can pick up
Datadog credentials; unit tests stub HTTP with `responses` and never need
them.
"""

import sys
from pathlib import Path

import pytest

# Make `src.*` importable when pytest runs without the project installed.
root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path))

from src.common.env import load_env  # noqa: E402
from src.screenboard import (  # noqa: E402
    Board,
    Color,
    Comparator,
    ConditionalFormat,
    NoteWidget,
    QueryValueWidget,
    ScreenboardClient,
    TimeseriesWidget,
)

load_env()


@pytest.fixture
def client():
    return ScreenboardClient("test-app-key", "test-api-key")


@pytest.fixture
def sample_board():
    """Small board with a graph, a formatted query value and a note."""
    return Board(
        title="Checkout health",
        description="Errors and latency for the checkout flow",
        widgets=[
            TimeseriesWidget.for_query("avg:checkout.latency{*}", x=0, y=0, width=40, height=15),
            QueryValueWidget(
                query="sum:checkout.errors{*}",
                x=41,
                y=0,
                width=20,
                height=15,
                title_text="Errors",
                conditional_formats=[
                    ConditionalFormat(Color.WHITE_ON_RED, False, Comparator.GREATER, 10.0),
                    ConditionalFormat(Color.WHITE_ON_GREEN, False, Comparator.LESS_EQUAL, 10.0),
                ],
            ),
            NoteWidget(html="Paged on >10 errors", x=0, y=16, width=30, height=8),
        ],
    )
