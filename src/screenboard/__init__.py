"""Client library for Datadog screenboards.

Build a `Board` out of widgets, then create, fetch, update or delete it
through `ScreenboardClient`:

    client = ScreenboardClient(application_key, api_key)
    board = Board(title="Checkout", widgets=[
        QueryValueWidget(query="sum:checkout.errors{*}", width=20, height=10),
    ])
    board_id = client.create(board)

Exports:
    - ScreenboardClient and its error types
    - Board, TemplateVariable: Board aggregate
    - ConditionalFormat, Color, Comparator: Conditional formatting rules
    - Widget and the widget variants
"""

from .client import (
    BoardNotFoundError,
    InvalidArgumentError,
    RemoteRejectionError,
    ScreenboardClient,
    ScreenboardError,
)
from .formats import Color, Comparator, ConditionalFormat
from .models import Board, ScreenboardResponse, ScreenboardUrlResponse, TemplateVariable
from .widgets import (
    WIDGET_TYPES,
    WIDGET_VARIANTS,
    Aggregator,
    AlertGraphWidget,
    AlertValueWidget,
    AlertVizType,
    CheckGrouping,
    CheckStatusWidget,
    EventSize,
    EventStreamWidget,
    EventTimelineWidget,
    FrameWidget,
    FreeTextWidget,
    ImageSizing,
    ImageWidget,
    MetricRequest,
    NoteColor,
    NoteWidget,
    QueryValueWidget,
    SeriesType,
    TextAlign,
    TickEdge,
    TileDef,
    Timeframe,
    TimeseriesWidget,
    ToplistWidget,
    Widget,
    WidgetBase,
)

__all__ = [
    # Client
    "ScreenboardClient",
    "ScreenboardError",
    "InvalidArgumentError",
    "RemoteRejectionError",
    "BoardNotFoundError",
    # Board
    "Board",
    "TemplateVariable",
    "ScreenboardResponse",
    "ScreenboardUrlResponse",
    # Conditional formats
    "ConditionalFormat",
    "Color",
    "Comparator",
    # Widgets
    "Widget",
    "WidgetBase",
    "WIDGET_TYPES",
    "WIDGET_VARIANTS",
    "TimeseriesWidget",
    "QueryValueWidget",
    "ToplistWidget",
    "EventStreamWidget",
    "EventTimelineWidget",
    "FreeTextWidget",
    "NoteWidget",
    "ImageWidget",
    "FrameWidget",
    "AlertGraphWidget",
    "AlertValueWidget",
    "CheckStatusWidget",
    "MetricRequest",
    "TileDef",
    # Widget vocabulary
    "Aggregator",
    "AlertVizType",
    "CheckGrouping",
    "EventSize",
    "ImageSizing",
    "NoteColor",
    "SeriesType",
    "TextAlign",
    "TickEdge",
    "Timeframe",
]
