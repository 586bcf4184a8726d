"""Widget variants that can be placed on a screenboard.

Widgets form a closed set discriminated by the `type` field on the wire.
Each variant shares the layout rectangle and title settings from
`WidgetBase` and adds its own configuration. `Widget` is the tagged union
used wherever a board holds widgets; adding a kind means adding a class
here and listing it in `WIDGET_VARIANTS`.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .formats import ConditionalFormat


# ============================================================================
# Enums (wire vocabulary)
# ============================================================================


class TextAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Timeframe(str, Enum):
    """Time windows offered by the screenboard editor."""

    FIVE_MINUTES = "5m"
    TEN_MINUTES = "10m"
    ONE_HOUR = "1h"
    FOUR_HOURS = "4h"
    ONE_DAY = "1d"
    TWO_DAYS = "2d"
    ONE_WEEK = "1w"
    ONE_MONTH = "1mo"
    THREE_MONTHS = "3mo"
    SIX_MONTHS = "6mo"
    ONE_YEAR = "1y"


class Aggregator(str, Enum):
    AVERAGE = "avg"
    MAX = "max"
    MIN = "min"
    SUM = "sum"


class SeriesType(str, Enum):
    """How a timeseries request is drawn."""

    LINE = "line"
    AREA = "area"
    BARS = "bars"


class NoteColor(str, Enum):
    YELLOW = "yellow"
    WHITE = "white"
    BLUE = "blue"
    PINK = "pink"
    GRAY = "gray"
    RED = "red"
    GREEN = "green"


class TickEdge(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class EventSize(str, Enum):
    SMALL = "s"
    LARGE = "l"


class ImageSizing(str, Enum):
    ZOOM = "zoom"
    FIT = "fit"
    CENTER = "center"


class AlertVizType(str, Enum):
    TIMESERIES = "timeseries"
    TOPLIST = "toplist"


class CheckGrouping(str, Enum):
    CHECK = "check"
    CLUSTER = "cluster"


# ============================================================================
# Metric requests
# ============================================================================


class MetricRequest(BaseModel):
    """One query plotted by a graph widget.

    Attributes:
        query: Time-series selector, e.g. `avg:system.cpu.user{*}` (wire name `q`).
        type: Series rendering; only meaningful for timeseries graphs.
        aggregator: Reducer used by toplists.
        conditional_formats: Rules evaluated in list order.
    """

    query: str = Field(..., alias="q")
    type: Optional[SeriesType] = None
    aggregator: Optional[Aggregator] = None
    conditional_formats: List[ConditionalFormat] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True, extra="ignore")


class TileDef(BaseModel):
    """Graph definition shared by timeseries and toplist widgets."""

    viz: str
    requests: List[MetricRequest] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True, extra="ignore")


# ============================================================================
# Widget variants
# ============================================================================


class WidgetBase(BaseModel):
    """Layout and title settings common to every widget.

    Coordinates and sizes are in screenboard grid units.
    """

    x: int = Field(0, ge=0)
    y: int = Field(0, ge=0)
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
    title_text: Optional[str] = None
    title_size: int = 16
    title_align: TextAlign = TextAlign.LEFT
    show_title: bool = Field(True, alias="title")

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True, extra="ignore")


class _GraphWidget(WidgetBase):
    """Widgets backed by a `tile_def` with one or more metric requests."""

    tile_def: TileDef
    timeframe: Timeframe = Timeframe.ONE_HOUR

    @model_validator(mode="after")
    def _viz_matches_type(self) -> "_GraphWidget":
        if self.tile_def.viz != self.type:
            raise ValueError(f"tile_def.viz {self.tile_def.viz!r} does not match widget type {self.type!r}")
        return self

    @property
    def queries(self) -> List[str]:
        return [request.query for request in self.tile_def.requests]

    @property
    def conditional_formats(self) -> List[ConditionalFormat]:
        """All rules across requests, in request then rule order."""
        return [fmt for request in self.tile_def.requests for fmt in request.conditional_formats]


class TimeseriesWidget(_GraphWidget):
    type: Literal["timeseries"] = "timeseries"

    @classmethod
    def for_query(cls, query: str, *, series_type: SeriesType = SeriesType.LINE, **layout) -> "TimeseriesWidget":
        """Build a single-query timeseries graph."""
        tile_def = TileDef(viz="timeseries", requests=[MetricRequest(query=query, type=series_type)])
        return cls(tile_def=tile_def, **layout)


class ToplistWidget(_GraphWidget):
    type: Literal["toplist"] = "toplist"

    @classmethod
    def for_query(
        cls,
        query: str,
        *,
        conditional_formats: Optional[List[ConditionalFormat]] = None,
        **layout,
    ) -> "ToplistWidget":
        """Build a single-query toplist, optionally with conditional formats."""
        request = MetricRequest(query=query, conditional_formats=list(conditional_formats or []))
        return cls(tile_def=TileDef(viz="toplist", requests=[request]), **layout)


class QueryValueWidget(WidgetBase):
    """Single aggregated value, recolored by its conditional formats."""

    type: Literal["query_value"] = "query_value"
    query: str
    conditional_formats: List[ConditionalFormat] = Field(default_factory=list)
    aggregator: Aggregator = Aggregator.AVERAGE
    precision: int = Field(2, ge=0)
    unit: str = "auto"
    text_size: str = "auto"
    text_align: TextAlign = TextAlign.LEFT
    timeframe: Timeframe = Timeframe.ONE_HOUR


class EventStreamWidget(WidgetBase):
    type: Literal["event_stream"] = "event_stream"
    query: str = ""
    timeframe: Timeframe = Timeframe.ONE_DAY
    size: EventSize = EventSize.SMALL


class EventTimelineWidget(WidgetBase):
    type: Literal["event_timeline"] = "event_timeline"
    query: str = ""
    timeframe: Timeframe = Timeframe.ONE_DAY


class FreeTextWidget(WidgetBase):
    type: Literal["free_text"] = "free_text"
    text: str = ""
    color: str = "#4d4d4d"
    font_size: str = "auto"
    text_align: TextAlign = TextAlign.LEFT


class NoteWidget(WidgetBase):
    """Sticky-note style text box, optionally with a pointer tick."""

    type: Literal["note"] = "note"
    html: str = ""
    bgcolor: NoteColor = NoteColor.YELLOW
    font_size: int = 14
    text_align: TextAlign = TextAlign.LEFT
    tick: bool = False
    tick_pos: str = "50%"
    tick_edge: TickEdge = TickEdge.LEFT


class _UrlWidget(WidgetBase):
    url: str

    @field_validator("url")
    @classmethod
    def _url_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("url is empty")
        return value


class ImageWidget(_UrlWidget):
    type: Literal["image"] = "image"
    sizing: ImageSizing = ImageSizing.ZOOM


class FrameWidget(_UrlWidget):
    """Embeds an external page (wire type `iframe`)."""

    type: Literal["iframe"] = "iframe"


class AlertGraphWidget(WidgetBase):
    type: Literal["alert_graph"] = "alert_graph"
    alert_id: int
    viz_type: AlertVizType = AlertVizType.TIMESERIES
    timeframe: Timeframe = Timeframe.FOUR_HOURS


class AlertValueWidget(WidgetBase):
    type: Literal["alert_value"] = "alert_value"
    alert_id: int
    precision: int = Field(2, ge=0)
    unit: str = "auto"
    text_size: str = "auto"
    text_align: TextAlign = TextAlign.LEFT


class CheckStatusWidget(WidgetBase):
    type: Literal["check_status"] = "check_status"
    check: str
    grouping: CheckGrouping = CheckGrouping.CLUSTER
    group: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    text_size: str = "auto"
    text_align: TextAlign = TextAlign.CENTER


WIDGET_VARIANTS = (
    TimeseriesWidget,
    QueryValueWidget,
    ToplistWidget,
    EventStreamWidget,
    EventTimelineWidget,
    FreeTextWidget,
    NoteWidget,
    ImageWidget,
    FrameWidget,
    AlertGraphWidget,
    AlertValueWidget,
    CheckStatusWidget,
)

Widget = Annotated[Union[WIDGET_VARIANTS], Field(discriminator="type")]

WIDGET_TYPES = tuple(variant.model_fields["type"].default for variant in WIDGET_VARIANTS)
