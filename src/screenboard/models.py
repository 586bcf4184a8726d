"""Pydantic models for screenboards and the API response envelopes.

Field aliases match the JSON names used by Datadog's v1 screen endpoints.
Unknown response fields are ignored so newer API versions keep decoding.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .widgets import Widget


class TemplateVariable(BaseModel):
    """Board-level variable substituted into widget queries as `$name`."""

    name: str
    prefix: Optional[str] = None
    default: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class Board(BaseModel):
    """A screenboard: positioned widgets plus board metadata.

    Attributes:
        id: Assigned by Datadog on create; None for boards built locally.
        title: Board title (wire name `board_title`).
        description: Free-form description.
        widgets: Widgets in display order.
        read_only: Whether only the creator and admins may edit.
        width: Optional canvas width in pixels.
        height: Optional canvas height in pixels.
        template_variables: Variables offered in the board header.
    """

    id: Optional[int] = None
    title: str = Field(..., alias="board_title")
    description: str = ""
    widgets: List[Widget] = Field(default_factory=list)
    read_only: bool = False
    width: Optional[int] = None
    height: Optional[int] = None
    template_variables: List[TemplateVariable] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True, extra="ignore")

    def add_widget(self, widget: Widget) -> "Board":
        """Append a widget after the existing ones and return the board."""
        # Reassign so validate_assignment checks the new widget.
        self.widgets = [*self.widgets, widget]
        return self

    def to_payload(self) -> Dict[str, Any]:
        """Render the JSON body sent on create and update."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"id"})

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, value: Any) -> Any:
        # Datadog sends null for boards saved without a description.
        return "" if value is None else value


class ScreenboardResponse(BaseModel):
    """Envelope returned by create, update and delete.

    The echoed board is kept as raw JSON; it may hold widget kinds this
    library does not model and no operation reads it.
    """

    id: int = 0
    board: Optional[Dict[str, Any]] = None
    errors: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class ScreenboardUrlResponse(BaseModel):
    """Envelope returned by the share endpoint."""

    id: int = 0
    public_url: Optional[str] = None
    errors: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")
