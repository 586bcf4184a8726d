"""Conditional formatting rules for metric widgets.

A rule pairs a comparator and threshold with a display color. Widgets keep
an ordered list of rules; Datadog evaluates them when rendering the board.
"""

from __future__ import annotations

import operator
from enum import Enum
from typing import Callable, Dict

from pydantic import BaseModel, ConfigDict, Field


class Color(str, Enum):
    """Palette accepted by Datadog for conditional formats."""

    WHITE_ON_RED = "white_on_red"
    WHITE_ON_YELLOW = "white_on_yellow"
    WHITE_ON_GREEN = "white_on_green"
    BLACK_ON_LIGHT_RED = "black_on_light_red"
    BLACK_ON_LIGHT_YELLOW = "black_on_light_yellow"
    BLACK_ON_LIGHT_GREEN = "black_on_light_green"
    RED_ON_WHITE = "red_on_white"
    YELLOW_ON_WHITE = "yellow_on_white"
    GREEN_ON_WHITE = "green_on_white"


class Comparator(str, Enum):
    """Relational operator applied as `metric <op> threshold`."""

    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="


_OPERATORS: Dict[Comparator, Callable[[float, float], bool]] = {
    Comparator.GREATER: operator.gt,
    Comparator.GREATER_EQUAL: operator.ge,
    Comparator.LESS: operator.lt,
    Comparator.LESS_EQUAL: operator.le,
}


class ConditionalFormat(BaseModel):
    """Recolors a widget when its metric crosses a threshold.

    Attributes:
        color: Display color applied when the rule matches.
        inverted: Swap foreground and background colors (wire name `invert`).
        comparator: Operator used against the threshold.
        threshold: Value compared against (wire name `value`).
    """

    color: Color = Color.WHITE_ON_GREEN
    inverted: bool = Field(False, alias="invert")
    comparator: Comparator = Comparator.GREATER
    threshold: float = Field(0.0, alias="value")

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True, extra="ignore")

    def __init__(
        self,
        color: Color = Color.WHITE_ON_GREEN,
        inverted: bool = False,
        comparator: Comparator = Comparator.GREATER,
        threshold: float = 0.0,
        **data,
    ):
        # Positional construction follows the (color, inverted, comparator, threshold) order.
        data.setdefault("color", color)
        data.setdefault("invert", data.pop("inverted", inverted))
        data.setdefault("comparator", comparator)
        data.setdefault("value", data.pop("threshold", threshold))
        super().__init__(**data)

    def matches(self, value: float) -> bool:
        """Return True when `value` satisfies this rule's comparator."""
        return _OPERATORS[self.comparator](value, self.threshold)
