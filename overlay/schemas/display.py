"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of Design Overlay, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Display geometry schemas for on-screen overlay rendering
"""

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from core.constants import Defaults
from utils import numeric_utils


def _px(value: float) -> str:
    return f"{numeric_utils.format_number(value)}px"


class DisplayMetrics(BaseModel):
    """
    Mapping between an image's natural size and its contain-fit box.

    Offsets are measured from the container's top-left corner.
    """

    original_width: float = Field(default=0.0, alias="originalWidth")
    original_height: float = Field(default=0.0, alias="originalHeight")
    display_width: float = Field(default=0.0, alias="displayWidth")
    display_height: float = Field(default=0.0, alias="displayHeight")
    offset_x: float = Field(default=0.0, alias="offsetX")
    offset_y: float = Field(default=0.0, alias="offsetY")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def is_measured(self) -> bool:
        """True once both the image and its rendered box have a size."""
        return numeric_utils.is_positive(
            self.original_width,
            self.original_height,
            self.display_width,
            self.display_height,
        )

    @property
    def scale(self) -> float:
        """Rendered pixels per natural pixel (0 when unmeasured)."""
        if not self.is_measured:
            return 0.0
        return self.display_width / self.original_width

    @property
    def center(self) -> Tuple[float, float]:
        """Center of the displayed image box in container pixels."""
        return (
            self.offset_x + self.display_width / 2,
            self.offset_y + self.display_height / 2,
        )


class ScreenTransform(BaseModel):
    """Screen-space transform of a design overlay."""

    anchor_left: float = Field(default=Defaults.ANCHOR_PERCENT, alias="anchorLeft")
    anchor_top: float = Field(default=Defaults.ANCHOR_PERCENT, alias="anchorTop")
    translate_x: float = Field(default=0.0, alias="translateX")
    translate_y: float = Field(default=0.0, alias="translateY")
    width: float = Defaults.FALLBACK_BOX_SIZE
    height: float = Defaults.FALLBACK_BOX_SIZE
    rotation: float = 0.0
    scale: float = 1.0
    fallback: bool = False

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def css_transform(self) -> str:
        """CSS `transform` of the overlay wrapper."""
        if self.fallback:
            return "translate(-50%, -50%)"
        return (
            "translate(-50%, -50%) "
            f"translate({_px(self.translate_x)}, {_px(self.translate_y)}) "
            f"rotate({numeric_utils.format_number(self.rotation)}deg)"
        )

    def to_css(self) -> Dict[str, str]:
        """Inline style of the overlay wrapper."""
        return {
            "left": f"{numeric_utils.format_number(self.anchor_left)}%",
            "top": f"{numeric_utils.format_number(self.anchor_top)}%",
            "width": _px(self.width),
            "height": _px(self.height),
            "transform": self.css_transform(),
        }

    def graphic_css(self) -> Dict[str, str]:
        """Inline style of the design graphic inside the wrapper."""
        return {"transform": f"scale({numeric_utils.format_number(self.scale)})"}


class ScreenBox(BaseModel):
    """Rectangle in container pixels."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return not numeric_utils.is_positive(self.width, self.height)

    @property
    def center(self) -> Tuple[float, float]:
        return (self.left + self.width / 2, self.top + self.height / 2)

    def to_css(self) -> Dict[str, str]:
        return {
            "left": _px(self.left),
            "top": _px(self.top),
            "width": _px(self.width),
            "height": _px(self.height),
        }


class BoundingBox(BaseModel):
    """Absolute rectangle on the product image's natural pixel grid."""

    left: int
    top: int
    width: int
    height: int

    model_config = ConfigDict(frozen=True)


class Placement(BaseModel):
    """
    Design placed inside a delimitation box.

    Offsets are measured from the box center and already clamped to the
    `min_*`/`max_*` range that keeps the design footprint inside the box.
    """

    width: float
    height: float
    offset_x: float = Field(alias="offsetX")
    offset_y: float = Field(alias="offsetY")
    rotation: float = 0.0
    min_x: float = Field(alias="minX")
    max_x: float = Field(alias="maxX")
    min_y: float = Field(alias="minY")
    max_y: float = Field(alias="maxY")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_css(self) -> Dict[str, str]:
        """Inline style of the design container, relative to the delimitation box."""
        return {
            "left": "50%",
            "top": "50%",
            "width": _px(self.width),
            "height": _px(self.height),
            "transform": (
                "translate(-50%, -50%) "
                f"translate({_px(self.offset_x)}, {_px(self.offset_y)}) "
                f"rotate({numeric_utils.format_number(self.rotation)}deg)"
            ),
            "transformOrigin": "center center",
        }
