"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of Design Overlay, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Positioning schemas for delimitations and design placements
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.constants import CoordinateType, Defaults, Limits


class Delimitation(BaseModel):
    """
    Raw print zone as received from the catalog API (unit unknown).
    Every field is accepted as sent; the normalizer coerces them.
    """

    id: Optional[Any] = None
    name: Optional[Any] = None
    x: Optional[Any] = None
    y: Optional[Any] = None
    width: Optional[Any] = None
    height: Optional[Any] = None
    coordinate_type: Optional[Any] = Field(default=None, alias="coordinateType")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class NormalizedDelimitation(BaseModel):
    """Print zone in percentage of the image size, clamped inside the image."""

    id: Optional[Any] = None
    name: Optional[str] = None
    x: float = Field(ge=0.0, le=Limits.ORIGIN_MAX)
    y: float = Field(ge=0.0, le=Limits.ORIGIN_MAX)
    width: float = Field(ge=Limits.MIN_SIZE, le=Limits.PERCENT_MAX)
    height: float = Field(ge=Limits.MIN_SIZE, le=Limits.PERCENT_MAX)
    coordinate_type: CoordinateType = Field(
        default=CoordinateType.PERCENTAGE, alias="coordinateType"
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class PositionConstraints(BaseModel):
    """Scale range a design position may use."""

    min_scale: float = Field(default=Limits.MIN_SCALE, alias="minScale")
    max_scale: float = Field(default=Limits.MAX_SCALE, alias="maxScale")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class DesignPosition(BaseModel):
    """Raw design placement as stored by the vendor API (fields may be missing)."""

    x: Optional[Any] = None
    y: Optional[Any] = None
    scale: Optional[Any] = None
    rotation: Optional[Any] = None
    design_width: Optional[Any] = Field(default=None, alias="designWidth")
    design_height: Optional[Any] = Field(default=None, alias="designHeight")
    constraints: Optional[Any] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class NormalizedPosition(BaseModel):
    """
    Design placement in the natural pixel grid of a product image.

    Attributes:
        x: Horizontal offset from the image center, in pixels.
        y: Vertical offset from the image center, in pixels.
        scale: Visual scale multiplier applied to the graphic.
        rotation: Rotation in degrees.
        design_width: Natural width of the design asset.
        design_height: Natural height of the design asset.
        constraints: Scale range, always attached.
    """

    x: float = 0.0
    y: float = 0.0
    scale: float = Field(default=Defaults.SCALE, ge=Limits.MIN_SCALE, le=Limits.MAX_SCALE)
    rotation: float = Defaults.ROTATION
    design_width: float = Field(default=Defaults.VENDOR_DESIGN_SIZE, alias="designWidth")
    design_height: float = Field(default=Defaults.VENDOR_DESIGN_SIZE, alias="designHeight")
    constraints: PositionConstraints = Field(default_factory=PositionConstraints)

    model_config = ConfigDict(populate_by_name=True, frozen=True)
