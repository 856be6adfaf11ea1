"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of Design Overlay, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Coordinate normalization for delimitations and design positions
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from core.constants import CoordinateType, Defaults, Limits, LogMessage
from overlay.schemas.positioning import (
    Delimitation,
    DesignPosition,
    NormalizedDelimitation,
    NormalizedPosition,
    PositionConstraints,
)
from utils import logging_utils, numeric_utils

logger = logging_utils.get_logger("overlay.services.normalizer")

_BOX_FIELDS = ("x", "y", "width", "height")


def _coordinate_tag(delimitation: Any) -> Optional[CoordinateType]:
    """Explicit unit tag of a raw record, if it carries a known one."""
    tag = numeric_utils.read_field(delimitation, "coordinateType", "coordinate_type")
    if isinstance(tag, CoordinateType):
        return tag
    if isinstance(tag, str) and tag.upper() in CoordinateType.__members__:
        return CoordinateType[tag.upper()]
    return None


def _is_pixel(box: Dict[str, float], tag: Optional[CoordinateType]) -> bool:
    """
    Decide whether a box is expressed in pixels.
    A PIXEL tag is always honoured. Anything above 100 cannot be a
    percentage, so it means pixels whatever the tag says.
    """
    if tag is CoordinateType.PIXEL:
        return True
    return any(value > Limits.PERCENT_MAX for value in box.values())


def _parse_delimitation(delimitation: Any) -> Any:
    if isinstance(delimitation, Mapping):
        return Delimitation.model_validate(dict(delimitation))
    return delimitation


def _to_percent(value: float, dimension: Any) -> float:
    if not numeric_utils.is_positive(dimension):
        return 0.0
    return value / numeric_utils.to_float(dimension) * 100


def normalize_delimitation(
    delimitation: Any, image_width: Any, image_height: Any
) -> NormalizedDelimitation:
    """
    Convert one raw delimitation to clamped percentage coordinates.
    """
    delimitation = _parse_delimitation(delimitation)
    box = {
        field: numeric_utils.to_float(numeric_utils.read_field(delimitation, field))
        for field in _BOX_FIELDS
    }
    tag = _coordinate_tag(delimitation)
    delimitation_id = numeric_utils.read_field(delimitation, "id")

    if _is_pixel(box=box, tag=tag):
        if tag is CoordinateType.PERCENTAGE:
            logger.warning(LogMessage.MISLABELED_PERCENTAGE.format(delimitation_id))
        box = {
            "x": _to_percent(box["x"], image_width),
            "y": _to_percent(box["y"], image_height),
            "width": _to_percent(box["width"], image_width),
            "height": _to_percent(box["height"], image_height),
        }

    x = numeric_utils.clamp(box["x"], 0.0, Limits.ORIGIN_MAX)
    y = numeric_utils.clamp(box["y"], 0.0, Limits.ORIGIN_MAX)
    width = max(Limits.MIN_SIZE, min(Limits.PERCENT_MAX - x, box["width"]))
    height = max(Limits.MIN_SIZE, min(Limits.PERCENT_MAX - y, box["height"]))

    name = numeric_utils.read_field(delimitation, "name")
    return NormalizedDelimitation(
        id=delimitation_id,
        name=str(name) if name is not None else None,
        x=x,
        y=y,
        width=width,
        height=height,
        coordinate_type=CoordinateType.PERCENTAGE,
    )


def normalize_delimitations(
    delimitations: Optional[Iterable[Any]], image_width: Any, image_height: Any
) -> List[NormalizedDelimitation]:
    """
    Normalize every delimitation of an image, keeping input order.
    """
    if not delimitations:
        return []

    normalized = [
        normalize_delimitation(
            delimitation=delimitation,
            image_width=image_width,
            image_height=image_height,
        )
        for delimitation in delimitations
    ]

    logger.debug(
        f"Normalized {len(normalized)} delimitations for image {image_width}x{image_height}"
    )
    return normalized


def normalize_design_position(position: Any = None) -> NormalizedPosition:
    """
    Fill in and clamp a raw design position.
    Coordinates are kept as sent, only invalid values become 0.
    """
    if isinstance(position, Mapping):
        position = DesignPosition.model_validate(dict(position))

    x = numeric_utils.to_float(numeric_utils.read_field(position, "x"))
    y = numeric_utils.to_float(numeric_utils.read_field(position, "y"))
    scale = numeric_utils.or_default(
        numeric_utils.read_field(position, "scale"), Defaults.SCALE
    )
    rotation = numeric_utils.or_default(
        numeric_utils.read_field(position, "rotation"), Defaults.ROTATION
    )
    design_width = numeric_utils.or_default(
        numeric_utils.read_field(position, "designWidth", "design_width"),
        Defaults.VENDOR_DESIGN_SIZE,
    )
    design_height = numeric_utils.or_default(
        numeric_utils.read_field(position, "designHeight", "design_height"),
        Defaults.VENDOR_DESIGN_SIZE,
    )

    return NormalizedPosition(
        x=x,
        y=y,
        scale=numeric_utils.clamp(scale, Limits.MIN_SCALE, Limits.MAX_SCALE),
        rotation=rotation,
        design_width=design_width,
        design_height=design_height,
        constraints=PositionConstraints(),
    )


def delimitation_to_pixels(
    delimitation: Any, image_width: Any, image_height: Any
) -> Dict[str, float]:
    """
    Absolute pixel box of a delimitation on its image.
    Percentage boxes without a usable image size use the 1200px reference image.
    """
    delimitation = _parse_delimitation(delimitation)
    box = {
        field: numeric_utils.to_float(numeric_utils.read_field(delimitation, field))
        for field in _BOX_FIELDS
    }
    if _is_pixel(box=box, tag=_coordinate_tag(delimitation)):
        return box

    width = numeric_utils.or_default(image_width, Defaults.REFERENCE_IMAGE_SIZE)
    height = numeric_utils.or_default(image_height, Defaults.REFERENCE_IMAGE_SIZE)
    if width < 0 or height < 0:
        width = height = Defaults.REFERENCE_IMAGE_SIZE

    return {
        "x": box["x"] / 100 * width,
        "y": box["y"] / 100 * height,
        "width": box["width"] / 100 * width,
        "height": box["height"] / 100 * height,
    }
