"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of Design Overlay, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Design placement inside delimitations and absolute bounding boxes

A design placed in a delimitation is described by a scale relative to the
delimitation (0.8 = 80% of the zone) and an offset in pixels from the zone
center. Server-side composition needs the same placement as an absolute
rectangle on the original image:

    container = delimitation size * scale
    center    = delimitation origin + delimitation size / 2
    left/top  = center + offset - container / 2
"""

from typing import Any, Dict, Optional

from core.constants import Defaults
from overlay.schemas.display import BoundingBox, Placement, ScreenBox
from overlay.services import normalizer
from utils import logging_utils, numeric_utils

logger = logging_utils.get_logger("overlay.services.placement")


def position_constraints(box_width: Any, box_height: Any, design_scale: Any) -> Dict[str, float]:
    """
    Offset range keeping a scaled design inside its delimitation.
    """
    box_width = numeric_utils.to_float(box_width)
    box_height = numeric_utils.to_float(box_height)
    design_scale = numeric_utils.to_float(design_scale)

    max_x = (box_width - box_width * design_scale) / 2
    max_y = (box_height - box_height * design_scale) / 2
    return {"min_x": -max_x, "max_x": max_x, "min_y": -max_y, "max_y": max_y}


def place_in_delimitation(position: Any, box: ScreenBox) -> Optional[Placement]:
    """
    Size and clamp a design inside an on-screen delimitation box.
    Returns None when the box has no area (nothing can be rendered).
    """
    if box is None or box.is_empty:
        return None

    scale = numeric_utils.or_default(
        numeric_utils.read_field(position, "scale"), Defaults.SCALE
    )
    width = box.width * scale
    height = box.height * scale

    limits = position_constraints(
        box_width=box.width, box_height=box.height, design_scale=scale
    )
    # Scales above 1 overflow the box and flip the range
    low_x, high_x = sorted((limits["min_x"], limits["max_x"]))
    low_y, high_y = sorted((limits["min_y"], limits["max_y"]))

    offset_x = numeric_utils.clamp(
        numeric_utils.to_float(numeric_utils.read_field(position, "x")), low_x, high_x
    )
    offset_y = numeric_utils.clamp(
        numeric_utils.to_float(numeric_utils.read_field(position, "y")), low_y, high_y
    )

    return Placement(
        width=width,
        height=height,
        offset_x=offset_x,
        offset_y=offset_y,
        rotation=numeric_utils.or_default(
            numeric_utils.read_field(position, "rotation"), Defaults.ROTATION
        ),
        min_x=limits["min_x"],
        max_x=limits["max_x"],
        min_y=limits["min_y"],
        max_y=limits["max_y"],
    )


def calculate_bounding_box(
    delimitation: Any,
    position: Any,
    image_width: Any = None,
    image_height: Any = None,
) -> BoundingBox:
    """
    Absolute rectangle (original image pixels) occupied by a placed design.

    Example:
        delimitation = {"x": 100, "y": 100, "width": 400, "height": 400,
                        "coordinateType": "PIXEL"}
        position = {"x": 50, "y": -30, "scale": 0.8}
        -> BoundingBox(left=190, top=110, width=320, height=320)
    """
    zone = normalizer.delimitation_to_pixels(
        delimitation=delimitation, image_width=image_width, image_height=image_height
    )
    scale = numeric_utils.or_default(
        numeric_utils.read_field(position, "designScale", "design_scale", "scale"),
        Defaults.SCALE,
    )

    container_width = zone["width"] * scale
    container_height = zone["height"] * scale
    center_x = zone["x"] + zone["width"] / 2
    center_y = zone["y"] + zone["height"] / 2

    left = center_x + numeric_utils.to_float(numeric_utils.read_field(position, "x"))
    top = center_y + numeric_utils.to_float(numeric_utils.read_field(position, "y"))

    bbox = BoundingBox(
        left=round(left - container_width / 2),
        top=round(top - container_height / 2),
        width=round(container_width),
        height=round(container_height),
    )
    logger.debug(f"Bounding box {bbox.model_dump()} for zone {zone}")
    return bbox


def centered_placement(box: Any, design_width: Any, design_height: Any) -> Dict[str, float]:
    """
    Edges of a design centered in a pixel box.
    """
    x = numeric_utils.to_float(numeric_utils.read_field(box, "x", "left"))
    y = numeric_utils.to_float(numeric_utils.read_field(box, "y", "top"))
    center_x = x + numeric_utils.to_float(numeric_utils.read_field(box, "width")) / 2
    center_y = y + numeric_utils.to_float(numeric_utils.read_field(box, "height")) / 2

    design_width = numeric_utils.to_float(design_width)
    design_height = numeric_utils.to_float(design_height)
    left = center_x - design_width / 2
    top = center_y - design_height / 2

    return {
        "center_x": center_x,
        "center_y": center_y,
        "left": left,
        "top": top,
        "right": left + design_width,
        "bottom": top + design_height,
    }


def optimal_scale(
    box: Any, design_width: Any, design_height: Any, padding: Optional[float] = None
) -> float:
    """
    Largest scale fitting a design in a pixel box, keeping `padding` free on
    every side (10% of the smaller side by default).
    """
    if not numeric_utils.is_positive(design_width, design_height):
        return 0.0

    box_width = numeric_utils.to_float(numeric_utils.read_field(box, "width"))
    box_height = numeric_utils.to_float(numeric_utils.read_field(box, "height"))
    if padding is None:
        padding = min(box_width, box_height) * Defaults.FIT_PADDING_RATIO

    available_width = box_width - numeric_utils.to_float(padding) * 2
    available_height = box_height - numeric_utils.to_float(padding) * 2

    scale = min(
        available_width / numeric_utils.to_float(design_width),
        available_height / numeric_utils.to_float(design_height),
    )
    return max(0.0, scale)
