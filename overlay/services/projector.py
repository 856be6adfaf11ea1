"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of Design Overlay, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Responsive projection of design overlays onto contain-fit product images
"""

import math
from typing import Any, Tuple

from core.constants import Defaults, LogMessage
from overlay.schemas.display import DisplayMetrics, ScreenBox, ScreenTransform
from overlay.schemas.positioning import NormalizedDelimitation, NormalizedPosition
from overlay.services import normalizer
from utils import logging_utils, numeric_utils

logger = logging_utils.get_logger("overlay.services.projector")


def compute_display_metrics(
    natural_width: Any,
    natural_height: Any,
    container_width: Any,
    container_height: Any,
) -> DisplayMetrics:
    """
    Compute where an image lands inside its container under `object-fit: contain`.

    The image is scaled to touch the container on one axis and centered on
    the other. Until both the image and the container have a size (image not
    loaded, container not laid out) the result is unmeasured, which makes the
    projector fall back instead of dividing by zero.
    """
    if not numeric_utils.is_positive(
        natural_width, natural_height, container_width, container_height
    ):
        return DisplayMetrics(
            original_width=numeric_utils.to_float(natural_width),
            original_height=numeric_utils.to_float(natural_height),
        )

    natural_width = numeric_utils.to_float(natural_width)
    natural_height = numeric_utils.to_float(natural_height)
    container_width = numeric_utils.to_float(container_width)
    container_height = numeric_utils.to_float(container_height)

    container_ratio = container_width / container_height
    image_ratio = natural_width / natural_height

    if image_ratio > container_ratio:
        # Wider than the container: letterbox top and bottom
        display_width = container_width
        display_height = container_width / image_ratio
        offset_x = 0.0
        offset_y = (container_height - display_height) / 2
    else:
        # Taller (or same ratio): pillarbox left and right
        display_height = container_height
        display_width = container_height * image_ratio
        offset_x = (container_width - display_width) / 2
        offset_y = 0.0

    return DisplayMetrics(
        original_width=natural_width,
        original_height=natural_height,
        display_width=display_width,
        display_height=display_height,
        offset_x=offset_x,
        offset_y=offset_y,
    )


def _fallback_transform() -> ScreenTransform:
    return ScreenTransform(
        width=Defaults.FALLBACK_BOX_SIZE,
        height=Defaults.FALLBACK_BOX_SIZE,
        fallback=True,
    )


def project_design_to_screen(position: Any, metrics: DisplayMetrics) -> ScreenTransform:
    """
    Map a design position from natural image pixels to the rendered image box.

    The overlay wrapper is anchored at the center of the displayed image,
    translated by the scaled offset and rotated about that anchor. The
    design's own `scale` is returned separately; it applies to the graphic
    inside the wrapper, not to the wrapper footprint.
    """
    if metrics is None or not metrics.is_measured:
        logger.debug(LogMessage.UNMEASURED_METRICS)
        return _fallback_transform()

    if not isinstance(position, NormalizedPosition):
        position = normalizer.normalize_design_position(position)

    ratio_x = metrics.display_width / metrics.original_width
    ratio_y = metrics.display_height / metrics.original_height

    translate_x = position.x * ratio_x
    translate_y = position.y * ratio_y
    width = position.design_width * ratio_x
    height = position.design_height * ratio_y

    # Huge offsets on an upscaled image overflow to infinity
    computed = (translate_x, translate_y, width, height)
    if not all(math.isfinite(value) for value in computed):
        logger.warning(LogMessage.NON_FINITE_TRANSFORM.format(position.x, position.y))
        return _fallback_transform()

    return ScreenTransform(
        translate_x=translate_x,
        translate_y=translate_y,
        width=width,
        height=height,
        rotation=position.rotation,
        scale=position.scale,
    )


def project_overlay(
    position: Any,
    natural_width: Any,
    natural_height: Any,
    container_width: Any,
    container_height: Any,
) -> ScreenTransform:
    """
    Measure and project in one call.
    Call on every image load and container resize so metrics and position
    always come from the same render.
    """
    metrics = compute_display_metrics(
        natural_width=natural_width,
        natural_height=natural_height,
        container_width=container_width,
        container_height=container_height,
    )
    return project_design_to_screen(position=position, metrics=metrics)


def project_delimitation_to_screen(delimitation: Any, metrics: DisplayMetrics) -> ScreenBox:
    """
    Place a delimitation on the rendered image, in container pixels.
    """
    if metrics is None or not metrics.is_measured:
        return ScreenBox()

    if not isinstance(delimitation, NormalizedDelimitation):
        delimitation = normalizer.normalize_delimitation(
            delimitation=delimitation,
            image_width=metrics.original_width,
            image_height=metrics.original_height,
        )

    return ScreenBox(
        left=metrics.offset_x + delimitation.x / 100 * metrics.display_width,
        top=metrics.offset_y + delimitation.y / 100 * metrics.display_height,
        width=delimitation.width / 100 * metrics.display_width,
        height=delimitation.height / 100 * metrics.display_height,
    )


def image_to_screen(x: Any, y: Any, metrics: DisplayMetrics) -> Tuple[float, float]:
    """
    Map a point on the natural image grid to container pixels.
    """
    if metrics is None or not metrics.is_measured:
        return (0.0, 0.0)
    scale = metrics.scale
    return (
        numeric_utils.to_float(x) * scale + metrics.offset_x,
        numeric_utils.to_float(y) * scale + metrics.offset_y,
    )
