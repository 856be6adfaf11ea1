"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of Design Overlay, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Geometry constants for delimitation normalization and overlay projection
"""

from enum import Enum


# Unit tags sent by the catalog API
class CoordinateType(str, Enum):
    PERCENTAGE = "PERCENTAGE"
    PIXEL = "PIXEL"


# Delimitation bounds (percentage space)
class Limits:
    # Any value above this cannot be a percentage
    PERCENT_MAX = 100.0

    # Top-left corner never goes past this, leaving room for a minimal box
    ORIGIN_MAX = 95.0

    # Smallest width/height a delimitation can collapse to
    MIN_SIZE = 5.0

    # Scale range applied to every design position
    MIN_SCALE = 0.1
    MAX_SCALE = 2.0


# Default values
class Defaults:
    SCALE = 0.8
    ROTATION = 0.0

    # Vendor-uploaded design assets
    VENDOR_DESIGN_SIZE = 1200.0

    # Admin-curated design assets (delimitation previews, best sellers)
    CURATED_DESIGN_SIZE = 200.0
    CURATED_SCALE = 0.6

    # Reference image size when a percentage box has to be converted without one
    REFERENCE_IMAGE_SIZE = 1200.0

    # Neutral overlay box used before the image has been measured
    FALLBACK_BOX_SIZE = 200.0

    # CSS anchor of the overlay wrapper (percent of the container)
    ANCHOR_PERCENT = 50.0

    # Share of the smaller delimitation side kept free when fitting a design
    FIT_PADDING_RATIO = 0.1

    # Default print zone when an image ships without delimitations
    ZONE_INSET_RATIO = 0.25
    ZONE_SIZE_RATIO = 0.5

    MOCKUP_VIEW = "Front"


# Log messages
class LogMessage:
    MISLABELED_PERCENTAGE = (
        "Delimitation {} tagged PERCENTAGE carries pixel values, converting"
    )
    MISSING_POSITIONS = "No design positions for product {}, skipping"
    UNMEASURED_METRICS = "Display metrics not measured yet, using fallback transform"
    NON_FINITE_TRANSFORM = (
        "Design offset ({}, {}) overflows the display, using fallback transform"
    )
