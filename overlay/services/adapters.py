"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of Design Overlay, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Adapters from catalog API payloads to product overlay view models
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from core.constants import CoordinateType, Defaults, LogMessage
from overlay.schemas.positioning import NormalizedDelimitation
from overlay.schemas.products import (
    ColorVariation,
    DesignPlacement,
    ProductImage,
    ProductOverlay,
)
from overlay.services import normalizer
from utils import logging_utils, numeric_utils
from utils.decorators_utils import fallback_on_error

logger = logging_utils.get_logger("overlay.services.adapters")


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        raise TypeError(f"Expected a list, got {type(value).__name__}")
    return list(value)


def _text(value: Any) -> Optional[str]:
    """Catalog labels arrive as numbers now and then."""
    return str(value) if value is not None else None


def _tagged(delimitation: Any, coordinate_type: CoordinateType) -> Dict[str, Any]:
    """Copy of a raw delimitation carrying a default unit tag."""
    fields = ("id", "name", "x", "y", "width", "height")
    record = {field: numeric_utils.read_field(delimitation, field) for field in fields}
    record["coordinateType"] = (
        numeric_utils.read_field(delimitation, "coordinateType", "coordinate_type")
        or coordinate_type.value
    )
    return record


def _default_zone() -> NormalizedDelimitation:
    inset = Defaults.ZONE_INSET_RATIO * 100
    size = Defaults.ZONE_SIZE_RATIO * 100
    return normalizer.normalize_delimitation(
        delimitation={
            "x": inset,
            "y": inset,
            "width": size,
            "height": size,
            "coordinateType": CoordinateType.PERCENTAGE.value,
        },
        image_width=None,
        image_height=None,
    )


def adapt_image(
    image: Any,
    default_coordinate_type: Optional[CoordinateType] = None,
    default_zone: bool = False,
) -> ProductImage:
    """
    Adapt one mockup image, normalizing its delimitations against its own size.
    """
    natural_width = numeric_utils.to_float(
        numeric_utils.read_field(image, "naturalWidth", "natural_width")
    )
    natural_height = numeric_utils.to_float(
        numeric_utils.read_field(image, "naturalHeight", "natural_height")
    )

    raw = _as_list(numeric_utils.read_field(image, "delimitations"))
    if default_coordinate_type is not None:
        raw = [_tagged(delimitation, default_coordinate_type) for delimitation in raw]

    delimitations = normalizer.normalize_delimitations(
        delimitations=raw, image_width=natural_width, image_height=natural_height
    )
    if not delimitations and default_zone:
        delimitations = [_default_zone()]

    return ProductImage(
        id=numeric_utils.read_field(image, "id"),
        url=_text(numeric_utils.read_field(image, "url")),
        view=_text(numeric_utils.read_field(image, "view", "viewType")),
        natural_width=natural_width,
        natural_height=natural_height,
        delimitations=delimitations,
    )


def adapt_color_variations(
    color_variations: Any,
    default_coordinate_type: Optional[CoordinateType] = None,
    default_zone: bool = False,
) -> List[ColorVariation]:
    """
    Adapt the color variations of a base product, images included.
    """
    return [
        ColorVariation(
            id=numeric_utils.read_field(variation, "id"),
            name=_text(numeric_utils.read_field(variation, "name")),
            color_code=_text(numeric_utils.read_field(variation, "colorCode", "color_code")),
            images=[
                adapt_image(
                    image=image,
                    default_coordinate_type=default_coordinate_type,
                    default_zone=default_zone,
                )
                for image in _as_list(numeric_utils.read_field(variation, "images"))
            ],
        )
        for variation in _as_list(color_variations)
    ]


def _adapt_positions(design_positions: Any) -> List[DesignPlacement]:
    return [
        DesignPlacement(
            design_id=numeric_utils.read_field(entry, "designId", "design_id"),
            position=normalizer.normalize_design_position(
                numeric_utils.read_field(entry, "position")
            ),
        )
        for entry in _as_list(design_positions)
    ]


def _first_color_id(color_variations: List[ColorVariation]) -> Any:
    return color_variations[0].id if color_variations else None


@fallback_on_error(default=None)
def adapt_new_arrival(item: Any) -> Optional[ProductOverlay]:
    """
    Adapt a new-arrivals item.
    Items without design positions cannot be rendered and give None.
    """
    item_id = numeric_utils.read_field(item, "id")
    design_positions = _adapt_positions(numeric_utils.read_field(item, "designPositions"))
    if not design_positions:
        logger.warning(LogMessage.MISSING_POSITIONS.format(item_id))
        return None

    base_product = numeric_utils.read_field(item, "baseProduct", default={})
    color_variations = adapt_color_variations(
        numeric_utils.read_field(base_product, "colorVariations")
    )
    design_url = _text(numeric_utils.read_field(item, "designCloudinaryUrl"))

    return ProductOverlay(
        product_id=item_id,
        name=_text(numeric_utils.read_field(item, "name")),
        price=numeric_utils.to_float(numeric_utils.read_field(item, "price"), None),
        design_id=design_positions[0].design_id,
        design_url=design_url,
        has_design=bool(design_url),
        color_variations=color_variations,
        design_positions=design_positions,
        selected_color_id=_first_color_id(color_variations),
    )


@fallback_on_error(default=None)
def adapt_best_seller(item: Any) -> Optional[ProductOverlay]:
    """
    Adapt a best-sellers item.

    Best sellers carry a single `designPosition` with admin-curated sizes and
    untagged delimitations in absolute pixels. Images without a print zone
    get a centered default one.
    """
    item_id = numeric_utils.read_field(item, "id")
    raw_position = numeric_utils.read_field(item, "designPosition", default={})

    position = {
        "x": numeric_utils.read_field(raw_position, "x"),
        "y": numeric_utils.read_field(raw_position, "y"),
        "scale": numeric_utils.or_default(
            numeric_utils.read_field(raw_position, "scale"),
            numeric_utils.or_default(
                numeric_utils.read_field(item, "designScale"), Defaults.CURATED_SCALE
            ),
        ),
        "rotation": numeric_utils.read_field(raw_position, "rotation"),
        "designWidth": numeric_utils.or_default(
            numeric_utils.read_field(raw_position, "designWidth"),
            numeric_utils.or_default(
                numeric_utils.read_field(item, "designWidth"),
                Defaults.CURATED_DESIGN_SIZE,
            ),
        ),
        "designHeight": numeric_utils.or_default(
            numeric_utils.read_field(raw_position, "designHeight"),
            numeric_utils.or_default(
                numeric_utils.read_field(item, "designHeight"),
                Defaults.CURATED_DESIGN_SIZE,
            ),
        ),
    }

    base_product = numeric_utils.read_field(item, "baseProduct", default={})
    color_variations = adapt_color_variations(
        numeric_utils.read_field(base_product, "colorVariations"),
        default_coordinate_type=CoordinateType.PIXEL,
        default_zone=True,
    )
    design_url = _text(numeric_utils.read_field(item, "designCloudinaryUrl"))

    return ProductOverlay(
        product_id=item_id,
        name=_text(numeric_utils.read_field(item, "name")),
        price=numeric_utils.to_float(numeric_utils.read_field(item, "price"), None),
        design_id=item_id,
        design_url=design_url,
        has_design=bool(design_url),
        color_variations=color_variations,
        design_positions=[
            DesignPlacement(
                design_id=item_id,
                position=normalizer.normalize_design_position(position),
            )
        ],
        selected_color_id=_first_color_id(color_variations),
    )


@fallback_on_error(default=None)
def adapt_vendor_product(product: Any) -> Optional[ProductOverlay]:
    """
    Adapt a vendor product as listed on the vendor dashboard and product cards.
    """
    admin_product = numeric_utils.read_field(product, "adminProduct", default={})
    color_variations = adapt_color_variations(
        numeric_utils.read_field(admin_product, "colorVariations")
    )
    design = numeric_utils.read_field(product, "design", default={})
    application = numeric_utils.read_field(product, "designApplication", default={})
    design_url = _text(
        numeric_utils.read_field(
            design, "imageUrl", default=numeric_utils.read_field(application, "designUrl")
        )
    )

    selected_colors = _as_list(numeric_utils.read_field(product, "selectedColors"))
    selected_color_id = (
        numeric_utils.read_field(selected_colors[0], "id")
        if selected_colors
        else _first_color_id(color_variations)
    )

    return ProductOverlay(
        product_id=numeric_utils.read_field(product, "id"),
        name=_text(
            numeric_utils.read_field(
                product, "vendorName", default=numeric_utils.read_field(admin_product, "name")
            )
        ),
        price=numeric_utils.to_float(numeric_utils.read_field(product, "price"), None),
        design_id=numeric_utils.read_field(
            product, "designId", default=numeric_utils.read_field(design, "id")
        ),
        design_url=design_url,
        has_design=bool(
            numeric_utils.read_field(application, "hasDesign", default=bool(design_url))
        ),
        color_variations=color_variations,
        design_positions=_adapt_positions(
            numeric_utils.read_field(product, "designPositions")
        ),
        selected_color_id=selected_color_id,
    )
