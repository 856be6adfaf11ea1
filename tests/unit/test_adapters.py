from __future__ import annotations

import logging

import pytest

from core.constants import CoordinateType
from overlay.schemas.products import ColorVariation, ProductImage, ProductOverlay
from overlay.services.adapters import (
    adapt_best_seller,
    adapt_color_variations,
    adapt_image,
    adapt_new_arrival,
    adapt_vendor_product,
)


def _base_product(delimitations=None, natural_size=(1000, 1000)) -> dict:
    width, height = natural_size
    return {
        "colorVariations": [
            {
                "id": 11,
                "name": "Blanc",
                "colorCode": "#FFFFFF",
                "images": [
                    {
                        "id": 101,
                        "url": "https://cdn.example.com/blanc-front.png",
                        "view": "Front",
                        "naturalWidth": width,
                        "naturalHeight": height,
                        "delimitations": delimitations or [],
                    },
                    {
                        "id": 102,
                        "url": "https://cdn.example.com/blanc-back.png",
                        "view": "Back",
                        "naturalWidth": width,
                        "naturalHeight": height,
                        "delimitations": [],
                    },
                ],
            },
            {
                "id": 12,
                "name": "Noir",
                "colorCode": "#000000",
                "images": [],
            },
        ]
    }


def _box(delimitation) -> tuple[float, float, float, float]:
    return (delimitation.x, delimitation.y, delimitation.width, delimitation.height)


def test_adapt_new_arrival_builds_overlay() -> None:
    item = {
        "id": 7,
        "name": "Hoodie Sunset",
        "price": "39.90",
        "designCloudinaryUrl": "https://cdn.example.com/design.png",
        "baseProduct": _base_product(
            delimitations=[{"id": 5, "x": 250, "y": 200, "width": 500, "height": 400}]
        ),
        "designPositions": [
            {"designId": 44, "position": {"x": 12, "y": -20, "scale": 0.7}},
        ],
    }

    overlay = adapt_new_arrival(item)

    assert overlay.product_id == 7
    assert overlay.price == pytest.approx(39.9)
    assert overlay.design_id == 44
    assert overlay.has_design
    assert overlay.selected_color_id == 11
    assert overlay.active_position.scale == 0.7
    assert overlay.active_position.design_width == 1200

    image = overlay.mockup_image()
    assert image.id == 101
    assert _box(image.delimitations[0]) == pytest.approx((25.0, 20.0, 50.0, 40.0))


def test_adapt_new_arrival_without_positions_is_skipped(caplog) -> None:
    item = {"id": 8, "baseProduct": _base_product(), "designPositions": []}

    with caplog.at_level(logging.WARNING):
        assert adapt_new_arrival(item) is None

    assert "No design positions for product 8" in caplog.text


def test_adapt_new_arrival_malformed_payload_returns_none(caplog) -> None:
    item = {
        "id": 9,
        "baseProduct": {"colorVariations": 42},
        "designPositions": [{"designId": 1, "position": {}}],
    }

    with caplog.at_level(logging.ERROR):
        assert adapt_new_arrival(item) is None

    assert any(record.levelno == logging.ERROR for record in caplog.records)
    assert "adapt_new_arrival failed" in caplog.text


def test_adapt_best_seller_uses_curated_defaults() -> None:
    item = {
        "id": 3,
        "name": "Tee Classic",
        "designCloudinaryUrl": "https://cdn.example.com/classic.png",
        "designPosition": {"x": 5, "y": 10},
        "baseProduct": _base_product(
            delimitations=[{"x": 10, "y": 10, "width": 50, "height": 50}],
            natural_size=(500, 500),
        ),
    }

    overlay = adapt_best_seller(item)
    position = overlay.active_position

    assert overlay.design_id == 3
    assert position.scale == 0.6
    assert (position.design_width, position.design_height) == (200, 200)
    assert (position.x, position.y) == (5, 10)

    delimitation = overlay.mockup_image().delimitations[0]
    assert _box(delimitation) == pytest.approx((2.0, 2.0, 10.0, 10.0))


def test_adapt_best_seller_reads_item_level_sizes() -> None:
    item = {
        "id": 4,
        "designScale": 0.9,
        "designWidth": 640,
        "designHeight": 480,
        "designPosition": {"scale": 0},
        "baseProduct": _base_product(),
    }

    position = adapt_best_seller(item).active_position

    assert position.scale == 0.9
    assert (position.design_width, position.design_height) == (640, 480)


def test_adapt_best_seller_adds_default_zone() -> None:
    overlay = adapt_best_seller({"id": 5, "baseProduct": _base_product()})

    for image in overlay.color_variations[0].images:
        assert len(image.delimitations) == 1
        assert _box(image.delimitations[0]) == (25.0, 25.0, 50.0, 50.0)
        assert image.delimitations[0].coordinate_type is CoordinateType.PERCENTAGE


def test_adapt_vendor_product() -> None:
    product = {
        "id": 21,
        "vendorName": "Sunset by Ada",
        "price": 25,
        "designId": 300,
        "design": {"id": 300, "imageUrl": "https://cdn.example.com/ada.png"},
        "selectedColors": [{"id": 12}],
        "adminProduct": {"name": "Hoodie", **_base_product()},
        "designPositions": [{"designId": 300, "position": {"x": -15, "scale": 1.2}}],
    }

    overlay = adapt_vendor_product(product)

    assert overlay.name == "Sunset by Ada"
    assert overlay.design_url == "https://cdn.example.com/ada.png"
    assert overlay.has_design
    assert overlay.selected_color_id == 12
    assert overlay.color_variation().name == "Noir"
    assert overlay.active_position.x == -15
    assert overlay.active_position.design_width == 1200


def test_adapt_vendor_product_falls_back_to_application_and_admin_name() -> None:
    product = {
        "id": 22,
        "designApplication": {"designUrl": "https://cdn.example.com/app.png", "hasDesign": False},
        "adminProduct": {"name": "Tote", "colorVariations": []},
    }

    overlay = adapt_vendor_product(product)

    assert overlay.name == "Tote"
    assert overlay.design_url == "https://cdn.example.com/app.png"
    assert not overlay.has_design
    assert overlay.selected_color_id is None
    assert overlay.active_position is None
    assert overlay.mockup_image() is None


def test_adapt_vendor_product_coerces_numeric_labels() -> None:
    product = {
        "id": 23,
        "vendorName": 42,
        "adminProduct": {
            "colorVariations": [{"id": 1, "name": 7, "colorCode": 255, "images": [{"view": 1}]}]
        },
    }

    overlay = adapt_vendor_product(product)

    assert overlay is not None
    assert overlay.name == "42"
    assert overlay.color_variations[0].name == "7"
    assert overlay.color_variations[0].color_code == "255"
    assert overlay.color_variations[0].images[0].view == "1"


def test_adapt_image_tags_untagged_delimitations() -> None:
    image = adapt_image(
        {
            "naturalWidth": 400,
            "naturalHeight": 400,
            "delimitations": [
                {"x": 40, "y": 40, "width": 80, "height": 80},
                {"x": 40, "y": 40, "width": 80, "height": 80, "coordinateType": "PERCENTAGE"},
            ],
        },
        default_coordinate_type=CoordinateType.PIXEL,
    )

    assert _box(image.delimitations[0]) == pytest.approx((10.0, 10.0, 20.0, 20.0))
    assert _box(image.delimitations[1]) == (40.0, 40.0, 60.0, 60.0)


def test_adapt_color_variations_rejects_non_lists() -> None:
    with pytest.raises(TypeError):
        adapt_color_variations({"id": 1})


def test_product_overlay_selection_fallbacks() -> None:
    front = ProductImage(id=1, view="Front")
    side = ProductImage(id=2, view="Side")
    overlay = ProductOverlay(
        color_variations=[
            ColorVariation(id="red", images=[side, front]),
            ColorVariation(id="blue", images=[side]),
        ],
        selected_color_id="blue",
    )

    assert overlay.color_variation().id == "blue"
    assert overlay.color_variation("red").id == "red"
    assert overlay.color_variation("green").id == "blue"
    assert overlay.mockup_image("red").id == 1
    assert overlay.mockup_image("red", view="Side").id == 2
    assert overlay.mockup_image("blue").id == 2
    assert ProductOverlay().color_variation() is None
