"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of Design Overlay, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Product schemas consumed by product cards, sliders and previews
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.constants import Defaults
from overlay.schemas.positioning import NormalizedDelimitation, NormalizedPosition


class ProductImage(BaseModel):
    """Mockup image of one view of a color variation."""

    id: Optional[Any] = None
    url: Optional[str] = None
    view: Optional[str] = None
    natural_width: float = Field(default=0.0, alias="naturalWidth")
    natural_height: float = Field(default=0.0, alias="naturalHeight")
    delimitations: List[NormalizedDelimitation] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ColorVariation(BaseModel):
    """Color variation of a base product with its mockup images."""

    id: Optional[Any] = None
    name: Optional[str] = None
    color_code: Optional[str] = Field(default=None, alias="colorCode")
    images: List[ProductImage] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class DesignPlacement(BaseModel):
    """One design application on a product."""

    design_id: Optional[Any] = Field(default=None, alias="designId")
    position: NormalizedPosition = Field(default_factory=NormalizedPosition)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ProductOverlay(BaseModel):
    """Everything a product card needs to composite a design on its mockup."""

    product_id: Optional[Any] = Field(default=None, alias="productId")
    name: Optional[str] = None
    price: Optional[float] = None
    design_id: Optional[Any] = Field(default=None, alias="designId")
    design_url: Optional[str] = Field(default=None, alias="designUrl")
    has_design: bool = Field(default=False, alias="hasDesign")
    color_variations: List[ColorVariation] = Field(
        default_factory=list, alias="colorVariations"
    )
    design_positions: List[DesignPlacement] = Field(
        default_factory=list, alias="designPositions"
    )
    selected_color_id: Optional[Any] = Field(default=None, alias="selectedColorId")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def active_position(self) -> Optional[NormalizedPosition]:
        """The placement rendered on cards: the first design position."""
        if not self.design_positions:
            return None
        return self.design_positions[0].position

    def color_variation(self, color_id: Any = None) -> Optional[ColorVariation]:
        """Color variation by id, falling back to the selected then the first one."""
        if not self.color_variations:
            return None
        for wanted in (color_id, self.selected_color_id):
            if wanted is None:
                continue
            for variation in self.color_variations:
                if variation.id == wanted:
                    return variation
        return self.color_variations[0]

    def mockup_image(
        self, color_id: Any = None, view: str = Defaults.MOCKUP_VIEW
    ) -> Optional[ProductImage]:
        """Image of the requested view for a color, or its first image."""
        variation = self.color_variation(color_id)
        if variation is None or not variation.images:
            return None
        for image in variation.images:
            if image.view == view:
                return image
        return variation.images[0]
