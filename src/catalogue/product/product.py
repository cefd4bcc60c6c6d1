"""Product aggregate: a handmade item listed in the storefront."""

import json

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Identifier, Integer, String, Text

from catalogue.domain import catalogue, logger


@catalogue.aggregate
class Product:
    name_en: String(required=True, max_length=200)
    name_ar: String(required=True, max_length=200)
    description_en: Text()
    description_ar: Text()
    materials_en: String(max_length=500)
    materials_ar: String(max_length=500)
    care_en: String(max_length=500)
    care_ar: String(max_length=500)
    price: Float(required=True, min_value=0.01)
    category: String(max_length=50)
    images: Text()  # JSON array of image URLs
    artisan_id: Identifier()
    stock: Integer(default=0, min_value=0)
    featured: Boolean(default=False)

    @invariant.post
    def images_must_be_a_json_list(self):
        if not self.images:
            return
        try:
            urls = json.loads(self.images)
        except (json.JSONDecodeError, TypeError):
            raise ValidationError({"images": ["Images must be a JSON array of URLs"]}) from None
        if not isinstance(urls, list):
            raise ValidationError({"images": ["Images must be a JSON array of URLs"]})

    @property
    def image_urls(self) -> list[str]:
        return json.loads(self.images) if self.images else []

    def remove_from_stock(self, quantity: int) -> None:
        """Take sold units out of stock.

        Orders are never rejected for stock, so an oversold product bottoms
        out at zero instead of going negative.
        """
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        if quantity > self.stock:
            logger.warning(
                "Product oversold",
                product_id=str(self.id),
                stock=self.stock,
                requested=quantity,
            )
        self.stock = max(self.stock - quantity, 0)

    def set_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})
        self.stock = quantity

    def to_record(self) -> dict:
        """Storefront JSON shape: ``_id`` plus the bilingual fields."""
        return {
            "_id": str(self.id),
            "name_en": self.name_en,
            "name_ar": self.name_ar,
            "description_en": self.description_en or "",
            "description_ar": self.description_ar or "",
            "materials_en": self.materials_en or "",
            "materials_ar": self.materials_ar or "",
            "care_en": self.care_en or "",
            "care_ar": self.care_ar or "",
            "price": self.price,
            "category": self.category,
            "images": self.image_urls,
            "artisan_id": str(self.artisan_id) if self.artisan_id else None,
            "stock": self.stock,
            "featured": self.featured,
        }
