"""Pydantic response schemas for the Catalogue API.

Records keep the storefront's JSON shape: ``_id`` plus bilingual
``*_en`` / ``*_ar`` fields.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")


class ProductResponse(_Record):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "_id": "1",
                    "name_en": "Handwoven Tote Bag",
                    "name_ar": "حقيبة يد منسوجة يدوياً",
                    "price": 350.0,
                    "category": "Bags",
                    "images": ["https://images.pexels.com/photos/7991579/pexels-photo-7991579.jpeg"],
                    "artisan_id": "1",
                    "stock": 15,
                    "featured": True,
                }
            ]
        },
    )

    name_en: str
    name_ar: str
    description_en: str = ""
    description_ar: str = ""
    materials_en: str = ""
    materials_ar: str = ""
    care_en: str = ""
    care_ar: str = ""
    price: float
    category: str | None = None
    images: list[str] = Field(default_factory=list)
    artisan_id: str | None = None
    stock: int = 0
    featured: bool = False


class ArtisanResponse(_Record):
    name_en: str
    name_ar: str
    bio_en: str = ""
    bio_ar: str = ""
    image_url: str = ""


class BlogPostResponse(_Record):
    title_en: str
    title_ar: str
    content_en: str
    content_ar: str
    author: str
    date: datetime | None = None
    image_url: str = ""


class CollectionPointResponse(_Record):
    name_en: str
    name_ar: str
    address_en: str
    address_ar: str
    latitude: float
    longitude: float
    hours_en: str = ""
    hours_ar: str = ""
    contact_phone: str = ""
