"""Artisan aggregate: a woman artisan whose work is sold in the storefront."""

from protean.fields import String, Text

from catalogue.domain import catalogue


@catalogue.aggregate
class Artisan:
    name_en: String(required=True, max_length=200)
    name_ar: String(required=True, max_length=200)
    bio_en: Text()
    bio_ar: Text()
    image_url: String(max_length=500)

    def to_record(self) -> dict:
        return {
            "_id": str(self.id),
            "name_en": self.name_en,
            "name_ar": self.name_ar,
            "bio_en": self.bio_en or "",
            "bio_ar": self.bio_ar or "",
            "image_url": self.image_url or "",
        }
