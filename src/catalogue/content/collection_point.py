"""CollectionPoint aggregate: a drop-off location for textile donations."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, String

from catalogue.domain import catalogue


@catalogue.aggregate
class CollectionPoint:
    name_en: String(required=True, max_length=200)
    name_ar: String(required=True, max_length=200)
    address_en: String(required=True, max_length=500)
    address_ar: String(required=True, max_length=500)
    latitude: Float(required=True)
    longitude: Float(required=True)
    hours_en: String(max_length=200)
    hours_ar: String(max_length=200)
    contact_phone: String(max_length=30)

    @invariant.post
    def coordinates_must_be_on_the_globe(self):
        if self.latitude is not None and not -90 <= self.latitude <= 90:
            raise ValidationError({"latitude": ["Latitude must be between -90 and 90"]})
        if self.longitude is not None and not -180 <= self.longitude <= 180:
            raise ValidationError({"longitude": ["Longitude must be between -180 and 180"]})

    def to_record(self) -> dict:
        return {
            "_id": str(self.id),
            "name_en": self.name_en,
            "name_ar": self.name_ar,
            "address_en": self.address_en,
            "address_ar": self.address_ar,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "hours_en": self.hours_en or "",
            "hours_ar": self.hours_ar or "",
            "contact_phone": self.contact_phone or "",
        }
