"""BlogPost aggregate: stories published on the storefront blog."""

from datetime import UTC, datetime

from protean.fields import DateTime, String, Text

from catalogue.domain import catalogue


def utc_now():
    return datetime.now(UTC)


@catalogue.aggregate
class BlogPost:
    title_en: String(required=True, max_length=255)
    title_ar: String(required=True, max_length=255)
    content_en: Text(required=True)
    content_ar: Text(required=True)
    author: String(required=True, max_length=100)
    date: DateTime(default=utc_now)
    image_url: String(max_length=500)

    def to_record(self) -> dict:
        return {
            "_id": str(self.id),
            "title_en": self.title_en,
            "title_ar": self.title_ar,
            "content_en": self.content_en,
            "content_ar": self.content_ar,
            "author": self.author,
            "date": self.date.isoformat() if self.date else None,
            "image_url": self.image_url or "",
        }
