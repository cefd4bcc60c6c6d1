"""Artisan registration: command and handler."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from catalogue.artisan.artisan import Artisan
from catalogue.domain import catalogue


@catalogue.command(part_of="Artisan")
class RegisterArtisan:
    artisan_id: Identifier()
    name_en: String(required=True, max_length=200)
    name_ar: String(required=True, max_length=200)
    bio_en: Text()
    bio_ar: Text()
    image_url: String(max_length=500)


@catalogue.command_handler(part_of=Artisan)
class RegisterArtisanHandler:
    @handle(RegisterArtisan)
    def register_artisan(self, command):
        attributes = {
            "name_en": command.name_en,
            "name_ar": command.name_ar,
            "bio_en": command.bio_en,
            "bio_ar": command.bio_ar,
            "image_url": command.image_url,
        }
        if command.artisan_id:
            attributes["id"] = str(command.artisan_id)

        artisan = Artisan(**attributes)
        current_domain.repository_for(Artisan).add(artisan)
        return str(artisan.id)
