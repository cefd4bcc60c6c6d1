"""Product listing: add products to the catalogue and adjust their stock."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class ListProduct:
    product_id: Identifier()  # optional, seeded products keep their dataset ids
    name_en: String(required=True, max_length=200)
    name_ar: String(required=True, max_length=200)
    description_en: Text()
    description_ar: Text()
    materials_en: String(max_length=500)
    materials_ar: String(max_length=500)
    care_en: String(max_length=500)
    care_ar: String(max_length=500)
    price: Float(required=True)
    category: String(max_length=50)
    images: Text()  # JSON array of image URLs
    artisan_id: Identifier()
    stock: Integer(default=0)
    featured: Boolean(default=False)


@catalogue.command(part_of="Product")
class SetStock:
    product_id: Identifier(required=True)
    stock: Integer(required=True)


@catalogue.command_handler(part_of=Product)
class ProductListingHandler:
    @handle(ListProduct)
    def list_product(self, command):
        attributes = {
            "name_en": command.name_en,
            "name_ar": command.name_ar,
            "description_en": command.description_en,
            "description_ar": command.description_ar,
            "materials_en": command.materials_en,
            "materials_ar": command.materials_ar,
            "care_en": command.care_en,
            "care_ar": command.care_ar,
            "price": command.price,
            "category": command.category,
            "images": command.images,
            "artisan_id": command.artisan_id,
            "stock": command.stock or 0,
            "featured": bool(command.featured),
        }
        if command.product_id:
            attributes["id"] = str(command.product_id)

        product = Product(**attributes)
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(SetStock)
    def set_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.set_stock(command.stock)
        repo.add(product)
