"""Cart line item.

Persisted with the wire names ``{id, name, price, image, quantity}`` so
carts saved by earlier storefront builds load unchanged.
"""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field


class CartItem(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    product_id: str = Field(alias="id", min_length=1)
    name: str
    unit_price: float = Field(alias="price", gt=0)
    image_url: str = Field(alias="image", default="")
    quantity: int = Field(ge=1)

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity

    def with_quantity(self, quantity: int) -> "CartItem":
        return self.model_copy(update={"quantity": quantity})

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)

    @classmethod
    def from_product(cls, product: Mapping, quantity: int) -> "CartItem":
        """Build a line item from a product card payload ``{id, name, price, image}``.

        A catalogue payload carrying ``images`` instead of ``image`` uses its
        first image.
        """
        images = product.get("images") or [""]
        return cls(
            id=str(product["id"]),
            name=product.get("name", ""),
            price=product["price"],
            image=product.get("image") or images[0],
            quantity=quantity,
        )
