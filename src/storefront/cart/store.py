"""Cart Store: the single owner of the shopping cart.

The cart lives in memory and is written through to key-value storage on
every mutation. Reads never touch storage after construction.
"""

from collections.abc import Callable, Iterable, Mapping

import pydantic
import structlog

from storefront.cart.item import CartItem
from storefront.errors import CartValidationError, StorageError
from storefront.notifier import Notifier
from storefront.storage import KeyValueStorage

logger = structlog.get_logger(__name__)

CART_STORAGE_KEY = "handmade_cart"

Listener = Callable[["CartStore"], None]


class CartStore:
    def __init__(self, storage: KeyValueStorage, notifier: Notifier | None = None):
        self._storage = storage
        self._notifier = notifier
        self._listeners: list[Listener] = []
        self._items: list[CartItem] = self._load()

    # -------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------
    def _load(self) -> list[CartItem]:
        try:
            raw = self._storage.get(CART_STORAGE_KEY)
        except StorageError:
            logger.warning("Cart storage unreadable, starting with an empty cart", exc_info=True)
            return []

        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.warning("Discarding malformed cart", stored_type=type(raw).__name__)
            return []

        try:
            return [CartItem.model_validate(entry) for entry in raw]
        except pydantic.ValidationError:
            logger.warning("Discarding malformed cart", entries=len(raw), exc_info=True)
            return []

    def _save(self) -> None:
        try:
            self._storage.set(CART_STORAGE_KEY, [item.to_wire() for item in self._items])
        except StorageError:
            logger.error("Failed to persist cart", item_count=len(self._items), exc_info=True)

    def _changed(self) -> None:
        self._save()
        for listener in list(self._listeners):
            listener(self)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a display callback invoked after every mutation.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def get_item(self, product_id: str) -> CartItem | None:
        return next((i for i in self._items if i.product_id == str(product_id)), None)

    def get_total(self) -> float:
        return sum((item.unit_price * item.quantity for item in self._items), 0.0)

    def get_item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add_item(self, product: Mapping | CartItem, quantity: int = 1) -> CartItem:
        """Add ``quantity`` units of a product, merging with an existing line.

        ``product`` is either a product card payload ``{id, name, price,
        image}`` or a ``CartItem`` (whose own quantity is ignored).
        """
        if quantity < 1:
            raise CartValidationError(
                f"Quantity must be at least 1, got {quantity}",
                field="quantity",
                message_key="cart.invalid_quantity",
            )

        try:
            if isinstance(product, CartItem):
                candidate = product.with_quantity(quantity)
            else:
                candidate = CartItem.from_product(product, quantity)
        except (KeyError, pydantic.ValidationError) as exc:
            raise CartValidationError(f"Invalid product: {exc}", field="product") from exc

        existing = self.get_item(candidate.product_id)
        if existing:
            updated = existing.with_quantity(existing.quantity + quantity)
            self._items[self._items.index(existing)] = updated
        else:
            updated = candidate
            self._items.append(updated)

        logger.info("Item added to cart", product_id=updated.product_id, quantity=updated.quantity)
        self._changed()
        if self._notifier:
            self._notifier.success("cart.item_added")
        return updated

    def remove_item(self, product_id: str) -> None:
        existing = self.get_item(product_id)
        if existing is None:
            return
        self._items.remove(existing)
        logger.info("Item removed from cart", product_id=existing.product_id)
        self._changed()

    def update_quantity(self, product_id: str, new_quantity: int) -> None:
        if new_quantity <= 0:
            self.remove_item(product_id)
            return

        existing = self.get_item(product_id)
        if existing is None:
            return
        self._items[self._items.index(existing)] = existing.with_quantity(new_quantity)
        self._changed()

    def clear(self) -> None:
        self._items = []
        logger.info("Cart cleared")
        self._changed()

    def remove_ordered(self, line_items: Iterable) -> None:
        """Take the ordered quantities out of the cart.

        Anything added after the order was snapshotted stays in the cart.
        """
        ordered: dict[str, int] = {}
        for line in line_items:
            ordered[line.product_id] = ordered.get(line.product_id, 0) + line.quantity

        remaining = []
        for item in self._items:
            left = item.quantity - ordered.get(item.product_id, 0)
            if left == item.quantity:
                remaining.append(item)
            elif left > 0:
                remaining.append(item.with_quantity(left))

        self._items = remaining
        logger.info("Ordered items removed from cart", remaining=len(remaining))
        self._changed()
