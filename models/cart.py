# models/cart.py
from collections import OrderedDict

from core.errors import InvalidQuantity
from models.dish import Dish

MAX_QUANTITY_PER_ITEM = 5


class CartItem:
    __slots__ = ("dish", "quantity")

    def __init__(self, dish: Dish, quantity: int = 1):
        self.dish = dish
        self.quantity = quantity

    @property
    def dish_id(self) -> str:
        return self.dish.id

    def copy(self) -> "CartItem":
        return CartItem(self.dish, self.quantity)

    def __eq__(self, other):
        if not isinstance(other, CartItem):
            return NotImplemented
        return self.dish.id == other.dish.id and self.quantity == other.quantity

    def __repr__(self):
        return f"<CartItem {self.dish.id} x{self.quantity}>"


class Cart:
    """In-memory cart, one per session. At most one entry per dish id."""

    def __init__(self):
        self._items = OrderedDict()

    def add_item(self, dish: Dish):
        """Add one unit of ``dish``.

        Returns ``(snapshot, added)``. ``added`` is False when the dish is
        already at MAX_QUANTITY_PER_ITEM; the cart is left untouched.
        """
        item = self._items.get(dish.id)
        if item is None:
            self._items[dish.id] = CartItem(dish, 1)
            return self.items(), True
        if item.quantity >= MAX_QUANTITY_PER_ITEM:
            return self.items(), False
        item.quantity += 1
        return self.items(), True

    def remove_item(self, dish_id: str):
        self._items.pop(dish_id, None)
        return self.items()

    def update_quantity(self, dish_id: str, quantity: int):
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise InvalidQuantity("Quantity must be at least 1. Remove the item instead.")
        if quantity > MAX_QUANTITY_PER_ITEM:
            raise InvalidQuantity(f"You can order at most {MAX_QUANTITY_PER_ITEM} of each dish.")
        item = self._items.get(dish_id)
        if item is not None:
            item.quantity = quantity
        return self.items()

    def clear(self):
        self._items.clear()

    def items(self) -> tuple:
        """Snapshot of the cart in insertion order."""
        return tuple(item.copy() for item in self._items.values())

    def get(self, dish_id: str):
        item = self._items.get(dish_id)
        return item.copy() if item else None

    def total_quantity(self) -> int:
        return sum(item.quantity for item in self._items.values())

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self.items())

    def __contains__(self, dish_id):
        return dish_id in self._items
