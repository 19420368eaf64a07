# core/meal_plan_service.py
"""Meal planner selection and its hand-off to the order page.

The planner passes its selection to the order flow as an explicit list of
dish ids (a request parameter), never through shared storage.
"""
from core.catalog import get_dish
from models.cart import Cart


class MealPlan:
    def __init__(self):
        self._dishes = []

    def add(self, dish):
        """Returns (added, message)"""
        if any(d.id == dish.id for d in self._dishes):
            return False, f"{dish.name} is already in your meal plan."
        self._dishes.append(dish)
        return True, f"{dish.name} has been added to your meal plan."

    def remove(self, dish_id: str) -> bool:
        before = len(self._dishes)
        self._dishes = [d for d in self._dishes if d.id != dish_id]
        return len(self._dishes) < before

    @property
    def dishes(self):
        return tuple(self._dishes)

    def __len__(self):
        return len(self._dishes)


def build_order_handoff(plan: MealPlan):
    """Dish ids to send along with the navigation to the order page"""
    return [dish.id for dish in plan.dishes]


def apply_meal_plan(cart: Cart, dish_ids, lookup=get_dish):
    """Add every planned dish to the cart. Returns the dishes that did not fit."""
    dishes = [lookup(dish_id) for dish_id in dish_ids]  # NotFoundError before any change
    skipped = []
    for dish in dishes:
        _, added = cart.add_item(dish)
        if not added:
            skipped.append(dish)
    return skipped
