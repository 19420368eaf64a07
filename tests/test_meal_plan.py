import pytest

from core.catalog import get_dish
from core.errors import NotFoundError
from core.meal_plan_service import MealPlan, apply_meal_plan, build_order_handoff
from models.cart import Cart, MAX_QUANTITY_PER_ITEM


def test_meal_plan_rejects_duplicates():
    plan = MealPlan()
    assert plan.add(get_dish("1"))[0] is True
    ok, message = plan.add(get_dish("1"))
    assert ok is False
    assert "already in your meal plan" in message
    assert len(plan) == 1


def test_remove_from_plan():
    plan = MealPlan()
    plan.add(get_dish("1"))
    assert plan.remove("1") is True
    assert plan.remove("1") is False


def test_handoff_to_cart():
    plan = MealPlan()
    for dish_id in ("3", "7", "11"):
        plan.add(get_dish(dish_id))
    handoff = build_order_handoff(plan)
    assert handoff == ["3", "7", "11"]

    cart = Cart()
    assert apply_meal_plan(cart, handoff) == []
    assert [i.dish_id for i in cart.items()] == ["3", "7", "11"]


def test_handoff_with_unknown_dish_leaves_cart_untouched(cart):
    with pytest.raises(NotFoundError):
        apply_meal_plan(cart, ["1", "nope"])
    assert cart.is_empty()


def test_handoff_reports_dishes_at_cap(cart):
    dish = get_dish("1")
    for _ in range(MAX_QUANTITY_PER_ITEM):
        cart.add_item(dish)
    skipped = apply_meal_plan(cart, ["1", "3"])
    assert skipped == [dish]
    assert cart.get("3").quantity == 1
