from datetime import datetime, timedelta

import pytest

from core.auth_service import login
from core.cart_service import (
    add_to_cart,
    discard_session_cart,
    get_cart_count,
    get_session_cart,
    prune_session_carts,
    remove_from_cart,
    update_cart_quantity,
    _session_carts,
)
from core.errors import InvalidQuantity, Unauthenticated
from core.session_manager import purge_expired_sessions
from models.auth_session import AuthSession
from models.cart import Cart, MAX_QUANTITY_PER_ITEM


def test_add_new_dish_inserts_quantity_one(cart, make_dish):
    snapshot, added = cart.add_item(make_dish("a"))
    assert added is True
    assert [(i.dish_id, i.quantity) for i in snapshot] == [("a", 1)]


def test_add_existing_dish_increments(cart, make_dish):
    dish = make_dish("a")
    cart.add_item(dish)
    snapshot, added = cart.add_item(dish)
    assert added is True
    assert len(snapshot) == 1
    assert snapshot[0].quantity == 2


def test_sixth_add_is_a_signaled_noop(cart, make_dish):
    dish = make_dish("a")
    results = [cart.add_item(dish)[1] for _ in range(6)]
    assert results == [True] * 5 + [False]
    assert cart.get("a").quantity == MAX_QUANTITY_PER_ITEM


def test_items_keep_insertion_order(cart, make_dish):
    for dish_id in ("c", "a", "b"):
        cart.add_item(make_dish(dish_id))
    cart.add_item(make_dish("a"))
    assert [i.dish_id for i in cart.items()] == ["c", "a", "b"]


def test_snapshot_is_detached_from_cart(cart, make_dish):
    snapshot, _ = cart.add_item(make_dish("a"))
    snapshot[0].quantity = 4
    assert cart.get("a").quantity == 1


def test_remove_item_deletes_whole_entry(cart, make_dish):
    dish = make_dish("a")
    for _ in range(3):
        cart.add_item(dish)
    cart.remove_item("a")
    assert cart.is_empty()


def test_remove_missing_item_is_noop(cart, make_dish):
    cart.add_item(make_dish("a"))
    cart.remove_item("zzz")
    assert len(cart) == 1


def test_update_quantity_replaces_value(cart, make_dish):
    cart.add_item(make_dish("a"))
    cart.update_quantity("a", 4)
    assert cart.get("a").quantity == 4


@pytest.mark.parametrize("quantity", [0, -1])
def test_update_quantity_below_one_fails_and_leaves_cart(cart, make_dish, quantity):
    cart.add_item(make_dish("a"))
    cart.add_item(make_dish("a"))
    with pytest.raises(InvalidQuantity):
        cart.update_quantity("a", quantity)
    assert cart.get("a").quantity == 2


def test_update_quantity_above_cap_fails(cart, make_dish):
    cart.add_item(make_dish("a"))
    with pytest.raises(InvalidQuantity):
        cart.update_quantity("a", MAX_QUANTITY_PER_ITEM + 1)
    assert cart.get("a").quantity == 1


def test_update_quantity_for_absent_dish_is_noop(cart, make_dish):
    cart.add_item(make_dish("a"))
    cart.update_quantity("b", 3)
    assert "b" not in cart
    assert cart.total_quantity() == 1


def test_clear(cart, make_dish):
    cart.add_item(make_dish("a"))
    cart.add_item(make_dish("b"))
    cart.clear()
    assert cart.is_empty()
    assert cart.total_quantity() == 0


def test_service_add_to_cart_uses_catalog(db, session_token):
    cart = get_session_cart(db, session_token)
    try:
        ok, message = add_to_cart(cart, "1")
        assert ok
        assert "added to cart" in message
        assert get_cart_count(cart) == 1

        ok, message = add_to_cart(cart, "does-not-exist")
        assert not ok
        assert "not found" in message
    finally:
        discard_session_cart(session_token)


def test_service_reports_max_quantity(db, session_token):
    cart = get_session_cart(db, session_token)
    try:
        for _ in range(MAX_QUANTITY_PER_ITEM):
            assert add_to_cart(cart, "3")[0]
        ok, message = add_to_cart(cart, "3")
        assert not ok
        assert "maximum" in message
    finally:
        discard_session_cart(session_token)


def test_service_update_and_remove(db, session_token):
    cart = get_session_cart(db, session_token)
    try:
        add_to_cart(cart, "1")
        assert update_cart_quantity(cart, "1", 3) == (True, "Quantity updated.")
        ok, _ = update_cart_quantity(cart, "1", 0)
        assert not ok
        assert cart.get("1").quantity == 3
        assert remove_from_cart(cart, "1") is True
        assert remove_from_cart(cart, "1") is False
    finally:
        discard_session_cart(session_token)


def test_session_carts_are_isolated(db, session_token):
    _, other_token = login(db, "cart.owner@university.edu", "cart-pass-1")
    try:
        first = get_session_cart(db, session_token)
        second = get_session_cart(db, other_token)
        add_to_cart(first, "1")
        assert second.is_empty()
        assert get_session_cart(db, session_token) is first
    finally:
        discard_session_cart(session_token)
        discard_session_cart(other_token)


@pytest.mark.parametrize("quantity", [True, False, 2.0, "3"])
def test_update_quantity_rejects_non_integers(cart, make_dish, quantity):
    cart.add_item(make_dish("a"))
    with pytest.raises(InvalidQuantity):
        cart.update_quantity("a", quantity)
    assert cart.get("a").quantity == 1


@pytest.mark.parametrize("token", ["forged-token", "", None])
def test_unknown_token_gets_no_cart(db, token):
    with pytest.raises(Unauthenticated):
        get_session_cart(db, token)
    assert token not in _session_carts


def test_expired_session_gets_no_cart(db, session_token):
    session = db.query(AuthSession).filter(AuthSession.token == session_token).one()
    session.expires_at = datetime.utcnow() - timedelta(seconds=1)
    db.commit()
    with pytest.raises(Unauthenticated):
        get_session_cart(db, session_token)
    assert session_token not in _session_carts


def test_purge_drops_carts_without_live_session(db, session_token):
    cart = get_session_cart(db, session_token)
    add_to_cart(cart, "1")
    # a cart whose session row was removed outside end_session
    _session_carts["orphaned-token"] = Cart()
    try:
        purge_expired_sessions(db)
        assert "orphaned-token" not in _session_carts
        assert _session_carts[session_token] is cart
    finally:
        discard_session_cart(session_token)
        discard_session_cart("orphaned-token")


def test_prune_session_carts_keeps_live_tokens(db, session_token):
    get_session_cart(db, session_token)
    _session_carts["stale"] = Cart()
    try:
        assert prune_session_carts([session_token]) >= 1
        assert "stale" not in _session_carts
        assert session_token in _session_carts
    finally:
        discard_session_cart(session_token)
        discard_session_cart("stale")
