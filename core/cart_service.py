# core/cart_service.py
import threading

from sqlalchemy.orm import Session

from core.catalog import get_dish
from core.errors import InvalidQuantity, NotFoundError, Unauthenticated
from core.logger import get_logger
from models.auth_session import AuthSession
from models.cart import Cart, MAX_QUANTITY_PER_ITEM

logger = get_logger(__name__)

# In-memory carts (session token -> Cart)
_session_carts = {}
_carts_lock = threading.Lock()


def get_session_cart(db: Session, session_token: str) -> Cart:
    """
    Get the cart for a live session, creating an empty one on first use.
    Unknown or expired tokens raise Unauthenticated and never get a cart.
    """
    session = None
    if session_token:
        session = db.query(AuthSession).filter(AuthSession.token == session_token).first()
    if session is None or session.is_expired():
        raise Unauthenticated()

    with _carts_lock:
        cart = _session_carts.get(session_token)
        if cart is None:
            cart = Cart()
            _session_carts[session_token] = cart
        return cart


def discard_session_cart(session_token: str):
    """Drop a session's cart (logout / expiry)"""
    with _carts_lock:
        _session_carts.pop(session_token, None)


def prune_session_carts(live_tokens):
    """Drop carts whose token is not in live_tokens. Returns how many were dropped."""
    live_tokens = set(live_tokens)
    with _carts_lock:
        stale = [token for token in _session_carts if token not in live_tokens]
        for token in stale:
            del _session_carts[token]
    return len(stale)


def add_to_cart(cart: Cart, dish_id: str):
    """Add one unit of a dish. Returns (added, message)."""
    try:
        dish = get_dish(dish_id)
    except NotFoundError as e:
        return False, e.message

    _, added = cart.add_item(dish)
    if not added:
        return False, f"{dish.name} is already at the maximum of {MAX_QUANTITY_PER_ITEM}."
    logger.debug("Added %s to cart (qty %s)", dish.id, cart.get(dish.id).quantity)
    return True, f"{dish.name} added to cart!"


def update_cart_quantity(cart: Cart, dish_id: str, quantity: int):
    """Update cart item quantity. Returns (success, message)."""
    if dish_id not in cart:
        return False, "Item is not in your cart."
    try:
        cart.update_quantity(dish_id, quantity)
    except InvalidQuantity as e:
        return False, e.message
    return True, "Quantity updated."


def remove_from_cart(cart: Cart, dish_id: str):
    """Remove item from cart"""
    if dish_id not in cart:
        return False
    cart.remove_item(dish_id)
    return True


def clear_cart(cart: Cart):
    cart.clear()


def get_cart_count(cart: Cart) -> int:
    """Get total number of items in cart"""
    return cart.total_quantity()
