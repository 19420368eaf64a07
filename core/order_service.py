# core/order_service.py
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.errors import EmptyCart, InternalError, NotFoundError
from core.logger import get_logger, log_action
from core.pricing_service import (
    discounted_line_total,
    format_amount,
    line_total,
    round_amount,
    total_carbon_footprint,
)
from models.cart import Cart
from models.order import Order, OrderItem
from models.user import User

logger = get_logger(__name__)


def place_order(db: Session, user_id: int, cart: Cart, pickup_time: str = None) -> Order:
    """Persist the cart as an order charged with the Low carbon line discount, then clear it."""
    if cart.is_empty():
        raise EmptyCart()

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")

    order = Order(
        user_id=user.id,
        pickup_time=pickup_time,
        total_carbon=total_carbon_footprint(cart),
    )
    for item in cart.items():
        order.items.append(OrderItem(
            dish_id=item.dish.id,
            dish_name=item.dish.name,
            currency=item.dish.currency,
            unit_price=item.dish.price,
            quantity=item.quantity,
            carbon_score=item.dish.carbon_score,
            carbon_footprint=item.dish.carbon_footprint,
            subtotal=round_amount(line_total(item)),
            discounted_subtotal=round_amount(discounted_line_total(item)),
        ))

    try:
        db.add(order)
        db.commit()
        db.refresh(order)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to place order for user %s", user_id)
        raise InternalError() from e

    cart.clear()

    totals = ", ".join(format_amount(c, a) for c, a in order.totals_by_currency().items())
    logger.info("Order %s placed by %s: %s", order.id, user.email, totals)
    log_action(db, user.email, f"Placed order #{order.id} ({totals})")
    return order


def get_user_orders(db: Session, user_id: int):
    """Order history, newest first"""
    return (
        db.query(Order)
        .filter(Order.user_id == user_id)
        .order_by(Order.created_at.desc(), Order.id.desc())
        .all()
    )


def order_totals_by_currency(order: Order):
    return {
        "subtotals": order.totals_by_currency(discounted=False),
        "totals": order.totals_by_currency(discounted=True),
    }


def daily_carbon_footprints(db: Session, user_id: int):
    """{iso_date: kg CO2e ordered that day} for one user"""
    daily = {}
    for order in get_user_orders(db, user_id):
        key = order.created_at.date().isoformat()
        daily[key] = daily.get(key, 0.0) + (order.total_carbon or 0.0)
    return daily
