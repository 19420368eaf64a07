# core/pricing_service.py
"""Cart pricing and carbon-based discounts.

Two discount policies live here and must stay separate:

* the line-item policy is what the customer is charged: every Low carbon
  item gets 10% off its own line total, other items pay full price;
* the cart-average policy only produces the "discount rate" shown on the
  order confirmation. It is derived from the average footprint per serving
  and does not change any charged amount.
"""
from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP

from core.errors import EmptyCart
from models.cart import Cart, CartItem

LOW_CARBON_DISCOUNT = Decimal("0.10")
LOW_CARBON_FACTOR = Decimal("1") - LOW_CARBON_DISCOUNT

# (average kg CO2e per serving upper bound, display rate)
CART_AVERAGE_RATES = (
    (1.0, Decimal("0.10")),
    (2.0, Decimal("0.05")),
)

# kg CO2e of a typical meal order, used for the "you saved" message
BASELINE_ORDER_CARBON = 5.0

CENT = Decimal("0.01")


def line_total(item: CartItem) -> Decimal:
    return item.dish.price * item.quantity


def discounted_line_total(item: CartItem) -> Decimal:
    """Line total after the line-item policy."""
    total = line_total(item)
    if item.dish.carbon_score == "Low":
        return total * LOW_CARBON_FACTOR
    return total


def subtotals_by_currency(cart: Cart) -> dict:
    """Sum of price * quantity per currency. Currencies are never mixed."""
    totals = defaultdict(Decimal)
    for item in cart.items():
        totals[item.dish.currency] += line_total(item)
    return dict(totals)


def discounted_totals_by_currency(cart: Cart) -> dict:
    totals = defaultdict(Decimal)
    for item in cart.items():
        totals[item.dish.currency] += discounted_line_total(item)
    return dict(totals)


def discounts_by_currency(cart: Cart) -> dict:
    subtotals = subtotals_by_currency(cart)
    discounted = discounted_totals_by_currency(cart)
    return {currency: subtotals[currency] - discounted[currency] for currency in subtotals}


def total_carbon_footprint(cart: Cart) -> float:
    return sum(item.dish.carbon_footprint * item.quantity for item in cart.items())


def total_quantity(cart: Cart) -> int:
    return cart.total_quantity()


def average_carbon_footprint(cart: Cart) -> float:
    quantity = total_quantity(cart)
    if quantity == 0:
        raise EmptyCart("Cannot compute an average footprint for an empty cart")
    return total_carbon_footprint(cart) / quantity


def cart_discount_rate(cart: Cart) -> Decimal:
    """Display-only rate from the cart-average policy. Empty cart -> 0."""
    if cart.is_empty():
        return Decimal("0")
    average = average_carbon_footprint(cart)
    for upper_bound, rate in CART_AVERAGE_RATES:
        if average < upper_bound:
            return rate
    return Decimal("0")


def estimated_carbon_saved(cart: Cart, baseline_kg: float = BASELINE_ORDER_CARBON) -> float:
    return max(0.0, baseline_kg - total_carbon_footprint(cart))


def round_amount(amount: Decimal) -> Decimal:
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(currency: str, amount) -> str:
    """format_amount("$", Decimal("25")) -> "$25.00" """
    return f"{currency}{round_amount(amount)}"


def summarize_cart(cart: Cart) -> dict:
    """Everything the checkout and order confirmation screens display."""
    lines = []
    for item in cart.items():
        lines.append({
            "dish_id": item.dish.id,
            "name": item.dish.name,
            "currency": item.dish.currency,
            "quantity": item.quantity,
            "carbon_score": item.dish.carbon_score,
            "subtotal": round_amount(line_total(item)),
            "discounted_subtotal": round_amount(discounted_line_total(item)),
        })

    return {
        "items": lines,
        "subtotals": {c: round_amount(a) for c, a in subtotals_by_currency(cart).items()},
        "discounted_totals": {c: round_amount(a) for c, a in discounted_totals_by_currency(cart).items()},
        "discounts": {c: round_amount(a) for c, a in discounts_by_currency(cart).items()},
        "display_discount_rate": cart_discount_rate(cart),
        "total_carbon": total_carbon_footprint(cart),
        "carbon_saved": estimated_carbon_saved(cart),
        "total_quantity": total_quantity(cart),
    }
