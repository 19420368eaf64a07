# core/analytics_service.py
from collections import defaultdict
from datetime import date, timedelta

import pandas as pd
from sqlalchemy.orm import Session

from models.order import Order, OrderItem
from models.waste_entry import WasteEntry

ORGANIC_WASTE_TYPES = ("Food Scraps", "Vegetables", "Fruits")
EDIBLE_WASTE_TYPES = ("Prepared Food", "Leftovers")


def _sum_by(entries, key):
    totals = defaultdict(float)
    for entry in entries:
        totals[getattr(entry, key)] += entry.quantity
    return dict(totals)


def aggregate_waste(entries, top_n: int = 5):
    """
    Summarise a waste log.
    Returns: dict with total quantity, per source / food type / disposal
    method / meal period totals and the compost percentage.
    """
    entries = list(entries)
    total = sum(e.quantity for e in entries)

    by_disposal = _sum_by(entries, "disposal_method")
    compost = by_disposal.get("Compost", 0.0)
    compost_percentage = (compost / total * 100) if total > 0 else 0.0

    # sorted() is stable: ties keep first-seen order
    by_type = sorted(_sum_by(entries, "food_type").items(), key=lambda kv: kv[1], reverse=True)

    return {
        "total_quantity": total,
        "entry_count": len(entries),
        "by_source": _sum_by(entries, "source"),
        "by_food_type": dict(by_type[:top_n]),
        "by_disposal_method": by_disposal,
        "by_meal_period": _sum_by(entries, "meal_period"),
        "compost_percentage": compost_percentage,
    }


def waste_by_day(entries, end_date: date, days: int = 7):
    """
    Daily waste totals for the `days` days ending on end_date (inclusive).
    Returns: dict with ISO dates and kg, zero-filled.
    """
    index = pd.date_range(end=pd.Timestamp(end_date), periods=days, freq="D")
    rows = [(pd.Timestamp(e.date), e.quantity) for e in entries]
    if rows:
        frame = pd.DataFrame(rows, columns=["date", "quantity"])
        daily = frame.groupby("date")["quantity"].sum()
    else:
        daily = pd.Series(dtype=float)
    daily = daily.reindex(index, fill_value=0.0)

    return {
        "dates": [ts.date().isoformat() for ts in daily.index],
        "quantity": [float(q) for q in daily.values],
    }


def get_waste_trend(entries, end_date: date, days: int = 7):
    """Compare the trailing window with the window before it."""
    entries = list(entries)
    current = sum(waste_by_day(entries, end_date, days)["quantity"])
    previous = sum(waste_by_day(entries, end_date - timedelta(days=days), days)["quantity"])

    if current > previous:
        direction = "up"
    elif current < previous:
        direction = "down"
    else:
        direction = "flat"

    percentage = abs(current - previous) / previous * 100 if previous > 0 else 0.0

    return {
        "direction": direction,
        "percentage": round(percentage, 1),
        "current": current,
        "previous": previous,
    }


def get_waste_suggestions(stats: dict):
    """Data-driven insights and tips from an aggregate_waste() result"""
    insights = {
        "top_food_types": list(stats["by_food_type"])[:3],
        "top_source": None,
        "top_meal_period": None,
        "tips": [],
    }
    if stats["total_quantity"] <= 0:
        return insights

    insights["top_source"] = max(stats["by_source"].items(), key=lambda kv: kv[1])[0]
    insights["top_meal_period"] = max(stats["by_meal_period"].items(), key=lambda kv: kv[1])[0]

    tips = insights["tips"]
    food_type, quantity = next(iter(stats["by_food_type"].items()))
    share = quantity / stats["total_quantity"] * 100
    tips.append(f"Focus on reducing {food_type} waste, which accounts for {share:.1f}% of total waste")

    if any(t in stats["by_food_type"] for t in ORGANIC_WASTE_TYPES):
        tips.append("Consider implementing a composting program for organic waste")
    if any(t in stats["by_food_type"] for t in EDIBLE_WASTE_TYPES):
        tips.append("Partner with local food banks to donate edible food waste")
    if stats["compost_percentage"] < 50:
        tips.append("Create clear signage for proper waste sorting to increase composting rates")

    return insights


def get_best_selling_dishes(db: Session, limit=10):
    """
    Get top selling dishes
    Returns: list of dicts with dish name, quantity sold, carbon score
    """
    item_stats = defaultdict(lambda: {"quantity": 0, "carbon_score": None, "dish_id": None})

    for oi in db.query(OrderItem).all():
        stats = item_stats[oi.dish_name]
        stats["quantity"] += oi.quantity
        stats["carbon_score"] = oi.carbon_score
        stats["dish_id"] = oi.dish_id

    items_list = [
        {
            "name": name,
            "dish_id": stats["dish_id"],
            "quantity": stats["quantity"],
            "carbon_score": stats["carbon_score"],
        }
        for name, stats in item_stats.items()
    ]

    items_list.sort(key=lambda x: x["quantity"], reverse=True)

    return items_list[:limit]


def get_dashboard_summary(db: Session):
    """
    Get sustainability dashboard summary stats
    Returns: dict with key metrics
    """
    orders = db.query(Order).all()
    order_items = db.query(OrderItem).all()

    carbon_consumed = sum(o.total_carbon or 0.0 for o in orders)
    low_carbon_servings = sum(oi.quantity for oi in order_items if oi.carbon_score == "Low")
    total_servings = sum(oi.quantity for oi in order_items)

    waste = aggregate_waste(db.query(WasteEntry).all())

    return {
        "total_orders": len(orders),
        "total_servings": total_servings,
        "low_carbon_servings": low_carbon_servings,
        "low_carbon_share": (low_carbon_servings / total_servings * 100) if total_servings else 0.0,
        "carbon_consumed": carbon_consumed,
        "total_waste": waste["total_quantity"],
        "compost_percentage": waste["compost_percentage"],
    }
