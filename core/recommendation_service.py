# core/recommendation_service.py
from core.catalog import get_all_dishes
from core.order_service import get_user_orders

# highest footprint in the catalog, used to scale the carbon factor
MAX_CARBON_FOOTPRINT = 5.8

CARBON_WEIGHT = 0.4
PREFERENCE_BONUS = 0.3
DIETARY_BONUS = 0.2
POPULARITY_WEIGHT = 0.1


def meets_restrictions(dish, dietary_restrictions) -> bool:
    for restriction in dietary_restrictions:
        r = restriction.lower()
        if r == "vegetarian" and not dish.is_vegetarian:
            return False
        if r == "vegan" and not dish.is_vegan:
            return False
        if r == "gluten-free" and not dish.is_gluten_free:
            return False
    return True


def score_dish(dish, preferred_ids=(), dietary_restrictions=()):
    """Returns (score, reason)"""
    reasons = []

    score = (1 - dish.carbon_footprint / MAX_CARBON_FOOTPRINT) * CARBON_WEIGHT
    reasons.append(f"Low carbon footprint ({dish.carbon_footprint} kg CO2e)")

    if dish.id in preferred_ids:
        score += PREFERENCE_BONUS
        reasons.append("Matches your preferences")

    if meets_restrictions(dish, dietary_restrictions):
        score += DIETARY_BONUS
        reasons.append("Meets your dietary restrictions")

    score += dish.popularity / 10 * POPULARITY_WEIGHT
    reasons.append(f"Popular choice ({dish.popularity}/10)")

    return score, ", ".join(reasons)


def get_meal_recommendations(dishes, preferred_ids=(), dietary_restrictions=(), limit: int = 5):
    """Top dishes for a user, best first. Ties keep catalog order."""
    preferred_ids = set(preferred_ids)
    scored = []
    for dish in dishes:
        score, reason = score_dish(dish, preferred_ids, dietary_restrictions)
        scored.append({"dish": dish, "score": score, "reason": reason})
    scored.sort(key=lambda r: r["score"], reverse=True)
    return scored[:limit]


def get_personalized_carbon_tips(daily_footprints, monthly_footprint: float = 0.0):
    """daily_footprints: {iso_date: kg CO2e eaten that day}"""
    tips = []
    if daily_footprints:
        average_daily = sum(daily_footprints.values()) / len(daily_footprints)
        if average_daily > 3:
            tips.append("Consider choosing more plant-based options to reduce your carbon footprint")
    if monthly_footprint > 40:
        tips.append("Your monthly carbon footprint is above average. Try incorporating more low-carbon meals")
    return tips


def recommend_for_user(db, user, dishes=None, limit: int = 5):
    """Recommendations using the user's past orders as preferences"""
    preferred = {item.dish_id for order in get_user_orders(db, user.id) for item in order.items}
    return get_meal_recommendations(
        dishes if dishes is not None else get_all_dishes(),
        preferred_ids=preferred,
        dietary_restrictions=user.dietary_restriction_list,
        limit=limit,
    )
