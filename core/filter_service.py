# core/filter_service.py
"""Meal planner and order page dish filters.

Price filtering compares amounts across currencies with a fixed rate of
80 rupees to the dollar. This is an approximation used only to place
dishes on the price slider; checkout never converts currencies.
"""
from dataclasses import dataclass

from models.dish import REFERENCE_CURRENCY

REGIONAL_CUISINE_TAGS = frozenset({"Indian", "South Indian", "North Indian", "South Asian"})

APPROXIMATE_FX_RATE = 80
DEFAULT_PRICE_RANGE = (0, 300)
POPULAR_THRESHOLD = 8


@dataclass
class DishFilter:
    search_text: str = ""
    cuisine_tags: frozenset = frozenset()
    # None disables the price filter; the planner slider starts at DEFAULT_PRICE_RANGE
    price_range: tuple = None
    carbon_scores: frozenset = frozenset()
    vegetarian: bool = False
    vegan: bool = False
    gluten_free: bool = False
    # the "Indian cuisine" toggle; replaces cuisine_tags when on
    regional_cuisine: bool = False

    def __post_init__(self):
        self.cuisine_tags = frozenset(self.cuisine_tags)
        self.carbon_scores = frozenset(self.carbon_scores)


def normalized_price(dish) -> float:
    price = float(dish.price)
    if dish.currency != REFERENCE_CURRENCY:
        return price / APPROXIMATE_FX_RATE
    return price


def _matches_search(dish, query):
    return (
        query in dish.name.lower()
        or query in dish.description.lower()
        or any(query in ingredient.lower() for ingredient in dish.ingredients)
    )


def _price_bounds(criteria):
    low, high = criteria.price_range
    # slider bounds are in rupees while the Indian tag is selected
    divisor = APPROXIMATE_FX_RATE if "Indian" in criteria.cuisine_tags else 1
    return low / divisor, high / divisor


def filter_dishes(catalog, criteria: DishFilter = None):
    """Apply the planner filters. Keeps catalog order."""
    criteria = criteria or DishFilter()
    result = list(catalog)

    if criteria.search_text:
        query = criteria.search_text.lower()
        result = [d for d in result if _matches_search(d, query)]

    if criteria.regional_cuisine:
        result = [d for d in result if d.ethno_tags & REGIONAL_CUISINE_TAGS]
    elif criteria.cuisine_tags:
        result = [d for d in result if d.ethno_tags & criteria.cuisine_tags]

    if criteria.price_range is not None:
        low, high = _price_bounds(criteria)
        result = [d for d in result if low <= normalized_price(d) <= high]

    if criteria.carbon_scores:
        result = [d for d in result if d.carbon_score in criteria.carbon_scores]

    if criteria.vegetarian:
        result = [d for d in result if d.is_vegetarian]
    if criteria.vegan:
        result = [d for d in result if d.is_vegan]
    if criteria.gluten_free:
        result = [d for d in result if d.is_gluten_free]

    return result


def all_ethno_tags(catalog):
    return sorted({tag for dish in catalog for tag in dish.ethno_tags})


# Order page tabs

def low_carbon_dishes(catalog):
    return [d for d in catalog if d.carbon_score == "Low"]


def vegetarian_dishes(catalog):
    return [d for d in catalog if d.is_vegetarian]


def popular_dishes(catalog, min_popularity: int = POPULAR_THRESHOLD):
    return [d for d in catalog if d.popularity >= min_popularity]
