import pytest

from core.catalog import get_all_dishes
from core.filter_service import (
    DishFilter,
    all_ethno_tags,
    filter_dishes,
    low_carbon_dishes,
    popular_dishes,
    vegetarian_dishes,
)
from models.dish import CARBON_SCORES

CATALOG = get_all_dishes()


def _ids(dishes):
    return [d.id for d in dishes]


@pytest.mark.parametrize("dish", CATALOG, ids=lambda d: d.name)
def test_carbon_filter_membership(dish):
    assert filter_dishes([dish], DishFilter(carbon_scores={dish.carbon_score})) == [dish]
    others = set(CARBON_SCORES) - {dish.carbon_score}
    assert filter_dishes([dish], DishFilter(carbon_scores=others)) == []


def test_no_criteria_returns_catalog_in_order():
    assert filter_dishes(CATALOG) == list(CATALOG)


def test_search_matches_name_description_and_ingredients():
    assert _ids(filter_dishes(CATALOG, DishFilter(search_text="DOSA"))) == ["3"]
    assert "1" in _ids(filter_dishes(CATALOG, DishFilter(search_text="tahini")))
    # ingredient only
    assert _ids(filter_dishes(CATALOG, DishFilter(search_text="urad"))) == ["3"]


def test_regional_cuisine_toggle_overrides_tag_filter():
    criteria = DishFilter(cuisine_tags={"Mexican"}, regional_cuisine=True)
    assert _ids(filter_dishes(CATALOG, criteria)) == ["2", "3", "6", "9"]


def test_cuisine_tags_intersect():
    criteria = DishFilter(cuisine_tags={"Japanese", "Italian"})
    assert _ids(filter_dishes(CATALOG, criteria)) == ["5", "8", "11"]


def test_price_range_normalizes_rupees(make_dish):
    dollars = make_dish("d", price="6", currency="$")
    rupees = make_dish("r", price="400", currency="₹")  # ~5 dollars
    criteria = DishFilter(price_range=(4, 7))
    assert _ids(filter_dishes([dollars, rupees], criteria)) == ["d", "r"]

    criteria = DishFilter(price_range=(5.5, 7))
    assert _ids(filter_dishes([dollars, rupees], criteria)) == ["d"]


def test_price_slider_in_rupees_when_indian_tag_selected(make_dish):
    rupees = make_dish("r", price="160", currency="₹", ethno_tags={"Indian"})
    dollars = make_dish("d", price="150", currency="$", ethno_tags={"Indian"})
    criteria = DishFilter(cuisine_tags={"Indian"}, price_range=(0, 300))
    # bounds become 0..3.75; 160 rupees is 2 dollars, the 150 dollar dish falls out
    assert _ids(filter_dishes([rupees, dollars], criteria)) == ["r"]


def test_dietary_flags_combine_with_and():
    criteria = DishFilter(vegan=True, gluten_free=True)
    result = filter_dishes(CATALOG, criteria)
    assert result
    assert all(d.is_vegan and d.is_gluten_free for d in result)
    assert "10" not in _ids(result)  # vegan but served with sourdough


def test_filters_compose():
    criteria = DishFilter(regional_cuisine=True, carbon_scores={"Low"}, vegan=True, price_range=(0, 300))
    assert _ids(filter_dishes(CATALOG, criteria)) == ["3", "6"]


def test_tab_helpers():
    assert all(d.carbon_score == "Low" for d in low_carbon_dishes(CATALOG))
    assert all(d.is_vegetarian for d in vegetarian_dishes(CATALOG))
    assert all(d.popularity >= 8 for d in popular_dishes(CATALOG))
    assert "4" not in _ids(popular_dishes(CATALOG))


def test_all_ethno_tags_sorted_unique():
    tags = all_ethno_tags(CATALOG)
    assert tags == sorted(set(tags))
    assert "South Indian" in tags
