# core/catalog.py
"""Static dish catalog served by the cafeteria.

Dishes are immutable and built once at import time; callers get the same
tuple back on every call.
"""
from core.errors import NotFoundError
from models.dish import Dish, Nutrition, carbon_score_for


def _dish(id, name, price, currency, footprint, **kwargs):
    return Dish(
        id=id,
        name=name,
        price=price,
        currency=currency,
        carbon_footprint=footprint,
        carbon_score=carbon_score_for(footprint),
        **kwargs,
    )


DISHES = (
    _dish(
        "1", "Mediterranean Quinoa Bowl", "8.50", "$", 0.7,
        description="Quinoa with roasted vegetables, chickpeas and lemon tahini.",
        ingredients=("Quinoa", "Chickpeas", "Zucchini", "Bell Pepper", "Tahini", "Lemon"),
        nutrition=Nutrition(calories=520, protein=18, carbs=72, fat=17, fiber=12),
        ethno_tags={"Mediterranean", "Middle Eastern"},
        is_vegetarian=True, is_vegan=True, is_gluten_free=True,
        allergens={"Sesame"},
        popularity=9,
    ),
    _dish(
        "2", "Paneer Tikka Masala", "180", "₹", 1.6,
        description="Grilled paneer in a spiced tomato and cream sauce with basmati rice.",
        ingredients=("Paneer", "Tomato", "Cream", "Garam Masala", "Basmati Rice"),
        nutrition=Nutrition(calories=640, protein=24, carbs=58, fat=34, fiber=5),
        ethno_tags={"Indian", "North Indian"},
        is_vegetarian=True, is_gluten_free=True,
        allergens={"Dairy"},
        popularity=9,
    ),
    _dish(
        "3", "Masala Dosa", "90", "₹", 0.5,
        description="Fermented rice and lentil crepe filled with spiced potato.",
        ingredients=("Rice", "Urad Dal", "Potato", "Mustard Seeds", "Curry Leaves"),
        nutrition=Nutrition(calories=410, protein=10, carbs=68, fat=11, fiber=6),
        ethno_tags={"Indian", "South Indian"},
        is_vegetarian=True, is_vegan=True, is_gluten_free=True,
        popularity=8,
    ),
    _dish(
        "4", "Beef Burger", "11.00", "$", 5.8,
        description="Grass-fed beef patty with cheddar, lettuce and tomato on a brioche bun.",
        ingredients=("Beef", "Cheddar", "Brioche Bun", "Lettuce", "Tomato"),
        nutrition=Nutrition(calories=780, protein=38, carbs=45, fat=46, fiber=3),
        ethno_tags={"American"},
        allergens={"Gluten", "Dairy", "Egg"},
        popularity=7,
    ),
    _dish(
        "5", "Chicken Teriyaki Rice", "9.75", "$", 1.9,
        description="Glazed chicken thigh with steamed rice and stir-fried greens.",
        ingredients=("Chicken", "Rice", "Soy Sauce", "Bok Choy", "Ginger"),
        nutrition=Nutrition(calories=610, protein=35, carbs=70, fat=16, fiber=3),
        ethno_tags={"Japanese", "East Asian"},
        allergens={"Soy", "Gluten"},
        popularity=8,
    ),
    _dish(
        "6", "Chana Masala", "120", "₹", 0.6,
        description="Chickpeas simmered with onion, tomato and warm spices.",
        ingredients=("Chickpeas", "Onion", "Tomato", "Cumin", "Coriander"),
        nutrition=Nutrition(calories=450, protein=16, carbs=60, fat=14, fiber=14),
        ethno_tags={"Indian", "North Indian", "South Asian"},
        is_vegetarian=True, is_vegan=True, is_gluten_free=True,
        popularity=8,
    ),
    _dish(
        "7", "Black Bean Tacos", "7.25", "$", 0.8,
        description="Corn tortillas with black beans, pico de gallo and avocado.",
        ingredients=("Corn Tortilla", "Black Beans", "Tomato", "Onion", "Avocado", "Lime"),
        nutrition=Nutrition(calories=480, protein=15, carbs=66, fat=18, fiber=15),
        ethno_tags={"Mexican", "Latin American"},
        is_vegetarian=True, is_vegan=True, is_gluten_free=True,
        popularity=8,
    ),
    _dish(
        "8", "Salmon Poke Bowl", "12.50", "$", 2.1,
        description="Raw salmon over sushi rice with edamame, cucumber and seaweed.",
        ingredients=("Salmon", "Sushi Rice", "Edamame", "Cucumber", "Seaweed", "Soy Sauce"),
        nutrition=Nutrition(calories=590, protein=32, carbs=64, fat=20, fiber=5),
        ethno_tags={"Hawaiian", "Japanese"},
        allergens={"Fish", "Soy"},
        popularity=7,
    ),
    _dish(
        "9", "Lamb Biryani", "250", "₹", 4.2,
        description="Layered basmati rice with slow-cooked lamb, saffron and fried onion.",
        ingredients=("Lamb", "Basmati Rice", "Saffron", "Yogurt", "Onion"),
        nutrition=Nutrition(calories=820, protein=36, carbs=88, fat=34, fiber=4),
        ethno_tags={"Indian", "South Asian"},
        is_gluten_free=True,
        allergens={"Dairy"},
        popularity=9,
    ),
    _dish(
        "10", "Lentil Soup", "5.50", "$", 0.4,
        description="Red lentils with carrot and cumin, served with sourdough.",
        ingredients=("Red Lentils", "Carrot", "Onion", "Cumin", "Sourdough"),
        nutrition=Nutrition(calories=360, protein=18, carbs=54, fat=6, fiber=13),
        ethno_tags={"Middle Eastern", "Mediterranean"},
        is_vegetarian=True, is_vegan=True,
        allergens={"Gluten"},
        popularity=6,
    ),
    _dish(
        "11", "Margherita Pizza", "9.00", "$", 2.4,
        description="Wood-fired pizza with tomato, mozzarella and basil.",
        ingredients=("Wheat Flour", "Tomato", "Mozzarella", "Basil", "Olive Oil"),
        nutrition=Nutrition(calories=700, protein=28, carbs=86, fat=26, fiber=4),
        ethno_tags={"Italian"},
        is_vegetarian=True,
        allergens={"Gluten", "Dairy"},
        popularity=9,
    ),
    _dish(
        "12", "Vegetable Pad Thai", "8.75", "$", 0.9,
        description="Rice noodles with tofu, bean sprouts, peanuts and tamarind sauce.",
        ingredients=("Rice Noodles", "Tofu", "Bean Sprouts", "Peanuts", "Tamarind"),
        nutrition=Nutrition(calories=560, protein=20, carbs=78, fat=19, fiber=6),
        ethno_tags={"Thai", "Southeast Asian"},
        is_vegetarian=True, is_vegan=True, is_gluten_free=True,
        allergens={"Peanuts", "Soy"},
        popularity=7,
    ),
)

_DISHES_BY_ID = {dish.id: dish for dish in DISHES}


def get_all_dishes():
    return DISHES


def get_dish(dish_id: str) -> Dish:
    dish = _DISHES_BY_ID.get(dish_id)
    if dish is None:
        raise NotFoundError(f"Dish {dish_id} not found")
    return dish
