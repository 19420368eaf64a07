# models/dish.py
from dataclasses import dataclass, field
from decimal import Decimal

CARBON_SCORES = ("Low", "Medium", "High")
REFERENCE_CURRENCY = "$"


@dataclass(frozen=True)
class Nutrition:
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    fiber: float = 0

    def __post_init__(self):
        for name in ("calories", "protein", "carbs", "fat", "fiber"):
            if getattr(self, name) < 0:
                raise ValueError(f"nutrition.{name} must be non-negative")


@dataclass(frozen=True)
class Dish:
    """A catalog dish. Reference data: built once at import, never mutated."""

    id: str
    name: str
    price: Decimal
    currency: str
    carbon_footprint: float
    carbon_score: str
    description: str = ""
    ingredients: tuple = ()
    nutrition: Nutrition = field(default_factory=Nutrition)
    ethno_tags: frozenset = frozenset()
    is_vegetarian: bool = False
    is_vegan: bool = False
    is_gluten_free: bool = False
    allergens: frozenset = frozenset()
    popularity: int = 0

    def __post_init__(self):
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "price", Decimal(str(self.price)))
        object.__setattr__(self, "ingredients", tuple(self.ingredients))
        object.__setattr__(self, "ethno_tags", frozenset(self.ethno_tags))
        object.__setattr__(self, "allergens", frozenset(self.allergens))

        if self.price < 0:
            raise ValueError("price must be non-negative")
        if self.carbon_footprint < 0:
            raise ValueError("carbon_footprint must be non-negative")
        if self.carbon_score not in CARBON_SCORES:
            raise ValueError(f"carbon_score must be one of {CARBON_SCORES}")
        if not 0 <= self.popularity <= 10:
            raise ValueError("popularity must be between 0 and 10")

    @property
    def is_low_carbon(self) -> bool:
        return self.carbon_score == "Low"


def carbon_score_for(footprint: float) -> str:
    """Bucket a kg CO2e footprint into Low / Medium / High."""
    if footprint < 1.0:
        return "Low"
    if footprint < 2.5:
        return "Medium"
    return "High"
