"""Request models for the HTTP API."""

from pydantic import BaseModel, Field, StrictFloat, StrictInt


class FoodOverridesPayload(BaseModel):
    """Full override map; ``null`` clears an entry.

    Weights are strict so booleans and numeric strings are rejected rather
    than coerced.
    """

    overrides: dict[str, StrictFloat | StrictInt | None]


class FoodPayload(BaseModel):
    """Fields accepted for a catalog food."""

    name: str | None = None
    note: str | None = None
    sub_group: str | None = None
    sub_group_icon: str | None = None


class MealCategoryFoodPayload(BaseModel):
    """Fields accepted for a food placed in a meal category."""

    meal_category_id: str | None = None
    food_id: str | None = None
    base_weight: float | None = Field(default=None, gt=0)
    sort_order: int | None = None
