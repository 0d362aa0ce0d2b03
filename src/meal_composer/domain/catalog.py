"""Domain models for the meal catalog."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class FoodItem:
    """A choosable food inside a meal category."""

    id: str
    name: str
    base_weight: float
    note: str | None = None
    sub_group: str | None = None
    sub_group_icon: str | None = None
    food_id: str | None = None


@dataclass(frozen=True)
class Category:
    """A group of interchangeable foods within a meal."""

    id: str
    name: str
    icon: str = ""
    is_optional: bool = False
    items: tuple[FoodItem, ...] = ()

    def find_item(self, item_id: str) -> FoodItem | None:
        """Return the item with the given id, if present."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None


@dataclass(frozen=True)
class Meal:
    """A named eating occasion made of categories."""

    id: str
    name: str
    icon: str = ""
    is_free: bool = False
    categories: tuple[Category, ...] = ()

    def find_category(self, category_id: str) -> Category | None:
        """Return the category with the given id, if present."""
        for category in self.categories:
            if category.id == category_id:
                return category
        return None


def meal_ids(meals: Sequence[Meal]) -> tuple[str, ...]:
    """Return the ordered meal ids that identify a catalog."""
    return tuple(meal.id for meal in meals)


def find_meal(meals: Sequence[Meal], meal_id: str) -> Meal | None:
    """Return the meal with the given id, if present."""
    for meal in meals:
        if meal.id == meal_id:
            return meal
    return None
