"""Domain models for a meal plan selection."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectedFood:
    """A food picked for a category with its share and derived grams.

    ``base_weight`` is the effective weight resolved when the food was last
    toggled; later override changes only apply after another toggle.
    """

    food_id: str
    name: str
    base_weight: float
    percentage: float
    adjusted_weight: int
    note: str | None = None


@dataclass(frozen=True)
class CategorySelection:
    """Selected foods of one category; shares sum to 100 when non-empty."""

    category_id: str
    category_name: str
    foods: tuple[SelectedFood, ...] = ()

    def find_food(self, food_id: str) -> SelectedFood | None:
        """Return the selected food with the given id, if present."""
        for food in self.foods:
            if food.food_id == food_id:
                return food
        return None


@dataclass(frozen=True)
class MealSelection:
    """Selected categories for a meal."""

    meal_id: str
    meal_name: str
    categories: tuple[CategorySelection, ...] = ()

    @property
    def is_active(self) -> bool:
        """Return True when at least one category has been selected."""
        return bool(self.categories)

    def find_category(self, category_id: str) -> CategorySelection | None:
        """Return the category selection with the given id, if present."""
        for category in self.categories:
            if category.category_id == category_id:
                return category
        return None


@dataclass(frozen=True)
class IncompleteMeal:
    """Mandatory categories still missing from an active meal."""

    meal_name: str
    missing_categories: tuple[str, ...]
