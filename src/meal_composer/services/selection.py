"""Selection store: pure state transitions over meal selections.

Every function takes the current selections and returns a new tuple. Unknown
meal, category or food ids pass the state through unchanged.
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import replace

from meal_composer.domain.catalog import Meal
from meal_composer.domain.selection import (
    CategorySelection,
    MealSelection,
    SelectedFood,
)
from meal_composer.services.overrides import resolve_weight

FULL_SHARE = 100.0

Selections = tuple[MealSelection, ...]


def initial_selections(meals: Sequence[Meal]) -> Selections:
    """Return one empty selection per catalog meal."""
    return tuple(MealSelection(meal_id=meal.id, meal_name=meal.name) for meal in meals)


def toggle_food(  # noqa: PLR0913
    selections: Sequence[MealSelection],
    meal_id: str,
    category_id: str,
    category_name: str,
    food_id: str,
    food_name: str,
    base_weight: float,
    note: str | None = None,
    overrides: Mapping[str, float] | None = None,
) -> Selections:
    """Add the food to its category, or remove it when already selected.

    The affected category is reset to an equal split and every food in it is
    re-resolved against the overrides.
    """
    effective_weight = resolve_weight(food_id, base_weight, overrides)
    candidate = SelectedFood(
        food_id=food_id,
        name=food_name,
        base_weight=effective_weight,
        percentage=FULL_SHARE,
        adjusted_weight=adjusted_weight(effective_weight, FULL_SHARE),
        note=note,
    )
    return tuple(
        _toggle_in_meal(meal, category_id, category_name, candidate, overrides)
        if meal.meal_id == meal_id
        else meal
        for meal in selections
    )


def update_percentage(
    selections: Sequence[MealSelection],
    meal_id: str,
    category_id: str,
    food_id: str,
    new_percentage: float,
) -> Selections:
    """Set one food's share and scale the other foods into the remainder.

    The value is clamped to ``[0, 100]``. A lone food stays at 100%. Base
    weights are not re-resolved here.
    """
    return tuple(
        _update_in_meal(meal, category_id, food_id, new_percentage)
        if meal.meal_id == meal_id
        else meal
        for meal in selections
    )


def is_food_selected(
    selections: Sequence[MealSelection], meal_id: str, food_id: str
) -> bool:
    """Return True when the food is selected in any category of the meal."""
    meal = get_meal_selection(selections, meal_id)
    if meal is None:
        return False
    return any(category.find_food(food_id) for category in meal.categories)


def get_meal_selection(
    selections: Sequence[MealSelection], meal_id: str
) -> MealSelection | None:
    """Return the selection for a meal, if present."""
    for meal in selections:
        if meal.meal_id == meal_id:
            return meal
    return None


def clear_meal(selections: Sequence[MealSelection], meal_id: str) -> Selections:
    """Drop every selected category of one meal."""
    return tuple(
        replace(meal, categories=()) if meal.meal_id == meal_id else meal
        for meal in selections
    )


def clear_all(selections: Sequence[MealSelection]) -> Selections:
    """Drop every selected category of every meal."""
    return tuple(replace(meal, categories=()) for meal in selections)


def has_selections(selections: Sequence[MealSelection]) -> bool:
    """Return True when at least one meal has a selected category."""
    return any(meal.is_active for meal in selections)


def adjusted_weight(base_weight: float, percentage: float) -> int:
    """Return the grams for a share of a base weight, rounded half up."""
    return math.floor(base_weight * percentage / FULL_SHARE + 0.5)


def _toggle_in_meal(
    meal: MealSelection,
    category_id: str,
    category_name: str,
    candidate: SelectedFood,
    overrides: Mapping[str, float] | None,
) -> MealSelection:
    category = meal.find_category(category_id)
    if category is None:
        created = CategorySelection(
            category_id=category_id,
            category_name=category_name,
            foods=(candidate,),
        )
        return replace(meal, categories=(*meal.categories, created))

    if category.find_food(candidate.food_id) is None:
        foods = (*category.foods, candidate)
    else:
        foods = tuple(
            food for food in category.foods if food.food_id != candidate.food_id
        )
    if not foods:
        return replace(
            meal,
            categories=tuple(
                existing
                for existing in meal.categories
                if existing.category_id != category_id
            ),
        )

    updated = replace(category, foods=_equal_split(foods, overrides))
    return replace(
        meal,
        categories=tuple(
            updated if existing.category_id == category_id else existing
            for existing in meal.categories
        ),
    )


def _equal_split(
    foods: tuple[SelectedFood, ...], overrides: Mapping[str, float] | None
) -> tuple[SelectedFood, ...]:
    share = FULL_SHARE / len(foods)
    split = []
    for food in foods:
        weight = resolve_weight(food.food_id, food.base_weight, overrides)
        split.append(
            replace(
                food,
                base_weight=weight,
                percentage=share,
                adjusted_weight=adjusted_weight(weight, share),
            )
        )
    return tuple(split)


def _update_in_meal(
    meal: MealSelection, category_id: str, food_id: str, new_percentage: float
) -> MealSelection:
    return replace(
        meal,
        categories=tuple(
            _redistribute(category, food_id, new_percentage)
            if category.category_id == category_id
            else category
            for category in meal.categories
        ),
    )


def _redistribute(
    category: CategorySelection, food_id: str, new_percentage: float
) -> CategorySelection:
    if len(category.foods) <= 1 or category.find_food(food_id) is None:
        return category
    if math.isnan(new_percentage):
        return category

    clamped = min(FULL_SHARE, max(0.0, float(new_percentage)))
    others = [food for food in category.foods if food.food_id != food_id]
    other_total = sum(food.percentage for food in others)
    remaining = FULL_SHARE - clamped

    foods = []
    for food in category.foods:
        if food.food_id == food_id:
            share = clamped
        elif other_total > 0:
            share = remaining * (food.percentage / other_total)
        else:
            share = remaining / len(others)
        foods.append(
            replace(
                food,
                percentage=share,
                adjusted_weight=adjusted_weight(food.base_weight, share),
            )
        )
    return replace(category, foods=tuple(foods))
