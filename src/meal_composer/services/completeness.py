"""Completeness rules for a meal plan selection."""

from collections.abc import Sequence

from meal_composer.domain.catalog import Meal, find_meal
from meal_composer.domain.selection import IncompleteMeal, MealSelection


def is_complete(selections: Sequence[MealSelection], meals: Sequence[Meal]) -> bool:
    """Return True when every active meal satisfies its mandatory categories.

    A plan without any active meal is incomplete.
    """
    active = [selection for selection in selections if selection.is_active]
    if not active:
        return False
    for selection in active:
        meal = find_meal(meals, selection.meal_id)
        if meal is None:
            return False
        if _missing_categories(selection, meal):
            return False
    return True


def incomplete_report(
    selections: Sequence[MealSelection], meals: Sequence[Meal]
) -> list[IncompleteMeal]:
    """Return the missing mandatory categories of each active meal."""
    report: list[IncompleteMeal] = []
    for selection in selections:
        if not selection.is_active:
            continue
        meal = find_meal(meals, selection.meal_id)
        if meal is None:
            continue
        missing = _missing_categories(selection, meal)
        if missing:
            report.append(
                IncompleteMeal(
                    meal_name=selection.meal_name, missing_categories=missing
                )
            )
    return report


def _missing_categories(selection: MealSelection, meal: Meal) -> tuple[str, ...]:
    if meal.is_free:
        return ()
    missing = []
    for category in meal.categories:
        if category.is_optional:
            continue
        selected = selection.find_category(category.id)
        if selected is None or not selected.foods:
            missing.append(category.name)
    return tuple(missing)
