"""Planning session that owns one user's selection state."""

import logging
from collections.abc import Mapping, Sequence

from meal_composer.domain.catalog import Meal, find_meal, meal_ids
from meal_composer.domain.selection import IncompleteMeal, MealSelection
from meal_composer.services import completeness, export, selection

_logger = logging.getLogger(__name__)


class MealPlanner:
    """Holds the catalog, overrides and selections of a planning session.

    The catalog and overrides are explicit inputs; the selection store
    functions do the actual work.
    """

    def __init__(
        self,
        meals: Sequence[Meal] = (),
        overrides: Mapping[str, float] | None = None,
    ) -> None:
        self._meals: tuple[Meal, ...] = tuple(meals)
        self._overrides: dict[str, float] = dict(overrides or {})
        self._selections = selection.initial_selections(self._meals)

    @property
    def meals(self) -> tuple[Meal, ...]:
        return self._meals

    @property
    def overrides(self) -> dict[str, float]:
        return dict(self._overrides)

    @property
    def selections(self) -> tuple[MealSelection, ...]:
        return self._selections

    @property
    def has_selections(self) -> bool:
        return selection.has_selections(self._selections)

    @property
    def is_complete(self) -> bool:
        return completeness.is_complete(self._selections, self._meals)

    def load_catalog(self, meals: Sequence[Meal]) -> None:
        """Replace the catalog, resetting selections if the meals changed."""
        previous = meal_ids(self._meals)
        self._meals = tuple(meals)
        if meal_ids(self._meals) != previous:
            _logger.debug("Catalog meals changed, resetting selections")
            self._selections = selection.initial_selections(self._meals)

    def set_overrides(self, overrides: Mapping[str, float]) -> None:
        """Replace the override map used by later toggles."""
        self._overrides = dict(overrides)

    def toggle_food(  # noqa: PLR0913
        self,
        meal_id: str,
        category_id: str,
        category_name: str,
        food_id: str,
        food_name: str,
        base_weight: float,
        note: str | None = None,
    ) -> None:
        """Add or remove a food in a meal category."""
        self._selections = selection.toggle_food(
            self._selections,
            meal_id,
            category_id,
            category_name,
            food_id,
            food_name,
            base_weight,
            note=note,
            overrides=self._overrides,
        )
        _logger.debug("Toggled %s in %s/%s", food_id, meal_id, category_id)

    def toggle_item(self, meal_id: str, category_id: str, item_id: str) -> None:
        """Toggle a catalog item by id; unknown ids are ignored."""
        meal = find_meal(self._meals, meal_id)
        category = meal.find_category(category_id) if meal else None
        item = category.find_item(item_id) if category else None
        if category is None or item is None:
            return
        self.toggle_food(
            meal_id,
            category.id,
            category.name,
            item.id,
            item.name,
            item.base_weight,
            note=item.note,
        )

    def update_percentage(
        self, meal_id: str, category_id: str, food_id: str, new_percentage: float
    ) -> None:
        """Change a food's share within its category."""
        self._selections = selection.update_percentage(
            self._selections, meal_id, category_id, food_id, new_percentage
        )
        _logger.debug(
            "Set %s in %s/%s to %s%%", food_id, meal_id, category_id, new_percentage
        )

    def is_food_selected(self, meal_id: str, food_id: str) -> bool:
        return selection.is_food_selected(self._selections, meal_id, food_id)

    def get_meal_selection(self, meal_id: str) -> MealSelection | None:
        return selection.get_meal_selection(self._selections, meal_id)

    def clear_meal(self, meal_id: str) -> None:
        self._selections = selection.clear_meal(self._selections, meal_id)

    def clear_all(self) -> None:
        self._selections = selection.clear_all(self._selections)

    def incomplete_meals(self) -> list[IncompleteMeal]:
        """Return the mandatory categories still missing per active meal."""
        return completeness.incomplete_report(self._selections, self._meals)

    def plan_text(self) -> str:
        return export.render_plan_text(self._selections)

    def prompt_text(self) -> str:
        return export.render_prompt_text(self._selections)
