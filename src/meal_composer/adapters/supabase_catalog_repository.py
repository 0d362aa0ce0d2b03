"""Supabase implementation of the meal catalog source."""

from collections import defaultdict
from dataclasses import dataclass

from supabase import Client

from meal_composer.domain.catalog import Category, FoodItem, Meal
from meal_composer.services.catalog import CatalogRepository


@dataclass
class SupabaseCatalogRepository(CatalogRepository):
    """Builds the meal hierarchy from the catalog tables."""

    client: Client

    def fetch_meals(self) -> list[Meal]:
        """Return ordered meals with their categories and items."""
        meal_rows = self._select_ordered("meals")
        meal_category_rows = self._select_ordered("meal_categories")
        item_rows = self._select_ordered("meal_category_foods")
        foods = {str(row["id"]): row for row in self._select_all("foods")}
        categories = {str(row["id"]): row for row in self._select_all("categories")}

        items_by_meal_category: dict[str, list[dict[str, object]]] = defaultdict(
            list
        )
        for row in item_rows:
            items_by_meal_category[str(row["meal_category_id"])].append(row)

        meal_categories_by_meal: dict[str, list[dict[str, object]]] = defaultdict(
            list
        )
        for row in meal_category_rows:
            meal_categories_by_meal[str(row["meal_id"])].append(row)

        return [
            Meal(
                id=str(meal_row.get("slug") or meal_row["id"]),
                name=str(meal_row.get("name") or ""),
                icon=str(meal_row.get("icon") or ""),
                is_free=bool(meal_row.get("is_free")),
                categories=tuple(
                    _parse_category(
                        meal_category,
                        categories.get(str(meal_category.get("category_id"))),
                        items_by_meal_category.get(str(meal_category["id"]), []),
                        foods,
                    )
                    for meal_category in meal_categories_by_meal.get(
                        str(meal_row["id"]), []
                    )
                ),
            )
            for meal_row in meal_rows
        ]

    def _select_ordered(self, table: str) -> list[dict[str, object]]:
        response = self.client.table(table).select("*").order("sort_order").execute()
        return list(response.data or [])

    def _select_all(self, table: str) -> list[dict[str, object]]:
        response = self.client.table(table).select("*").execute()
        return list(response.data or [])


def _parse_category(
    meal_category: dict[str, object],
    category: dict[str, object] | None,
    item_rows: list[dict[str, object]],
    foods: dict[str, dict[str, object]],
) -> Category:
    """Parse a meal-category row; its id keys the category within the meal."""
    category = category or {}
    return Category(
        id=str(meal_category["id"]),
        name=str(category.get("name") or ""),
        icon=str(meal_category.get("icon_override") or category.get("icon") or ""),
        is_optional=bool(meal_category.get("is_optional")),
        items=tuple(
            _parse_item(row, foods.get(str(row.get("food_id")))) for row in item_rows
        ),
    )


def _parse_item(row: dict[str, object], food: dict[str, object] | None) -> FoodItem:
    """Parse a meal-category-food row; its id is the override key."""
    food = food or {}
    food_id = row.get("food_id")
    return FoodItem(
        id=str(row["id"]),
        name=str(food.get("name") or ""),
        base_weight=float(row.get("base_weight") or 0.0),
        note=food.get("note") or None,
        sub_group=food.get("sub_group") or None,
        sub_group_icon=food.get("sub_group_icon") or None,
        food_id=str(food_id) if food_id is not None else None,
    )
