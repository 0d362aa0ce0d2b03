"""Supabase repository for catalog administration."""

from dataclasses import dataclass

from supabase import Client

from meal_composer.services.catalog_admin import CatalogAdminRepository


@dataclass
class SupabaseCatalogAdminRepository(CatalogAdminRepository):
    """Writes ``foods`` and ``meal_category_foods`` rows."""

    client: Client

    def create_food(self, payload: dict[str, object]) -> dict[str, object]:
        """Insert a food row and return it."""
        return self._insert("foods", payload)

    def update_food(
        self, food_id: str, payload: dict[str, object]
    ) -> dict[str, object] | None:
        """Update a food row and return it."""
        return self._update("foods", food_id, payload)

    def delete_food(self, food_id: str) -> None:
        """Delete a food row."""
        self.client.table("foods").delete().eq("id", food_id).execute()

    def create_item(self, payload: dict[str, object]) -> dict[str, object]:
        """Insert a meal-category-food row and return it."""
        return self._insert("meal_category_foods", payload)

    def update_item(
        self, item_id: str, payload: dict[str, object]
    ) -> dict[str, object] | None:
        """Update a meal-category-food row and return it."""
        return self._update("meal_category_foods", item_id, payload)

    def delete_item(self, item_id: str) -> None:
        """Delete a meal-category-food row."""
        self.client.table("meal_category_foods").delete().eq("id", item_id).execute()

    def _insert(self, table: str, payload: dict[str, object]) -> dict[str, object]:
        response = self.client.table(table).insert(payload).execute()
        if not response.data:
            raise RuntimeError(f"Failed to create {table} row")
        return response.data[0]

    def _update(
        self, table: str, row_id: str, payload: dict[str, object]
    ) -> dict[str, object] | None:
        response = self.client.table(table).update(payload).eq("id", row_id).execute()
        if not response.data:
            return None
        return response.data[0]
