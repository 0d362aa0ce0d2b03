"""Supabase repository for food weight overrides."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from meal_composer.services.overrides import OverrideRepository


@dataclass
class SupabaseOverrideRepository(OverrideRepository):
    """Supabase implementation backed by ``user_food_overrides``."""

    client: Client

    def get_overrides(self, user_id: UUID) -> dict[str, float]:
        """Return overrides keyed by meal-category-food id."""
        response = (
            self.client.table("user_food_overrides")
            .select("meal_category_food_id, custom_weight")
            .eq("user_id", str(user_id))
            .execute()
        )
        overrides: dict[str, float] = {}
        for row in response.data or []:
            weight = row.get("custom_weight")
            if weight is None:
                continue
            overrides[str(row["meal_category_food_id"])] = float(weight)
        return overrides

    def replace_overrides(self, user_id: UUID, overrides: dict[str, float]) -> None:
        """Delete the user's overrides and insert the new set."""
        self.client.table("user_food_overrides").delete().eq(
            "user_id", str(user_id)
        ).execute()
        rows = [
            {
                "user_id": str(user_id),
                "meal_category_food_id": item_id,
                "custom_weight": weight,
            }
            for item_id, weight in overrides.items()
        ]
        if rows:
            self.client.table("user_food_overrides").insert(rows).execute()
