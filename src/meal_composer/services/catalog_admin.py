"""Admin edits of the food catalog."""

import logging
from dataclasses import dataclass
from typing import Protocol

from meal_composer.services.catalog import CatalogService

_FOOD_FIELDS = ("name", "note", "sub_group", "sub_group_icon")
_ITEM_FIELDS = ("meal_category_id", "food_id", "base_weight", "sort_order")
_ITEM_UPDATE_FIELDS = ("base_weight", "sort_order")

_logger = logging.getLogger(__name__)


class InvalidCatalogChangeError(ValueError):
    """Raised when an admin edit is missing required fields."""


class CatalogAdminRepository(Protocol):
    """Persistence interface for catalog rows."""

    def create_food(self, payload: dict[str, object]) -> dict[str, object]:
        """Insert a food row and return it."""

    def update_food(
        self, food_id: str, payload: dict[str, object]
    ) -> dict[str, object] | None:
        """Update a food row and return it, or None when it does not exist."""

    def delete_food(self, food_id: str) -> None:
        """Delete a food row."""

    def create_item(self, payload: dict[str, object]) -> dict[str, object]:
        """Insert a meal-category-food row and return it."""

    def update_item(
        self, item_id: str, payload: dict[str, object]
    ) -> dict[str, object] | None:
        """Update a meal-category-food row and return it, or None."""

    def delete_item(self, item_id: str) -> None:
        """Delete a meal-category-food row."""


@dataclass
class CatalogAdminService:
    """Writes catalog rows and keeps the cached catalog fresh."""

    repository: CatalogAdminRepository
    catalog_service: CatalogService

    def create_food(self, payload: dict[str, object]) -> dict[str, object]:
        """Create a food; ``name`` is required."""
        if not payload.get("name"):
            raise InvalidCatalogChangeError("Food name is required")
        values = _pick(payload, _FOOD_FIELDS)
        for optional in ("note", "sub_group", "sub_group_icon"):
            values[optional] = values.get(optional) or None
        row = self.repository.create_food(values)
        self._changed("create_food", row.get("id"))
        return row

    def update_food(
        self, food_id: str, payload: dict[str, object]
    ) -> dict[str, object] | None:
        """Update the provided food fields."""
        row = self.repository.update_food(
            food_id, _require_fields(_pick(payload, _FOOD_FIELDS))
        )
        if row is not None:
            self._changed("update_food", food_id)
        return row

    def delete_food(self, food_id: str) -> None:
        """Delete a food."""
        self.repository.delete_food(food_id)
        self._changed("delete_food", food_id)

    def create_item(self, payload: dict[str, object]) -> dict[str, object]:
        """Place a food in a meal category with its base weight."""
        missing = [
            name
            for name in ("meal_category_id", "food_id", "base_weight")
            if not payload.get(name)
        ]
        if missing:
            raise InvalidCatalogChangeError(
                f"Missing required fields: {', '.join(missing)}"
            )
        values = _pick(payload, _ITEM_FIELDS)
        values["sort_order"] = values.get("sort_order") or 0
        row = self.repository.create_item(values)
        self._changed("create_item", row.get("id"))
        return row

    def update_item(
        self, item_id: str, payload: dict[str, object]
    ) -> dict[str, object] | None:
        """Update the base weight or sort order of a catalog item."""
        row = self.repository.update_item(
            item_id, _require_fields(_pick(payload, _ITEM_UPDATE_FIELDS))
        )
        if row is not None:
            self._changed("update_item", item_id)
        return row

    def delete_item(self, item_id: str) -> None:
        """Remove a food from a meal category."""
        self.repository.delete_item(item_id)
        self._changed("delete_item", item_id)

    def _changed(self, action: str, row_id: object) -> None:
        self.catalog_service.invalidate()
        _logger.info("Catalog %s: id=%s", action, row_id)


def _pick(payload: dict[str, object], fields: tuple[str, ...]) -> dict[str, object]:
    return {name: payload[name] for name in fields if name in payload}


def _require_fields(values: dict[str, object]) -> dict[str, object]:
    if not values:
        raise InvalidCatalogChangeError("No fields to update")
    return values
