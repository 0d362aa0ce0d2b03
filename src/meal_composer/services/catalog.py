"""Catalog retrieval with caching."""

import logging
from dataclasses import dataclass
from typing import Protocol

from meal_composer.domain.catalog import Category, FoodItem, Meal, find_meal
from meal_composer.services.cache import Cache

_CACHE_KEY = "catalog:meals"

_logger = logging.getLogger(__name__)


class CatalogRepository(Protocol):
    """Source of the meal hierarchy."""

    def fetch_meals(self) -> list[Meal]:
        """Return the ordered meals with their categories and items."""


@dataclass
class CatalogService:
    """Service that serves the catalog from cache when possible."""

    repository: CatalogRepository
    cache: Cache
    ttl_seconds: int = 300

    def get_meals(self) -> list[Meal]:
        """Return the catalog, fetching it when the cache is cold."""
        cached = self.cache.get(_CACHE_KEY)
        if isinstance(cached, list):
            return cached
        return self._fetch()

    def reload(self) -> list[Meal]:
        """Drop the cached catalog and fetch it again."""
        self.invalidate()
        return self._fetch()

    def invalidate(self) -> None:
        """Forget the cached catalog."""
        self.cache.delete(_CACHE_KEY)

    def find_item(
        self, meal_id: str, category_id: str, item_id: str
    ) -> tuple[Meal, Category, FoodItem] | None:
        """Locate a catalog item by its meal, category and item ids."""
        meal = find_meal(self.get_meals(), meal_id)
        if meal is None:
            return None
        category = meal.find_category(category_id)
        if category is None:
            return None
        item = category.find_item(item_id)
        if item is None:
            return None
        return meal, category, item

    def _fetch(self) -> list[Meal]:
        meals = self.repository.fetch_meals()
        self.cache.set(_CACHE_KEY, meals, ttl_seconds=self.ttl_seconds)
        _logger.info("Catalog loaded: meals=%s", len(meals))
        return meals
