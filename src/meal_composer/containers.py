"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from meal_composer.adapters.supabase_catalog_admin_repository import (
    SupabaseCatalogAdminRepository,
)
from meal_composer.adapters.supabase_catalog_repository import (
    SupabaseCatalogRepository,
)
from meal_composer.adapters.supabase_override_repository import (
    SupabaseOverrideRepository,
)
from meal_composer.config import Settings
from meal_composer.services.cache import InMemoryCache
from meal_composer.services.catalog import CatalogService
from meal_composer.services.catalog_admin import CatalogAdminService
from meal_composer.services.overrides import OverrideService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    catalog_admin_service: CatalogAdminService
    override_service: OverrideService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    catalog_service = CatalogService(
        repository=SupabaseCatalogRepository(supabase_client),
        cache=InMemoryCache(),
        ttl_seconds=resolved_settings.catalog_ttl_seconds,
    )
    catalog_admin_service = CatalogAdminService(
        repository=SupabaseCatalogAdminRepository(supabase_client),
        catalog_service=catalog_service,
    )
    override_service = OverrideService(SupabaseOverrideRepository(supabase_client))

    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        catalog_admin_service=catalog_admin_service,
        override_service=override_service,
    )
