"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import Depends, FastAPI, Header, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware

from meal_composer.api.admin import router as admin_router
from meal_composer.api.models import FoodOverridesPayload
from meal_composer.app_logging import configure_logging
from meal_composer.config import parse_allowed_origins
from meal_composer.containers import AppContainer
from meal_composer.domain.catalog import Category, FoodItem, Meal
from meal_composer.services.overrides import InvalidOverrideError


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            app.state.container.catalog_service.get_meals()
        except Exception:
            logger.exception("Failed to warm the meal catalog")
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/meals-structure", dependencies=[Depends(require_api_token)])
    async def meals_structure(request: Request) -> dict[str, object]:
        """Return the full meal hierarchy."""
        state_container: AppContainer = request.app.state.container
        meals = state_container.catalog_service.get_meals()
        return {"meals": [_serialize_meal(meal) for meal in meals]}

    @app.get(
        "/users/{user_id}/food-overrides", dependencies=[Depends(require_api_token)]
    )
    async def get_food_overrides(user_id: UUID, request: Request) -> dict[str, object]:
        """Return the user's food weight overrides."""
        state_container: AppContainer = request.app.state.container
        return {"overrides": state_container.override_service.get_overrides(user_id)}

    @app.put(
        "/users/{user_id}/food-overrides", dependencies=[Depends(require_api_token)]
    )
    async def put_food_overrides(
        user_id: UUID, payload: FoodOverridesPayload, request: Request
    ) -> dict[str, object]:
        """Replace the user's food weight overrides."""
        state_container: AppContainer = request.app.state.container
        try:
            saved = state_container.override_service.save_overrides(
                user_id, payload.overrides
            )
        except InvalidOverrideError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        return {"status": "ok", "overrides": saved}

    @app.get(
        "/users/{user_id}/meals/{meal_id}/categories/{category_id}/items/{item_id}",
        dependencies=[Depends(require_api_token)],
    )
    async def get_item_weight(
        user_id: UUID, meal_id: str, category_id: str, item_id: str, request: Request
    ) -> dict[str, object]:
        """Return a catalog item with the weight the user would get."""
        state_container: AppContainer = request.app.state.container
        found = state_container.catalog_service.find_item(
            meal_id, category_id, item_id
        )
        if found is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        _, category, item = found
        weight = state_container.override_service.resolve(
            user_id, item.id, item.base_weight
        )
        return {
            "item": _serialize_item(item),
            "category": category.name,
            "effectiveWeight": weight,
        }

    return app


def _serialize_meal(meal: Meal) -> dict[str, object]:
    return {
        "id": meal.id,
        "name": meal.name,
        "icon": meal.icon,
        "is_free": meal.is_free,
        "categories": [_serialize_category(category) for category in meal.categories],
    }


def _serialize_category(category: Category) -> dict[str, object]:
    return {
        "id": category.id,
        "name": category.name,
        "icon": category.icon,
        "is_optional": category.is_optional,
        "items": [_serialize_item(item) for item in category.items],
    }


def _serialize_item(item: FoodItem) -> dict[str, object]:
    return {
        "id": item.id,
        "food_id": item.food_id,
        "name": item.name,
        "baseWeight": item.base_weight,
        "note": item.note,
        "subGroup": item.sub_group,
        "subGroupIcon": item.sub_group_icon,
    }
