"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from meal_composer.api.models import FoodPayload, MealCategoryFoodPayload
from meal_composer.services.catalog_admin import InvalidCatalogChangeError

if TYPE_CHECKING:
    from meal_composer.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.post("/catalog/reload", dependencies=[Depends(require_admin)])
async def reload_catalog(request: Request) -> dict[str, object]:
    """Refetch the catalog and report how many meals it has."""
    container: AppContainer = request.app.state.container
    meals = container.catalog_service.reload()
    return {"status": "ok", "meals": len(meals)}


@router.post(
    "/foods",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_food(payload: FoodPayload, request: Request) -> dict[str, object]:
    """Create a catalog food."""
    container: AppContainer = request.app.state.container
    try:
        food = container.catalog_admin_service.create_food(
            payload.model_dump(exclude_unset=True)
        )
    except InvalidCatalogChangeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return {"food": food}


@router.put("/foods/{food_id}", dependencies=[Depends(require_admin)])
async def update_food(
    food_id: str, payload: FoodPayload, request: Request
) -> dict[str, object]:
    """Update the provided fields of a catalog food."""
    container: AppContainer = request.app.state.container
    try:
        food = container.catalog_admin_service.update_food(
            food_id, payload.model_dump(exclude_unset=True)
        )
    except InvalidCatalogChangeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    if food is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"food": food}


@router.delete("/foods/{food_id}", dependencies=[Depends(require_admin)])
async def delete_food(food_id: str, request: Request) -> dict[str, str]:
    """Delete a catalog food."""
    container: AppContainer = request.app.state.container
    container.catalog_admin_service.delete_food(food_id)
    return {"status": "ok"}


@router.post(
    "/meal-category-foods",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_meal_category_food(
    payload: MealCategoryFoodPayload, request: Request
) -> dict[str, object]:
    """Place a food in a meal category."""
    container: AppContainer = request.app.state.container
    try:
        item = container.catalog_admin_service.create_item(
            payload.model_dump(exclude_unset=True)
        )
    except InvalidCatalogChangeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return {"meal_category_food": item}


@router.put("/meal-category-foods/{item_id}", dependencies=[Depends(require_admin)])
async def update_meal_category_food(
    item_id: str, payload: MealCategoryFoodPayload, request: Request
) -> dict[str, object]:
    """Update the base weight or sort order of a catalog item."""
    container: AppContainer = request.app.state.container
    try:
        item = container.catalog_admin_service.update_item(
            item_id, payload.model_dump(exclude_unset=True)
        )
    except InvalidCatalogChangeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"meal_category_food": item}


@router.delete(
    "/meal-category-foods/{item_id}", dependencies=[Depends(require_admin)]
)
async def delete_meal_category_food(item_id: str, request: Request) -> dict[str, str]:
    """Remove a food from a meal category."""
    container: AppContainer = request.app.state.container
    container.catalog_admin_service.delete_item(item_id)
    return {"status": "ok"}
