"""Per-user food weight overrides."""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

_logger = logging.getLogger(__name__)


class InvalidOverrideError(ValueError):
    """Raised when an override weight cannot be stored."""


class OverrideRepository(Protocol):
    """Persistence interface for food weight overrides."""

    def get_overrides(self, user_id: UUID) -> dict[str, float]:
        """Return overrides keyed by catalog item id."""

    def replace_overrides(self, user_id: UUID, overrides: dict[str, float]) -> None:
        """Replace every override of the user with the given set."""


def resolve_weight(
    food_id: str, base_weight: float, overrides: Mapping[str, float] | None
) -> float:
    """Return the user's custom weight for a food or its base weight."""
    if overrides and food_id in overrides:
        return overrides[food_id]
    return base_weight


@dataclass
class OverrideService:
    """Service for loading and saving override maps."""

    repository: OverrideRepository

    def get_overrides(self, user_id: UUID) -> dict[str, float]:
        """Return the user's overrides, empty when none are stored."""
        return self.repository.get_overrides(user_id)

    def save_overrides(
        self, user_id: UUID, overrides: Mapping[str, object]
    ) -> dict[str, float]:
        """Validate and store the full override map for a user.

        Entries set to ``None`` are cleared. Anything that is not a finite,
        non-negative number raises ``InvalidOverrideError``.
        """
        cleaned: dict[str, float] = {}
        for item_id, value in overrides.items():
            if value is None:
                continue
            cleaned[item_id] = _to_weight(item_id, value)
        self.repository.replace_overrides(user_id, cleaned)
        _logger.info("Saved %s food overrides for user %s", len(cleaned), user_id)
        return cleaned

    def resolve(self, user_id: UUID, food_id: str, base_weight: float) -> float:
        """Resolve a single food weight against the stored overrides."""
        return resolve_weight(food_id, base_weight, self.get_overrides(user_id))


def _to_weight(item_id: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidOverrideError(f"Override for {item_id} must be a number")
    weight = float(value)
    if not math.isfinite(weight) or weight < 0:
        raise InvalidOverrideError(
            f"Override for {item_id} must be a non-negative number"
        )
    return weight
