"""Tests for logging configuration."""

import logging

import pytest

from meal_composer.app_logging import configure_logging
from meal_composer.services.cache import InMemoryCache
from meal_composer.services.catalog import CatalogService
from meal_composer.services.planner import MealPlanner
from tests.conftest import InMemoryCatalogRepository


@pytest.fixture
def package_logger():
    logger = logging.getLogger("meal_composer")
    logger.handlers.clear()
    yield logger
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_repeated_configuration_keeps_one_handler(package_logger) -> None:
    configure_logging()
    configure_logging(logging.DEBUG)

    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG
    assert not package_logger.propagate


def test_catalog_load_is_logged(package_logger, capsys) -> None:
    configure_logging()
    service = CatalogService(InMemoryCatalogRepository(), InMemoryCache())

    service.get_meals()

    err = capsys.readouterr().err
    assert "INFO: meal_composer.services.catalog: Catalog loaded: meals=3" in err


def test_planner_debug_lines_hidden_at_info(package_logger, capsys, meals) -> None:
    configure_logging()
    MealPlanner(meals).toggle_item("lunch", "lunch-carbs", "l-pasta")

    assert "Toggled" not in capsys.readouterr().err
