"""Tests for plan and prompt exports."""

import re

from meal_composer.services.export import (
    PLAN_TITLE,
    render_plan_text,
    render_prompt_text,
)
from meal_composer.services.selection import (
    Selections,
    initial_selections,
    toggle_food,
    update_percentage,
)


def _plan(meals) -> Selections:
    selections = initial_selections(meals)
    selections = toggle_food(
        selections, "breakfast", "breakfast-carbs", "Carbs", "b-oats", "Oats", 40
    )
    selections = toggle_food(
        selections,
        "breakfast",
        "breakfast-fruit",
        "Fruit",
        "b-apple",
        "Apple",
        150,
        note="1 medium",
    )
    selections = toggle_food(
        selections, "lunch", "lunch-carbs", "Carbs", "l-pasta", "Pasta", 80
    )
    selections = toggle_food(
        selections, "lunch", "lunch-carbs", "Carbs", "l-rice", "Rice", 70
    )
    return update_percentage(selections, "lunch", "lunch-carbs", "l-pasta", 75)


def test_render_plan_text(meals) -> None:
    text = render_plan_text(_plan(meals))

    assert text.splitlines() == [
        PLAN_TITLE,
        "═" * 40,
        "",
        "▸ BREAKFAST",
        "─" * 30,
        "  Carbs:",
        "    • Oats: 40 g",
        "  Fruit:",
        "    • Apple: 150 g (1 medium)",
        "",
        "▸ LUNCH",
        "─" * 30,
        "  Carbs:",
        "    • Pasta: 60 g",
        "    • Rice: 18 g",
    ]


def test_render_prompt_text_groups_by_meal(meals) -> None:
    text = render_prompt_text(_plan(meals))

    assert (
        "Breakfast: Oats (40g), Apple (150g)\n\nLunch: Pasta (60g), Rice (18g)"
    ) in text
    assert "Free meal" not in text


def test_every_plan_entry_appears_once_in_prompt(meals) -> None:
    selections = _plan(meals)
    plan = render_plan_text(selections)
    prompt = render_prompt_text(selections)

    entries = re.findall(r"• (.+): (\d+) g", plan)
    assert len(entries) == 4
    for name, grams in entries:
        assert prompt.count(f"{name} ({grams}g)") == 1


def test_empty_selection_exports(meals) -> None:
    selections = initial_selections(meals)

    assert render_plan_text(selections) == f"{PLAN_TITLE}\n{'═' * 40}\n"
    assert "Here is my meal plan:" in render_prompt_text(selections)
