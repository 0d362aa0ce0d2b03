"""Text exports of a meal plan selection."""

from collections.abc import Sequence

from meal_composer.domain.selection import MealSelection, SelectedFood

PLAN_TITLE = "DAILY MEAL PLAN"

PROMPT_TEMPLATE = """\
You are an expert nutritionist and chef. Create healthy, tasty and balanced \
recipes for my daily meal plan using ONLY the ingredients and quantities \
listed below. For each meal, propose a complete recipe with: recipe name, \
ingredient list with amounts, step-by-step method, preparation and cooking \
time. Vary the cooking techniques (steamed, baked, pan-cooked, raw) to keep \
the plan interesting and healthy.

Here is my meal plan:

{meals}

For each recipe, also suggest herbs or spices (with no significant calories) \
that would bring out the flavour of the dishes."""


def render_plan_text(selections: Sequence[MealSelection]) -> str:
    """Render the selection as a plain-text diet plan listing."""
    lines = [PLAN_TITLE, "═" * 40, ""]
    for meal in selections:
        if not meal.is_active:
            continue
        lines.append(f"▸ {meal.meal_name.upper()}")
        lines.append("─" * 30)
        for category in meal.categories:
            lines.append(f"  {category.category_name}:")
            lines.extend(f"    • {_plan_entry(food)}" for food in category.foods)
        lines.append("")
    return "\n".join(lines)


def render_prompt_text(selections: Sequence[MealSelection]) -> str:
    """Render the selection as a recipe-generation prompt."""
    meal_parts = []
    for meal in selections:
        if not meal.is_active:
            continue
        ingredients = [
            ingredient_label(food)
            for category in meal.categories
            for food in category.foods
        ]
        meal_parts.append(f"{meal.meal_name}: {', '.join(ingredients)}")
    return PROMPT_TEMPLATE.format(meals="\n\n".join(meal_parts))


def ingredient_label(food: SelectedFood) -> str:
    """Return the ``name (Ng)`` label used in prompts."""
    return f"{food.name} ({food.adjusted_weight}g)"


def _plan_entry(food: SelectedFood) -> str:
    entry = f"{food.name}: {food.adjusted_weight} g"
    if food.note:
        entry += f" ({food.note})"
    return entry
