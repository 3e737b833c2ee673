"""Shopping list builder.

Provides aggregate(days): merges the ingredients of every selected meal in a
week snapshot into shopping list lines keyed by (name, unit).
"""
from typing import Dict, Iterator, List, Sequence, Tuple

from mealplanner.domain.Day import Day
from mealplanner.domain.Meal import Meal
from mealplanner.domain.ShoppingList import ShoppingListLine


def selected_meals(days: Sequence[Day]) -> Iterator[Meal]:
    """Yield the selected meals of every day, in day order then meal order."""
    for day in days:
        for meal in day.meals:
            if meal.selected:
                yield meal


def aggregate(days: Sequence[Day]) -> List[ShoppingListLine]:
    """Sum ingredient quantities across the selected meals of a week.

    Args:
        days: Snapshot of the week. May be empty; days may have no meals.

    Returns:
        One ShoppingListLine per distinct (name, unit), in first-seen order.
        Same name with a different unit stays on its own line. Zero totals are kept.
        The input is never modified.
    """
    totals: Dict[Tuple[str, str], Dict[str, object]] = {}

    for meal in selected_meals(days):
        for ing in meal.ingredients:
            k = (ing.name, ing.unit)
            if k not in totals:
                totals[k] = {"unit": ing.unit, "quantity": 0}
            totals[k]["quantity"] += ing.quantity

    return [
        ShoppingListLine(name, data["quantity"], data["unit"])
        for (name, _unit), data in totals.items()
    ]


__all__ = ['aggregate', 'selected_meals']
