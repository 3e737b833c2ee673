"""Static sample week used to seed the planner at startup."""
from typing import List

from mealplanner.domain.Day import Day
from mealplanner.domain.Ingredient import Ingredient
from mealplanner.domain.Meal import Meal, MealType
from mealplanner.utilities.constants import DAY_NAMES

SAMPLE_MEALS = [
    {"name": "Pancakes", "type": MealType.BREAKFAST,
     "ingredients": [("Flour", 1, "cup"), ("Eggs", 2, "items")]},
    {"name": "Omelette", "type": MealType.BREAKFAST,
     "ingredients": [("Eggs", 2, "items"), ("Cheese", 1, "slice")]},
    {"name": "Sandwich", "type": MealType.LUNCH,
     "ingredients": [("Bread", 2, "slices"), ("Cheese", 1, "slice")]},
    {"name": "Salad", "type": MealType.LUNCH,
     "ingredients": [("Lettuce", 1, "cup"), ("Tomato", 1, "item")]},
    {"name": "Pizza", "type": MealType.DINNER,
     "ingredients": [("Pizza Dough", 1, "piece"), ("Cheese", 100, "g")]},
    {"name": "Pasta", "type": MealType.DINNER,
     "ingredients": [("Pasta", 200, "g"), ("Tomato Sauce", 1, "cup")]},
]


def _sample_meals() -> List[Meal]:
    return [
        Meal(name=m["name"], meal_type=m["type"],
             ingredients=[Ingredient(n, q, u) for n, q, u in m["ingredients"]])
        for m in SAMPLE_MEALS
    ]


def sample_week() -> List[Day]:
    """Seven days, each with its own fresh copy of every sample meal (nothing selected)."""
    return [Day(name=name, meals=_sample_meals()) for name in DAY_NAMES]
