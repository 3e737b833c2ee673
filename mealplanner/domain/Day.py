"""Day domain entity: one calendar day's ordered list of meals."""
from typing import List, Optional
from uuid import uuid4

from mealplanner.domain.Meal import Meal, MealType


class Day:
    def __init__(self, name: str = "", meals: Optional[List[Meal]] = None, id: Optional[str] = None):
        self.id = id or uuid4().hex
        self.name = name
        self.meals = meals[:] if meals else []

    def meals_of_type(self, meal_type) -> List[Meal]:
        meal_type = MealType.parse(meal_type)
        return [m for m in self.meals if m.type == meal_type]

    def find_meal(self, meal_id: str) -> Optional[Meal]:
        for meal in self.meals:
            if meal.id == meal_id:
                return meal
        return None

    def __str__(self) -> str:
        return f"{self.name} - {len(self.meals)} meals"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Day(
            name=d.get("name", ""),
            meals=[Meal.from_dict(m) for m in d.get("meals", [])],
            id=d.get("id"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "meals": [m.to_dict() for m in self.meals],
        }
