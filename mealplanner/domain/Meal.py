"""Meal domain entity: a named dish of a given type with its ingredients and a selection flag."""
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from mealplanner.domain.Ingredient import Ingredient


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value) -> "MealType":
        '''Accepts a MealType, its value or its label ("Dinner").'''
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown meal type: {value!r}") from None


class Meal:
    def __init__(self, name: str = "", meal_type=MealType.BREAKFAST,
                 ingredients: Optional[List[Ingredient]] = None, selected: bool = False,
                 id: Optional[str] = None):
        self.id = id or uuid4().hex
        self.name = name
        self.type = MealType.parse(meal_type)
        self.ingredients = ingredients[:] if ingredients else []
        self.selected = selected

    def toggle(self) -> bool:
        '''Flips the selection flag and returns the new value. Identity is unchanged.'''
        self.selected = not self.selected
        return self.selected

    def copy(self) -> "Meal":
        '''Independent copy with a fresh id, used when one meal is placed into several days.'''
        return Meal(
            name=self.name,
            meal_type=self.type,
            ingredients=[Ingredient(i.name, i.quantity, i.unit) for i in self.ingredients],
            selected=self.selected,
        )

    def __str__(self) -> str:
        mark = " [x]" if self.selected else ""
        return f"{self.name} ({self.type.label}){mark} - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Meal(
            name=d.get("name", ""),
            meal_type=d.get("type", MealType.BREAKFAST),
            ingredients=[Ingredient.from_dict(i) for i in d.get("ingredients", [])],
            selected=bool(d.get("selected", False)),
            id=d.get("id"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "selected": self.selected,
        }
