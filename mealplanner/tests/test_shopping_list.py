import unittest
from mealplanner.domain.Day import Day
from mealplanner.domain.Ingredient import Ingredient
from mealplanner.domain.Meal import Meal, MealType
from mealplanner.domain.ShoppingList import ShoppingListLine
from mealplanner.infra.sample_data import sample_week
from mealplanner.logic.shopping.list_builder import aggregate, selected_meals


def _meal(name, ingredients, selected=True, meal_type=MealType.LUNCH):
    return Meal(name, meal_type, [Ingredient(n, q, u) for n, q, u in ingredients], selected=selected)


class TestAggregate(unittest.TestCase):

    def test_empty_week(self):
        self.assertEqual(aggregate([]), [])
        self.assertEqual(aggregate([Day("Monday"), Day("Tuesday")]), [])

    def test_eggs_summed_across_days(self):
        days = [
            Day("Monday", [_meal("Omelette", [("Eggs", 2, "items")])]),
            Day("Tuesday", [_meal("Omelette", [("Eggs", 2, "items")])]),
        ]
        self.assertEqual(aggregate(days), [ShoppingListLine("Eggs", 4, "items")])

    def test_same_name_different_unit_not_merged(self):
        days = [Day("Monday", [
            _meal("Omelette", [("Cheese", 1, "slice")]),
            _meal("Pizza", [("Cheese", 100, "g")], meal_type=MealType.DINNER),
        ])]
        lines = aggregate(days)
        self.assertEqual(lines, [ShoppingListLine("Cheese", 1, "slice"), ShoppingListLine("Cheese", 100, "g")])
        self.assertEqual([str(l) for l in lines], ["1 slice of Cheese", "100 g of Cheese"])

    def test_unselected_meals_ignored(self):
        days = [Day("Monday", [
            _meal("Pancakes", [("Flour", 1, "cup"), ("Eggs", 2, "items")], selected=False),
            _meal("Salad", [("Lettuce", 1, "cup")]),
        ])]
        self.assertEqual(aggregate(days), [ShoppingListLine("Lettuce", 1, "cup")])

    def test_sum_of_many_meals(self):
        quantities = [3, 0, 7, 12, 1]
        days = [Day(f"Day {i}", [_meal("Pasta", [("Pasta", q, "g")])]) for i, q in enumerate(quantities)]
        self.assertEqual(aggregate(days), [ShoppingListLine("Pasta", sum(quantities), "g")])

    def test_zero_total_is_kept(self):
        days = [Day("Monday", [_meal("Tea", [("Water", 0, "ml")])])]
        self.assertEqual(aggregate(days), [ShoppingListLine("Water", 0, "ml")])

    def test_first_seen_order(self):
        days = [
            Day("Monday", [_meal("A", [("Bread", 2, "slices"), ("Cheese", 1, "slice")])]),
            Day("Tuesday", [_meal("B", [("Apple", 1, "item"), ("Bread", 2, "slices")])]),
        ]
        self.assertEqual([l.name for l in aggregate(days)], ["Bread", "Cheese", "Apple"])

    def test_repeatable_and_input_untouched(self):
        days = sample_week()
        days[0].meals[0].selected = True
        days[3].meals[4].selected = True
        before = [d.to_dict() for d in days]
        first = aggregate(days)
        second = aggregate(days)
        self.assertEqual(first, second)
        self.assertEqual([d.to_dict() for d in days], before)

    def test_sample_week_selection(self):
        days = sample_week()
        # Pancakes on Monday, Omelette on Tuesday, Pizza on Wednesday
        days[0].meals[0].selected = True
        days[1].meals[1].selected = True
        days[2].meals[4].selected = True
        self.assertEqual([m.name for m in selected_meals(days)], ["Pancakes", "Omelette", "Pizza"])
        self.assertEqual(aggregate(days), [
            ShoppingListLine("Flour", 1, "cup"),
            ShoppingListLine("Eggs", 4, "items"),
            ShoppingListLine("Cheese", 1, "slice"),
            ShoppingListLine("Pizza Dough", 1, "piece"),
            ShoppingListLine("Cheese", 100, "g"),
        ])

    def test_nothing_selected_in_sample_week(self):
        self.assertEqual(aggregate(sample_week()), [])
