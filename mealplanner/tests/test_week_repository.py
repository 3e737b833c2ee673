import unittest
from mealplanner.domain.Ingredient import Ingredient
from mealplanner.domain.Meal import Meal, MealType
from mealplanner.events.Event_Bus import EventBus
from mealplanner.infra.Week_Repository import WeekRepository, UnknownDayError, UnknownMealError
from mealplanner.utilities.constants import WEEK_MEAL_ADDED, WEEK_MEAL_TOGGLED, WEEK_RESET


class TestWeekRepository(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.events = []
        for name in (WEEK_MEAL_ADDED, WEEK_MEAL_TOGGLED, WEEK_RESET):
            self.bus.subscribe(name, lambda n, p: self.events.append((n, p)))
        self.repo = WeekRepository(event_bus=self.bus)
        self.new_meal = Meal("Onion Soup", MealType.DINNER, [Ingredient("onion", 2, "onions")])

    def test_seeded_week(self):
        days = self.repo.snapshot()
        self.assertEqual([d.name for d in days][:2], ["Monday", "Tuesday"])
        self.assertEqual(len(days), 7)
        self.assertTrue(all(len(d.meals) == 6 for d in days))

    def test_snapshot_is_detached(self):
        days = self.repo.snapshot()
        days[0].meals[0].selected = True
        days[0].meals.clear()
        again = self.repo.snapshot()
        self.assertEqual(len(again[0].meals), 6)
        self.assertFalse(again[0].meals[0].selected)
        self.assertEqual(again[0].id, days[0].id)

    def test_toggle_only_affects_one_day(self):
        days = self.repo.snapshot()
        monday, tuesday = days[0], days[1]
        meal = self.repo.toggle_meal(monday.id, monday.meals[0].id)
        self.assertTrue(meal.selected)
        self.assertEqual(meal.id, monday.meals[0].id)
        after = self.repo.snapshot()
        self.assertTrue(after[0].meals[0].selected)
        self.assertFalse(after[1].meals[0].selected)
        self.assertEqual(self.events[-1][0], WEEK_MEAL_TOGGLED)

    def test_toggle_unknown_ids(self):
        day_id = self.repo.day_ids()[0]
        with self.assertRaises(UnknownDayError):
            self.repo.toggle_meal("nope", "nope")
        with self.assertRaises(UnknownMealError):
            self.repo.toggle_meal(day_id, "nope")

    def test_add_meal_to_every_day(self):
        touched = self.repo.add_meal(self.new_meal)
        self.assertEqual(touched, self.repo.day_ids())
        days = self.repo.snapshot()
        added = [d.meals[-1] for d in days]
        self.assertTrue(all(m.name == "Onion Soup" for m in added))
        self.assertEqual(len({m.id for m in added}), len(days))
        self.assertEqual(self.events[-1][0], WEEK_MEAL_ADDED)

    def test_add_meal_to_some_days(self):
        ids = self.repo.day_ids()
        self.repo.add_meal(self.new_meal, [ids[2]])
        days = self.repo.snapshot()
        self.assertEqual(days[2].meals[-1].name, "Onion Soup")
        self.assertEqual(len(days[0].meals), 6)

    def test_add_meal_repeated_day_once(self):
        ids = self.repo.day_ids()
        touched = self.repo.add_meal(self.new_meal, [ids[0], ids[3], ids[0]])
        self.assertEqual(touched, [ids[0], ids[3]])
        counts = [len(d.meals) for d in self.repo.snapshot()]
        self.assertEqual(counts, [7, 6, 6, 7, 6, 6, 6])

    def test_add_meal_unknown_day_changes_nothing(self):
        ids = self.repo.day_ids()
        with self.assertRaises(UnknownDayError):
            self.repo.add_meal(self.new_meal, [ids[0], "nope"])
        self.assertTrue(all(len(d.meals) == 6 for d in self.repo.snapshot()))
        self.assertEqual(self.events, [])

    def test_reset(self):
        self.repo.add_meal(self.new_meal)
        self.repo.reset()
        self.assertTrue(all(len(d.meals) == 6 for d in self.repo.snapshot()))
        self.assertEqual(self.events[-1], (WEEK_RESET, {"days": 7}))
