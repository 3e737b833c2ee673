"""In-memory owner of the week's Day/Meal collection.

The core functions never hold this state; they receive snapshots. Every
mutation (selection toggle, meal insertion, reset) goes through here.
"""
import logging
from threading import Lock
from typing import Callable, Iterable, List, Optional

from mealplanner.domain.Day import Day
from mealplanner.domain.Meal import Meal
from mealplanner.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from mealplanner.infra.sample_data import sample_week
from mealplanner.utilities.constants import WEEK_MEAL_ADDED, WEEK_MEAL_TOGGLED, WEEK_RESET

logger = logging.getLogger(__name__)


class UnknownDayError(KeyError):
    pass


class UnknownMealError(KeyError):
    pass


class WeekRepository:
    def __init__(self, seed: Callable[[], List[Day]] = sample_week, event_bus: Optional[EventBus] = None):
        self._seed = seed
        self._lock = Lock()
        self._event_bus = event_bus or GLOBAL_EVENT_BUS
        self._days: List[Day] = seed()

    def snapshot(self) -> List[Day]:
        '''Deep copy of the week (ids preserved) safe to hand to the aggregator.'''
        with self._lock:
            return [Day.from_dict(d.to_dict()) for d in self._days]

    def get_day(self, day_id: str) -> Day:
        with self._lock:
            return Day.from_dict(self._find_day(day_id).to_dict())

    def day_ids(self) -> List[str]:
        with self._lock:
            return [d.id for d in self._days]

    def toggle_meal(self, day_id: str, meal_id: str) -> Meal:
        with self._lock:
            day = self._find_day(day_id)
            meal = day.find_meal(meal_id)
            if meal is None:
                raise UnknownMealError(meal_id)
            meal.toggle()
            result = Meal.from_dict(meal.to_dict())
        self._event_bus.publish(WEEK_MEAL_TOGGLED, {"day_id": day_id, "meal": result})
        return result

    def add_meal(self, meal: Meal, day_ids: Optional[Iterable[str]] = None) -> List[str]:
        """Append a copy of meal to every day, or only to day_ids. Returns the days touched.

        Repeated ids count once. Unknown ids are rejected before any day is modified.
        """
        with self._lock:
            if day_ids is None:
                targets = list(self._days)
            else:
                targets = [self._find_day(i) for i in dict.fromkeys(day_ids)]
            for day in targets:
                day.meals.append(meal.copy())
            touched = [d.id for d in targets]
        logger.info(f"Added meal '{meal.name}' to {len(touched)} day(s)")
        self._event_bus.publish(WEEK_MEAL_ADDED, {"meal": meal, "day_ids": touched})
        return touched

    def reset(self) -> None:
        with self._lock:
            self._days = self._seed()
            count = len(self._days)
        self._event_bus.publish(WEEK_RESET, {"days": count})

    def _find_day(self, day_id: str) -> Day:
        for day in self._days:
            if day.id == day_id:
                return day
        raise UnknownDayError(day_id)
