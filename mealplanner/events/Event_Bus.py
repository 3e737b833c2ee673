"""In-process publish/subscribe for week state changes.

Event names (see mealplanner.utilities.constants):
  week.meal_added -> payload {"meal": Meal, "day_ids": [str]}
  week.meal_toggled -> payload {"day_id": str, "meal": Meal}
  week.reset -> payload {"days": int}
  recipe.extraction_failed -> payload {"name": str, "error": str}

Subscribers are callables taking (event_name, payload). A failing subscriber
is logged and does not stop delivery to the others.
"""
from __future__ import annotations
import logging
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

Listener = Callable[[str, Any], None]


class EventBus:
	def __init__(self):
		self._listeners: Dict[str, List[Listener]] = {}

	def subscribe(self, event_name: str, listener: Listener):
		listeners = self._listeners.setdefault(event_name, [])
		if listener not in listeners:
			listeners.append(listener)

	def publish(self, event_name: str, payload: Any = None) -> int:
		"""Deliver payload to every listener of event_name; returns how many were called."""
		listeners = list(self._listeners.get(event_name, ()))
		for listener in listeners:
			try:
				listener(event_name, payload)
			except Exception:
				logger.exception(f"Listener {listener!r} failed on {event_name}")
		return len(listeners)


# Process-wide bus used by the week repository and the API
GLOBAL_EVENT_BUS = EventBus()


__all__ = ['EventBus', 'GLOBAL_EVENT_BUS', 'Listener']
