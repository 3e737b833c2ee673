"""Web-facing observers for week events.

Subscribes to the GLOBAL_EVENT_BUS and keeps a bounded in-memory buffer of
recent events that the UI can poll (since=<last_id_seen>) to show
notifications such as "meal added" or "extraction failed".

Each event gets an auto-increment integer id used as a cursor. Access is
guarded by a Lock since uvicorn may serve requests from several threads.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import GLOBAL_EVENT_BUS
from mealplanner.utilities.constants import (
    WEEK_MEAL_ADDED, WEEK_MEAL_TOGGLED, WEEK_RESET, RECIPE_EXTRACTION_FAILED
)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')
        }
        if isinstance(payload, dict):
            meal = payload.get('meal')
            if meal is not None and hasattr(meal, 'name'):
                evt['meal_id'] = meal.id
                evt['name'] = meal.name
                evt['selected'] = meal.selected
            for k in ('day_id', 'day_ids', 'days', 'error'):
                if k in payload:
                    evt[k] = payload[k]
            if 'name' in payload and 'name' not in evt:
                evt['name'] = payload['name']
        _events.append(evt)
        _next_id += 1
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in (WEEK_MEAL_ADDED, WEEK_MEAL_TOGGLED, WEEK_RESET, RECIPE_EXTRACTION_FAILED):
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True


def get_events(since: Optional[int] = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the last MAX_EVENTS events.
    next_cursor is the largest id so the client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events', 'MAX_EVENTS']
