from fastapi import FastAPI, Query
from typing import Optional
import logging

from mealplanner.events.web_observers import start as start_event_observers, get_events as get_web_events

# Routers
from mealplanner.api.routes import week
from mealplanner.api.api_ai import router as ai_router

# Logging
logger = logging.getLogger("mealplanner_app")

# Initialize FastAPI app
app = FastAPI(title="Meal Planner API")

# Include routers
app.include_router(week.router)
app.include_router(ai_router)

# Observers must exist before the first request publishes anything
start_event_observers()


@app.get('/health')
def health():
    return {"status": "ok"}


# -------------------- API: Week Events (polled by frontend) --------------------
@app.get('/api/events')
def api_events(
    since: Optional[int] = Query(default=None, description="Return events with id greater than this value")
):
    """
    Return recent week events (meal added, selection toggled, extraction failed).

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from response.
        3. Subsequent polls: /api/events?since=<next_cursor>
    """
    return get_web_events(since)
