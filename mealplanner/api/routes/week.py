from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from mealplanner.domain.Meal import MealType
from mealplanner.infra.Week_Repository import WeekRepository, UnknownDayError, UnknownMealError
from mealplanner.infra.pdf_utils import generate_pdf_for_shopping_list
from mealplanner.logic.shopping.list_builder import aggregate, selected_meals

router = APIRouter()

# Week state owned by the web layer (one per process)
WEEK = WeekRepository()


def get_week() -> WeekRepository:
    return WEEK


@router.get('/api/days')
def list_days(week: WeekRepository = Depends(get_week)):
    return {"days": [d.to_dict() for d in week.snapshot()]}


@router.get('/api/days/{day_id}')
def get_day(day_id: str, week: WeekRepository = Depends(get_week)):
    """One day with its meals grouped into breakfast / lunch / dinner sections."""
    try:
        day = week.get_day(day_id)
    except UnknownDayError:
        raise HTTPException(status_code=404, detail=f"Unknown day: {day_id}")
    return {
        "id": day.id,
        "name": day.name,
        "sections": [
            {"type": t.value, "label": t.label, "meals": [m.to_dict() for m in day.meals_of_type(t)]}
            for t in MealType
        ],
    }


@router.post('/api/days/{day_id}/meals/{meal_id}/toggle')
def toggle_meal(day_id: str, meal_id: str, week: WeekRepository = Depends(get_week)):
    try:
        meal = week.toggle_meal(day_id, meal_id)
    except UnknownDayError:
        raise HTTPException(status_code=404, detail=f"Unknown day: {day_id}")
    except UnknownMealError:
        raise HTTPException(status_code=404, detail=f"Unknown meal: {meal_id}")
    return meal.to_dict()


# -------------------- API: Shopping List --------------------
@router.get('/api/shopping-list')
@router.get('/api/shopping-list/')
def api_shopping_list(week: WeekRepository = Depends(get_week)):
    days = week.snapshot()
    items = aggregate(days)
    return {
        "items": [line.to_dict() for line in items],
        "lines": [str(line) for line in items],
        "count": len(items),
        "selected_meals": [m.name for m in selected_meals(days)],
    }


@router.get('/api/shopping-list/pdf')
def api_shopping_list_pdf(week: WeekRepository = Depends(get_week)):
    pdf = generate_pdf_for_shopping_list(aggregate(week.snapshot()))
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="shopping_list.pdf"'},
    )


@router.post('/api/week/reset')
def reset_week(week: WeekRepository = Depends(get_week)):
    week.reset()
    return {"status": "ok", "days": len(week.day_ids())}
