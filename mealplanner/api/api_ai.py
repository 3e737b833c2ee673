import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from mealplanner.api.routes.week import get_week
from mealplanner.events.Event_Bus import GLOBAL_EVENT_BUS
from mealplanner.infra.Week_Repository import WeekRepository, UnknownDayError
from mealplanner.logic.extraction.errors import ExtractionError
from mealplanner.logic.extraction.extractor import IngredientExtractor
from mealplanner.utilities.config import get_api_key
from mealplanner.utilities.constants import RECIPE_EXTRACTION_FAILED
from mealplanner.utilities.validators import RecipeTextInput, AddRecipeInput

logger = logging.getLogger(__name__)


# === Helper: Get extractor ===
def get_extractor() -> Optional[IngredientExtractor]:
    """Return an IngredientExtractor if OPENAI_API_KEY is set, otherwise None."""
    api_key = get_api_key()
    if not api_key:
        return None
    return IngredientExtractor(api_key)


def _require(extractor: Optional[IngredientExtractor]) -> IngredientExtractor:
    if extractor is None:
        logger.warning("OPENAI_API_KEY not set, cannot extract ingredients.")
        raise HTTPException(status_code=503, detail="Ingredient extraction is not configured")
    return extractor


def _failed(e: ExtractionError, name: str = "") -> JSONResponse:
    GLOBAL_EVENT_BUS.publish(RECIPE_EXTRACTION_FAILED, {"name": name, "error": e.code})
    return JSONResponse(status_code=502, content=e.to_dict())


# === FastAPI Endpoints ===
router = APIRouter()


@router.post("/api/recipes/extract")
async def extract_ingredients(payload: RecipeTextInput,
                              extractor: Optional[IngredientExtractor] = Depends(get_extractor)):
    extractor = _require(extractor)
    try:
        ingredients = await extractor.extract(payload.recipe_text)
    except ExtractionError as e:
        return _failed(e)
    return {"ingredients": [i.to_dict() for i in ingredients], "count": len(ingredients)}


@router.post("/api/recipes")
async def add_recipe(payload: AddRecipeInput,
                     extractor: Optional[IngredientExtractor] = Depends(get_extractor),
                     week: WeekRepository = Depends(get_week)):
    """Extract ingredients from the text and add the new meal to every day (or payload.day_ids).

    A failed extraction creates nothing. An extraction that finds no ingredients
    still succeeds, with an empty ingredient list and a 'no_ingredients' flag.
    """
    extractor = _require(extractor)
    if payload.day_ids is not None:
        known = set(week.day_ids())
        unknown = [i for i in payload.day_ids if i not in known]
        if unknown:
            raise HTTPException(status_code=404, detail=f"Unknown day(s): {', '.join(unknown)}")
    try:
        meal = await extractor.extract_meal(payload.recipe_text, payload.name, payload.meal_type)
    except ExtractionError as e:
        return _failed(e, payload.name)
    try:
        touched = week.add_meal(meal, payload.day_ids)
    except UnknownDayError as e:
        raise HTTPException(status_code=404, detail=f"Unknown day: {e.args[0]}")
    return {
        "status": "success",
        "meal": meal.to_dict(),
        "day_ids": touched,
        "no_ingredients": not meal.ingredients,
    }
