"""
Pydantic schemas: completion service wire format and API input validation.
"""
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator
from typing import List, Optional


# --- Completion service response -------------------------------------------

class CompletionMessage(BaseModel):
    role: StrictStr
    content: StrictStr


class CompletionChoice(BaseModel):
    index: StrictInt
    message: CompletionMessage
    finish_reason: StrictStr


class CompletionEnvelope(BaseModel):
    """Outer chat completion response. Unknown keys (object, usage, ...) are ignored."""
    id: StrictStr
    created: StrictInt
    model: StrictStr
    choices: List[CompletionChoice]


class IngredientSchema(BaseModel):
    """One ingredient as produced by the model. Quantity must be a real integer, never "2"."""
    name: StrictStr
    quantity: StrictInt = Field(..., ge=0)
    unit: StrictStr


class IngredientsPayload(BaseModel):
    """JSON text inside choices[0].message.content. An empty object means no recipe was detected."""
    model_config = ConfigDict(extra="forbid")

    ingredients: List[IngredientSchema] = Field(default_factory=list)


# --- API input ---------------------------------------------------------------

class RecipeTextInput(BaseModel):
    """Schema for the extract endpoint."""
    recipe_text: str = Field(..., min_length=1, max_length=20000)

    @field_validator('recipe_text')
    @classmethod
    def validate_text(cls, v):
        """Reject whitespace-only text."""
        if not v.strip():
            raise ValueError('Recipe text cannot be empty')
        return v


class AddRecipeInput(RecipeTextInput):
    """Schema for creating a meal from recipe text."""
    name: str = Field(..., min_length=1, max_length=200)
    meal_type: str = Field("breakfast", pattern=r'^(?i:breakfast|lunch|dinner)$')
    day_ids: Optional[List[str]] = None

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        """Remove leading/trailing whitespace."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()
