"""Recipe text -> structured ingredients, via a chat completion service.

One POST per call, no retry. The reply is decoded in two strict steps (outer
envelope, then the JSON text in choices[0].message.content) and each failure
point raises its own ExtractionError subclass.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import httpx
from pydantic import ValidationError

from mealplanner.domain.Ingredient import Ingredient
from mealplanner.domain.Meal import Meal
from mealplanner.logic.extraction.errors import (
    ExtractionError, TransportFailure, InvalidEnvelope, NoChoices, InvalidIngredientPayload
)
from mealplanner.utilities.config import OPENAI_CHAT_URL, OPENAI_MODEL, OPENAI_TIMEOUT
from mealplanner.utilities.constants import SYSTEM_PROMPT
from mealplanner.utilities.validators import CompletionEnvelope, IngredientsPayload

logger = logging.getLogger(__name__)


# === Request construction ===
def build_request(recipe_text: str, model: str = OPENAI_MODEL) -> Dict[str, Any]:
    return {
        "model": model,
        "response_format": {"type": "json_object"},
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": recipe_text},
        ],
    }


def build_headers(api_key: str) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


# === Response decoding ===
def decode_envelope(body, status_code: Optional[int] = None) -> CompletionEnvelope:
    """Validate the outer chat completion envelope (bytes or str)."""
    try:
        return CompletionEnvelope.model_validate_json(body)
    except ValidationError as e:
        raise InvalidEnvelope(f"Unexpected completion response: {e.error_count()} error(s)",
                              status_code=status_code) from e


def decode_ingredients(envelope: CompletionEnvelope) -> List[Ingredient]:
    """Decode the ingredient list carried by the first choice of an envelope."""
    if not envelope.choices:
        raise NoChoices("Completion response contains no choices")
    content = envelope.choices[0].message.content
    try:
        payload = IngredientsPayload.model_validate_json(content)
    except ValidationError as e:
        raise InvalidIngredientPayload(f"Model content is not an ingredients object: {e.error_count()} error(s)") from e
    return [Ingredient(i.name, i.quantity, i.unit) for i in payload.ingredients]


# === Async outcome delivery ===
@dataclass
class ExtractionOutcome:
    ingredients: Optional[List[Ingredient]] = None
    error: Optional[ExtractionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ExtractionJob:
    """Handle on a scheduled extraction.

    on_done receives exactly one ExtractionOutcome, called through the event
    loop that started the job. Once cancel() has been called it is never invoked.
    A task cancelled from elsewhere (e.g. loop shutdown) counts as a cancelled
    job: cancelled becomes True and on_done is not called.
    """

    def __init__(self, task: "asyncio.Task", on_done: Optional[Callable[[ExtractionOutcome], None]],
                 loop: asyncio.AbstractEventLoop):
        self._task = task
        self._on_done = on_done
        self._loop = loop
        self._cancelled = False
        self._delivered = False
        self.outcome: Optional[ExtractionOutcome] = None
        task.add_done_callback(self._finish)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def task(self) -> "asyncio.Task":
        return self._task

    def done(self) -> bool:
        return self._task.done()

    def cancel(self) -> bool:
        self._cancelled = True
        return self._task.cancel()

    async def wait(self) -> Optional[ExtractionOutcome]:
        """Wait for the task; returns None if the job was cancelled."""
        try:
            await asyncio.shield(self._task)
        except asyncio.CancelledError:
            if not self._task.cancelled():
                raise
        except ExtractionError:
            pass  # carried by self.outcome
        return self.outcome

    def _finish(self, task: "asyncio.Task"):
        if task.cancelled():
            self._cancelled = True
            return
        exc = task.exception()
        if self._cancelled:
            return
        if exc is None:
            self.outcome = ExtractionOutcome(ingredients=task.result())
        elif isinstance(exc, ExtractionError):
            self.outcome = ExtractionOutcome(error=exc)
        else:
            logger.error("Unexpected error during extraction", exc_info=exc)
            self.outcome = ExtractionOutcome(error=ExtractionError(str(exc)))
        self._loop.call_soon(self._deliver)

    def _deliver(self):
        if self._cancelled or self._delivered or self._on_done is None:
            return
        self._delivered = True
        self._on_done(self.outcome)


# === Extractor ===
class IngredientExtractor:
    def __init__(self, api_key: str, *, model: str = OPENAI_MODEL, url: str = OPENAI_CHAT_URL,
                 timeout: float = OPENAI_TIMEOUT, client: Optional[httpx.AsyncClient] = None):
        if not api_key:
            raise ValueError("An API key is required for the completion service")
        self._api_key = api_key
        self.model = model
        self.url = url
        self.timeout = timeout
        self._client = client

    def __repr__(self) -> str:
        return f"IngredientExtractor(model={self.model!r}, url={self.url!r})"

    async def _post(self, body: Dict[str, Any]) -> httpx.Response:
        headers = build_headers(self._api_key)
        try:
            if self._client is not None:
                return await self._client.post(self.url, json=body, headers=headers, timeout=self.timeout)
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.post(self.url, json=body, headers=headers)
        except httpx.TransportError as e:
            logger.warning(f"Completion request failed before a response: {e!r}")
            raise TransportFailure(str(e) or e.__class__.__name__) from e
        except httpx.DecodingError as e:
            # a response arrived but its body could not be decoded (bad Content-Encoding etc.)
            logger.warning(f"Completion response body could not be decoded: {e!r}")
            raise InvalidEnvelope(f"Undecodable response body: {e}") from e
        except httpx.RequestError as e:
            logger.warning(f"Completion request failed: {e!r}")
            raise TransportFailure(str(e) or e.__class__.__name__) from e

    async def extract(self, recipe_text: str) -> List[Ingredient]:
        """Return the ingredients found in recipe_text, or raise an ExtractionError.

        An empty list means the model found no recipe. Cancelling the awaiting
        task aborts the request.
        """
        response = await self._post(build_request(recipe_text, self.model))
        logger.info(f"Completion service HTTP status: {response.status_code}")
        try:
            envelope = decode_envelope(response.content, status_code=response.status_code)
            ingredients = decode_ingredients(envelope)
        except ExtractionError as e:
            logger.warning(f"Ingredient extraction failed ({e.code}): {e}")
            raise
        logger.info(f"Extracted {len(ingredients)} ingredient(s)")
        return ingredients

    async def extract_meal(self, recipe_text: str, name: str, meal_type) -> Meal:
        """Build a ready-to-insert, unselected Meal from recipe_text."""
        ingredients = await self.extract(recipe_text)
        return Meal(name=name, meal_type=meal_type, ingredients=ingredients, selected=False)

    def start(self, recipe_text: str,
              on_done: Optional[Callable[[ExtractionOutcome], None]] = None) -> ExtractionJob:
        """Schedule extract() on the running loop and return a cancellable handle."""
        loop = asyncio.get_running_loop()
        task = loop.create_task(self.extract(recipe_text))
        return ExtractionJob(task, on_done, loop)


__all__ = [
    'IngredientExtractor', 'ExtractionJob', 'ExtractionOutcome',
    'build_request', 'build_headers', 'decode_envelope', 'decode_ingredients',
]
