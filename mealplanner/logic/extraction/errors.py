"""Failure kinds of the recipe text extraction pipeline.

Every failure is terminal (no retry) and distinct from a successful
extraction that found no ingredients.
"""
from typing import Optional


class ExtractionError(Exception):
    code = "extraction_error"

    def __init__(self, message: str = "", *, status_code: Optional[int] = None):
        super().__init__(message or self.code)
        self.status_code = status_code

    def to_dict(self):
        d = {"error": self.code, "detail": str(self)}
        if self.status_code is not None:
            d["status_code"] = self.status_code
        return d


class TransportFailure(ExtractionError):
    """Network or connection error before any response was obtained."""
    code = "transport_failure"


class InvalidEnvelope(ExtractionError):
    """The response body is not a chat completion envelope."""
    code = "invalid_envelope"


class NoChoices(ExtractionError):
    """The envelope decoded but holds zero choices."""
    code = "no_choices"


class InvalidIngredientPayload(ExtractionError):
    """choices[0].message.content is not JSON matching {"ingredients": [...]}."""
    code = "invalid_ingredient_payload"


__all__ = ['ExtractionError', 'TransportFailure', 'InvalidEnvelope', 'NoChoices', 'InvalidIngredientPayload']
