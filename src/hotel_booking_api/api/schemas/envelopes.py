from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _EnvelopeModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuccessResponseDTO(_EnvelopeModel):
    """Success envelope: `{statusCode, statusText, data}`."""

    status_code: int
    status_text: str
    data: Any = None


class ErrorResponseDTO(_EnvelopeModel):
    """Single error envelope: `{statusCode, statusText, error}`."""

    status_code: int
    status_text: str
    error: str


class ValidationErrorResponseDTO(_EnvelopeModel):
    """Multi-field validation envelope: `{statusCode, statusText, errors}`."""

    status_code: int
    status_text: str
    errors: list[str]
