from __future__ import annotations

from typing import Any, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ValidationError

M = TypeVar("M", bound=BaseModel)


def parse_payload(model: Type[M], data: Any, *, message: str) -> M:
    """Shape-check a JSON body against a pydantic model.

    Any pydantic failure is reported as a domain ``ValidationError`` carrying
    ``message`` (the client only ever shows that text).
    """
    try:
        return model.model_validate(data if data is not None else {})
    except PydanticValidationError as e:
        raise ValidationError(message) from e


def optional_int_arg(value: str | None) -> int | None:
    """Query-string id (``?classId=3``); missing or blank means no filter."""
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"Invalid id: {value!r}")
