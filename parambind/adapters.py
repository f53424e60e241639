"""Cached pydantic ``TypeAdapter`` lookup and error translation."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.errors import PydanticSchemaGenerationError

_LOGGER = logging.getLogger("parambind")

_TYPE_ADAPTER_CACHE: dict[Any, Any] = {}
ADAPTER_UNAVAILABLE = object()


def get_type_adapter(tp: Any) -> Any:
    """Return a cached ``TypeAdapter`` for *tp* or ``ADAPTER_UNAVAILABLE``."""

    if tp in _TYPE_ADAPTER_CACHE:
        return _TYPE_ADAPTER_CACHE[tp]
    try:
        adapter = TypeAdapter(tp)
    except PydanticSchemaGenerationError:
        _LOGGER.debug("No schema for %r", tp, exc_info=True)
        adapter = ADAPTER_UNAVAILABLE
    _TYPE_ADAPTER_CACHE[tp] = adapter
    return adapter


def validation_errors(
    exc: PydanticValidationError, base_loc: list[Any]
) -> list[dict[str, Any]]:
    """Convert pydantic errors into ``loc/msg/type/input`` detail entries."""

    errors: list[dict[str, Any]] = []
    for err in exc.errors():
        err_loc = [part for part in err.get("loc", ()) if part != "__root__"]
        input_value = err.get("input")
        if input_value == {}:
            input_value = None
        errors.append(
            {
                "loc": base_loc + err_loc,
                "msg": err.get("msg", ""),
                "type": err.get("type", "value_error"),
                "input": input_value,
            }
        )
    return errors


__all__ = ["ADAPTER_UNAVAILABLE", "get_type_adapter", "validation_errors"]
