"""Structural binding of query fields and JSON bodies onto model types."""

from __future__ import annotations

from dataclasses import is_dataclass
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .adapters import ADAPTER_UNAVAILABLE, get_type_adapter, validation_errors
from .coercion import coerce, is_blank
from .descriptors import describe, is_pydantic_model, model_attributes
from .exceptions import BindingError, ModelBindingFailure, UnsupportedBodyType
from .http import RequestView


def parse_json(text: str, target: Any) -> Any:
    """Materialize *target* from JSON *text*.

    Raises
    ------
    UnsupportedBodyType
        If pydantic cannot build a schema for *target*.
    ModelBindingFailure
        If *text* is not valid JSON for *target*.
    """

    adapter = get_type_adapter(target)
    if adapter is ADAPTER_UNAVAILABLE:
        raise UnsupportedBodyType(target)
    try:
        return adapter.validate_json(text)
    except PydanticValidationError as exc:
        raise ModelBindingFailure(
            target, exc, errors=validation_errors(exc, ["body"])
        ) from exc


def _construct(target: type, values: dict[str, Any]) -> Any:
    if is_dataclass(target) or is_pydantic_model(target):
        return target(**values)
    instance = target()
    for name, value in values.items():
        setattr(instance, name, value)
    return instance


def bind_model(target: Any, request: RequestView, prefix: str | None = None) -> Any:
    """Build *target* from query fields named ``prefix[attr]`` (or ``attr``).

    Only primitive attributes are bound; nested structured attributes keep
    their defaults. Returns ``None`` when no attribute received a value.
    """

    attributes = model_attributes(target)
    if not attributes:
        return None
    values: dict[str, Any] = {}
    try:
        for name, annotation in attributes:
            descriptor = describe(annotation)
            if not descriptor.is_primitive:
                continue
            key = f"{prefix}[{name}]" if prefix else name
            raw = request.query(key)
            if is_blank(raw):
                continue
            values[name] = coerce(descriptor.target, raw, key)
        if not values:
            return None
        return _construct(target, values)
    except PydanticValidationError as exc:
        base = ["query", prefix] if prefix else ["query"]
        raise ModelBindingFailure(
            target, exc, errors=validation_errors(exc, base)
        ) from exc
    except (BindingError, TypeError, ValueError, AttributeError) as exc:
        raise ModelBindingFailure(target, exc) from exc


__all__ = ["bind_model", "parse_json"]
