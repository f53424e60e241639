"""Conversion of raw request text into declared scalar types."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from .adapters import get_type_adapter, validation_errors
from .exceptions import CoercionFailure

_ZERO_VALUES: Dict[type, Any] = {
    int: 0,
    float: 0.0,
    bool: False,
    Decimal: Decimal(0),
}


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def coerce(target: Any, raw: str | None, name: str | None = None) -> Any:
    """Convert *raw* to *target*.

    Blank text yields the zero value of numeric and boolean targets, while
    malformed text raises :class:`CoercionFailure`. Non-blank text is
    validated by pydantic in lax mode, so booleans accept ``1/true/on/yes``
    and ``0/false/off/no`` among others. Targets outside the known scalar set
    yield ``None``.
    """

    if target is str:
        return raw if raw is not None else ""
    if target is bytes:
        return raw.encode() if raw is not None else b""
    if target not in _ZERO_VALUES:
        return None
    if is_blank(raw):
        return _ZERO_VALUES[target]
    try:
        return get_type_adapter(target).validate_python(raw)
    except PydanticValidationError as exc:
        loc: list[Any] = [name] if name else []
        raise CoercionFailure(
            name, raw, target, errors=validation_errors(exc, loc)
        ) from exc


__all__ = ["coerce", "is_blank"]
