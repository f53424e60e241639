"""Classification of declared parameter and attribute types."""

from __future__ import annotations

import enum
import inspect
import types
from dataclasses import dataclass, fields, is_dataclass
from decimal import Decimal
from typing import (
    Annotated,
    Any,
    ClassVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from pydantic import BaseModel

from .injector import is_context_type

PRIMITIVE_TYPES = frozenset({str, bytes, int, float, bool, Decimal, complex})

# Serialization-version marker never bound from request data.
VERSION_MARKER = "serial_version_uid"

_ATTRIBUTE_CACHE: dict[type, tuple[tuple[str, Any], ...]] = {}


class TypeKind(enum.Enum):
    PRIMITIVE = "primitive"
    CONTEXT = "context"
    STRUCTURED = "structured"


@dataclass(frozen=True)
class TypeDescriptor:
    """Declared type of a parameter with ``Optional``/``Annotated`` peeled off."""

    annotation: Any
    target: Any
    kind: TypeKind
    nullable: bool = False

    @property
    def is_primitive(self) -> bool:
        return self.kind is TypeKind.PRIMITIVE

    @property
    def is_context(self) -> bool:
        return self.kind is TypeKind.CONTEXT

    @property
    def is_structured(self) -> bool:
        return self.kind is TypeKind.STRUCTURED


def _strip_annotated(tp: Any) -> Any:
    while get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    return tp


def _unwrap_optional(tp: Any) -> tuple[Any, bool]:
    if get_origin(tp) in (Union, types.UnionType):
        args = get_args(tp)
        present = [a for a in args if a is not type(None)]
        if len(present) == 1 and len(present) < len(args):
            return _strip_annotated(present[0]), True
    return tp, False


def describe(annotation: Any) -> TypeDescriptor:
    """Return the :class:`TypeDescriptor` for a declared *annotation*.

    A missing annotation is treated as ``str``.
    """

    if annotation is inspect.Parameter.empty or annotation is Any:
        return TypeDescriptor(annotation, str, TypeKind.PRIMITIVE)
    target, nullable = _unwrap_optional(_strip_annotated(annotation))
    if is_context_type(target):
        kind = TypeKind.CONTEXT
    elif target in PRIMITIVE_TYPES:
        kind = TypeKind.PRIMITIVE
    else:
        kind = TypeKind.STRUCTURED
    return TypeDescriptor(annotation, target, kind, nullable)


def is_pydantic_model(tp: Any) -> bool:
    return inspect.isclass(tp) and issubclass(tp, BaseModel)


def _is_class_var(tp: Any) -> bool:
    return tp is ClassVar or get_origin(tp) is ClassVar


def _collect_attributes(cls: type) -> list[tuple[str, Any]]:
    if is_pydantic_model(cls):
        return [(name, info.annotation) for name, info in cls.model_fields.items()]
    try:
        hints = get_type_hints(cls)
    except (NameError, TypeError) as exc:
        raise TypeError(
            f"cannot resolve attribute types of {cls.__qualname__!r}: {exc}"
        ) from exc
    if is_dataclass(cls):
        return [(f.name, hints.get(f.name, f.type)) for f in fields(cls)]
    return [(name, tp) for name, tp in hints.items() if not _is_class_var(tp)]


def model_attributes(cls: Any) -> tuple[tuple[str, Any], ...]:
    """Ordered ``(name, annotation)`` pairs bindable on structured *cls*."""

    if not inspect.isclass(cls):
        return ()
    cached = _ATTRIBUTE_CACHE.get(cls)
    if cached is not None:
        return cached
    attributes = tuple(
        (name, tp)
        for name, tp in _collect_attributes(cls)
        if not name.startswith("_") and name != VERSION_MARKER
    )
    _ATTRIBUTE_CACHE[cls] = attributes
    return attributes


__all__ = [
    "PRIMITIVE_TYPES",
    "TypeDescriptor",
    "TypeKind",
    "VERSION_MARKER",
    "describe",
    "is_pydantic_model",
    "model_attributes",
]
