"""Handler parameter metadata, discovered once per handler."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Annotated, Any, Callable, Sequence, get_args, get_origin, get_type_hints

from .descriptors import TypeDescriptor, describe, model_attributes
from .http import FileItem
from .params import SOURCE_PRIORITY, Multipart, SourceTag

_SIGNATURE_CACHE: dict[Callable[..., Any], "HandlerSignature"] = {}


@dataclass(frozen=True)
class ParameterSpec:
    """Name, declared type and governing source tag of one parameter."""

    name: str
    descriptor: TypeDescriptor
    source: SourceTag | None = None
    keyword_only: bool = False


@dataclass(frozen=True)
class HandlerSignature:
    """Immutable parameter list of a handler, in declaration order."""

    func: Callable[..., Any]
    parameters: tuple[ParameterSpec, ...]

    def invoke(self, args: Sequence[Any]) -> Any:
        """Call the handler with an argument vector aligned to ``parameters``."""
        if len(args) != len(self.parameters):
            raise TypeError(
                f"expected {len(self.parameters)} arguments, got {len(args)}"
            )
        positional: list[Any] = []
        keywords: dict[str, Any] = {}
        for spec, value in zip(self.parameters, args):
            if spec.keyword_only:
                keywords[spec.name] = value
            else:
                positional.append(value)
        return self.func(*positional, **keywords)


def _annotated_tags(hint: Any) -> list[SourceTag]:
    if get_origin(hint) is not Annotated:
        return []
    return [meta for meta in get_args(hint)[1:] if isinstance(meta, SourceTag)]


def select_source(tags: Sequence[SourceTag], descriptor: TypeDescriptor) -> SourceTag | None:
    """Pick the governing tag: ``Query > Body > Path > Header > Cookie > Multipart``.

    A ``Multipart`` tag only counts on ``FileItem`` parameters.
    """

    for tag_type in SOURCE_PRIORITY:
        for tag in tags:
            if not isinstance(tag, tag_type):
                continue
            if tag_type is Multipart and descriptor.target is not FileItem:
                continue
            return tag
    return None


def _build(func: Callable[..., Any]) -> HandlerSignature:
    sig = inspect.signature(func)
    try:
        type_hints = get_type_hints(func, include_extras=True)
    except (NameError, TypeError) as exc:
        raise TypeError(
            f"cannot resolve type hints of handler "
            f"{getattr(func, '__qualname__', func)!r}: {exc}"
        ) from exc
    specs: list[ParameterSpec] = []
    for name, param in sig.parameters.items():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            raise TypeError(
                f"handler {getattr(func, '__qualname__', func)!r} cannot declare "
                f"variadic parameter '{name}'"
            )
        hint = type_hints.get(name, param.annotation)
        tags = _annotated_tags(hint)
        if isinstance(param.default, SourceTag):
            tags.append(param.default)
        descriptor = describe(hint)
        if descriptor.is_structured:
            model_attributes(descriptor.target)
        specs.append(
            ParameterSpec(
                name=name,
                descriptor=descriptor,
                source=select_source(tags, descriptor),
                keyword_only=param.kind is param.KEYWORD_ONLY,
            )
        )
    return HandlerSignature(func, tuple(specs))


def inspect_handler(func: Callable[..., Any]) -> HandlerSignature:
    """Return the cached :class:`HandlerSignature` of *func*.

    Raises
    ------
    TypeError
        If *func* declares ``*args`` or ``**kwargs``, or an annotation that
        cannot be resolved.
    """

    cached = _SIGNATURE_CACHE.get(func)
    if cached is None:
        cached = _build(func)
        _SIGNATURE_CACHE[func] = cached
    return cached


__all__ = ["HandlerSignature", "ParameterSpec", "inspect_handler", "select_source"]
