"""Argument resolution: request data -> positional handler arguments."""

from __future__ import annotations

import logging
from typing import Any

from .binding import bind_model, parse_json
from .coercion import coerce, is_blank
from .context import Signature
from .exceptions import MissingRequiredParameter
from .extractors import (
    extract_body,
    extract_cookie,
    extract_file,
    extract_header,
    extract_path,
    extract_query,
)
from .http import FileItem
from .injector import inject
from .params import Body, Cookie, Header, Multipart, Path, Query, SourceTag
from .signature import ParameterSpec

_LOGGER = logging.getLogger("parambind")


def _resolve_query(param: ParameterSpec, tag: Query, signature: Signature) -> Any:
    descriptor = param.descriptor
    request = signature.request
    name = tag.effective_name(param.name)
    if descriptor.is_primitive:
        return coerce(descriptor.target, extract_query(request, param.name, tag), name)
    value = bind_model(descriptor.target, request, name)
    if value is None and tag.required:
        raise MissingRequiredParameter(param.name, tag.source)
    return value


def _resolve_body(param: ParameterSpec, tag: Body, signature: Signature) -> Any:
    descriptor = param.descriptor
    text = extract_body(signature.request, param.name, tag)
    if descriptor.is_primitive:
        return coerce(descriptor.target, text, param.name)
    if is_blank(text):
        return None
    return parse_json(text, descriptor.target)


def _resolve_tagged(param: ParameterSpec, tag: SourceTag, signature: Signature) -> Any:
    request = signature.request
    target = param.descriptor.target
    name = tag.effective_name(param.name)
    if isinstance(tag, Query):
        return _resolve_query(param, tag, signature)
    if isinstance(tag, Body):
        return _resolve_body(param, tag, signature)
    if isinstance(tag, Path):
        return coerce(target, extract_path(request, param.name, tag), name)
    if isinstance(tag, Header):
        return coerce(target, extract_header(request, param.name, tag), name)
    if isinstance(tag, Cookie):
        return coerce(target, extract_cookie(request, param.name, tag), name)
    if isinstance(tag, Multipart):
        return extract_file(request, param.name, tag)
    raise TypeError(f"unknown source tag {tag!r}")


def resolve_parameter(param: ParameterSpec, signature: Signature) -> Any:
    """Resolve the value of a single declared parameter."""

    descriptor = param.descriptor
    tag = param.source
    explicit_file = isinstance(tag, Multipart) and descriptor.target is FileItem
    if descriptor.is_context and not explicit_file:
        return inject(descriptor.target, signature)
    if tag is not None:
        _LOGGER.debug("Binding %s from %s", param.name, tag.source)
        return _resolve_tagged(param, tag, signature)
    if descriptor.is_primitive:
        return coerce(
            descriptor.target, extract_query(signature.request, param.name), param.name
        )
    return bind_model(descriptor.target, signature.request)


def resolve(signature: Signature) -> list[Any]:
    """Return the argument vector for ``signature.handler``.

    The result is aligned with ``signature.parameters``. Any
    :class:`~parambind.exceptions.BindingError` aborts the whole vector.
    """

    return [resolve_parameter(param, signature) for param in signature.parameters]


__all__ = ["resolve", "resolve_parameter"]
