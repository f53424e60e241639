"""Direct injection of framework context objects by exact declared type."""

from __future__ import annotations

import collections.abc
import typing
from typing import Any, Callable, Dict

from .context import Signature
from .http import FileItem, HttpSession, Request, Response, Session
from .templates import ModelAndView

ContextBinder = Callable[[Signature], Any]


def _first_file_item(signature: Signature) -> FileItem | None:
    # Order among several uploads follows the multipart body; callers wanting
    # a specific field use a Multipart tag instead.
    items = signature.request.file_items()
    return next(iter(items.values()), None)


def _parameters(signature: Signature) -> dict[str, str]:
    return signature.request.parameters()


def _session(signature: Signature) -> Session:
    return signature.request.session()


_CONTEXT_BINDERS: Dict[Any, ContextBinder] = {
    Signature: lambda signature: signature,
    Request: lambda signature: signature.request,
    Response: lambda signature: signature.response,
    Session: _session,
    HttpSession: _session,
    dict: _parameters,
    typing.Dict: _parameters,
    typing.Mapping: _parameters,
    collections.abc.Mapping: _parameters,
    FileItem: _first_file_item,
    ModelAndView: lambda signature: ModelAndView(),
}

CONTEXT_TYPES = frozenset(_CONTEXT_BINDERS)


def is_context_type(target: Any) -> bool:
    try:
        return target in _CONTEXT_BINDERS
    except TypeError:  # unhashable annotation
        return False


def inject(target: Any, signature: Signature) -> Any:
    """Return the context object for *target*.

    Raises
    ------
    KeyError
        If *target* is not a registered context type.
    """

    return _CONTEXT_BINDERS[target](signature)


__all__ = ["CONTEXT_TYPES", "ContextBinder", "inject", "is_context_type"]
