"""Handlers and models declared under postponed annotation evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

import pytest

from parambind import Path, Query, Request, Router, inspect_handler, resolve
from parambind.descriptors import model_attributes


@dataclass
class Window:
    start: int = 0
    end: int = 0


@dataclass
class Archive:
    label: str = ""
    shelf: Shelf = None  # noqa: F821


def test_string_annotations_resolve_to_real_types(make_request, make_signature) -> None:
    def handler(
        id: Annotated[int, Path()],
        count: int,
        window: Annotated[Window, Query("w")],
        req: Request,
    ) -> None:
        return None

    request = make_request(
        "/users/42?count=7&w[start]=1&w[end]=5", path_params={"id": "42"}
    )
    values = resolve(make_signature(handler, request))
    assert values == [42, 7, Window(start=1, end=5), request]


def test_unresolvable_handler_hint_fails_at_registration() -> None:
    class Local:
        pass

    def handler(id: Annotated[int, Path()], count: int, local: Local) -> None:
        return None

    with pytest.raises(TypeError, match="Local"):
        inspect_handler(handler)

    router = Router()
    with pytest.raises(TypeError, match="cannot resolve type hints"):
        router.add_route("/users/{id}", "GET", handler)
    assert router.routes == []


def test_unresolvable_model_attribute_is_rejected() -> None:
    with pytest.raises(TypeError, match="Archive"):
        model_attributes(Archive)

    def handler(archive: Archive) -> None:
        return None

    with pytest.raises(TypeError, match="cannot resolve attribute types"):
        inspect_handler(handler)
