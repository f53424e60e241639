"""Context-type injection by exact declared type."""

import collections.abc
import typing

from parambind import (
    FileItem,
    HttpSession,
    ModelAndView,
    Request,
    Response,
    Session,
    Signature,
    inject,
    is_context_type,
)
from parambind.injector import CONTEXT_TYPES


def _handler() -> None:
    return None


def test_signature_request_and_response(make_request, make_signature) -> None:
    signature = make_signature(_handler, make_request("/"))
    assert inject(Signature, signature) is signature
    assert inject(Request, signature) is signature.request
    assert inject(Response, signature) is signature.response


def test_session_and_legacy_alias_share_request_session(make_request, make_signature) -> None:
    signature = make_signature(_handler, make_request("/"))
    session = inject(Session, signature)
    assert isinstance(session, Session)
    assert inject(HttpSession, signature) is session
    assert signature.request.session() is session


def test_untyped_maps_receive_request_parameters(make_request, make_signature) -> None:
    request = make_request(
        "/?a=1&a=2&b=",
        method="POST",
        body=b"c=3",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    signature = make_signature(_handler, request)
    expected = {"a": "1", "b": "", "c": "3"}
    for tp in (dict, typing.Dict, typing.Mapping, collections.abc.Mapping):
        assert inject(tp, signature) == expected


def test_first_file_item_when_untagged(make_request, make_signature) -> None:
    request = make_request(
        "/",
        method="POST",
        files={
            "first": ("a.txt", b"A", "text/plain"),
            "second": ("b.txt", b"B", "text/plain"),
        },
    )
    item = inject(FileItem, make_signature(_handler, request))
    assert isinstance(item, FileItem)
    assert item.name == "first"


def test_no_upload_yields_none(make_request, make_signature) -> None:
    assert inject(FileItem, make_signature(_handler, make_request("/"))) is None


def test_model_and_view_is_always_fresh(make_request, make_signature) -> None:
    signature = make_signature(_handler, make_request("/?view=x"))
    first = inject(ModelAndView, signature)
    second = inject(ModelAndView, signature)
    assert first == ModelAndView()
    assert first is not second


def test_subclasses_are_not_context_types() -> None:
    class CustomRequest(Request):
        pass

    assert is_context_type(Request)
    assert not is_context_type(CustomRequest)
    assert not is_context_type(typing.Dict[str, str])
    assert Signature in CONTEXT_TYPES
