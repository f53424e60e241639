"""Per-source raw value extraction with defaulting and required checks.

Query and cookie values fall back to the tag default only when absent;
path, header and body text fall back when blank. A required tag whose value
is still blank afterwards raises :class:`MissingRequiredParameter`.
"""

from __future__ import annotations

from .coercion import is_blank
from .exceptions import BodyDecodingError, MissingRequiredParameter
from .http import FileItem, RequestView
from .params import Body, Cookie, Header, Multipart, Path, Query, SourceTag


def _require(tag: SourceTag | None, value: str | None, param_name: str) -> str | None:
    if tag is not None and tag.required and is_blank(value):
        raise MissingRequiredParameter(param_name, tag.source)
    return value


def extract_query(
    request: RequestView, param_name: str, tag: Query | None = None
) -> str | None:
    if tag is None:
        return request.query(param_name)
    raw = request.query(tag.effective_name(param_name))
    if raw is None:
        raw = tag.default
    return _require(tag, raw, param_name)


def extract_body(request: RequestView, param_name: str, tag: Body) -> str:
    try:
        raw = request.body_to_string()
    except UnicodeDecodeError as exc:
        raise BodyDecodingError(exc.encoding, exc) from exc
    if is_blank(raw):
        raw = tag.default
    return _require(tag, raw, param_name) or ""


def extract_path(request: RequestView, param_name: str, tag: Path) -> str:
    raw = request.path_string(tag.effective_name(param_name))
    if is_blank(raw):
        raw = tag.default
    return _require(tag, raw, param_name) or ""


def extract_header(request: RequestView, param_name: str, tag: Header) -> str:
    raw = request.header(tag.effective_name(param_name))
    if is_blank(raw):
        raw = tag.default
    return _require(tag, raw, param_name) or ""


def extract_cookie(request: RequestView, param_name: str, tag: Cookie) -> str | None:
    raw = request.cookie(tag.effective_name(param_name))
    if raw is None:
        raw = tag.default
    return _require(tag, raw, param_name)


def extract_file(
    request: RequestView, param_name: str, tag: Multipart
) -> FileItem | None:
    item = request.file_item(tag.effective_name(param_name))
    if item is None and tag.required:
        raise MissingRequiredParameter(param_name, tag.source)
    return item


__all__ = [
    "extract_body",
    "extract_cookie",
    "extract_file",
    "extract_header",
    "extract_path",
    "extract_query",
]
