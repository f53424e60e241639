"""Minimal HTTP primitives with query, header, cookie and multipart support."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from http.cookies import SimpleCookie
from typing import Any, Callable, Dict, Mapping, Protocol, runtime_checkable
from urllib.parse import parse_qs, urlsplit

from .exceptions import MultipartError


def _parse_header(line: str) -> tuple[str, Dict[str, str]]:
    """Parse a Content-Disposition header.

    This replaces :func:`cgi.parse_header` removed from the standard library.
    Only the subset required for multipart form parsing is implemented.
    """
    parts = [p.strip() for p in line.split(";") if p]
    value = parts[0] if parts else ""
    params: Dict[str, str] = {}
    for item in parts[1:]:
        if "=" in item:
            k, v = item.split("=", 1)
            params[k.strip()] = v.strip().strip('"')
    return value, params


@dataclass
class FileItem:
    """One uploaded file from a multipart body."""

    name: str
    filename: str
    content_type: str = "application/octet-stream"
    content: bytes = b""

    @property
    def length(self) -> int:
        return len(self.content)

    def text(self, encoding: str = "utf-8") -> str:
        return self.content.decode(encoding)


class Session:
    """Server-side attribute map bound to one client."""

    def __init__(
        self, session_id: str | None = None, attributes: Mapping[str, Any] | None = None
    ) -> None:
        self.id = session_id or uuid.uuid4().hex
        self._attributes: dict[str, Any] = dict(attributes or {})

    def attribute(self, name: str, default: Any = None) -> Any:
        return self._attributes.get(name, default)

    def set_attribute(self, name: str, value: Any) -> None:
        self._attributes[name] = value

    def remove_attribute(self, name: str) -> None:
        self._attributes.pop(name, None)

    def attributes(self) -> dict[str, Any]:
        return dict(self._attributes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"


class HttpSession(Session):
    """Legacy name for :class:`Session`, still injectable on its own."""


@runtime_checkable
class RequestView(Protocol):
    """Read-only request facade consumed by argument resolution."""

    def query(self, name: str) -> str | None: ...

    def body_to_string(self) -> str: ...

    def path_string(self, name: str) -> str: ...

    def header(self, name: str) -> str: ...

    def cookie(self, name: str) -> str | None: ...

    def file_item(self, name: str) -> FileItem | None: ...

    def file_items(self) -> dict[str, FileItem]: ...

    def session(self) -> Session: ...

    def parameters(self) -> dict[str, str]: ...


class Request:
    """Represent an incoming HTTP request."""

    def __init__(
        self,
        method: str = "GET",
        url: str = "/",
        body: bytes = b"",
        headers: Mapping[str, str] | None = None,
        path_params: Mapping[str, str] | None = None,
        session: Session | None = None,
        session_loader: Callable[["Request"], Session] | None = None,
        encoding: str = "utf-8",
        max_upload_size: int | None = None,
        allowed_mime_types: set[str] | None = None,
    ) -> None:
        self.method = method.upper()
        self.url = url
        self._body = body
        self.headers = {k.lower(): v for k, v in (headers or {}).items()}
        self.path_params = dict(path_params or {})
        parts = urlsplit(url)
        self.path = parts.path or "/"
        self.query_params: dict[str, list[str]] = parse_qs(
            parts.query, keep_blank_values=True
        )
        self.encoding = encoding
        self.max_upload_size = max_upload_size
        self.allowed_mime_types = allowed_mime_types
        self._session = session
        self.session_loader = session_loader
        self._cookies: dict[str, str] | None = None
        self._form_data: dict[str, list[str]] | None = None
        self._files: dict[str, FileItem] | None = None

    @property
    def body(self) -> bytes:
        return self._body

    def query(self, name: str) -> str | None:
        """Return the first query value for *name*, ``None`` when absent."""
        values = self.query_params.get(name)
        return values[0] if values else None

    def body_to_string(self) -> str:
        """Decode the body strictly; invalid bytes raise ``UnicodeDecodeError``."""
        return self._body.decode(self.encoding)

    def path_string(self, name: str) -> str:
        return self.path_params.get(name) or ""

    def header(self, name: str) -> str:
        return self.headers.get(name.lower(), "")

    @property
    def cookies(self) -> dict[str, str]:
        """Lazily parse cookies from the request headers."""
        if self._cookies is None:
            raw = self.headers.get("cookie", "")
            jar: SimpleCookie = SimpleCookie()
            jar.load(raw)
            self._cookies = {k: morsel.value for k, morsel in jar.items()}
        return self._cookies

    def cookie(self, name: str) -> str | None:
        return self.cookies.get(name)

    def file_item(self, name: str) -> FileItem | None:
        return self.file_items().get(name)

    def file_items(self) -> dict[str, FileItem]:
        """Return uploaded files parsed from the body."""
        self._parse_form()
        return dict(self._files or {})

    def session(self) -> Session:
        """Return the bound session, loading or opening one on first use."""
        if self._session is None:
            loader = self.session_loader
            self._session = loader(self) if loader is not None else Session()
        return self._session

    def has_session(self) -> bool:
        return self._session is not None

    def parameters(self) -> dict[str, str]:
        """Query and form fields by name, first value wins."""
        self._parse_form()
        merged: dict[str, str] = {}
        for source in (self.query_params, self._form_data or {}):
            for key, values in source.items():
                if values and key not in merged:
                    merged[key] = values[0]
        return merged

    def _parse_form(self) -> None:
        if self._form_data is not None:
            return

        data = self._body
        ctype = self.headers.get("content-type", "")
        form: dict[str, list[str]] = {}
        files: dict[str, FileItem] = {}
        if ctype.startswith("multipart/form-data") or data.startswith(b"--"):
            boundary = (
                ctype.split("boundary=")[-1].strip('"') if "boundary=" in ctype else ""
            )
            if not boundary:
                line = data.split(b"\r\n", 1)[0]
                if line.startswith(b"--"):
                    boundary = line[2:].decode()
            if boundary:
                delim = ("--" + boundary).encode()
                for part in data.split(delim)[1:-1]:
                    if b"\r\n\r\n" not in part:
                        continue
                    header_block, content = part.split(b"\r\n\r\n", 1)
                    lines = header_block.decode(self.encoding).strip().split("\r\n")
                    disp = next(
                        (h for h in lines if h.lower().startswith("content-disposition")),
                        "",
                    )
                    ctype_header = next(
                        (h for h in lines if h.lower().startswith("content-type")),
                        "",
                    )
                    mime = (
                        ctype_header.split(":", 1)[1].strip().lower()
                        if ctype_header
                        else "application/octet-stream"
                    )
                    _, params = _parse_header(disp.split(":", 1)[-1])
                    name = params.get("name", "")
                    filename = params.get("filename")
                    content = content[:-2] if content.endswith(b"\r\n") else content
                    if filename is not None:
                        self._check_upload(mime, content)
                        files[name] = FileItem(name, filename, mime, content)
                    else:
                        form.setdefault(name, []).append(
                            content.decode(self.encoding, errors="replace")
                        )
        elif ctype.startswith("application/x-www-form-urlencoded"):
            form = parse_qs(
                self._body.decode(self.encoding, errors="replace"),
                keep_blank_values=True,
            )
        self._form_data = form
        self._files = files

    def _check_upload(self, mime: str, content: bytes) -> None:
        if self.allowed_mime_types is not None and mime not in self.allowed_mime_types:
            raise MultipartError("unsupported media type")
        if self.max_upload_size is not None and len(content) > self.max_upload_size:
            raise MultipartError("file too large")

    def __repr__(self) -> str:
        return f"Request({self.method} {self.url})"


class Response:
    """HTTP response container with header and cookie management."""

    def __init__(
        self,
        content: str | bytes = b"",
        *,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        media_type: str | None = None,
    ) -> None:
        if isinstance(content, str):
            self.body = content.encode()
            default_type = "text/plain; charset=utf-8"
        else:
            self.body = content
            default_type = "application/octet-stream"
        self.status_code = status_code
        self.headers = {k.lower(): v for k, v in (headers or {}).items()}
        self.media_type = media_type or default_type
        self.headers.setdefault("content-type", self.media_type)
        self._cookies: SimpleCookie = SimpleCookie()

    def set_header(self, key: str, value: str) -> None:
        """Set or replace a header."""
        self.headers[key.lower()] = value

    def set_cookie(self, key: str, value: str, **params: Any) -> None:
        """Attach a cookie to the response."""
        self._cookies[key] = value
        for k, v in params.items():
            self._cookies[key][k.replace("_", "-")] = str(v)

    def set_body(self, content: str | bytes, media_type: str | None = None) -> None:
        self.body = content.encode() if isinstance(content, str) else content
        if media_type is not None:
            self.media_type = media_type
            self.headers["content-type"] = media_type

    def serialize(self) -> tuple[int, bytes, dict[str, str]]:
        """Return ``(status_code, body, headers)`` for transmission."""
        headers = self.headers.copy()
        if self._cookies:
            headers["set-cookie"] = self._cookies.output(
                header="",
                sep="; ",
            ).strip()
        return self.status_code, self.body, headers


__all__ = [
    "FileItem",
    "HttpSession",
    "Request",
    "RequestView",
    "Response",
    "Session",
]
