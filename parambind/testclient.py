"""Simple in-memory HTTP client for a :class:`~parambind.routing.Router`."""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urlencode

from .http import Request
from .routing import Router


@dataclass
class TestResponse:
    """Container for HTTP response data."""

    __test__ = False  # prevent Pytest from treating this as a test case

    status_code: int
    text: str
    headers: Mapping[str, str]
    content: bytes

    def json(self) -> Any:
        """Return the body parsed as JSON."""
        return json.loads(self.text)


def encode_multipart(
    fields: Mapping[str, str] | None = None,
    files: Mapping[str, tuple[str, bytes, str]] | None = None,
    boundary: str | None = None,
) -> tuple[bytes, str]:
    """Return ``(body, content_type)`` for a ``multipart/form-data`` upload.

    *files* maps field names to ``(filename, content, content_type)``.
    """

    boundary = boundary or uuid.uuid4().hex
    chunks: list[bytes] = []
    for name, value in (fields or {}).items():
        chunks.append(
            (
                f"--{boundary}\r\n"
                f'Content-Disposition: form-data; name="{name}"\r\n\r\n'
                f"{value}\r\n"
            ).encode()
        )
    for name, (filename, content, content_type) in (files or {}).items():
        chunks.append(
            (
                f"--{boundary}\r\n"
                f'Content-Disposition: form-data; name="{name}"; '
                f'filename="{filename}"\r\n'
                f"Content-Type: {content_type}\r\n\r\n"
            ).encode()
            + content
            + b"\r\n"
        )
    chunks.append(f"--{boundary}--\r\n".encode())
    return b"".join(chunks), f"multipart/form-data; boundary={boundary}"


class TestClient:
    """Execute requests against a ``Router`` without a server."""

    __test__ = False  # prevent Pytest from treating this as a test case

    def __init__(self, router: Router) -> None:
        self.router = router
        self.cookies: dict[str, str] = {}

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: bytes | None = None,
        json_body: Any = None,
        data: Mapping[str, str] | None = None,
        files: Mapping[str, tuple[str, bytes, str]] | None = None,
        headers: Mapping[str, str] | None = None,
        cookies: Mapping[str, str] | None = None,
    ) -> TestResponse:
        """Send an HTTP request and return the response."""
        if sum(x is not None for x in (body, json_body, files)) > 1:
            raise ValueError("provide only one of body, json_body or files")
        request_headers = dict(headers or {})
        if files is not None:
            body, ctype = encode_multipart(data, files)
            request_headers.setdefault("content-type", ctype)
        elif json_body is not None:
            body = json.dumps(json_body).encode()
            request_headers.setdefault("content-type", "application/json")
        elif data is not None:
            body = urlencode(data).encode()
            request_headers.setdefault(
                "content-type", "application/x-www-form-urlencoded"
            )
        jar = {**self.cookies, **(cookies or {})}
        if jar:
            request_headers["cookie"] = "; ".join(f"{k}={v}" for k, v in jar.items())
        url = path
        if params:
            url = f"{path}?{urlencode(params, doseq=True)}"
        settings = self.router.settings
        request = Request(
            method,
            url,
            body or b"",
            request_headers,
            encoding=settings.body_encoding,
            max_upload_size=settings.max_upload_size,
        )
        status, content, resp_headers = self.router.dispatch(request).serialize()
        self._remember_cookie(resp_headers.get("set-cookie", ""))
        try:
            text = content.decode()
        except UnicodeDecodeError:
            text = content.decode("latin1")
        return TestResponse(status, text, resp_headers, content)

    def _remember_cookie(self, header: str) -> None:
        if not header:
            return
        first = header.split(";", 1)[0]
        if "=" in first:
            name, value = first.split("=", 1)
            self.cookies[name.strip()] = value.strip()

    def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        cookies: Mapping[str, str] | None = None,
    ) -> TestResponse:
        """Send a GET request."""
        return self.request(
            "GET", path, params=params, headers=headers, cookies=cookies
        )

    def post(
        self,
        path: str,
        json_body: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> TestResponse:
        """Send a POST request."""
        return self.request(
            "POST",
            path,
            json_body=json_body,
            params=params,
            headers=headers,
            **kwargs,
        )


__all__ = ["TestClient", "TestResponse", "encode_multipart"]
