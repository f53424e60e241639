"""
Pytest configuration and shared fixtures for the parambind test suite.

This module provides request, signature and client factories shared by
all test modules.
"""

import sys
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from parambind import Request, Response, Router, Signature, TestClient, inspect_handler
from parambind.testclient import encode_multipart


# ============================================================================
# Request fixtures
# ============================================================================

@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Return a factory building a :class:`Request` from keyword parts."""

    def factory(
        url: str = "/",
        *,
        method: str = "GET",
        body: bytes = b"",
        headers: Optional[Mapping[str, str]] = None,
        path_params: Optional[Mapping[str, str]] = None,
        files: Optional[Dict[str, tuple]] = None,
        fields: Optional[Dict[str, str]] = None,
    ) -> Request:
        request_headers = dict(headers or {})
        if files is not None:
            body, ctype = encode_multipart(fields, files, boundary="testboundary")
            request_headers["content-type"] = ctype
        return Request(method, url, body, request_headers, path_params)

    return factory


@pytest.fixture
def make_signature() -> Callable[[Callable[..., Any], Request], Signature]:
    """Return a factory bundling a handler and request into a :class:`Signature`."""

    def factory(func: Callable[..., Any], request: Request) -> Signature:
        return Signature(inspect_handler(func), request, Response())

    return factory


# ============================================================================
# Routing fixtures
# ============================================================================

@pytest.fixture
def router() -> Router:
    """Provide an empty router."""
    return Router()


@pytest.fixture
def client(router: Router) -> TestClient:
    """Provide a test client bound to the ``router`` fixture."""
    return TestClient(router)
