"""Bind HTTP request data to typed handler arguments."""

__version__ = "0.1.0"

from .binding import bind_model, parse_json
from .coercion import coerce
from .config import Settings, configure_logging, load_settings
from .context import Signature
from .descriptors import TypeDescriptor, TypeKind, describe
from .exceptions import (
    BindingError,
    BodyDecodingError,
    CoercionFailure,
    MissingRequiredParameter,
    ModelBindingFailure,
    MultipartError,
    UnsupportedBodyType,
)
from .http import FileItem, HttpSession, Request, RequestView, Response, Session
from .injector import inject, is_context_type
from .params import Body, Cookie, Header, Multipart, Path, Query, SourceTag
from .resolver import resolve, resolve_parameter
from .responses import HTMLResponse, HTTPException, JSONResponse, PlainTextResponse
from .routing import Router
from .sessions import SessionStore
from .signature import HandlerSignature, ParameterSpec, inspect_handler
from .templates import ModelAndView, TemplateRenderer
from .testclient import TestClient, TestResponse

__all__ = [
    "__version__",
    "BindingError",
    "BodyDecodingError",
    "Body",
    "CoercionFailure",
    "Cookie",
    "FileItem",
    "HTMLResponse",
    "HTTPException",
    "HandlerSignature",
    "Header",
    "HttpSession",
    "JSONResponse",
    "MissingRequiredParameter",
    "ModelAndView",
    "ModelBindingFailure",
    "Multipart",
    "MultipartError",
    "ParameterSpec",
    "Path",
    "PlainTextResponse",
    "Query",
    "Request",
    "RequestView",
    "Response",
    "Router",
    "Session",
    "SessionStore",
    "Settings",
    "Signature",
    "SourceTag",
    "TemplateRenderer",
    "TestClient",
    "TestResponse",
    "TypeDescriptor",
    "TypeKind",
    "UnsupportedBodyType",
    "bind_model",
    "coerce",
    "configure_logging",
    "describe",
    "inject",
    "inspect_handler",
    "is_context_type",
    "load_settings",
    "parse_json",
    "resolve",
    "resolve_parameter",
]
