"""Decorator-based routing that feeds matched requests through argument resolution."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable
from urllib.parse import unquote

from .config import Settings
from .context import Signature
from .exceptions import BindingError, MultipartError
from .http import Request, Response
from .resolver import resolve
from .responses import HTTPException, JSONResponse
from .sessions import SessionStore
from .signature import HandlerSignature, inspect_handler
from .templates import ModelAndView, TemplateRenderer

_LOGGER = logging.getLogger("parambind.routing")

_PARAM_PATTERN = re.compile(r"{([^}:]+)(?::([^}]+))?}")


@dataclass(frozen=True)
class Route:
    """A registered handler with its precompiled path pattern."""

    method: str
    path: str
    pattern: re.Pattern[str]
    param_names: tuple[str, ...]
    signature: HandlerSignature

    def match(self, path: str) -> dict[str, str] | None:
        found = self.pattern.match(path)
        if found is None:
            return None
        return {
            name: unquote(value)
            for name, value in zip(self.param_names, found.groups())
        }


def compile_path(path: str) -> tuple[re.Pattern[str], tuple[str, ...]]:
    """Turn ``/users/{id}`` or ``/users/{id:int}`` into a regex and its names.

    The optional ``:type`` suffix is accepted for readability only; values
    are converted from the handler's declared parameter types.
    """

    names: list[str] = []
    parts: list[str] = []
    idx = 0
    for found in _PARAM_PATTERN.finditer(path):
        parts.append(re.escape(path[idx : found.start()]))
        parts.append(r"([^/]+)")
        names.append(found.group(1))
        idx = found.end()
    parts.append(re.escape(path[idx:]))
    return re.compile("^" + "".join(parts) + "$"), tuple(names)


class Router:
    """Register handlers by method and path and dispatch requests to them."""

    def __init__(
        self,
        settings: Settings | None = None,
        session_store: SessionStore | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.session_store = session_store or SessionStore(self.settings.session_cookie)
        self.renderer = renderer
        self.routes: list[Route] = []

    def add_route(self, path: str, method: str, func: Callable[..., Any]) -> Route:
        pattern, names = compile_path(path)
        route = Route(method.upper(), path, pattern, names, inspect_handler(func))
        self.routes.append(route)
        _LOGGER.debug("Registered %s %s -> %r", route.method, path, func)
        return route

    def route(
        self, path: str, method: str = "GET"
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register the decorated function for *method* and *path*."""

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.add_route(path, method, func)
            return func

        return decorator

    def get(self, path: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        return self.route(path, "GET")

    def post(self, path: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        return self.route(path, "POST")

    def put(self, path: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        return self.route(path, "PUT")

    def delete(self, path: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        return self.route(path, "DELETE")

    def match(self, method: str, path: str) -> tuple[Route, dict[str, str]] | None:
        for route in self.routes:
            if route.method != method.upper():
                continue
            params = route.match(path)
            if params is not None:
                return route, params
        return None

    def dispatch(self, request: Request) -> Response:
        """Resolve arguments for the matching handler, call it, render the result."""

        matched = self.match(request.method, request.path)
        if matched is None:
            return JSONResponse({"detail": "Not Found"}, status_code=404)
        route, params = matched
        request.path_params = params
        if not request.has_session():
            request.session_loader = self.session_store.load
        response = Response()
        signature = Signature(route.signature, request, response)
        try:
            args = resolve(signature)
            result = route.signature.invoke(args)
            response = self._render(result, response)
        except BindingError as exc:
            _LOGGER.warning(
                "Argument binding failed for %s %s: %s", request.method, route.path, exc
            )
            return JSONResponse({"detail": exc.errors()}, status_code=exc.status_code)
        except MultipartError as exc:
            return JSONResponse({"detail": str(exc)}, status_code=400)
        except HTTPException as exc:
            return JSONResponse(
                {"detail": exc.detail}, status_code=exc.status_code, headers=exc.headers
            )
        except Exception:
            _LOGGER.error(
                "Handler %r raised an exception", route.signature.func, exc_info=True
            )
            return JSONResponse({"detail": "Internal Server Error"}, status_code=500)
        if request.has_session():
            self.session_store.commit(request.session(), response)
        return response

    def _render(self, result: Any, response: Response) -> Response:
        if isinstance(result, Response):
            return result
        if result is None:
            return response
        if isinstance(result, ModelAndView):
            if self.renderer is None:
                raise RuntimeError("ModelAndView returned but no renderer configured")
            response.set_body(
                self.renderer.render_view(result), "text/html; charset=utf-8"
            )
        elif isinstance(result, (str, bytes)):
            response.set_body(result, "text/plain; charset=utf-8")
        else:
            response.set_body(json.dumps(result), "application/json")
        return response


__all__ = ["Route", "Router", "compile_path"]
