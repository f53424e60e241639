"""Per-invocation context handed to argument resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from .http import Request, Response

if TYPE_CHECKING:
    from .signature import HandlerSignature, ParameterSpec


@dataclass(frozen=True)
class Signature:
    """One handler invocation: its declared parameters plus request and response."""

    handler: "HandlerSignature"
    request: Request
    response: Response

    @property
    def action(self) -> Callable[..., Any]:
        return self.handler.func

    @property
    def parameters(self) -> tuple["ParameterSpec", ...]:
        return self.handler.parameters


__all__ = ["Signature"]
