"""Errors raised while binding request data to handler arguments."""

from __future__ import annotations

from typing import Any


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


class BindingError(Exception):
    """Base error for every argument binding failure.

    ``errors()`` returns FastAPI-style detail entries so the transport can
    answer with ``{"detail": errors}`` without inspecting the subclass.
    """

    status_code = 422

    def __init__(
        self,
        code: str,
        message: str,
        *,
        loc: list[Any] | None = None,
        input_value: Any | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")
        if errors is not None:
            self._errors = errors
        else:
            self._errors = [
                {
                    "loc": list(loc or []),
                    "msg": message,
                    "type": code,
                    "input": input_value,
                }
            ]

    def errors(self) -> list[dict[str, Any]]:
        return self._errors


class MissingRequiredParameter(BindingError):
    """A required tagged parameter yielded no usable value."""

    def __init__(self, name: str, source: str = "query") -> None:
        self.name = name
        self.source = source
        super().__init__(
            "missing",
            f"{source} param [{name}] is required",
            loc=[source, name],
        )


class CoercionFailure(BindingError):
    """Malformed text for a numeric or boolean target."""

    def __init__(
        self,
        name: str | None,
        raw: str,
        target: Any,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.name = name
        self.raw = raw
        self.target = target
        kind = _type_name(target)
        label = name or "value"
        super().__init__(
            f"{kind.lower()}_parsing",
            f"{label}: {raw!r} is not a valid {kind}",
            loc=[name] if name else [],
            input_value=raw,
            errors=errors,
        )


class ModelBindingFailure(BindingError):
    """Structural binding of *target* failed; ``cause`` holds the original error."""

    def __init__(
        self,
        target: Any,
        cause: BaseException,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.target = target
        self.cause = cause
        if errors is None and isinstance(cause, BindingError):
            errors = cause.errors()
        super().__init__(
            "model_binding",
            f"cannot bind {_type_name(target)}: {cause}",
            loc=[_type_name(target)],
            errors=errors,
        )


class UnsupportedBodyType(BindingError):
    """Body tag used with a type the JSON collaborator cannot materialize."""

    status_code = 500

    def __init__(self, target: Any) -> None:
        self.target = target
        super().__init__(
            "unsupported_body_type",
            f"{_type_name(target)} cannot be parsed from a JSON body",
            loc=["body"],
        )


class BodyDecodingError(BindingError):
    """Request body bytes are not valid in the configured encoding."""

    def __init__(self, encoding: str, cause: UnicodeDecodeError) -> None:
        self.encoding = encoding
        self.cause = cause
        super().__init__(
            "body_decoding",
            f"body is not valid {encoding}: {cause.reason}",
            loc=["body"],
            input_value=None,
        )


class MultipartError(ValueError):
    """Rejected multipart upload (size or media type)."""


__all__ = [
    "BindingError",
    "BodyDecodingError",
    "CoercionFailure",
    "MissingRequiredParameter",
    "ModelBindingFailure",
    "MultipartError",
    "UnsupportedBodyType",
]
