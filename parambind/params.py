"""Source tags declaring where a handler parameter gets its value.

Tags are attached either through ``typing.Annotated`` or as the parameter
default, the same way ``Depends`` markers are used::

    def show(id: Annotated[int, Path()], name: str = Query(required=True)): ...
    def create(user: Annotated[User, Body()]): ...
    def upload(avatar: FileItem = Multipart("file")): ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class SourceTag:
    """Base marker; ``name`` overrides the parameter name when non-blank."""

    name: str = ""
    required: bool = False
    default: str = ""

    source: ClassVar[str] = ""

    def effective_name(self, param_name: str) -> str:
        return self.name if self.name.strip() else param_name


@dataclass(frozen=True)
class Query(SourceTag):
    """Value from the query string."""

    source: ClassVar[str] = "query"


@dataclass(frozen=True)
class Body(SourceTag):
    """Whole request body, as text or parsed from JSON."""

    source: ClassVar[str] = "body"


@dataclass(frozen=True)
class Path(SourceTag):
    """Named path segment of the matched route."""

    source: ClassVar[str] = "path"


@dataclass(frozen=True)
class Header(SourceTag):
    """Request header, matched case-insensitively."""

    source: ClassVar[str] = "header"


@dataclass(frozen=True)
class Cookie(SourceTag):
    """Request cookie."""

    source: ClassVar[str] = "cookie"


@dataclass(frozen=True)
class Multipart(SourceTag):
    """Uploaded file item; only honored on ``FileItem`` parameters."""

    source: ClassVar[str] = "multipart"


# Applied when several tags decorate the same parameter.
SOURCE_PRIORITY: tuple[type[SourceTag], ...] = (
    Query,
    Body,
    Path,
    Header,
    Cookie,
    Multipart,
)


__all__ = [
    "Body",
    "Cookie",
    "Header",
    "Multipart",
    "Path",
    "Query",
    "SOURCE_PRIORITY",
    "SourceTag",
]
