"""View-model holder and a lightweight file-based template renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class ModelAndView:
    """Template name plus the attributes a handler wants rendered."""

    view: str | None = None
    model: dict[str, Any] = field(default_factory=dict)

    def add(self, name: str, value: Any) -> "ModelAndView":
        self.model[name] = value
        return self


class TemplateRenderer:
    """Render templates stored on disk using ``str.format``."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def render(self, template: str, **context: Any) -> str:
        """Return template *template* formatted with *context*."""
        text = (self.directory / template).read_text(encoding="utf8")
        return text.format(**context)

    def render_view(self, view: ModelAndView) -> str:
        if not view.view:
            raise ValueError("ModelAndView has no view name")
        return self.render(view.view, **view.model)


__all__ = ["ModelAndView", "TemplateRenderer"]
