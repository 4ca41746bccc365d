"""
ui.template_set - The fixed set of views the UI can render.

Built once by create_app() from the Jinja environment and stored in
app.extensions; it cannot be changed afterwards.  Asking for a view that
was never registered is a server-side configuration fault.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from flask import current_app, render_template
from jinja2 import Environment, Template, TemplateNotFound

from config import ConfigError

logger = logging.getLogger(__name__)

EXTENSION_KEY = "template_set"

# view name → template file under templates/
VIEWS: Mapping[str, str] = MappingProxyType({
    "landing": "landing.html",
    "import":  "import.html",
    "export":  "export.html",
    "help":    "help.html",
    "success": "success.html",
    "error":   "error.html",
})


class TemplateNotRegistered(LookupError):
    """Raised when a handler asks for a view that is not in the set."""


class TemplateSet:

    def __init__(self, templates: Mapping[str, Template]):
        self._templates = MappingProxyType(dict(templates))

    @classmethod
    def load(cls, env: Environment, views: Mapping[str, str] = VIEWS) -> TemplateSet:
        """Compile every view up front; a missing file is fatal."""
        loaded = {}
        for name, filename in views.items():
            try:
                loaded[name] = env.get_template(filename)
            except TemplateNotFound as exc:
                raise ConfigError(
                    f"template {filename!r} for view {name!r} not found"
                ) from exc
        logger.info(f"Loaded {len(loaded)} views: {', '.join(sorted(loaded))}")
        return cls(loaded)

    def __contains__(self, name: str) -> bool:
        return name in self._templates

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._templates)

    def render(self, name: str, **context) -> str:
        try:
            template = self._templates[name]
        except KeyError:
            raise TemplateNotRegistered(f"template {name!r} not found") from None
        return render_template(template, **context)


def render_view(name: str, **context) -> str:
    """Render a view through the application's TemplateSet."""
    return current_app.extensions[EXTENSION_KEY].render(name, **context)
