"""Jinja2 implementation of the generator's :class:`Renderer` port."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import inflection
from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

TEMPLATE_EXTENSION = ".py.jinja"


class TemplateRenderer:
    """Render factory templates shipped with the package.

    Parameters
    ----------
    template_dirs:
        Extra directories searched before the bundled templates, so an
        application can override ``fixture_factory.py.jinja``.
    """

    def __init__(self, template_dirs: Iterable[str | Path] = ()) -> None:
        loaders = [FileSystemLoader([str(path) for path in template_dirs])] if template_dirs else []
        loaders.append(PackageLoader("fixture_factories", "templates"))
        self.env = Environment(
            loader=ChoiceLoader(loaders),
            extensions=["jinja2.ext.do"],
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["underscore"] = inflection.underscore
        self._data: dict[str, Any] = {}

    def set(self, data: Mapping[str, Any]) -> None:
        """Replace the variables available to the next :meth:`generate` call."""
        self._data = dict(data)

    def generate(self, template_name: str) -> str:
        """Render ``<template_name>.py.jinja`` with the current variables."""
        template = self.env.get_template(template_name + TEMPLATE_EXTENSION)
        return template.render(**self._data)
