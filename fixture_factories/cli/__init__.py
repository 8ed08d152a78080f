"""Command-line interface registration for a Flask application."""

from __future__ import annotations

from flask import Flask

from fixture_factories.core.config import CONFIG_KEYS, BaseConfig, get_config

from .bake import bake_cli


def init_app(app: Flask, config: type[BaseConfig] | object | None = None) -> None:
    """Register the ``bake`` command group.

    Parameters
    ----------
    app:
        Flask application instance whose CLI registry will receive the
        ``flask bake fixture_factory`` command.
    config:
        Object providing defaults for the generator keys the application
        does not set itself. Defaults to :func:`get_config`, i.e. the
        environment.
    """
    defaults = get_config() if config is None else config
    for key in CONFIG_KEYS:
        app.config.setdefault(key, getattr(defaults, key))
    app.cli.add_command(bake_cli)
