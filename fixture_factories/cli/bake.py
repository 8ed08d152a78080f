"""Flask CLI commands generating fixture factories from mapped models."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import click
from flask import Flask, current_app
from flask.cli import with_appcontext

from fixture_factories.core.config import GeneratorSettings
from fixture_factories.core.errors import (
    FileConflictError,
    InvalidPluginNamespaceError,
    ModelNotFoundError,
    UnknownPluginError,
)
from fixture_factories.core.logger import configure_logging, set_package_level
from fixture_factories.generator import FactoryGenerator, TemplateRenderer, WriteResult
from fixture_factories.generator.naming import normalize_plugin, plugin_package, split_plugin
from fixture_factories.orm import SQLAlchemyTableLocator

LOGGER = logging.getLogger(__name__)


def _configure_logging(verbose: bool, level: str | int = "INFO") -> None:
    """Apply the app's ``LOG_LEVEL`` to the package loggers, DEBUG when verbose."""
    if verbose:
        configure_logging(logging.DEBUG)
    set_package_level(logging.DEBUG if verbose else level)


def build_generator(app: Flask) -> FactoryGenerator:
    """Wire a :class:`FactoryGenerator` to the app's Flask-SQLAlchemy models.

    Parameters
    ----------
    app:
        Application whose ``sqlalchemy`` extension and ``FIXTURE_FACTORIES_*``
        settings are used. Must run inside an application context.
    """
    settings = GeneratorSettings.from_mapping(app.config, app.root_path)
    modules = app.config.get("FIXTURE_FACTORIES_PLUGIN_MODULES") or {}
    plugins = {name: modules.get(name, plugin_package(name)) for name in settings.plugins}
    db = app.extensions["sqlalchemy"]
    locator = SQLAlchemyTableLocator(db.Model.registry, db.engine, plugins)
    renderer = TemplateRenderer(app.config.get("FIXTURE_FACTORIES_TEMPLATE_DIRS") or ())
    return FactoryGenerator(locator, renderer, settings)


def _echo_results(results: Iterable[WriteResult], quiet: bool) -> None:
    """Report written files; deletion failures are always shown."""
    for result in results:
        for failure in result.failed_deletions:
            click.echo(str(failure), err=True)
        if quiet:
            continue
        for path in result.deleted:
            click.echo(f"Deleted `{path}`")
        click.echo(f"Wrote `{result.path}`")


@click.group("bake")
@click.option("--verbose", is_flag=True, help="Enable verbose logging for the generators.")
@with_appcontext
def bake_cli(verbose: bool) -> None:
    """Code generators for the test suite."""
    _configure_logging(verbose, current_app.config.get("LOG_LEVEL") or "INFO")


@bake_cli.command("fixture_factory", context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("model", required=False, default="")
@click.option("--plugin", "-p", default=None, help="Plugin to bake into.")
@click.option("--all", "-a", "all_models", is_flag=True, help="Bake factories for all models.")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Force overwriting existing file if a factory already exists with the same name.",
)
@click.option("--quiet", "-q", is_flag=True, help="Enable quiet output.")
@click.option("--methods", "-m", is_flag=True, help="Include methods based on the table relations.")
@with_appcontext
def fixture_factory_command(
    model: str,
    plugin: str | None,
    all_models: bool,
    force: bool,
    quiet: bool,
    methods: bool,
) -> None:
    """Fixture factory generator.

    MODEL is the plural model name without the table suffix. Use the
    Foo.Bars notation for the model Bars of the plugin Foo. Factories are
    written to tests/factories of the app, resp. plugin.
    """
    generator = build_generator(current_app)

    qualifier, model = split_plugin(model) if model else (None, "")
    plugin = qualifier or plugin
    if plugin:
        try:
            plugin = normalize_plugin(plugin)
        except InvalidPluginNamespaceError as exc:
            click.echo(str(exc))
            return

    try:
        if all_models:
            results = generator.generate_all(plugin=plugin, force=force, methods=methods)
            if not results:
                click.echo(f"No tables were found at `{generator.model_path(plugin)}`", err=True)
            _echo_results(results, quiet)
            return

        if not model:
            if not quiet:
                click.echo("Choose a table from the following, choose -a for all, or -h for help:")
                for table in generator.list_models(plugin):
                    click.echo(f"- {table}")
            return

        result = generator.generate_one(model, plugin=plugin, force=force, methods=methods)
    except (ModelNotFoundError, FileConflictError, UnknownPluginError) as exc:
        raise click.ClickException(str(exc)) from exc
    _echo_results([result], quiet)
