"""Global pytest fixtures for the fixture-factories test-suite."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from flask import Flask
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from fixture_factories import cli as factories_cli
from fixture_factories.core.config import GeneratorSettings
from fixture_factories.orm import SQLAlchemyTableLocator
from fixture_factories.testing import FixtureManager
from tests.sample import PLUGIN_MODULES, db


class TestConfig:
    """Testing configuration for the sample Flask application.

    Notes
    -----
    - Uses an in-memory SQLite database for speed.
    - Paths are filled in per test from ``tmp_path``.
    """

    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    APP_NAMESPACE = "app"
    FIXTURE_FACTORIES_PLUGIN_MODULES = PLUGIN_MODULES
    LOG_LEVEL = "INFO"


@pytest.fixture()
def app_root(tmp_path: Path) -> Path:
    """Application root holding ``models`` and ``tests/factories``."""

    root = tmp_path / "app"
    (root / "models").mkdir(parents=True)
    return root


@pytest.fixture()
def plugin_roots(tmp_path: Path) -> dict[str, Path]:
    """Root directories of the ``Blog`` and ``Users`` sample plugins."""

    roots = {name: tmp_path / "plugins" / name for name in PLUGIN_MODULES}
    for root in roots.values():
        (root / "models").mkdir(parents=True)
    return roots


@pytest.fixture()
def settings(app_root: Path, plugin_roots: dict[str, Path]) -> GeneratorSettings:
    """Generator settings pointing at the temporary roots."""

    return GeneratorSettings(app_root=app_root, app_namespace="app", plugins=plugin_roots)


@pytest.fixture()
def app(app_root: Path, plugin_roots: dict[str, Path]) -> Generator[Flask, None, None]:
    """Create a Flask application wired to the sample models and the CLI."""

    application = Flask("sample_app", root_path=str(app_root))
    application.config.from_object(TestConfig)
    application.config["FIXTURE_FACTORIES_PLUGINS"] = {
        name: str(path) for name, path in plugin_roots.items()
    }
    db.init_app(application)
    factories_cli.init_app(application)

    with application.app_context():
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


@pytest.fixture()
def locator() -> SQLAlchemyTableLocator:
    """Locator over the sample models without a database check."""

    return SQLAlchemyTableLocator(db.Model.registry, plugins=PLUGIN_MODULES)


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    """Single-connection in-memory SQLite engine."""

    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture()
def manager(engine: Engine) -> FixtureManager:
    """Fixture manager over :func:`engine` with the sample schema."""

    return FixtureManager({"default": engine}, metadatas={"default": db.metadata})


@pytest.fixture()
def write_model_files() -> Any:
    """Return a helper creating empty model modules in a directory."""

    def _write(directory: Path, *names: str) -> list[Path]:
        directory.mkdir(parents=True, exist_ok=True)
        paths = [directory / name for name in names]
        for path in paths:
            path.write_text("", encoding="utf-8")
        return paths

    return _write
