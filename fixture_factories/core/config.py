"""Settings for the generator with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing'

DEFAULT_APP_NAMESPACE: Final[str] = "app"
DEFAULT_MODEL_DIR: Final[str] = "models"
DEFAULT_TABLE_SUFFIX: Final[str] = "_table.py"
DEFAULT_FACTORY_DIR: Final[str] = "tests/factories"


# Load .env in development (no-op when the file is missing)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_mapping(name: str) -> dict[str, str]:
    """Parse ``Key=value,Key2=value2`` pairs from an environment variable.

    Empty items and items without ``=`` are ignored.
    """
    raw = os.getenv(name, "")
    pairs: dict[str, str] = {}
    for item in raw.split(","):
        key, sep, value = item.partition("=")
        if sep and key.strip():
            pairs[key.strip()] = value.strip()
    return pairs


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    APP_NAMESPACE: str
        Root package of the application; generated factories for models
        outside any plugin live under ``<APP_NAMESPACE>.tests.factories``.
    FIXTURE_FACTORIES_APP_ROOT: str | None
        Directory holding the application's ``models`` and ``tests``
        folders. ``None`` means the Flask application's ``root_path``.
    FIXTURE_FACTORIES_PLUGINS: dict[str, str]
        Plugin name to plugin root directory.
    FIXTURE_FACTORIES_PLUGIN_MODULES: dict[str, str]
        Plugin name to the module prefix of its models, when it differs from
        the plugin name.
    FIXTURE_FACTORIES_TEMPLATE_DIRS: list[str]
        Directories searched for template overrides before the bundled ones.
    FIXTURE_FACTORIES_MODEL_DIR: str
        Model directory relative to an app or plugin root.
    FIXTURE_FACTORIES_TABLE_SUFFIX: str
        File name suffix identifying a model module.
    FIXTURE_FACTORIES_FACTORY_DIR: str
        Factory directory relative to an app or plugin root.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    """

    APP_NAMESPACE = os.getenv("APP_NAMESPACE", DEFAULT_APP_NAMESPACE)

    FIXTURE_FACTORIES_APP_ROOT = os.getenv("FIXTURE_FACTORIES_APP_ROOT")
    FIXTURE_FACTORIES_PLUGINS = env_mapping("FIXTURE_FACTORIES_PLUGINS")
    FIXTURE_FACTORIES_PLUGIN_MODULES = env_mapping("FIXTURE_FACTORIES_PLUGIN_MODULES")
    FIXTURE_FACTORIES_TEMPLATE_DIRS = [
        path for path in os.getenv("FIXTURE_FACTORIES_TEMPLATE_DIRS", "").split(os.pathsep) if path
    ]
    FIXTURE_FACTORIES_MODEL_DIR = os.getenv("FIXTURE_FACTORIES_MODEL_DIR", DEFAULT_MODEL_DIR)
    FIXTURE_FACTORIES_TABLE_SUFFIX = os.getenv(
        "FIXTURE_FACTORIES_TABLE_SUFFIX", DEFAULT_TABLE_SUFFIX
    )
    FIXTURE_FACTORIES_FACTORY_DIR = os.getenv(
        "FIXTURE_FACTORIES_FACTORY_DIR", DEFAULT_FACTORY_DIR
    )

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development."""

    DEBUG = env_bool("FLASK_DEBUG", True)


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    Keeps logging quiet so pytest output stays readable.
    """

    TESTING = True
    DEBUG = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")


# Keys copied onto a Flask app by ``fixture_factories.cli.init_app``
CONFIG_KEYS: Final[tuple[str, ...]] = (
    "APP_NAMESPACE",
    "FIXTURE_FACTORIES_APP_ROOT",
    "FIXTURE_FACTORIES_PLUGINS",
    "FIXTURE_FACTORIES_PLUGIN_MODULES",
    "FIXTURE_FACTORIES_TEMPLATE_DIRS",
    "FIXTURE_FACTORIES_MODEL_DIR",
    "FIXTURE_FACTORIES_TABLE_SUFFIX",
    "FIXTURE_FACTORIES_FACTORY_DIR",
    "LOG_LEVEL",
)

# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)


@dataclass(frozen=True, slots=True)
class GeneratorSettings:
    """Resolved, immutable settings consumed by the factory generator.

    :param app_root: Application root holding the model and factory folders.
    :param app_namespace: Root package for non-plugin factories.
    :param plugins: Plugin name to plugin root directory.
    :param model_dir: Model directory relative to a root.
    :param table_suffix: File suffix identifying model modules.
    :param factory_dir: Factory directory relative to a root.
    """

    app_root: Path
    app_namespace: str = DEFAULT_APP_NAMESPACE
    plugins: Mapping[str, Path] = field(default_factory=dict)
    model_dir: str = DEFAULT_MODEL_DIR
    table_suffix: str = DEFAULT_TABLE_SUFFIX
    factory_dir: str = DEFAULT_FACTORY_DIR

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any], default_root: str | Path) -> GeneratorSettings:
        """Build settings from a Flask-style config mapping.

        Parameters
        ----------
        config:
            Mapping carrying the ``APP_NAMESPACE`` and
            ``FIXTURE_FACTORIES_*`` keys. Missing keys fall back to defaults.
        default_root:
            Root used when ``FIXTURE_FACTORIES_APP_ROOT`` is unset.
        """
        root = config.get("FIXTURE_FACTORIES_APP_ROOT") or default_root
        plugins = config.get("FIXTURE_FACTORIES_PLUGINS") or {}
        return cls(
            app_root=Path(root),
            app_namespace=config.get("APP_NAMESPACE") or DEFAULT_APP_NAMESPACE,
            plugins={name: Path(path) for name, path in plugins.items()},
            model_dir=config.get("FIXTURE_FACTORIES_MODEL_DIR") or DEFAULT_MODEL_DIR,
            table_suffix=config.get("FIXTURE_FACTORIES_TABLE_SUFFIX") or DEFAULT_TABLE_SUFFIX,
            factory_dir=config.get("FIXTURE_FACTORIES_FACTORY_DIR") or DEFAULT_FACTORY_DIR,
        )
