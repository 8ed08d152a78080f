"""
Domain-level exceptions raised by the generator and the fixture manager.

These exceptions are **framework-agnostic** and never import click, Flask or
pytest. The translation to console output and exit codes is handled by
``fixture_factories/cli/bake.py``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class FixtureFactoriesError(Exception):
    """
    Base class for all errors raised by this package.

    Notes
    -----
    - The CLI turns fatal subclasses into ``click.ClickException``.
    - Nothing in the package retries after one of these is raised.
    """

    pass


# --------------------------------------------------------------------------- #
# Generator errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class ModelNotFoundError(FixtureFactoriesError):
    """
    Raised when a model cannot be resolved or its schema cannot be loaded.

    :param model: Registry name that was looked up (e.g. ``"Blog.Posts"``).
    :type model: str
    :param path: Model directory that was searched.
    :type path: Path | str
    :param reason: Message of the underlying lookup failure, if any.
    :type reason: str
    """

    model: str
    path: Path | str
    reason: str = ""

    def __str__(self) -> str:
        message = f"The table {self.model} could not be found... in {self.path}"
        if self.reason:
            message = f"{message} ({self.reason})"
        return message


@dataclass(slots=True)
class InvalidPluginNamespaceError(FixtureFactoriesError):
    """Raised when a plugin name uses ``\\`` instead of ``/`` as separator."""

    plugin: str

    def __str__(self) -> str:
        return "Invalid plugin namespace separator, please use / instead of \\ for plugins."


@dataclass(slots=True)
class UnknownPluginError(FixtureFactoriesError):
    """Raised when a plugin has no configured root directory."""

    plugin: str

    def __str__(self) -> str:
        return f"Plugin {self.plugin} could not be found (configure FIXTURE_FACTORIES_PLUGINS)"


@dataclass(slots=True)
class FileConflictError(FixtureFactoriesError):
    """
    Raised when a factory file exists and overwriting was not forced.

    :param name: Factory name (without extension).
    :type name: str
    """

    name: str

    def __str__(self) -> str:
        return f"A factory with the name `{self.name}` already exists."


@dataclass(slots=True)
class UnknownAssociationTypeError(FixtureFactoriesError):
    """Raised when an association reports a type outside the known four."""

    association: str
    type: str

    def __str__(self) -> str:
        return f"Association {self.association} has unsupported type {self.type!r}"


# --------------------------------------------------------------------------- #
# Test-suite errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class FixtureNotFoundError(FixtureFactoriesError):
    """Raised when a test requests a static fixture that was never registered."""

    name: str

    def __str__(self) -> str:
        return f"Fixture not registered: {self.name}"


# --------------------------------------------------------------------------- #
# Non-fatal records
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class DeletionFailure:
    """
    A factory file that could not be removed during a forced overwrite.

    Reported per file; never raised, so the remaining deletions still run.
    """

    path: Path
    reason: str

    def __str__(self) -> str:
        return f"An error occurred while deleting `{self.path}`: {self.reason}"


__all__ = [
    "DeletionFailure",
    "FileConflictError",
    "FixtureFactoriesError",
    "FixtureNotFoundError",
    "InvalidPluginNamespaceError",
    "ModelNotFoundError",
    "UnknownAssociationTypeError",
    "UnknownPluginError",
]
