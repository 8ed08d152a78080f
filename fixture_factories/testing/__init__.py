"""Test-suite helpers: factory base classes and dirty-table truncation."""

from __future__ import annotations

from .context import SuiteContext
from .factories import BaseFactory, SQLAlchemySession
from .injector import CaseConfig, FixtureInjector
from .manager import Fixture, FixtureManager

__all__ = [
    "BaseFactory",
    "CaseConfig",
    "Fixture",
    "FixtureInjector",
    "FixtureManager",
    "SQLAlchemySession",
    "SuiteContext",
]
