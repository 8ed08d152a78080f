"""Fixture factory generation and dirty-table truncation for SQLAlchemy test suites.

The generator lives in :mod:`fixture_factories.generator` (exposed to Flask
through :func:`fixture_factories.cli.init_app`); the pytest side lives in
:mod:`fixture_factories.testing`.
"""

from __future__ import annotations

__version__ = "1.0.0"
