from __future__ import annotations

from .locator import SQLAlchemyAssociation, SQLAlchemyTable, SQLAlchemyTableLocator

__all__ = ["SQLAlchemyAssociation", "SQLAlchemyTable", "SQLAlchemyTableLocator"]
