"""Factory generator: naming rules, association resolution and rendering."""

from __future__ import annotations

from .associations import AssociationKind, resolve_associations, sub_factory_names
from .dto import TemplateData, WriteResult
from .renderer import TemplateRenderer
from .service import FactoryGenerator, ModelListing

__all__ = [
    "AssociationKind",
    "FactoryGenerator",
    "ModelListing",
    "TemplateData",
    "TemplateRenderer",
    "WriteResult",
    "resolve_associations",
    "sub_factory_names",
]
