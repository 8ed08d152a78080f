from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from fixture_factories.core.errors import DeletionFailure

# ------------------------------ Template data ------------------------------ #


@dataclass(frozen=True, slots=True)
class TemplateData:
    """Values handed once to the renderer for one factory.

    The association maps stay ``None`` unless helper methods were requested.
    ``sub_factories`` names the ``to_one`` entries declared as always-on
    ``SubFactory`` attributes; the other associations render as opt-in
    post-generation helpers.
    """

    root_table_registry_name: str
    model_name_singular: str
    model_name: str
    factory: str
    namespace: str
    model_module: str
    model_class: str
    to_one: Mapping[str, str] | None = None
    one_to_many: Mapping[str, str] | None = None
    many_to_many: Mapping[str, str] | None = None
    sub_factories: tuple[str, ...] = ()

    def as_context(self) -> Mapping[str, Any]:
        """Read-only mapping view used as the template context."""
        context: dict[str, Any] = {
            "root_table_registry_name": self.root_table_registry_name,
            "model_name_singular": self.model_name_singular,
            "model_name": self.model_name,
            "factory": self.factory,
            "namespace": self.namespace,
            "model_module": self.model_module,
            "model_class": self.model_class,
        }
        if self.to_one is not None:
            context["to_one"] = MappingProxyType(dict(self.to_one))
            context["one_to_many"] = MappingProxyType(dict(self.one_to_many or {}))
            context["many_to_many"] = MappingProxyType(dict(self.many_to_many or {}))
            context["sub_factories"] = tuple(self.sub_factories)
        return MappingProxyType(context)


# ------------------------------ Write results ------------------------------ #


@dataclass(frozen=True, slots=True)
class WriteResult:
    """Outcome of writing one factory file."""

    model: str
    path: Path
    written: bool
    deleted: tuple[Path, ...] = field(default_factory=tuple)
    failed_deletions: tuple[DeletionFailure, ...] = field(default_factory=tuple)

    @property
    def overwritten(self) -> bool:
        return bool(self.deleted)
