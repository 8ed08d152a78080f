"""Collaborator ports consumed by :class:`FactoryGenerator`."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol


class AssociationLike(Protocol):
    """A declared relation from one model to another."""

    name: str
    class_name: str | None

    def type(self) -> str: ...


class TableLike(Protocol):
    """Model descriptor returned by a :class:`TableLocator`."""

    registry_name: str
    entity_class: type

    def get_schema(self) -> Any: ...

    def associations(self) -> Iterable[AssociationLike]: ...


class TableLocator(Protocol):
    """Port resolving registry names such as ``Articles`` or ``Blog.Posts``."""

    def get(self, name: str) -> TableLike: ...


class Renderer(Protocol):
    """Port rendering a named template with data set beforehand."""

    def set(self, data: Mapping[str, Any]) -> None: ...

    def generate(self, template_name: str) -> str: ...
