"""SQLAlchemy implementations of the generator's model ports."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

import inflection
from sqlalchemy import Table, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import NoSuchTableError
from sqlalchemy.orm import Mapper, RelationshipDirection, RelationshipProperty, registry

from fixture_factories.generator.naming import split_plugin, ucfirst


class SQLAlchemyAssociation:
    """Expose a :class:`RelationshipProperty` through the association port."""

    def __init__(self, prop: RelationshipProperty, class_name: str | None) -> None:
        self.prop = prop
        self.name = prop.key
        self.class_name = class_name

    def type(self) -> str:
        direction = self.prop.direction
        if direction is RelationshipDirection.MANYTOMANY:
            return "manyToMany"
        if direction is RelationshipDirection.MANYTOONE:
            return "manyToOne"
        return "oneToMany" if self.prop.uselist else "oneToOne"

    def __repr__(self) -> str:
        return f"<SQLAlchemyAssociation {self.name} -> {self.class_name}>"


class SQLAlchemyTable:
    """A mapped class seen through the generator's table port.

    Parameters
    ----------
    registry_name:
        Name the table was requested under (``Articles``, ``Blog.Posts``).
    mapper:
        Mapper of the entity class.
    locator:
        Locator used to name association targets.
    engine:
        When given, :meth:`get_schema` also checks that the table exists in
        the database.
    """

    def __init__(
        self,
        registry_name: str,
        mapper: Mapper,
        locator: SQLAlchemyTableLocator,
        engine: Engine | None = None,
    ) -> None:
        self.registry_name = registry_name
        self.mapper = mapper
        self.entity_class = mapper.class_
        self.locator = locator
        self.engine = engine

    def get_schema(self) -> Table:
        """Return the mapped :class:`sqlalchemy.Table`.

        Raises
        ------
        NoSuchTableError
            If an engine is bound and the database lacks the table.
        """
        table = self.mapper.local_table
        if self.engine is not None and not inspect(self.engine).has_table(
            table.name, schema=table.schema
        ):
            raise NoSuchTableError(table.name)
        return table

    def associations(self) -> Iterator[SQLAlchemyAssociation]:
        for prop in self.mapper.relationships:
            yield SQLAlchemyAssociation(prop, self.locator.registry_name_for(prop.mapper))


class SQLAlchemyTableLocator:
    """Resolve registry names against a declarative :class:`registry`.

    ``Articles`` matches the mapper whose table is ``articles`` (or whose
    class is ``Article``) outside every plugin; ``Blog.Posts`` matches
    ``posts`` among the classes of the ``Blog`` plugin.

    Parameters
    ----------
    mapper_registry:
        Declarative registry, e.g. ``db.Model.registry``.
    engine:
        Engine used to verify that tables exist.
    plugins:
        Plugin name to the module prefix of its model classes.
    """

    def __init__(
        self,
        mapper_registry: registry,
        engine: Engine | None = None,
        plugins: Mapping[str, str] | None = None,
    ) -> None:
        self.registry = mapper_registry
        self.engine = engine
        self.plugins = dict(plugins or {})

    def plugin_of(self, cls: type) -> str | None:
        module = cls.__module__
        for plugin, prefix in self.plugins.items():
            if module == prefix or module.startswith(prefix + "."):
                return plugin
        return None

    def registry_name_for(self, mapper: Mapper) -> str:
        """Registry name of a mapped class, ``Plugin.Model`` inside plugins."""
        model = inflection.camelize(mapper.local_table.name)
        plugin = self.plugin_of(mapper.class_)
        return f"{plugin}.{model}" if plugin else model

    def get(self, name: str) -> SQLAlchemyTable:
        """Return the table registered under ``name``.

        Raises
        ------
        LookupError
            If no mapped class matches.
        """
        plugin, model = split_plugin(name)
        table_name = inflection.underscore(model)
        class_name = inflection.singularize(ucfirst(model))
        for mapper in self.registry.mappers:
            if self.plugin_of(mapper.class_) != plugin:
                continue
            local_name = getattr(mapper.local_table, "name", None)
            if local_name == table_name or mapper.class_.__name__ == class_name:
                return SQLAlchemyTable(name, mapper, self, self.engine)
        raise LookupError(f"No mapped class for {name!r}")
