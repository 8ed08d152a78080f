"""Factory generation service: resolve a model, render, write the file."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import inflection

from fixture_factories.core.config import GeneratorSettings
from fixture_factories.core.errors import (
    DeletionFailure,
    FileConflictError,
    ModelNotFoundError,
    UnknownPluginError,
)
from fixture_factories.generator.associations import (
    AssociationKind,
    resolve_associations,
    sub_factory_names,
)
from fixture_factories.generator.dto import TemplateData, WriteResult
from fixture_factories.generator.naming import (
    FILE_EXTENSION,
    factory_name,
    file_name,
    namespace_for,
    normalize_plugin,
    split_plugin,
    ucfirst,
)
from fixture_factories.generator.ports import Renderer, TableLike, TableLocator

LOGGER = logging.getLogger(__name__)


class ModelListing:
    """
    Model names found in a model directory.

    Iterating rescans the directory, so the same listing can be walked any
    number of times. Names are the camelized file stems without the table
    suffix (``blog_posts_table.py`` -> ``BlogPosts``), in file name order.
    """

    def __init__(self, directory: Path, suffix: str) -> None:
        self.directory = directory
        self.suffix = suffix

    def __iter__(self) -> Iterator[str]:
        if not self.directory.is_dir():
            return
        for path in sorted(self.directory.glob(f"*{self.suffix}")):
            stem = path.name[: -len(self.suffix)]
            if stem:
                yield inflection.camelize(stem)


class FactoryGenerator:
    """
    Generate factory_boy factories from mapped models.

    Responsibilities
    ----------------
    * Resolve models through the injected :class:`TableLocator`.
    * Build :class:`TemplateData` and render it with the injected
      :class:`Renderer`.
    * Own the file system side: conflict checks, forced deletion, writes.

    Notes
    -----
    - Fatal conditions raise :mod:`fixture_factories.core.errors` types.
    - Deletion failures during a forced overwrite are logged and returned,
      never raised.
    """

    TEMPLATE = "fixture_factory"

    def __init__(
        self,
        locator: TableLocator,
        renderer: Renderer,
        settings: GeneratorSettings,
    ) -> None:
        self.locator = locator
        self.renderer = renderer
        self.settings = settings

    # -------------------------- Paths ------------------------------------

    def root_path(self, plugin: str | None = None) -> Path:
        """Root directory of the application or of ``plugin``."""
        if not plugin:
            return self.settings.app_root
        try:
            return self.settings.plugins[plugin]
        except KeyError:
            raise UnknownPluginError(plugin) from None

    def model_path(self, plugin: str | None = None) -> Path:
        """Directory scanned for model modules."""
        return self.root_path(plugin) / self.settings.model_dir

    def factory_dir(self, plugin: str | None = None) -> Path:
        """Directory receiving the generated factories."""
        return self.root_path(plugin) / self.settings.factory_dir

    def factory_path(self, model_name: str, plugin: str | None = None) -> Path:
        return self.factory_dir(plugin) / file_name(model_name)

    # -------------------------- Naming -----------------------------------

    def namespace_for(self, plugin: str | None) -> str:
        return namespace_for(plugin, self.settings.app_namespace)

    def list_models(self, plugin: str | None = None) -> ModelListing:
        return ModelListing(self.model_path(plugin), self.settings.table_suffix)

    # -------------------------- Model resolution -------------------------

    def get_table(self, model_name: str, plugin: str | None = None) -> TableLike:
        """Resolve ``model_name`` and check that its schema loads.

        Raises
        ------
        ModelNotFoundError
            When the locator cannot resolve the name or the schema lookup
            fails; the message carries the model path searched.
        """
        registry_name = f"{plugin}.{model_name}" if plugin else model_name
        model_path = self.model_path(plugin)
        try:
            table = self.locator.get(registry_name)
            table.get_schema()
        except Exception as exc:
            LOGGER.warning("The table %s could not be found... in %s", registry_name, model_path)
            raise ModelNotFoundError(registry_name, model_path, str(exc)) from exc
        return table

    def resolve_associations(self, table: TableLike) -> dict[AssociationKind, dict[str, str]]:
        return resolve_associations(table.associations(), self.settings.app_namespace)

    def template_data(
        self,
        table: TableLike,
        model_name: str,
        plugin: str | None = None,
        *,
        methods: bool = False,
    ) -> TemplateData:
        """Build the values handed to the ``fixture_factory`` template."""
        entity = table.entity_class
        registry_name = f"{plugin}.{model_name}" if plugin else model_name
        relations = list(table.associations()) if methods else []
        associations = (
            resolve_associations(relations, self.settings.app_namespace) if methods else None
        )
        return TemplateData(
            root_table_registry_name=registry_name,
            model_name_singular=inflection.singularize(model_name),
            model_name=model_name,
            factory=factory_name(model_name),
            namespace=self.namespace_for(plugin),
            model_module=entity.__module__,
            model_class=entity.__name__,
            to_one=associations[AssociationKind.TO_ONE] if associations else None,
            one_to_many=associations[AssociationKind.ONE_TO_MANY] if associations else None,
            many_to_many=associations[AssociationKind.MANY_TO_MANY] if associations else None,
            sub_factories=sub_factory_names(relations, registry_name),
        )

    # -------------------------- Files ------------------------------------

    def handle_factory_with_same_name(
        self,
        name: str,
        plugin: str | None = None,
        *,
        force: bool = False,
    ) -> tuple[tuple[Path, ...], tuple[DeletionFailure, ...]]:
        """Delete factories called ``name`` when forced, refuse otherwise.

        Returns
        -------
        tuple
            The deleted paths and the per-file deletion failures.

        Raises
        ------
        FileConflictError
            If a factory file already exists and ``force`` is false.
        """
        same_name = sorted(self.factory_dir(plugin).glob(name + FILE_EXTENSION))
        if not same_name:
            return (), ()
        if not force:
            raise FileConflictError(name)

        LOGGER.info("A factory with the name `%s` already exists, it will be deleted.", name)
        deleted: list[Path] = []
        failures: list[DeletionFailure] = []
        for factory in same_name:
            LOGGER.info("Deleting factory file `%s`...", factory)
            try:
                factory.unlink()
            except OSError as exc:
                failure = DeletionFailure(factory, exc.strerror or str(exc))
                LOGGER.error(str(failure))
                failures.append(failure)
            else:
                LOGGER.info("Deleted `%s`", factory)
                deleted.append(factory)
        return tuple(deleted), tuple(failures)

    # -------------------------- Operations -------------------------------

    def generate_one(
        self,
        model_name: str,
        *,
        plugin: str | None = None,
        force: bool = False,
        methods: bool = False,
    ) -> WriteResult:
        """Generate the factory of one model.

        Parameters
        ----------
        model_name:
            Plural model name, optionally ``Plugin.Model``; the qualifier
            wins over ``plugin``.
        plugin:
            Plugin owning the model.
        force:
            Replace an existing factory file.
        methods:
            Render association-derived declarations.
        """
        qualifier, model_name = split_plugin(model_name)
        plugin = qualifier or plugin
        if plugin:
            plugin = normalize_plugin(plugin)
        model_name = ucfirst(model_name)

        table = self.get_table(model_name, plugin)
        self.renderer.set(self.template_data(table, model_name, plugin, methods=methods).as_context())
        contents = self.renderer.generate(self.TEMPLATE)

        path = self.factory_path(model_name, plugin)
        deleted, failures = self.handle_factory_with_same_name(
            factory_name(model_name), plugin, force=force
        )
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")
        LOGGER.info("Wrote factory %s", path, extra={"model": model_name, "path": str(path)})
        return WriteResult(
            model=model_name,
            path=path,
            written=True,
            deleted=deleted,
            failed_deletions=failures,
        )

    def generate_all(
        self,
        *,
        plugin: str | None = None,
        force: bool = False,
        methods: bool = False,
    ) -> list[WriteResult]:
        """Generate a factory for every model module of the app or plugin.

        An empty model directory is reported and leaves the disk untouched.
        """
        if plugin:
            plugin = normalize_plugin(plugin)
        models = list(self.list_models(plugin))
        if not models:
            LOGGER.info("No tables were found at `%s`", self.model_path(plugin))
            return []
        return [
            self.generate_one(model, plugin=plugin, force=force, methods=methods)
            for model in models
        ]
