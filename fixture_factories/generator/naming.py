"""Naming conventions shared by the generator and the SQLAlchemy locator."""

from __future__ import annotations

from typing import Final

import inflection

from fixture_factories.core.errors import InvalidPluginNamespaceError

FACTORY_SUFFIX: Final[str] = "Factory"
FACTORY_PACKAGE: Final[str] = "tests.factories"
PLUGIN_SEPARATOR: Final[str] = "."
FILE_EXTENSION: Final[str] = ".py"


def ucfirst(name: str) -> str:
    """Upper-case the first character only (``blogPosts`` -> ``BlogPosts``)."""
    return name[:1].upper() + name[1:]


def factory_name(model_name: str) -> str:
    """Return ``singularize(ucfirst(model_name)) + "Factory"``.

    >>> factory_name("Articles")
    'ArticleFactory'
    """
    return inflection.singularize(ucfirst(model_name)) + FACTORY_SUFFIX


def file_name(model_name: str) -> str:
    """File name of the factory generated for ``model_name``."""
    return factory_name(model_name) + FILE_EXTENSION


def split_plugin(name: str) -> tuple[str | None, str]:
    """Split ``Plugin.Model`` into ``("Plugin", "Model")``.

    Names without a plugin qualifier return ``(None, name)``.
    """
    plugin, sep, model = name.rpartition(PLUGIN_SEPARATOR)
    if not sep:
        return None, name
    return plugin, model


def normalize_plugin(plugin: str) -> str:
    """Camelize each ``/``-separated part of a plugin name.

    Raises
    ------
    InvalidPluginNamespaceError
        If the name uses ``\\`` as separator.
    """
    if "\\" in plugin:
        raise InvalidPluginNamespaceError(plugin)
    return "/".join(inflection.camelize(part) for part in plugin.split("/"))


def plugin_package(plugin: str) -> str:
    """Dotted package root of a plugin (``Vendor/Blog`` -> ``Vendor.Blog``)."""
    return plugin.replace("/", ".")


def namespace_for(plugin: str | None, app_namespace: str) -> str:
    """Package holding the generated factories of a plugin or the app."""
    root = plugin_package(plugin) if plugin else app_namespace
    return f"{root}.{FACTORY_PACKAGE}"


def factory_reference(association_class: str, app_namespace: str) -> str:
    """Absolute import path of the factory built for ``association_class``.

    ``Users.Authors`` resolves under the ``Users`` plugin, anything else
    under the application namespace.

    >>> factory_reference("Users.Authors", "app")
    'Users.tests.factories.AuthorFactory.AuthorFactory'
    """
    plugin, model = split_plugin(association_class)
    factory = factory_name(model)
    return f"{namespace_for(plugin, app_namespace)}.{factory}.{factory}"
