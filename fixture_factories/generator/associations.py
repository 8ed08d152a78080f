"""Classification of model relations into factory association kinds."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from fixture_factories.core.errors import UnknownAssociationTypeError
from fixture_factories.generator.naming import factory_reference
from fixture_factories.generator.ports import AssociationLike


class AssociationKind(str, Enum):
    """The three association kinds a generated factory knows about.

    Values double as keys in the template data.
    """

    TO_ONE = "to_one"
    ONE_TO_MANY = "one_to_many"
    MANY_TO_MANY = "many_to_many"


# Relation types reported by the ORM port -> association kind
ASSOCIATION_TYPES: dict[str, AssociationKind] = {
    "oneToOne": AssociationKind.TO_ONE,
    "manyToOne": AssociationKind.TO_ONE,
    "oneToMany": AssociationKind.ONE_TO_MANY,
    "manyToMany": AssociationKind.MANY_TO_MANY,
}


def classify(association: AssociationLike) -> AssociationKind:
    """Return the kind of ``association``.

    Raises
    ------
    UnknownAssociationTypeError
        If the association reports a type outside :data:`ASSOCIATION_TYPES`.
    """
    kind = association.type()
    try:
        return ASSOCIATION_TYPES[kind]
    except KeyError:
        raise UnknownAssociationTypeError(association.name, kind) from None


def resolve_associations(
    associations: Iterable[AssociationLike], app_namespace: str
) -> dict[AssociationKind, dict[str, str]]:
    """Map every association name to its target factory, grouped by kind.

    Parameters
    ----------
    associations:
        Relations declared by a model.
    app_namespace:
        Namespace used for targets without a ``Plugin.`` qualifier.

    Returns
    -------
    dict[AssociationKind, dict[str, str]]
        One entry per kind (possibly empty), each mapping the local
        association name to an absolute factory import path.
    """
    resolved: dict[AssociationKind, dict[str, str]] = {kind: {} for kind in AssociationKind}
    for association in associations:
        target = association.class_name or association.name
        resolved[classify(association)][association.name] = factory_reference(
            target, app_namespace
        )
    return resolved


def sub_factory_names(
    associations: Iterable[AssociationLike], registry_name: str
) -> tuple[str, ...]:
    """Names of the to-one associations built by default with a ``SubFactory``.

    Only the side holding the foreign key (``manyToOne``) qualifies, and
    never when it points back at ``registry_name`` itself. The parent side
    of a one-to-one and self references stay opt-in, otherwise building one
    end would keep building the other.
    """
    return tuple(
        association.name
        for association in associations
        if association.type() == "manyToOne"
        and (association.class_name or association.name) != registry_name
    )
