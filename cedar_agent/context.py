"""
Builds an :class:`.EvaluationContext` from a decoded request.

Whether a schema is loaded is decided once per request, at the top of
:func:`build`; the schema-aware and schema-less paths are never mixed. The
same schema handle is later given to the engine, which checks the request
itself against it.
"""

from typing import Any

from .domain import Artifacts, AuthorizationRequest, EvaluationContext
from .exceptions import ActionInvalid, EntitiesInvalid, PrincipalInvalid, \
    ResourceInvalid
from .services.entities import parse_action, parse_entities, parse_uid


def build(req: AuthorizationRequest, artifacts: Artifacts) \
        -> EvaluationContext:
    """
    Parse a request's entities and identifiers.

    Entities are parsed first, then identifiers in order: principal, action,
    resource. Only the first failure is reported.

    Raises
    ------
    :class:`.BuildError`
        One of :class:`.EntitiesInvalid`, :class:`.PrincipalInvalid`,
        :class:`.ActionInvalid`, :class:`.ResourceInvalid`.

    """
    schema = artifacts.schema
    entities = _entities(req, schema)
    try:
        principal = parse_uid(req.principal)
    except ValueError as e:
        raise PrincipalInvalid(str(e)) from e
    try:
        action = parse_action(req.action)
    except ValueError as e:
        raise ActionInvalid(str(e)) from e
    try:
        resource = parse_uid(req.resource)
    except ValueError as e:
        raise ResourceInvalid(str(e)) from e
    return EvaluationContext(principal, action, resource, entities)


def _entities(req: AuthorizationRequest, schema: Any) -> Any:
    try:
        return parse_entities(req.entities, schema)
    except ValueError as e:
        raise EntitiesInvalid(str(e)) from e
