"""Decodes raw request bodies into :class:`.AuthorizationRequest`."""

from typing import Any, Dict
import json

from .domain import AuthorizationRequest
from .exceptions import Malformed

STRING_FIELDS = ('principal', 'action', 'resource')


def decode(raw: bytes) -> AuthorizationRequest:
    """
    Decode a request body.

    Only the presence and JSON type of the fields are checked here; whether
    the identifiers are meaningful is left to
    :func:`cedar_agent.context.build`.

    Raises
    ------
    :class:`.Malformed`
        If the body is not a JSON object carrying string ``principal``,
        ``action`` and ``resource`` fields and an ``entities`` field.

    """
    try:
        data: Any = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise Malformed(f'body is not valid JSON: {e}') from e
    if not isinstance(data, dict):
        raise Malformed(f'expected a JSON object, got {type(data).__name__}')
    return _from_dict(data)


def _from_dict(data: Dict[str, Any]) -> AuthorizationRequest:
    for field in STRING_FIELDS:
        if field not in data:
            raise Malformed(f'missing field `{field}`')
        if not isinstance(data[field], str):
            raise Malformed(f'field `{field}` must be a string, got '
                            f'{type(data[field]).__name__}')
    if 'entities' not in data:
        raise Malformed('missing field `entities`')
    return AuthorizationRequest(principal=data['principal'],
                                action=data['action'],
                                resource=data['resource'],
                                entities=data['entities'])
