"""
Parsing of entity identifiers and entity documents.

Identifiers use Cedar's normalized textual form, ``Type::"id"``, where
``Type`` may be namespaced (``PhotoApp::User::"alice"``). They are checked
here so that a failure can be attributed to the principal, action or
resource; entity documents are parsed by the engine itself.
"""

from typing import Any, List, Optional
import json
import re

import cedarpy

from ..domain import EntityUid

IDENT = r'[_a-zA-Z][_a-zA-Z0-9]*'
UID_PATTERN = re.compile(
    rf'(?P<type>{IDENT}(?:::{IDENT})*)::"(?P<id>(?:[^"\\]|\\.)*)"',
    re.DOTALL
)
ESCAPES = {'n': '\n', 'r': '\r', 't': '\t', '0': '\0', '\\': '\\',
           '"': '"', "'": "'"}
UNICODE_ESCAPE = re.compile(r'\{([0-9a-fA-F]{1,6})\}')


def parse_uid(text: Any) -> EntityUid:
    """Parse an entity identifier from its textual form."""
    if not isinstance(text, str):
        raise ValueError(f'expected a string, got {type(text).__name__}')
    match = UID_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f'expected an entity uid like Type::"id", '
                         f'got {text!r}')
    return EntityUid(match.group('type'), _unescape(match.group('id')))


def parse_action(text: Any) -> EntityUid:
    """Parse an action identifier, e.g. ``Action::"view"``."""
    uid = parse_uid(text)
    if not uid.is_action:
        raise ValueError(f'expected an entity of type Action, '
                         f'got {uid.type}')
    return uid


def _unescape(raw: str) -> str:
    """Decode the escape sequences permitted in a Cedar string literal."""
    out: List[str] = []
    i = 0
    while i < len(raw):
        char = raw[i]
        if char != '\\':
            out.append(char)
            i += 1
            continue
        code = raw[i + 1]   # The pattern guarantees a following character.
        if code in ESCAPES:
            out.append(ESCAPES[code])
            i += 2
        elif code == 'u':
            match = UNICODE_ESCAPE.match(raw, i + 2)
            if match is None:
                raise ValueError(f'invalid unicode escape in {raw!r}')
            value = int(match.group(1), 16)
            if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
                raise ValueError(f'invalid unicode escape in {raw!r}')
            out.append(chr(value))
            i = match.end()
        else:
            raise ValueError(f'invalid escape sequence \\{code} in {raw!r}')
    return ''.join(out)


def parse_entities(value: Any, schema: Optional[cedarpy.Schema] = None) \
        -> cedarpy.Entities:
    """
    Parse a JSON entity document into an entity graph.

    Parameters
    ----------
    value : list or str
        A list of entity records, or a JSON string holding one.
    schema : :class:`cedarpy.Schema` or None
        If provided, the entities must conform to it.

    Returns
    -------
    :class:`cedarpy.Entities`

    Raises
    ------
    ValueError
        If the document is not a valid entity list, or violates the schema.

    """
    if not isinstance(value, str):
        value = json.dumps(value)
    return cedarpy.Entities.from_json_str(value, schema=schema)
