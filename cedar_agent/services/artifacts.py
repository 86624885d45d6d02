"""
Loads the policy set and optional schema, and holds them for the app.

Artifacts are loaded once, when the application is created. A missing
schema is acceptable and puts the agent in schema-less mode; a missing or
unparseable policy set, or a schema that is present but unparseable,
prevents the application from being created at all.
"""

from typing import Any, Optional

import logging
from flask import Flask, current_app

from ..domain import Artifacts
from ..exceptions import PolicyInvalid, PolicyUnreadable, SchemaInvalid
from . import engine

logger = logging.getLogger(__name__)

EXTENSION = 'cedar_agent'


def _read(path: str) -> str:
    with open(path, encoding='utf-8') as f:
        return f.read()


def load_schema(schema_path: str) -> Optional[Any]:
    """Load the schema at ``schema_path``, or ``None`` if it can't be read."""
    try:
        source = _read(schema_path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning('Schema file not found (%s), proceeding without '
                       'schema validation', e)
        return None
    try:
        return engine.load_schema(source)
    except ValueError as e:
        raise SchemaInvalid(f'Failed to parse schema: {e}') from e


def load(policy_path: str, schema_path: str) -> Artifacts:
    """
    Load the policy set and optional schema.

    Parameters
    ----------
    policy_path : str
        Location of the policy-set source text.
    schema_path : str
        Location of the JSON schema document.

    Returns
    -------
    :class:`.Artifacts`

    Raises
    ------
    :class:`.PolicyUnreadable`
    :class:`.PolicyInvalid`
    :class:`.SchemaInvalid`

    """
    logger.info('Loading policies from: %s', policy_path)
    logger.info('Loading schema from: %s', schema_path)
    try:
        policies = _read(policy_path)
    except (OSError, UnicodeDecodeError) as e:
        raise PolicyUnreadable(f'Failed to read policy file: {e}') from e
    try:
        policy_set = engine.load_policies(policies)
    except ValueError as e:
        raise PolicyInvalid(f'Failed to parse policies: {e}') from e

    policy_count = len(policy_set)
    schema = load_schema(schema_path)
    logger.info('Cedar service initialized successfully')
    logger.info('Loaded %i policies', policy_count)
    return Artifacts(policy_set, policy_count, schema)


def init_app(app: Flask) -> None:
    """Load artifacts for ``app`` using its configuration."""
    app.config.setdefault('CEDAR_POLICY_PATH', '/app/policies/policy.cedar')
    app.config.setdefault('CEDAR_SCHEMA_PATH',
                          '/app/policies/schema.cedarschema.json')
    app.extensions[EXTENSION] = load(app.config['CEDAR_POLICY_PATH'],
                                     app.config['CEDAR_SCHEMA_PATH'])


def current_artifacts() -> Artifacts:
    """Get the :class:`.Artifacts` loaded for the current application."""
    artifacts: Artifacts = current_app.extensions[EXTENSION]
    return artifacts
