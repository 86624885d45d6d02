"""Flask configuration for the Cedar agent."""

import os

CEDAR_POLICY_PATH = os.environ.get('CEDAR_POLICY_PATH',
                                   '/app/policies/policy.cedar')
"""Location of the policy-set source. Must exist and parse."""

CEDAR_SCHEMA_PATH = os.environ.get('CEDAR_SCHEMA_PATH',
                                   '/app/policies/schema.cedarschema.json')
"""Location of the JSON schema. If absent, requests are not schema-checked."""

BIND_ADDR = os.environ.get('BIND_ADDR', '0.0.0.0:8181')

LOGLEVEL = int(os.environ.get('LOGLEVEL', 20))
LOG_JSON = bool(int(os.environ.get('LOG_JSON', '1')))
"""If 1, log records are emitted as JSON; otherwise as plain text."""

MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 1024 * 1024))
"""Largest request body accepted, in bytes."""
