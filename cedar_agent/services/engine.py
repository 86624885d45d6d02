"""
Service API for the Cedar policy evaluation engine.

This module maps the engine functions required by the agent onto the
:mod:`cedarpy` binding. The engine is pure: identical inputs always yield
an identical decision, so calls are never retried.
"""

from typing import Any, Tuple
import json

import cedarpy

from ..domain import Artifacts, Decision, Diagnostics, EvaluationContext
from ..exceptions import RequestInvalid

DECISIONS = {
    cedarpy.Decision.Allow: Decision.ALLOW,
    cedarpy.Decision.Deny: Decision.DENY
}


def load_policies(source: str) -> cedarpy.PolicySet:
    """
    Parse a policy set.

    Raises
    ------
    ValueError
        If the engine cannot parse the policies.

    """
    return cedarpy.PolicySet.from_str(source)


def load_schema(source: str) -> cedarpy.Schema:
    """
    Parse and compile a JSON schema document.

    Raises
    ------
    ValueError
        If the document is not a valid schema, including one that refers
        to undeclared types.

    """
    return cedarpy.Schema.from_json_str(source)


def _error_text(error: Any) -> str:
    if isinstance(error, str):
        return error
    if isinstance(error, dict):
        if 'policy_id' in error and 'error' in error:
            return f'{error["policy_id"]}: {error["error"]}'
        return json.dumps(error, sort_keys=True)
    return str(error)


def is_authorized(context: EvaluationContext, artifacts: Artifacts) \
        -> Tuple[Decision, Diagnostics]:
    """
    Evaluate a request against the policy set.

    Policy errors encountered during evaluation do not fail the call; they
    are returned in :attr:`.Diagnostics.errors` alongside the decision.

    Raises
    ------
    :class:`.RequestInvalid`
        If the engine refuses to evaluate the request at all, e.g. because
        it does not conform to the schema.

    """
    result = cedarpy.is_authorized(context.to_request(), artifacts.policies,
                                   context.entities,
                                   schema=artifacts.schema)
    reason = tuple(str(policy_id) for policy_id
                   in result.diagnostics.reasons)
    errors = tuple(_error_text(e) for e in result.diagnostics.errors)
    if result.decision not in DECISIONS:
        raise RequestInvalid('; '.join(errors)
                             or 'request rejected by the policy engine')
    return DECISIONS[result.decision], Diagnostics(reason, errors)
