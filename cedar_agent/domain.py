"""Data model for the Cedar agent: requests, decisions, artifacts."""

from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple
from enum import Enum


class EntityUid(NamedTuple):
    """Strongly-typed entity identifier, e.g. ``Photo::"vacation.jpg"``."""

    type: str
    """Fully-qualified entity type name, with ``::``-separated namespaces."""

    id: str
    """Entity id, unescaped."""

    def to_json(self) -> Dict[str, str]:
        """
        Render this UID in Cedar's JSON entity form.

        Unlike the textual form, this needs no escaping, so ids holding
        control characters reach the engine intact.
        """
        return {'type': self.type, 'id': self.id}

    @property
    def is_action(self) -> bool:
        """Whether this UID names an action."""
        return self.type == 'Action' or self.type.endswith('::Action')


class AuthorizationRequest(NamedTuple):
    """An inbound authorization request, as decoded from the wire."""

    principal: str
    action: str
    resource: str
    entities: Any
    """Raw JSON describing the entity records for this request."""


class EvaluationContext(NamedTuple):
    """A fully-parsed request, ready for evaluation by the engine."""

    principal: EntityUid
    action: EntityUid
    resource: EntityUid
    entities: Any
    """Parsed entity graph (a :class:`cedarpy.Entities` handle)."""

    context: Optional[Mapping[str, Any]] = None
    """Contextual attributes. Always empty for requests from the wire."""

    def to_request(self) -> Dict[str, Any]:
        """Render the principal/action/resource/context request."""
        return {
            'principal': self.principal.to_json(),
            'action': self.action.to_json(),
            'resource': self.resource.to_json(),
            'context': dict(self.context or {})
        }


class Decision(Enum):
    """Outcome of policy evaluation."""

    ALLOW = 'Allow'
    DENY = 'Deny'


class Diagnostics(NamedTuple):
    """Supplementary output of policy evaluation."""

    reason: Tuple[str, ...] = ()
    """Ids of the policies that determined the decision, in engine order."""

    errors: Tuple[str, ...] = ()
    """Non-fatal evaluation errors, in engine order."""


class AuthorizationResponse(NamedTuple):
    """Wire representation of an authorization decision."""

    decision: str
    diagnostics: Diagnostics

    def to_dict(self) -> Dict[str, Any]:
        """Render this response as a JSON-serializable dict."""
        return {
            'decision': self.decision,
            'diagnostics': {
                'reason': list(self.diagnostics.reason),
                'errors': list(self.diagnostics.errors)
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AuthorizationResponse':
        """Load a response from its JSON-serializable dict."""
        diagnostics = data.get('diagnostics', {})
        return cls(
            decision=data['decision'],
            diagnostics=Diagnostics(
                reason=tuple(diagnostics.get('reason', [])),
                errors=tuple(diagnostics.get('errors', []))
            )
        )


class Artifacts(NamedTuple):
    """
    Policy and schema artifacts, shared read-only by every request.

    Built once by :func:`cedar_agent.services.artifacts.load` before the
    service accepts traffic, and never mutated afterwards.
    """

    policies: Any
    """Parsed policy set (a :class:`cedarpy.PolicySet` handle)."""

    policy_count: int

    schema: Optional[Any] = None
    """Parsed schema (a :class:`cedarpy.Schema` handle), or ``None`` when
    running schema-less."""
