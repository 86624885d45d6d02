"""Maps engine output onto the wire response."""

from .domain import AuthorizationResponse, Decision, Diagnostics


def assemble(decision: Decision, diagnostics: Diagnostics) \
        -> AuthorizationResponse:
    """Build the response, keeping diagnostics in engine order."""
    return AuthorizationResponse(
        decision=decision.value,
        diagnostics=Diagnostics(reason=tuple(diagnostics.reason),
                                errors=tuple(diagnostics.errors))
    )
