"""Exceptions raised while starting the agent or handling a request."""


class StartupError(RuntimeError):
    """The agent cannot start; it must not serve any traffic."""


class PolicyUnreadable(StartupError):
    """The policy source could not be read."""


class PolicyInvalid(StartupError):
    """The policy source could not be parsed into a policy set."""


class SchemaInvalid(StartupError):
    """A schema document is present but could not be parsed."""


class InvalidBindAddress(StartupError):
    """The configured bind address is not a usable ``host:port``."""


class RequestError(ValueError):
    """
    A client supplied an unusable authorization request.

    Every subclass sets :attr:`kind`, so that a failure can be attributed
    to the field or stage that produced it.
    """

    kind = 'request'
    prefix = 'Invalid request'

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super(RequestError, self).__init__(f'{self.prefix}: {detail}')

    @property
    def message(self) -> str:
        """Message suitable for the ``error`` field of a response."""
        return str(self)


class DecodeError(RequestError):
    """The request body could not be decoded."""


class Malformed(DecodeError):
    """The request body is not JSON, or lacks a required field."""

    kind = 'malformed'


class BuildError(RequestError):
    """The decoded request could not be turned into an evaluation context."""


class EntitiesInvalid(BuildError):
    """The ``entities`` document could not be parsed."""

    kind = 'entities'
    prefix = 'Failed to parse entities'


class PrincipalInvalid(BuildError):
    """The principal is not a valid entity identifier."""

    kind = 'principal'
    prefix = 'Failed to parse principal'


class ActionInvalid(BuildError):
    """The action is not a valid action identifier."""

    kind = 'action'
    prefix = 'Failed to parse action'


class ResourceInvalid(BuildError):
    """The resource is not a valid entity identifier."""

    kind = 'resource'
    prefix = 'Failed to parse resource'


class RequestInvalid(BuildError):
    """The request is inconsistent with the schema or rejected by the engine."""

    kind = 'request'
    prefix = 'Failed to create request'
