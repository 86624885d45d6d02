"""
Controllers for the authorization endpoints.

A request to ``/authorize`` passes through four stages: the body is decoded
(:mod:`cedar_agent.decoder`), the identifiers and entities are parsed
(:mod:`cedar_agent.context`), the policy engine is invoked once
(:mod:`cedar_agent.services.engine`), and the result is mapped onto the
response (:mod:`cedar_agent.assembler`). Any failure is contained to the
request: client errors become 400, anything else 500.
"""

from typing import Tuple
from http import HTTPStatus
import logging

from werkzeug.exceptions import BadRequest, InternalServerError

from ..assembler import assemble
from ..context import build
from ..decoder import decode
from ..exceptions import RequestError
from ..services import engine
from ..services.artifacts import current_artifacts

logger = logging.getLogger(__name__)

ResponseData = Tuple[dict, int, dict]

GENERIC_ERROR = 'Internal server error'


def status_for(error: Exception) -> int:
    """Map a pipeline failure to a response status code."""
    if isinstance(error, RequestError):
        return HTTPStatus.BAD_REQUEST
    return HTTPStatus.INTERNAL_SERVER_ERROR


def health() -> ResponseData:
    """Report that the agent is alive."""
    return {'status': 'healthy'}, HTTPStatus.OK, {}


def authorize(body: bytes) -> ResponseData:
    """
    Evaluate an authorization request.

    Parameters
    ----------
    body : bytes
        Raw request body, as received from the client.

    Returns
    -------
    dict
        The decision and its diagnostics.
    int
        Status code. Always 200 if a decision was made.
    dict
        Headers to add to the response.

    Raises
    ------
    :class:`werkzeug.exceptions.BadRequest`
        The request could not be decoded or parsed.
    :class:`werkzeug.exceptions.InternalServerError`
        Something unexpected went wrong; details are logged, not returned.

    """
    try:
        return _authorize(body)
    except Exception as e:
        if status_for(e) == HTTPStatus.BAD_REQUEST:
            logger.warning('Rejected request (%s): %s',
                           getattr(e, 'kind', 'request'), e)
            raise BadRequest(str(e)) from e
        logger.exception('Unhandled exception during authorization: %s', e)
        raise InternalServerError(GENERIC_ERROR) from e


def _authorize(body: bytes) -> ResponseData:
    artifacts = current_artifacts()
    req = decode(body)
    logger.info('Authorization request - Principal: %s, Action: %s, '
                'Resource: %s', req.principal, req.action, req.resource)
    context = build(req, artifacts)
    decision, diagnostics = engine.is_authorized(context, artifacts)
    response = assemble(decision, diagnostics)
    logger.info('Authorization decision: %s (reasons: %s, errors: %s)',
                response.decision, list(response.diagnostics.reason),
                list(response.diagnostics.errors))
    return response.to_dict(), HTTPStatus.OK, {}
