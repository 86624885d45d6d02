"""Provides the HTTP routes of the Cedar agent."""

from flask import Blueprint, Response, request, jsonify, make_response
from werkzeug.exceptions import BadRequest, ClientDisconnected

from .controllers import authorization

blueprint = Blueprint('cedar_agent', __name__, url_prefix='')


@blueprint.route('/health', methods=['GET'],
                 provide_automatic_options=False)
def health() -> Response:
    """Liveness check; independent of the loaded policies."""
    data, code, headers = authorization.health()
    return make_response(jsonify(data), code, headers)


@blueprint.route('/authorize', methods=['POST'],
                 provide_automatic_options=False)
def authorize() -> Response:
    """Evaluate the authorization request in the body."""
    try:
        body = request.get_data(cache=False)
    except ClientDisconnected as e:
        raise BadRequest(f'Failed to read body: {e.description}') from e
    data, code, headers = authorization.authorize(body)
    return make_response(jsonify(data), code, headers)
