"""Application factory for the Cedar agent."""

from typing import Any, Mapping, Optional
from http import HTTPStatus

from flask import Flask, Response, jsonify, make_response
from werkzeug.exceptions import HTTPException, BadRequest, NotFound, \
    MethodNotAllowed, InternalServerError, RequestEntityTooLarge

from . import routes
from .controllers.authorization import GENERIC_ERROR
from .services import artifacts


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    Initialize an instance of the Cedar agent.

    Policy and schema artifacts are loaded here, so a
    :class:`.StartupError` propagates to the caller and no app is created.
    """
    app = Flask('cedar_agent')
    app.config.from_pyfile('config.py')
    if config:
        app.config.update(config)

    artifacts.init_app(app)
    app.register_blueprint(routes.blueprint)
    register_error_handlers(app)
    return app


def register_error_handlers(app: Flask) -> None:
    """Register error handlers for the Flask app."""
    app.errorhandler(NotFound)(not_found)
    app.errorhandler(MethodNotAllowed)(not_found)
    app.errorhandler(BadRequest)(jsonify_exception)
    app.errorhandler(RequestEntityTooLarge)(jsonify_exception)
    app.errorhandler(InternalServerError)(internal_error)


def jsonify_exception(error: HTTPException) -> Response:
    """Render exceptions as JSON."""
    exc_resp = error.get_response()
    response: Response = jsonify(error=error.description)
    response.status_code = exc_resp.status_code
    return response


def not_found(error: HTTPException) -> Response:
    """Any unknown method or path is reported as not found."""
    return make_response('Not found', HTTPStatus.NOT_FOUND,
                         {'Content-Type': 'text/plain; charset=utf-8'})


def internal_error(error: HTTPException) -> Response:
    """Never leak internal details to the caller."""
    response: Response = jsonify(error=GENERIC_ERROR)
    response.status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    return response
