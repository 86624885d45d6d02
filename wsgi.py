"""Web Server Gateway Interface entry-point."""

from cedar_agent import config
from cedar_agent.app_logging import setup_logger
from cedar_agent.factory import create_app

setup_logger(config.LOGLEVEL, config.LOG_JSON)
application = create_app()
