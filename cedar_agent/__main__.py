"""Run the Cedar agent with the threaded development server."""

from typing import Tuple
import logging
import sys

from werkzeug.serving import run_simple

from . import config
from .app_logging import setup_logger
from .exceptions import InvalidBindAddress, StartupError
from .factory import create_app

logger = logging.getLogger(__name__)


def parse_bind_addr(bind_addr: str) -> Tuple[str, int]:
    """Split a ``host:port`` bind address."""
    host, sep, port = bind_addr.rpartition(':')
    if not sep or not host:
        raise InvalidBindAddress(f'Invalid bind address: {bind_addr!r}')
    try:
        port_number = int(port)
    except ValueError as e:
        raise InvalidBindAddress(f'Invalid bind address: {bind_addr!r}') \
            from e
    if not 0 < port_number < 65536:
        raise InvalidBindAddress(f'Invalid bind address: {bind_addr!r}')
    return host.strip('[]'), port_number


def main() -> int:
    """Load artifacts, then serve until interrupted."""
    setup_logger(config.LOGLEVEL, config.LOG_JSON)
    try:
        host, port = parse_bind_addr(config.BIND_ADDR)
        app = create_app()
    except StartupError as e:
        logger.error('Startup failed: %s', e)
        return 1
    logger.info('Cedar Local Agent listening on %s:%i', host, port)
    run_simple(host, port, app, threaded=True)
    return 0


if __name__ == '__main__':
    sys.exit(main())
