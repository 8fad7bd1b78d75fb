"""Main entry point for dfsaccess.

Handles:
- Signal handling for graceful shutdown
- Logging setup from the environment
"""

import signal
import sys
from typing import NoReturn

from dfsaccess.cli import app
from dfsaccess.core import configure_logging, get_config, get_logger

settings = get_config().logging
configure_logging(settings.level, settings.format)
logger = get_logger(__name__)


def signal_handler(signum: int, frame) -> None:
    """Handle shutdown signals gracefully."""
    signal_name = signal.Signals(signum).name
    logger.info("shutdown_signal", signal=signal_name)
    sys.exit(0)


def main() -> NoReturn:
    """Main entry point with signal handling."""
    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    try:
        app()
    except KeyboardInterrupt:
        logger.info("keyboard_interrupt")
        sys.exit(0)
    except Exception as e:
        logger.error("unexpected_error", error=str(e), exc_info=True)
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
