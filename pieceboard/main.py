"""Application entry point."""

import logging
import sys

from pieceboard.infra.config import load_board_config, load_default_env_files
from pieceboard.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the piece board window."""
    load_default_env_files()
    setup_logging()
    config = load_board_config()
    if config.debug_input:
        logger.info("Debug flags enabled", extra={"pieceboard_debug_input": "1"})
    from pieceboard.qt.bootstrap import run_qt_app

    try:
        code = run_qt_app(config)
    finally:
        shutdown_logging()
    sys.exit(code)


if __name__ == "__main__":
    main()
