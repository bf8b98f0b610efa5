"""Console entry point."""

import logging

from diet_planner.app_logging import configure_logging
from diet_planner.cli.formatting import FAREWELL_TEXT
from diet_planner.containers import AppContainer, build_container

_logger = logging.getLogger(__name__)


def main(container: AppContainer | None = None) -> int:
    """Run the interactive diet planner and return the exit status."""
    configure_logging()
    resolved = container or build_container()
    try:
        resolved.session.run()
    except (EOFError, KeyboardInterrupt):
        resolved.console.write(FAREWELL_TEXT)
        _logger.info("Input closed before the session finished")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
