import sys
import logging
from typing import NoReturn, Optional, Sequence

from .config import LauncherConfig
from .launcher import run


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Re-run the test command every time a tracked file changes.

    - Arguments are taken verbatim; the first one is dropped (cargo passes the subcommand name there).
    - ``--help`` is only honored as the second argument.
    - Exits with the watch tool's status once it stops.
    """
    if argv is None:
        argv = sys.argv

    config = LauncherConfig.from_env(argv[0])

    # Logging
    logging.basicConfig(
        level=getattr(logging, config.loglevel.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    logging.debug(f"Command name: {config.command_name}")
    logging.debug(f"Test command: {' '.join(config.test_command)}")

    run(list(argv[1:]), config)


if __name__ == "__main__":
    main()
