import os
import shlex
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .utils import command_name

DEFAULT_TEST_COMMAND: Tuple[str, ...] = ("cargo", "test")
DEFAULT_LOGLEVEL = "WARNING"

TEST_COMMAND_ENVVAR = "TESTWATCH_TEST_COMMAND"
LOGLEVEL_ENVVAR = "TESTWATCH_LOGLEVEL"


@dataclass(frozen=True)
class LauncherConfig:
    command_name: str
    vcs_program: str = "git"
    watch_program: str = "entr"
    test_command: Tuple[str, ...] = DEFAULT_TEST_COMMAND
    loglevel: str = DEFAULT_LOGLEVEL

    @classmethod
    def from_env(
        cls, argv0: str, environ: Optional[Mapping[str, str]] = None
    ) -> "LauncherConfig":
        """Build the launcher settings once at startup.

        - ``command_name`` is derived from ``argv0`` (see ``utils.command_name``).
        - ``TESTWATCH_TEST_COMMAND`` overrides the test command, split like a shell would.
        - ``TESTWATCH_LOGLEVEL`` sets the logging level name.
        """
        if environ is None:
            environ = os.environ

        test_command = tuple(shlex.split(environ.get(TEST_COMMAND_ENVVAR, "")))
        if not test_command:
            test_command = DEFAULT_TEST_COMMAND

        loglevel = (environ.get(LOGLEVEL_ENVVAR) or DEFAULT_LOGLEVEL).strip()

        return cls(
            command_name=command_name(argv0),
            test_command=test_command,
            loglevel=loglevel or DEFAULT_LOGLEVEL,
        )
