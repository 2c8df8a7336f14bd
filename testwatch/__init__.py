"""testwatch package: re-run a test command whenever a git-tracked file changes.

Exports:
- main: console entrypoint (from testwatch.cli)
- run, MissingDependencyError: launcher operation and its error (from testwatch.launcher)
- LauncherConfig: settings built once at startup (from testwatch.config)
- command_name, find_executable: helpers (from testwatch.utils)
"""

from .cli import main  # noqa: F401
from .config import LauncherConfig  # noqa: F401
from .launcher import MissingDependencyError, run  # noqa: F401
from .utils import command_name, find_executable  # noqa: F401

__all__ = [
    "main",
    "run",
    "MissingDependencyError",
    "LauncherConfig",
    "command_name",
    "find_executable",
]
