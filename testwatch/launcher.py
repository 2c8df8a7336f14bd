import contextlib
import logging
import signal
import subprocess
from typing import List, NoReturn, Sequence

import typer

from .config import LauncherConfig
from .utils import find_executable

HELP_FLAG = "--help"


class MissingDependencyError(RuntimeError):
    """Raised when a required external program is not on PATH."""

    def __init__(self, program: str) -> None:
        super().__init__(f"'{program}' not found on PATH")
        self.program = program


def usage(config: LauncherConfig) -> str:
    test_command = " ".join(config.test_command)
    return (
        f"{config.command_name} [ARGS...]: run '{test_command} ARGS...' "
        f"every time a file tracked by {config.vcs_program} changes"
    )


def check_dependencies(config: LauncherConfig) -> None:
    # git first, so a missing git is reported even when entr is also missing
    for program in (config.vcs_program, config.watch_program):
        path = find_executable(program)
        if path is None:
            raise MissingDependencyError(program)
        logging.debug(f"Found {program} at {path}")


def list_command(config: LauncherConfig) -> List[str]:
    return [config.vcs_program, "ls-files"]


def watch_command(config: LauncherConfig, extra_args: Sequence[str]) -> List[str]:
    """Command line for the watch tool: non-interactive, clear screen, then the test command."""
    return [config.watch_program, "-n", "-c", *config.test_command, *extra_args]


def watch(config: LauncherConfig, extra_args: Sequence[str]) -> int:
    """Pipe the tracked file list into the watch tool and block until it exits.

    Returns the watch tool's exit status untouched, or 130 when interrupted.
    """
    cmd = watch_command(config, extra_args)
    logging.debug(f"Listing tracked files: {' '.join(list_command(config))}")
    logging.debug(f"Watch command: {' '.join(cmd)}")

    listing = subprocess.Popen(list_command(config), stdout=subprocess.PIPE)
    try:
        try:
            watcher = subprocess.Popen(cmd, stdin=listing.stdout)
        finally:
            # The watch tool owns the read end now; the lister gets SIGPIPE if it goes away
            listing.stdout.close()

        try:
            return watcher.wait()
        except KeyboardInterrupt:
            logging.info("Stopping watcher...")
            with contextlib.suppress(KeyboardInterrupt):
                watcher.wait()
            return 128 + int(signal.SIGINT)
    finally:
        listing.wait()


def run(args: Sequence[str], config: LauncherConfig) -> NoReturn:
    """Validate dependencies and hand the tracked files to the watch tool.

    ``args`` are the positional arguments after the program name. ``args[0]``
    is the subcommand name cargo passes along and is discarded; ``--help`` is
    only recognized as ``args[1]``. Always exits via ``SystemExit``.
    """
    if len(args) > 1 and args[1] == HELP_FLAG:
        typer.echo(usage(config))
        raise SystemExit(0)

    try:
        check_dependencies(config)
    except MissingDependencyError as e:
        logging.debug(f"Missing dependency: {e}")
        prefix = typer.style("error:", fg=typer.colors.RED, bold=True)
        typer.echo(
            f"{prefix} '{e.program}' is required for {config.command_name} to run"
        )
        raise SystemExit(1)

    extra_args = list(args[1:])
    raise SystemExit(watch(config, extra_args))
