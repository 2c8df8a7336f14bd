import shutil
from pathlib import Path
from typing import Optional

# cargo runs `cargo-<name>` for `cargo <name>` and passes <name> as argv[1]
CARGO_PREFIX = "cargo-"


def command_name(argv0: str) -> str:
    """Display name for help and error text, e.g. ``/usr/bin/cargo-testwatch`` -> ``testwatch``."""
    name = Path(argv0).name
    if name.startswith(CARGO_PREFIX) and len(name) > len(CARGO_PREFIX):
        name = name[len(CARGO_PREFIX):]
    return name


def find_executable(program: str, path: Optional[str] = None) -> Optional[str]:
    """Return the full path of ``program`` if it is on PATH and executable."""
    return shutil.which(program, path=path)
