import os
import stat
from pathlib import Path

import pytest


def _write_stub(path: Path, body: str) -> Path:
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(stat.S_IRWXU)
    return path


class Stubs:
    """Fake git/entr executables that record how they were called."""

    tracked_files = "Cargo.toml\nsrc/lib.rs\nsrc/with space.rs\n"

    def __init__(self, root: Path) -> None:
        self.bin_dir = root / "bin"
        self.bin_dir.mkdir()
        self.git_args = root / "git.args"
        self.entr_args = root / "entr.args"
        self.entr_stdin = root / "entr.stdin"
        self.entr_ready = root / "entr.ready"

    def git(self) -> Path:
        listing = self.tracked_files.replace("\n", "\\n")
        return _write_stub(
            self.bin_dir / "git",
            f"printf '%s\\n' \"$@\" > '{self.git_args}'\n"
            f"printf '{listing}'\n",
        )

    def entr(self, exit_code: int = 0) -> Path:
        return _write_stub(
            self.bin_dir / "entr",
            f"cat > '{self.entr_stdin}'\n"
            f"printf '%s\\n' \"$@\" > '{self.entr_args}'\n"
            f"exit {exit_code}\n",
        )

    def blocking_entr(self) -> Path:
        # Waits on a background sleep until SIGINT; touches entr_ready once waiting
        return _write_stub(
            self.bin_dir / "entr",
            "cat > /dev/null\n"
            "trap 'exit 3' INT\n"
            "sleep 30 < /dev/null > /dev/null 2>&1 &\n"
            f": > '{self.entr_ready}'\n"
            "wait\n",
        )

    def path(self, isolated: bool = False) -> str:
        # isolated: only the stubs are visible, so a real git/entr cannot be found
        if isolated:
            return str(self.bin_dir)
        return f"{self.bin_dir}{os.pathsep}{os.environ.get('PATH', '')}"


@pytest.fixture
def stubs(tmp_path):
    return Stubs(tmp_path)
