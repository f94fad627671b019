"""Shared test fixtures for linediff.

Library tests use the `lib` fixture; command line tests run the package
as a subprocess through the `cli` fixture and check exit codes and output.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import Optional

import pytest

PY_DIR = Path(__file__).parent.parent / "py"
sys.path.insert(0, str(PY_DIR))


def load_python_impl():
    """Load Python implementation."""
    import linediff
    return linediff


class LineDiffCli:
    """Helper class to run the linediff command."""

    def __init__(self, work_dir: Path):
        self.work_dir = work_dir
        self.cmd_prefix = [sys.executable, "-m", "linediff"]

    def run(self, *args: str, input: Optional[str] = None,
            env: Optional[dict] = None) -> subprocess.CompletedProcess:
        """Run linediff with the given arguments."""
        python_path = os.pathsep.join(
            p for p in (str(PY_DIR), os.environ.get("PYTHONPATH", "")) if p
        )
        return subprocess.run(
            self.cmd_prefix + list(args),
            cwd=self.work_dir,
            capture_output=True,
            text=True,
            input=input,
            env={**os.environ, "PYTHONPATH": python_path, **(env or {})},
        )

    def write(self, name: str, content: str) -> Path:
        path = self.work_dir / name
        path.write_bytes(content.encode("utf-8"))
        return path


@pytest.fixture(scope="session")
def lib():
    """Load the linediff package."""
    return load_python_impl()


@pytest.fixture
def cli(tmp_path):
    """A command runner working in a temporary directory."""
    return LineDiffCli(tmp_path)


@pytest.fixture
def doc(lib):
    """Build a Document from a list of lines."""
    def make(lines, source="doc", trailing_newline=True):
        text = "".join(f"{line}\n" for line in lines)
        if lines and not trailing_newline:
            text = text[:-1]
        return lib.from_text(text, source=source)
    return make
