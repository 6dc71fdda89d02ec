"""Shared fixtures for peek tests."""

import io
import pathlib

import pytest

from console_ui import ConsoleUI


class CapturedUI:
    """ConsoleUI writing plain text to in-memory buffers"""

    def __init__(self):
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.ui = ConsoleUI(force_terminal=False, file=self.out, stderr_file=self.err)

    @property
    def stdout(self) -> str:
        return self.out.getvalue()

    @property
    def stderr(self) -> str:
        return self.err.getvalue()


@pytest.fixture
def captured_ui() -> CapturedUI:
    return CapturedUI()


@pytest.fixture
def sample_tree(tmp_path: pathlib.Path) -> pathlib.Path:
    """
    Build a small directory:

        alpha/        sub/, a.txt, .hidden
        Beta/         (empty)
        .git/
        big.bin       2048 bytes
        small.txt     10 bytes
        .env          5 bytes
    """
    alpha = tmp_path / "alpha"
    alpha.mkdir()
    (alpha / "sub").mkdir()
    (alpha / "a.txt").write_text("a")
    (alpha / ".hidden").write_text("h")
    (tmp_path / "Beta").mkdir()
    (tmp_path / ".git").mkdir()
    (tmp_path / "big.bin").write_bytes(b"\0" * 2048)
    (tmp_path / "small.txt").write_bytes(b"x" * 10)
    (tmp_path / ".env").write_bytes(b"K=V\n\n")
    return tmp_path
