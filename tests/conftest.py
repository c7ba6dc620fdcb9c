# File: tests/conftest.py

import os
import sys
import logging
import pytest
from typing import Callable, List, Sequence, Tuple

# 1. Add project root to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mdmp4rev.features.video_reversal.domain.interfaces import ICommandRunner
from mdmp4rev.features.video_reversal.domain.models import CommandResult


class FakeCommandRunner(ICommandRunner):
    """
    Records every call and answers with `behavior(program, args)`.
    `behavior` may return a CommandResult or raise OSError to simulate a launch failure.
    """

    def __init__(self, behavior: Callable[[str, Sequence[str]], CommandResult]):
        self.behavior = behavior
        self.calls: List[Tuple[str, List[str]]] = []

    def run(self, program: str, args: Sequence[str]) -> CommandResult:
        self.calls.append((program, list(args)))
        return self.behavior(program, args)


def ok(program, args) -> CommandResult:
    return CommandResult(returncode=0)


@pytest.fixture
def make_runner():
    """
    Factory fixture: make_runner(behavior) -> FakeCommandRunner.
    Defaults to a runner where every command succeeds.
    """
    def _make(behavior=ok) -> FakeCommandRunner:
        return FakeCommandRunner(behavior)
    return _make


@pytest.fixture
def mp4_file(tmp_path):
    """
    A placeholder .mp4 file. Content is irrelevant: only FFmpeg would read it.
    """
    p = tmp_path / "test.mp4"
    p.write_text("test content")
    return p


@pytest.fixture(autouse=True)
def reset_package_logger():
    """
    configure_logging() turns propagation off; restore it so caplog sees records in later tests.
    """
    yield
    logger = logging.getLogger("mdmp4rev")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
