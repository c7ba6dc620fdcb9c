import subprocess
from typing import Sequence

from ..domain.interfaces import ICommandRunner
from ..domain.models import CommandResult

class SubprocessCommandRunner(ICommandRunner):
    """
    Concrete ICommandRunner backed by subprocess.
    Blocks until the child exits; there is no timeout.
    """

    def run(self, program: str, args: Sequence[str]) -> CommandResult:
        cmd = [program, *args]
        # No check=True: a non-zero exit is a result, not an exception.
        # Launch failures (FileNotFoundError, PermissionError) propagate as OSError.
        completed = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE
        )
        return CommandResult(
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr
        )
