from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence, Union

from .models import CommandResult


class ICommandRunner(ABC):
    """
    Contract for launching an external program and waiting for it to exit.
    Lets tests swap in a fake instead of spawning real processes.
    """

    @abstractmethod
    def run(self, program: str, args: Sequence[str]) -> CommandResult:
        """
        Runs `program` with `args`, capturing stdout and stderr.

        Returns:
            CommandResult, whatever the exit status.

        Raises:
            OSError: If the process could not be launched at all.
        """
        pass


class IVideoReverser(ABC):
    """
    Contract for the reversal engine.
    """

    @abstractmethod
    def reverse_video(self, input_path: Union[str, Path]) -> Path:
        """
        Writes a reversed copy of the MP4 next to the input.

        Returns:
            Path of the reversed video.

        Raises:
            VideoError: On invalid input, missing tool or a failed conversion.
        """
        pass
