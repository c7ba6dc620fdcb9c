from pathlib import Path
from typing import Optional, Union

from ..domain.interfaces import ICommandRunner
from ..data.ffmpeg_adapter import FFmpegReverseAdapter

def reverse_video(input_path: Union[str, Path], runner: Optional[ICommandRunner] = None) -> Path:
    """
    Public Service API: Write a copy of an MP4 with video and audio played backwards.

    Args:
        input_path: Path to an existing .mp4 file.
        runner: Process runner to use. Defaults to spawning real processes.

    Returns:
        Path of the reversed file (<stem>-rev.mp4 next to the input).
    """
    adapter = FFmpegReverseAdapter(runner=runner)
    return adapter.reverse_video(input_path)
