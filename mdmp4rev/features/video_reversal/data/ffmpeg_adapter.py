import logging
from pathlib import Path
from typing import Optional, Union

from mdmp4rev.core.config.settings import settings
from mdmp4rev.core.shared_types import MediaFile
from ..domain.errors import FFmpegNotFound, InvalidInput, IoError, ProcessingError
from ..domain.interfaces import ICommandRunner, IVideoReverser
from ..domain.models import ReversalRequest
from .command_runner import SubprocessCommandRunner

logger = logging.getLogger(__name__)

class FFmpegReverseAdapter(IVideoReverser):
    """
    Concrete implementation of IVideoReverser using FFmpeg's reverse/areverse filters.
    Success is decided by FFmpeg's exit status alone; the output file is not inspected.
    """

    def __init__(self, runner: Optional[ICommandRunner] = None, ffmpeg_binary: str = settings.FFMPEG_BINARY):
        self.runner = runner or SubprocessCommandRunner()
        self.ffmpeg_binary = ffmpeg_binary

    def check_ffmpeg(self) -> None:
        """
        Probes `ffmpeg -version`. Only the ability to launch matters, not the exit code.
        """
        try:
            self.runner.run(self.ffmpeg_binary, ["-version"])
        except OSError as e:
            logger.debug(f"FFmpeg probe failed: {e}")
            raise FFmpegNotFound() from e

    def validate_input(self, source: MediaFile) -> None:
        if not source.exists():
            raise InvalidInput("Input file does not exist")
        if not source.has_extension(settings.REQUIRED_EXTENSION):
            raise InvalidInput("Input file must be an MP4")

    def reverse_video(self, input_path: Union[str, Path]) -> Path:
        # 1. Validate (no subprocess is spawned on failure)
        if not str(input_path).strip():
            raise InvalidInput("Input file does not exist")
        source = MediaFile(Path(input_path))
        self.validate_input(source)

        # 2. Make sure the tool is there
        self.check_ffmpeg()

        # 3. Build the request
        request = ReversalRequest.for_source(source)
        args = request.to_ffmpeg_args()
        logger.debug(f"Executing FFmpeg Reverse: {self.ffmpeg_binary} {' '.join(args)}")

        # 4. Execute
        try:
            result = self.runner.run(self.ffmpeg_binary, args)
        except OSError as e:
            raise IoError(e) from e

        if not result.success:
            error_message = result.stderr_text()
            logger.debug(f"FFmpeg Reverse Failed (exit {result.returncode}). STDERR: {error_message}")
            raise ProcessingError(error_message)

        logger.info(f"Reversed video written to {request.output_video.path}")
        return request.output_video.path
