"""
Failures of the video reversal pipeline.

Every error is terminal: nothing is retried and partially written output
is left in place.
"""


class VideoError(Exception):
    """Base exception for every reversal failure."""
    pass


class FFmpegNotFound(VideoError):
    """
    The FFmpeg executable could not be launched
    (not installed or not on the search path).
    """

    def __init__(self):
        super().__init__("FFmpeg is not installed or not accessible")


class InvalidInput(VideoError):
    """The supplied path is missing or is not an MP4 file."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid input file path: {reason}")


class ProcessingError(VideoError):
    """FFmpeg started but exited with a non-zero status."""

    def __init__(self, stderr: str):
        self.stderr = stderr
        super().__init__(f"Failed to process video: {stderr}")


class IoError(VideoError):
    """
    The operating system failed to spawn the transformation process.
    The availability probe never raises this; it maps to FFmpegNotFound.
    """

    def __init__(self, cause: OSError):
        self.cause = cause
        super().__init__(f"IO error: {cause}")
