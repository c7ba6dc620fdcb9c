from .domain.errors import VideoError, FFmpegNotFound, InvalidInput, ProcessingError, IoError
from .domain.models import derive_output_path
from .service.api import reverse_video

__all__ = [
    "VideoError",
    "FFmpegNotFound",
    "InvalidInput",
    "ProcessingError",
    "IoError",
    "derive_output_path",
    "reverse_video",
]
