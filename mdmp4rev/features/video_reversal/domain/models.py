from dataclasses import dataclass
from pathlib import Path
from typing import List

from mdmp4rev.core.config.settings import settings
from mdmp4rev.core.shared_types import MediaFile


def derive_output_path(input_path: Path, suffix: str = settings.OUTPUT_SUFFIX) -> Path:
    """
    Inserts the suffix between the stem and the extension, keeping the parent dir.
    e.g. a/b/clip.mp4 -> a/b/clip-rev.mp4
    """
    return input_path.with_name(f"{input_path.stem}{suffix}{input_path.suffix}")


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of one external process run. Never persisted.
    """
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def success(self) -> bool:
        return self.returncode == 0

    def stderr_text(self) -> str:
        # Invalid byte sequences are replaced rather than raising
        return self.stderr.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class ReversalRequest:
    """
    Domain entity describing one reversal: where to read and where FFmpeg writes.
    """
    source_video: MediaFile
    output_video: MediaFile

    @classmethod
    def for_source(cls, source: MediaFile) -> "ReversalRequest":
        return cls(
            source_video=source,
            output_video=MediaFile(derive_output_path(source.path))
        )

    def to_ffmpeg_args(self) -> List[str]:
        # -vf reverse: reverse frame order
        # -af areverse: reverse audio samples
        # -y: overwrite the output without asking
        return [
            "-i", str(self.source_video.path),
            "-vf", "reverse",
            "-af", "areverse",
            "-y",
            str(self.output_video.path)
        ]
