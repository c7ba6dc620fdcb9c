from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class MediaFile:
    """
    Entity representing a media file on the filesystem.
    Wraps the path and the checks the reversal pipeline performs on it.
    """
    path: Path

    def exists(self) -> bool:
        # Unstat-able paths (ENAMETOOLONG, EACCES, ...) count as missing
        try:
            return self.path.exists()
        except OSError:
            return False

    @property
    def extension(self) -> str:
        """Final extension without the leading dot ('' when there is none)."""
        return self.path.suffix[1:]

    def has_extension(self, extension: str) -> bool:
        # Exact comparison: "MP4" does not match "mp4"
        return self.extension == extension
