# File: mdmp4rev/cli.py

import sys
from pathlib import Path
from typing import List, Optional

from mdmp4rev.core.config.settings import settings
from mdmp4rev.core.logging_setup import configure_logging
from mdmp4rev.features.video_reversal.data.ffmpeg_adapter import FFmpegReverseAdapter
from mdmp4rev.features.video_reversal.domain.errors import VideoError
from mdmp4rev.features.video_reversal.domain.interfaces import IVideoReverser


class UsageError(Exception):
    """Wrong number of command-line arguments."""
    pass


def run(argv: List[str], reverser: Optional[IVideoReverser] = None) -> Path:
    """
    Dispatches `<program> <input_mp4_file>` to the reverser.
    argv[0] is the program name, as in sys.argv.
    """
    if len(argv) != 2:
        program = argv[0] if argv else settings.PROGRAM_NAME
        raise UsageError(f"Usage: {program} <input_mp4_file>")

    reverser = reverser or FFmpegReverseAdapter()
    return reverser.reverse_video(argv[1])


def main(argv: Optional[List[str]] = None, reverser: Optional[IVideoReverser] = None) -> int:
    configure_logging(settings.LOG_LEVEL)
    argv = list(sys.argv) if argv is None else argv

    try:
        output_path = run(argv, reverser)
    except UsageError as e:
        print(e, file=sys.stderr)
        return 1
    except VideoError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Successfully created reversed video: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
