# File: mdmp4rev/core/config/settings.py

import logging


class Settings:
    # --- CLI ---
    PROGRAM_NAME: str = "mdmp4rev"

    # --- External Tools ---
    # Resolved on PATH by the OS when the process is spawned
    FFMPEG_BINARY: str = "ffmpeg"

    # --- Reversal ---
    REQUIRED_EXTENSION: str = "mp4"  # Matched case-sensitively
    OUTPUT_SUFFIX: str = "-rev"

    # --- Logging ---
    # WARNING keeps the console to the single result line printed by the CLI
    LOG_LEVEL: int = logging.WARNING


settings = Settings()
