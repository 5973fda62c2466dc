"""SRT4Whisper: bracketed-timestamp transcripts to SubRip subtitles."""

__version__ = "0.1.0"

__all__ = [
    "batch_processor",
    "cli",
    "exceptions",
    "file_io",
    "log",
    "models",
    "srt",
    "substitution",
    "timecode",
]
