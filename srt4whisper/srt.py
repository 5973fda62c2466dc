"""Transcript line parsing and SRT rendering.

Cue lines in a transcript look like ``[12.340 --> 15.670] some text``.
Everything else (blank lines, commentary, broken brackets) is skipped.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, NamedTuple, Optional

from srt4whisper.file_io import read_text
from srt4whisper.timecode import coerce_seconds, format_timestamp

logger = logging.getLogger(__name__)

ARROW = '-->'
RANGE_SEPARATOR = ' --> '


class CueCandidate(NamedTuple):
    """A parsed cue line that has not been numbered yet."""
    start: float
    end: float
    text: str


@dataclass
class SRTEntry:
    """Represents a single SRT subtitle entry."""
    index: int
    start: float
    end: float
    text: str

    @property
    def start_time(self) -> str:
        return format_timestamp(self.start)

    @property
    def end_time(self) -> str:
        return format_timestamp(self.end)

    def to_lines(self) -> List[str]:
        """Return the four lines of this cue, ending with the blank separator."""
        return [str(self.index), f"{self.start_time} --> {self.end_time}", self.text, '']

    def to_srt(self) -> str:
        """Convert the SRT entry to its string representation."""
        return '\n'.join(self.to_lines())


def parse_line(line: str) -> Optional[CueCandidate]:
    """Extract a timestamp pair and caption from one transcript line.

    Returns None for any line that is not a cue line. Only the text up to
    the second ``]`` is kept, so a caption containing ``]`` is cut short.
    """
    if ARROW not in line:
        return None

    segments = [s for s in line.split(']') if s]
    if len(segments) < 2:
        return None

    time_range = segments[0].replace('[', '')
    times = [t for t in time_range.split(RANGE_SEPARATOR) if t]
    if len(times) != 2:
        return None

    return CueCandidate(
        start=coerce_seconds(times[0]),
        end=coerce_seconds(times[1]),
        text=segments[1].strip(),
    )


def convert_to_entries(content: str) -> List[SRTEntry]:
    """Parse a whole transcript into sequentially numbered entries."""
    entries: List[SRTEntry] = []
    skipped = 0
    for line in content.split('\n'):
        candidate = parse_line(line)
        if candidate is None:
            if ARROW in line:
                skipped += 1
            continue
        entries.append(SRTEntry(
            index=len(entries) + 1,
            start=candidate.start,
            end=candidate.end,
            text=candidate.text,
        ))
    if skipped:
        logger.debug("Skipped %d malformed cue line(s)", skipped)
    return entries


def render_entries(entries: Iterable[SRTEntry]) -> str:
    """Serialize entries as SRT text; no entries gives an empty string."""
    lines: List[str] = []
    for entry in entries:
        lines.extend(entry.to_lines())
    return '\n'.join(lines)


def convert(content: str) -> str:
    """Convert a bracketed-timestamp transcript to SRT text."""
    return render_entries(convert_to_entries(content))


def convert_file(path: Path, encoding: str = 'utf-8') -> str:
    """Read a transcript file and return its SRT conversion."""
    return convert(read_text(path, encoding=encoding))
