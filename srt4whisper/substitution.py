"""Literal find/replace over converted SRT text."""

import logging
from pathlib import Path
from typing import Optional, Tuple

from srt4whisper.file_io import read_text, write_text

logger = logging.getLogger(__name__)


def replace(text: str, target: str, replacement: str) -> str:
    """Replace every non-overlapping occurrence of ``target``, left to right.

    The match is literal, not a regex. An empty ``target`` leaves the text
    unchanged.
    """
    if not target:
        return text
    return text.replace(target, replacement)


def replace_counted(text: str, target: str, replacement: str) -> Tuple[str, int]:
    """Like :func:`replace`, also returning how many occurrences were replaced."""
    if not target:
        return text, 0
    return text.replace(target, replacement), text.count(target)


def replace_in_file(
    path: Path,
    target: str,
    replacement: str,
    output: Optional[Path] = None,
    encoding: str = 'utf-8',
) -> int:
    """Substitute text inside a file, writing to ``output`` or back in place."""
    path = Path(path)
    content = read_text(path, encoding=encoding)
    new_content, count = replace_counted(content, target, replacement)
    destination = Path(output) if output else path
    write_text(destination, new_content, encoding=encoding)
    logger.info("Replaced %d occurrence(s) of %r in %s", count, target, destination)
    return count
