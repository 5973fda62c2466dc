"""File primitives used by the converter: reading, atomic writing, listing."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, List

from srt4whisper.exceptions import FileReadError, FileWriteError, InputError

logger = logging.getLogger(__name__)

TRANSCRIPT_EXTENSIONS = ('.txt',)
SRT_EXTENSION = '.srt'


def read_text(path: Path, encoding: str = 'utf-8') -> str:
    """Read a whole text file, wrapping OS and decoding errors."""
    path = Path(path)
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(f"Unable to read {path}", original_error=e) from e


def write_text(path: Path, content: str, encoding: str = 'utf-8') -> None:
    """Write text atomically through a uniquely named temporary sibling file.

    Concurrent writers targeting the same path never share a temp file; the
    last ``os.replace`` wins.
    """
    path = Path(path)
    tmp = None
    try:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=path.name + '.', suffix='.tmp')
        tmp = Path(tmp_name)
        with os.fdopen(fd, 'w', encoding=encoding, newline='') as f:
            f.write(content)
        os.replace(tmp, path)
    except (OSError, UnicodeEncodeError) as e:
        if tmp is not None and tmp.exists():
            tmp.unlink()
        raise FileWriteError(f"Unable to write {path}", original_error=e) from e


def list_directory(path: Path) -> List[Path]:
    """Return the immediate entries of a directory, sorted by name."""
    path = Path(path)
    try:
        return sorted(path.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise FileReadError(f"Failed to read folder {path}", original_error=e) from e


def is_transcript_file(path: Path, extensions: Iterable[str] = TRANSCRIPT_EXTENSIONS) -> bool:
    """Check whether a directory entry is a plain-text transcript."""
    path = Path(path)
    return path.is_file() and path.suffix in set(extensions)


def srt_path_for(source: Path, output_dir: Path, extension: str = SRT_EXTENSION) -> Path:
    """Destination for a converted file: same base name, new extension."""
    return Path(output_dir) / f"{Path(source).stem}{extension}"


def validate_output_dir(path) -> Path:
    if path is None or str(path) == '':
        raise InputError("No output directory selected")
    path = Path(path)
    if not path.exists():
        raise InputError(f"Output directory does not exist: {path}")
    if not path.is_dir():
        raise InputError(f"Path is not a directory: {path}")
    return path
