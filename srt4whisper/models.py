"""Data models for the transcript-to-SRT batch pipeline."""

import codecs
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

from srt4whisper.exceptions import ConfigError


class BatchStatus(Enum):
    """Outcome of converting one file in a batch."""
    SUCCESS = 'success'
    FAILURE = 'failure'


@dataclass
class ConversionConfig:
    """Configuration shared by every file of a batch."""
    output_dir: Optional[Path] = None
    input_extensions: Tuple[str, ...] = ('.txt',)
    output_extension: str = '.srt'
    encoding: str = 'utf-8'
    max_workers: int = 1

    def __post_init__(self):
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigError(f"Unknown text encoding: {self.encoding}", original_error=e) from e


@dataclass
class BatchResult:
    """Result of converting a single file in a batch."""
    source_path: Path
    status: BatchStatus
    destination_path: Optional[Path] = None
    error: Optional[str] = None
    cue_count: int = 0
    message: str = ''

    @property
    def success(self) -> bool:
        return self.status is BatchStatus.SUCCESS


@dataclass
class BatchReport:
    """Everything a batch run hands back to its caller."""
    results: List[BatchResult] = field(default_factory=list)
    log: List[str] = field(default_factory=list)
    cancelled: bool = False

    @property
    def failed(self) -> List[BatchResult]:
        return [r for r in self.results if not r.success]

    def log_text(self) -> str:
        """Return the log as one newline-joined block."""
        return '\n'.join(self.log)
