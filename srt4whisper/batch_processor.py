"""Batch conversion of transcript files and folders to SRT."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from srt4whisper.exceptions import BatchCancelledError, InputError, ProcessingError
from srt4whisper.file_io import (
    TRANSCRIPT_EXTENSIONS, is_transcript_file, list_directory, read_text,
    srt_path_for, validate_output_dir, write_text,
)
from srt4whisper.models import BatchReport, BatchResult, BatchStatus, ConversionConfig
from srt4whisper.srt import convert_to_entries, render_entries

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]

CANCELLED_MESSAGE = "User canceled output folder selection."


def expand_targets(
    targets: Iterable[Path],
    extensions: Iterable[str] = TRANSCRIPT_EXTENSIONS,
) -> Tuple[List[Path], List[BatchResult]]:
    """Turn files and folders into the list of files to convert.

    Folders contribute their immediate transcript entries only. A folder
    that cannot be listed yields a failure record instead of an exception.
    """
    extensions = tuple(extensions)
    files: List[Path] = []
    failures: List[BatchResult] = []
    for target in targets:
        target = Path(target)
        if not target.is_dir():
            files.append(target)
            continue
        try:
            entries = list_directory(target)
        except ProcessingError as e:
            reason = str(e.original_error or e.message)
            failures.append(BatchResult(
                source_path=target,
                status=BatchStatus.FAILURE,
                error=reason,
                message=f"Failed to read folder: {target}, error: {reason}",
            ))
            logger.error("Failed to read folder %s: %s", target, reason)
            continue
        found = [p for p in entries if is_transcript_file(p, extensions)]
        logger.debug("Found %d transcript(s) in %s", len(found), target)
        files.extend(found)
    return files, failures


class BatchProcessor:
    """Convert many transcripts into one output folder."""

    def __init__(self, config: Optional[ConversionConfig] = None):
        self.config = config or ConversionConfig()

    def convert_one(self, source: Path, output_dir: Path) -> BatchResult:
        """Convert one file; failures are returned, never raised."""
        source = Path(source)
        try:
            content = read_text(source, encoding=self.config.encoding)
            entries = convert_to_entries(content)
            destination = srt_path_for(source, output_dir, self.config.output_extension)
            write_text(destination, render_entries(entries), encoding=self.config.encoding)
        except ProcessingError as e:
            reason = str(e.original_error or e.message)
            logger.error("Failed %s: %s", source.name, reason)
            return BatchResult(
                source_path=source,
                status=BatchStatus.FAILURE,
                error=reason,
                message=f"Conversion failed: {source.name}, error: {reason}",
            )
        logger.info("Converted %s -> %s (%d cues)", source.name, destination.name, len(entries))
        return BatchResult(
            source_path=source,
            status=BatchStatus.SUCCESS,
            destination_path=destination,
            cue_count=len(entries),
            message=f"Conversion successful: {source.name} -> {destination.name}",
        )

    def process(
        self,
        targets: List[Path],
        output_dir: Optional[Path] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> BatchReport:
        """Convert every file reachable from ``targets``.

        Args:
            targets: Files and/or folders to convert.
            output_dir: Destination folder; falls back to the config's.
            progress_callback: Called with (done, total, filename).

        Raises:
            BatchCancelledError: If there is no usable output folder. Nothing
                is converted in that case.
        """
        try:
            out_dir = validate_output_dir(output_dir or self.config.output_dir)
        except InputError as e:
            logger.warning("Batch cancelled: %s", e.message)
            raise BatchCancelledError(CANCELLED_MESSAGE, original_error=e) from e

        files, failures = expand_targets(targets, self.config.input_extensions)
        self._warn_collisions(files)
        total = len(files)
        logger.info("Converting %d file(s) into %s", total, out_dir)

        results: List[BatchResult] = list(failures)
        workers = max(1, self.config.max_workers)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            converted = pool.map(lambda f: self.convert_one(f, out_dir), files)
            for done, result in enumerate(converted, start=1):
                results.append(result)
                if progress_callback:
                    progress_callback(done, total, result.source_path.name)

        log = [r.message for r in results]
        log.append(f"Batch conversion complete! Files saved in {out_dir}.")
        return BatchReport(results=results, log=log)

    def submit(
        self,
        targets: List[Path],
        output_dir: Optional[Path] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> "Future[BatchReport]":
        """Run :meth:`process` in the background, resolving once the batch ends."""
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix='srt4whisper-batch')
        future = executor.submit(self.process, targets, output_dir, progress_callback)
        executor.shutdown(wait=False)
        return future

    @staticmethod
    def _warn_collisions(files: List[Path]) -> None:
        seen: Dict[str, Path] = {}
        for f in files:
            if f.stem in seen and seen[f.stem] != f:
                logger.warning("%s and %s share a base name; the later output overwrites the earlier", seen[f.stem], f)
            seen[f.stem] = f

    @staticmethod
    def get_summary(results: List[BatchResult]) -> Dict[str, Any]:
        """Generate summary statistics from batch results."""
        total = len(results)
        succeeded = sum(1 for r in results if r.success)
        return {
            "total": total,
            "succeeded": succeeded,
            "failed": total - succeeded,
            "cues": sum(r.cue_count for r in results),
            "failed_files": [str(r.source_path) for r in results if not r.success],
        }


def run_batch(
    targets: List[Path],
    output_dir: Optional[Path],
    config: Optional[ConversionConfig] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> BatchReport:
    """Convert a batch and always hand back a report, even when cancelled."""
    processor = BatchProcessor(config)
    try:
        return processor.process(targets, output_dir, progress_callback)
    except BatchCancelledError as e:
        return BatchReport(log=[e.message], cancelled=True)
