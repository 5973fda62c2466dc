"""Click CLI for SRT4Whisper: convert, batch, replace."""

import sys
from pathlib import Path

import click

from srt4whisper.log import setup_logging, get_logger
from srt4whisper.exceptions import Srt4WhisperError

logger = get_logger(__name__)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging.')
@click.option('--log-file', default=None, type=click.Path(), help='Also write logs to this file.')
def cli(verbose, log_file):
    """SRT4Whisper: turn bracketed-timestamp transcripts into SRT subtitles."""
    setup_logging('DEBUG' if verbose else 'INFO', log_file=log_file)


@cli.command()
@click.argument('transcript', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', default=None, type=click.Path(dir_okay=False),
              help='Write the SRT here instead of printing it.')
@click.option('--save', '-s', is_flag=True, help='Save next to the transcript as <name>.srt.')
@click.option('--replace', '-r', 'replacements', nargs=2, multiple=True, metavar='TARGET WITH',
              help='Literal replacement applied to the converted text. Repeatable.')
def convert(transcript, output, save, replacements):
    """Convert one transcript to SRT."""
    from srt4whisper.file_io import read_text, srt_path_for, write_text
    from srt4whisper.srt import convert as to_srt
    from srt4whisper.substitution import replace

    source = Path(transcript)
    try:
        srt_text = to_srt(read_text(source))
        for target, replacement in replacements:
            srt_text = replace(srt_text, target, replacement)

        if output is None and save:
            output = srt_path_for(source, source.parent)
        if output is None:
            click.echo(srt_text, nl=False)
            return
        if not srt_text:
            click.echo(f"No cues found in {source.name}; nothing saved.", err=True)
            return
        write_text(Path(output), srt_text)
        click.echo(f"Converted {source.name} -> {output}")
    except Srt4WhisperError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('targets', nargs=-1, type=click.Path(), required=True)
@click.option('--output-dir', '-o', default=None, type=click.Path(file_okay=False),
              help='Folder that receives every .srt file.')
@click.option('--workers', '-w', default=1, type=click.IntRange(min=1), help='Files converted in parallel.')
@click.option('--ext', 'extensions', multiple=True, default=('.txt',), show_default=True,
              help='Transcript extension picked up from folders. Repeatable.')
def batch(targets, output_dir, workers, extensions):
    """Batch-convert transcript files and folders."""
    from srt4whisper.batch_processor import BatchProcessor, run_batch
    from srt4whisper.models import ConversionConfig

    config = ConversionConfig(
        output_dir=Path(output_dir) if output_dir else None,
        input_extensions=tuple(e if e.startswith('.') else f'.{e}' for e in extensions),
        max_workers=workers,
    )
    report = run_batch([Path(t) for t in targets], config.output_dir, config)
    click.echo(report.log_text())

    if report.cancelled:
        sys.exit(1)
    summary = BatchProcessor.get_summary(report.results)
    click.echo(f"Batch complete: {summary['succeeded']}/{summary['total']} succeeded")
    if summary['failed']:
        click.echo(f"Failed ({summary['failed']}): {', '.join(summary['failed_files'])}", err=True)
        sys.exit(1)


@cli.command('replace')
@click.argument('srt_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('target')
@click.argument('replacement')
@click.option('--output', '-o', default=None, type=click.Path(dir_okay=False),
              help='Write the result here instead of editing in place.')
def replace_cmd(srt_file, target, replacement, output):
    """Replace literal text in an SRT file."""
    from srt4whisper.substitution import replace_in_file

    try:
        count = replace_in_file(Path(srt_file), target, replacement,
                                output=Path(output) if output else None)
        click.echo(f"Replaced {count} occurrence(s) -> {output or srt_file}")
    except Srt4WhisperError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


def main():
    cli()


if __name__ == '__main__':
    main()
