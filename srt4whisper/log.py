"""Logging setup for the srt4whisper command line and library, stdlib only."""

import logging


def setup_logging(level='INFO', log_file=None):
    """Attach console (and optionally file) handlers to the package logger.

    Handlers are added once; later calls only change the level, so the CLI
    can be invoked repeatedly in one process without duplicated output.
    """
    logger = logging.getLogger('srt4whisper')
    if not logger.handlers:
        fmt = logging.Formatter('%(asctime)s %(levelname)-8s %(name)s - %(message)s')
        ch = logging.StreamHandler()
        ch.setFormatter(fmt)
        logger.addHandler(ch)
        if log_file:
            fh = logging.FileHandler(log_file, encoding='utf-8')
            fh.setFormatter(fmt)
            logger.addHandler(fh)
    logger.setLevel(level.upper())
    return logger


def get_logger(name):
    """Logger for a module; bare names are placed under ``srt4whisper.``."""
    if name.startswith('srt4whisper.') or name == 'srt4whisper':
        return logging.getLogger(name)
    return logging.getLogger(f'srt4whisper.{name}')
