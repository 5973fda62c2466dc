"""Timestamp coercion and SRT time rendering."""

import logging
import math
import re
from decimal import Decimal

logger = logging.getLogger(__name__)

DECIMAL_RE = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?', re.ASCII)


def coerce_seconds(raw) -> float:
    """Parse a decimal seconds value, mapping anything unusable to 0.0.

    Unparseable, negative and non-finite values all become ``0.0`` so a
    single bad timestamp degrades one cue instead of failing the document.
    """
    token = str(raw).strip()
    if not DECIMAL_RE.fullmatch(token):
        logger.debug("Unparseable timestamp %r, using 0.0", raw)
        return 0.0
    value = float(token)
    if not math.isfinite(value) or value < 0:
        logger.debug("Out-of-range timestamp %r, using 0.0", raw)
        return 0.0
    return value


def format_timestamp(seconds: float) -> str:
    """Convert seconds to SRT timestamp format (HH:MM:SS,mmm).

    Hours are not wrapped, and milliseconds are truncated rather than rounded.
    """
    if not math.isfinite(seconds) or seconds < 0:
        seconds = 0.0
    # str() gives the shortest repr, so 59.999 stays 59.999 instead of 59.99899...
    ms = int(Decimal(str(seconds)) * 1000)
    h = ms // 3_600_000
    ms %= 3_600_000
    m = ms // 60_000
    ms %= 60_000
    s = ms // 1000
    ms %= 1000
    return f"{h:02d}:{m:02d}:{s:02d},{ms:03d}"


def timestamp_to_seconds(ts: str) -> float:
    """Convert SRT timestamp (HH:MM:SS,mmm) to seconds."""
    ts = ts.strip().replace(',', '.')
    parts = ts.split(':')
    if len(parts) != 3:
        raise ValueError(f"Not an SRT timestamp: {ts!r}")
    return float(parts[0]) * 3600 + float(parts[1]) * 60 + float(parts[2])
