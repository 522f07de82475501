"""
Shared utility functions for CaptionKit.

Provides timestamp conversion between the encodings found in caption
payloads and the canonical MM:SS display form used in transcripts.
"""

import math
from typing import Union


def timestamp_to_seconds(timestamp: str) -> float:
    """
    Convert a caption timestamp to seconds.

    Accepts HH:MM:SS.mmm, HH:MM:SS,mmm (SubRip), MM:SS.mmm and plain
    decimal seconds. Hours may have any number of digits.

    Args:
        timestamp: Timestamp string

    Returns:
        Time in seconds as float

    Raises:
        ValueError: If the string is not a recognizable timestamp

    Example:
        >>> timestamp_to_seconds("00:01:30.500")
        90.5
        >>> timestamp_to_seconds("00:00:03,200")
        3.2
    """
    value = timestamp.strip().replace(',', '.')
    if not value:
        raise ValueError("Empty timestamp")

    parts = value.split(':')
    if len(parts) > 3:
        raise ValueError(f"Unrecognized timestamp: {timestamp!r}")

    seconds = float(parts[-1])
    if len(parts) >= 2:
        seconds += int(parts[-2]) * 60
    if len(parts) == 3:
        seconds += int(parts[0]) * 3600

    if seconds < 0 or not math.isfinite(seconds):
        raise ValueError(f"Unrecognized timestamp: {timestamp!r}")
    return seconds


def format_offset(offset: Union[float, int, str]) -> str:
    """
    Normalize a cue offset to the MM:SS display form.

    The offset is truncated to whole seconds; minutes are not wrapped at
    the hour, so 3725 seconds renders as "62:05".

    Args:
        offset: Seconds as a number, or any string accepted by timestamp_to_seconds

    Returns:
        Zero-padded "MM:SS" string

    Example:
        >>> format_offset(5.5)
        '00:05'
        >>> format_offset("00:01:07,900")
        '01:07'
    """
    if isinstance(offset, str):
        seconds = timestamp_to_seconds(offset)
    else:
        seconds = float(offset)

    if seconds < 0 or not math.isfinite(seconds):
        raise ValueError(f"Offset must be a non-negative number, got {offset!r}")

    whole = int(seconds)
    minutes = whole // 60
    secs = whole % 60
    return f"{minutes:02d}:{secs:02d}"
