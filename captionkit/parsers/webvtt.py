"""WebVTT parser."""

from .base import LineCueParser
from ..models import CaptionFormat

VTT_SIGNATURE = 'WEBVTT'


class WebVTTParser(LineCueParser):
    """
    Parser for WebVTT payloads.

    Timing lines may use MM:SS.mmm or HH:MM:SS.mmm. Blank lines end a cue
    and inline tags (<c>, <00:00:01.000>, <v Speaker>) are stripped.

    Example:
        >>> WebVTTParser().parse("WEBVTT\\n\\n00:00:07.000 --> 00:00:09.000\\nHi there")
        [Cue(start=7.0, text='Hi there', duration=2.0)]
    """

    format = CaptionFormat.VTT
    flush_on_blank = True
