"""
Caption format parsers.

Provides one parser per supported serialization (timed-text XML, WebVTT,
SubRip-style text) plus format sniffing to pick the right one for a
payload.
"""

from typing import Dict, List, Optional, Tuple

from .base import CueParser, LineCueParser, strip_tags
from .subrip import SubRipParser
from .timedtext import TimedTextXMLParser, XML_MARKERS, decode_entities
from .webvtt import WebVTTParser, VTT_SIGNATURE
from ..models import CaptionFormat, Cue

_PARSERS: Dict[CaptionFormat, CueParser] = {
    CaptionFormat.XML: TimedTextXMLParser(),
    CaptionFormat.VTT: WebVTTParser(),
    CaptionFormat.SRT_LIKE: SubRipParser(),
    # Raw text gets the SubRip-shaped parser as a last resort
    CaptionFormat.RAW: SubRipParser(),
}


def detect_format(raw: str) -> CaptionFormat:
    """
    Sniff the format of a caption payload.

    Example:
        >>> detect_format("WEBVTT\\n\\n00:00:01.000 --> 00:00:02.000\\nHi")
        <CaptionFormat.VTT: 'vtt'>
    """
    head = raw.lstrip('\ufeff')
    if head.startswith(VTT_SIGNATURE):
        return CaptionFormat.VTT
    if any(marker in raw for marker in XML_MARKERS):
        return CaptionFormat.XML
    if '-->' in raw:
        return CaptionFormat.SRT_LIKE
    return CaptionFormat.RAW


def get_parser(fmt: CaptionFormat) -> CueParser:
    """Return the parser registered for a format."""
    return _PARSERS[fmt]


def parse_captions(raw: str) -> Tuple[CaptionFormat, Optional[List[Cue]]]:
    """Sniff a payload and parse it with the matching parser."""
    fmt = detect_format(raw)
    return fmt, get_parser(fmt).parse(raw)


__all__ = [
    "CueParser",
    "LineCueParser",
    "TimedTextXMLParser",
    "WebVTTParser",
    "SubRipParser",
    "detect_format",
    "get_parser",
    "parse_captions",
    "strip_tags",
    "decode_entities",
]
