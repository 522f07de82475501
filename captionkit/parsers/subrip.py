"""SubRip-style fallback parser."""

from .base import LineCueParser
from ..models import CaptionFormat


class SubRipParser(LineCueParser):
    """
    Parser for SubRip-shaped text (HH:MM:SS,mmm --> HH:MM:SS,mmm).

    Used as the last resort for payloads that are neither timed-text XML
    nor WebVTT. Text accumulates until the next timing line, so blank
    separator lines do not end a cue.
    """

    format = CaptionFormat.SRT_LIKE
    flush_on_blank = False
