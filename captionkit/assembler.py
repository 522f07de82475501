"""
Transcript assembly for CaptionKit.

Turns resolved cues into the canonical "[MM:SS] text" transcript.
"""

from typing import Iterable

from .models import Cue, TranscriptResult, UNKNOWN_LANGUAGE
from .utils import format_offset


def format_cue_line(cue: Cue) -> str:
    """
    Render one cue as a transcript line.

    Example:
        >>> format_cue_line(Cue(start=5.5, text="Hello & welcome"))
        '[00:05] Hello & welcome'
    """
    return f"[{format_offset(cue.start)}] {cue.text}"


def assemble_transcript(cues: Iterable[Cue], language: str = UNKNOWN_LANGUAGE) -> TranscriptResult:
    """
    Build a TranscriptResult from cues, preserving their order.

    Args:
        cues: Cues in source order
        language: Language tag of the track the cues came from

    Returns:
        TranscriptResult with one line per cue
    """
    lines = tuple(format_cue_line(cue) for cue in cues if cue.text.strip())
    return TranscriptResult(language=language, lines=lines)


def is_empty_transcript(text: str) -> bool:
    """True when a transcript string carries no captions at all."""
    return not text or not text.strip()
