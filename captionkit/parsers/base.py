"""
Shared parser interface and line-scanning machinery.

Every format parser turns a raw caption payload into an ordered list of
Cue objects, or returns None when it finds no usable cue.
"""

import logging
import re
from typing import List, Optional

from ..models import Cue, CaptionFormat
from ..utils import timestamp_to_seconds

logger = logging.getLogger(__name__)

_TAG_PATTERN = re.compile(r'<[^>]+>')
_INDEX_PATTERN = re.compile(r'^\d+$')
_LINE_SPLIT_PATTERN = re.compile(r'\r?\n')


def strip_tags(text: str) -> str:
    """Remove inline markup tags such as <c>, <i> or <00:00:01.000>."""
    return _TAG_PATTERN.sub('', text)


class CueParser:
    """Base interface: raw text -> ordered cues, or None if nothing usable."""

    format: CaptionFormat = CaptionFormat.RAW

    def parse(self, raw: str) -> Optional[List[Cue]]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class LineCueParser(CueParser):
    """
    Line-scanning parser for cue-block formats (WebVTT, SubRip).

    A line containing "-->" flushes the buffered cue and opens a new one
    timed by the left side of the arrow. Pure integer lines are cue
    indices and are skipped. Text lines accumulate into the open cue.
    Cues without a timestamp or with empty text are dropped.
    """

    flush_on_blank = True

    def parse(self, raw: str) -> Optional[List[Cue]]:
        cues: List[Cue] = []
        current_start: Optional[float] = None
        current_duration: Optional[float] = None
        buffer: List[str] = []

        def flush():
            nonlocal current_start, current_duration, buffer
            text = ' '.join(buffer).strip()
            if text and current_start is not None:
                cues.append(Cue(start=current_start, text=text, duration=current_duration))
            buffer = []
            current_start = None
            current_duration = None

        opened = False
        for line in _LINE_SPLIT_PATTERN.split(raw):
            line = line.strip()

            if not line:
                if self.flush_on_blank:
                    flush()
                    opened = False
                continue

            if '-->' in line:
                flush()
                opened = True
                current_start, current_duration = self._parse_timing(line)
                continue

            if _INDEX_PATTERN.match(line):
                continue

            # Header and NOTE/STYLE blocks never belong to a cue
            if not opened:
                continue

            text = self.clean_text(line)
            if text:
                buffer.append(text)

        flush()
        return cues or None

    def clean_text(self, line: str) -> str:
        return strip_tags(line).strip()

    def _parse_timing(self, line: str):
        left, _, right = line.partition('-->')
        try:
            start = timestamp_to_seconds(left.strip())
        except ValueError:
            logger.debug(f"Unparsable cue timing: {line!r}")
            return None, None

        # Right side may carry cue settings, e.g. "00:00:09.000 align:start position:0%"
        end_token = right.strip().split(' ')[0] if right.strip() else ''
        try:
            end = timestamp_to_seconds(end_token)
        except ValueError:
            return start, None
        return start, max(0.0, end - start)
