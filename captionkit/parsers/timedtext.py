"""
Timed-text XML parser.

Handles the legacy YouTube timedtext document::

    <transcript>
      <text start="5.5" dur="2">Hello &amp; welcome</text>
    </transcript>
"""

import logging
import math
import re
from typing import List, Optional

from .base import CueParser, strip_tags
from ..models import Cue, CaptionFormat

logger = logging.getLogger(__name__)

_TEXT_ELEMENT_PATTERN = re.compile(r'<text\b([^>]*?)\s*(?:/>|>(.*?)</text>)', re.DOTALL)
_ATTRIBUTE_PATTERN = re.compile(r'([\w:-]+)\s*=\s*"([^"]*)"')
_WHITESPACE_PATTERN = re.compile(r'\s*\n\s*')

# &amp; goes first so double-encoded entities like "&amp;#39;" fully resolve
_ENTITIES = (
    ('&amp;', '&'),
    ('&lt;', '<'),
    ('&gt;', '>'),
    ('&quot;', '"'),
    ('&#39;', "'"),
)

XML_MARKERS = ('<transcript', '<timedtext')


def decode_entities(text: str) -> str:
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


class TimedTextXMLParser(CueParser):
    """Parser for <text start=".." dur="..">BODY</text> documents."""

    format = CaptionFormat.XML

    def parse(self, raw: str) -> Optional[List[Cue]]:
        cues = []
        for match in _TEXT_ELEMENT_PATTERN.finditer(raw):
            # Self-closing <text .../> has no body
            if match.group(2) is None:
                continue
            attributes = dict(_ATTRIBUTE_PATTERN.findall(match.group(1)))

            try:
                start = float(attributes['start'])
            except (KeyError, ValueError):
                logger.debug(f"Skipping <text> element without a usable start: {match.group(1)!r}")
                continue
            if not math.isfinite(start) or start < 0:
                logger.debug(f"Skipping <text> element with out-of-range start: {attributes['start']!r}")
                continue

            duration = None
            if 'dur' in attributes:
                try:
                    duration = float(attributes['dur'])
                except ValueError:
                    pass
                if duration is not None and (not math.isfinite(duration) or duration < 0):
                    duration = None

            body = _WHITESPACE_PATTERN.sub(' ', match.group(2))
            text = strip_tags(decode_entities(body)).strip()
            if not text:
                continue

            cues.append(Cue(start=start, text=text, duration=duration))

        return cues or None
