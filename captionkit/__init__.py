"""
CaptionKit - YouTube caption retrieval and transcript normalization

Fetches a video's public or auto-generated captions from unauthenticated
YouTube endpoints and normalizes timed-text XML, WebVTT or SubRip-style
payloads into one transcript of "[MM:SS] text" lines.

Features:
- Video id extraction from watch, youtu.be, embed and shorts URLs
- Priority-ordered language x variant caption search with miss fallback
- Timed-text XML, WebVTT and SubRip parsers with shared timestamp normalization
- Best-effort title lookup (oEmbed or yt-dlp) that never fails a request

Example usage:
    >>> from captionkit import fetch_transcript
    >>>
    >>> result = fetch_transcript("https://www.youtube.com/watch?v=VIDEO_ID")
    >>> if result.no_captions_found:
    ...     print(result.info)
    ... else:
    ...     print(result.video_title)
    ...     print(result.transcript)
"""

import logging

__version__ = "0.1.0"
__author__ = "CaptionKit Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Timestamp utilities
from .utils import (
    timestamp_to_seconds,
    format_offset,
)

# Parsers
from .parsers import (
    CueParser,
    TimedTextXMLParser,
    WebVTTParser,
    SubRipParser,
    detect_format,
    get_parser,
    parse_captions,
)

# Main classes
from .resolver import CaptionSourceResolver
from .assembler import assemble_transcript, format_cue_line, is_empty_transcript
from .transcriber import Transcriber, fetch_transcript, fetch_transcript_from_config

# Data models
from .models import (
    Cue,
    CaptionFormat,
    CaptionPayload,
    CaptionResolution,
    AttemptVariant,
    RetrievalAttempt,
    Hit,
    Miss,
    TranscriptResult,
    VideoTranscript,
    TranscriptConfig,
    build_attempt_matrix,
    DEFAULT_LANGUAGES,
    DEFAULT_VARIANTS,
)

# Errors
from .exceptions import (
    CaptionKitError,
    InvalidIdentifier,
    TransportError,
    ResolutionCancelled,
    error_response,
)

# YouTube utilities
from .youtube import (
    YouTubeClient,
    extract_video_id,
    is_youtube_url,
    resolve_video_title,
    fallback_title,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Entry points
    "fetch_transcript",
    "fetch_transcript_from_config",
    "Transcriber",

    # Timestamp utilities
    "timestamp_to_seconds",
    "format_offset",

    # Parsing
    "CueParser",
    "TimedTextXMLParser",
    "WebVTTParser",
    "SubRipParser",
    "detect_format",
    "get_parser",
    "parse_captions",

    # Resolution and assembly
    "CaptionSourceResolver",
    "assemble_transcript",
    "format_cue_line",
    "is_empty_transcript",

    # Models
    "Cue",
    "CaptionFormat",
    "CaptionPayload",
    "CaptionResolution",
    "AttemptVariant",
    "RetrievalAttempt",
    "Hit",
    "Miss",
    "TranscriptResult",
    "VideoTranscript",
    "TranscriptConfig",
    "build_attempt_matrix",
    "DEFAULT_LANGUAGES",
    "DEFAULT_VARIANTS",

    # Errors
    "CaptionKitError",
    "InvalidIdentifier",
    "TransportError",
    "ResolutionCancelled",
    "error_response",

    # YouTube utilities
    "YouTubeClient",
    "extract_video_id",
    "is_youtube_url",
    "resolve_video_title",
    "fallback_title",
]
