"""
Exceptions raised by CaptionKit.

Only identifier-shape problems and whole-mechanism transport failures
escape the library. Individual caption misses are reported as values.
"""

from typing import Any, Dict, Optional


class CaptionKitError(Exception):
    """Base class for all CaptionKit errors."""


class InvalidIdentifier(CaptionKitError, ValueError):
    """Input could not be parsed into a video id."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid YouTube URL or video id: {value!r}")


class TransportError(CaptionKitError):
    """The caption endpoint could not be reached for any attempt."""

    def __init__(self, video_id: str, attempts: int, cause: Optional[BaseException] = None):
        self.video_id = video_id
        self.attempts = attempts
        self.cause = cause
        message = f"Caption endpoint unreachable for {video_id} ({attempts} attempts failed)"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class ResolutionCancelled(CaptionKitError):
    """The caller cancelled an in-progress caption search."""


def error_response(error: CaptionKitError) -> Dict[str, Any]:
    """Render a failure in the same JSON shape as VideoTranscript.to_dict()."""
    return {
        "success": False,
        "error": str(error),
        "errorType": type(error).__name__,
    }
