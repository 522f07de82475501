"""
YouTube client for CaptionKit.

Provides video id extraction and thin HTTP access to the public,
unauthenticated timedtext and oEmbed endpoints.
"""

import logging
import re
from typing import Any, Dict, Optional, Tuple

import requests

from ..exceptions import InvalidIdentifier
from ..models import RetrievalAttempt, TranscriptConfig

logger = logging.getLogger(__name__)

# Tried in order; the first capture group is the video id
_ID_PATTERNS = (
    re.compile(r'(?:youtube\.com/watch\?(?:[^#\s]*&)?v=)([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])'),
    re.compile(r'(?:youtu\.be/)([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])'),
    re.compile(r'(?:youtube(?:-nocookie)?\.com/embed/)([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])'),
    re.compile(r'(?:youtube\.com/(?:shorts|live)/)([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])'),
    re.compile(r'^([A-Za-z0-9_-]{11})$'),
)

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


def extract_video_id(value: str) -> str:
    """
    Extract a YouTube video id from a URL or a bare id.

    Args:
        value: watch URL, youtu.be link, embed URL or 11-character id

    Returns:
        The 11-character video id

    Raises:
        InvalidIdentifier: If no supported shape matches

    Example:
        >>> extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
        'dQw4w9WgXcQ'
        >>> extract_video_id("https://youtu.be/dQw4w9WgXcQ?t=42")
        'dQw4w9WgXcQ'
    """
    if not isinstance(value, str):
        raise InvalidIdentifier(str(value))

    candidate = value.strip()
    for pattern in _ID_PATTERNS:
        match = pattern.search(candidate)
        if match:
            return match.group(1)
    raise InvalidIdentifier(value)


def is_youtube_url(url: str) -> bool:
    """
    Check whether a string is a supported YouTube URL or video id.

    Example:
        >>> is_youtube_url("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
        True
        >>> is_youtube_url("https://example.com/video")
        False
    """
    try:
        extract_video_id(url)
        return True
    except InvalidIdentifier:
        return False


def watch_url(video_id: str) -> str:
    return WATCH_URL.format(video_id=video_id)


class YouTubeClient:
    """
    HTTP client for the public YouTube caption and metadata endpoints.

    Every call is bounded by the configured timeout. Transport exceptions
    from requests propagate to the caller, which decides whether they are
    misses or fatal.
    """

    def __init__(self, config: Optional[TranscriptConfig] = None, session: Optional[requests.Session] = None):
        """
        Initialize YouTube client.

        Args:
            config: TranscriptConfig with endpoint URLs and timeout
            session: Optional requests session (one is created if omitted)
        """
        self.config = config or TranscriptConfig()
        self._owns_session = session is None
        self.session = session or requests.Session()
        if self.config.user_agent:
            self.session.headers['User-Agent'] = self.config.user_agent

    def caption_params(self, video_id: str, attempt: RetrievalAttempt) -> Dict[str, str]:
        """Query parameters for one timedtext request."""
        params = {'lang': attempt.language, 'v': video_id}
        if attempt.kind:
            params['kind'] = attempt.kind
        if attempt.fmt:
            params['fmt'] = attempt.fmt
        return params

    def fetch_captions(self, video_id: str, attempt: RetrievalAttempt) -> Tuple[int, str]:
        """
        Fetch one caption track.

        Returns:
            Tuple of (HTTP status code, response body)

        Raises:
            requests.RequestException: On timeout or connection failure
        """
        params = self.caption_params(video_id, attempt)
        logger.debug(f"Requesting captions {attempt} for {video_id}")
        response = self.session.get(
            self.config.timedtext_url,
            params=params,
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
        )
        return response.status_code, response.text

    def fetch_oembed(self, video_id: str) -> Dict[str, Any]:
        """
        Fetch oEmbed metadata for a video.

        Raises:
            requests.RequestException: On HTTP or transport failure
            ValueError: If the body is not JSON
        """
        response = self.session.get(
            self.config.oembed_url,
            params={'url': watch_url(video_id), 'format': 'json'},
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
        )
        response.raise_for_status()
        return response.json()

    @property
    def owns_session(self) -> bool:
        """True when the session was created here rather than passed in by the caller."""
        return self._owns_session

    def close(self):
        """Close the underlying session, aborting pooled connections."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if self.owns_session:
            self.close()
