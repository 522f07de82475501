"""
YouTube module for CaptionKit.

Provides video id extraction, the HTTP client for the public caption
and oEmbed endpoints, and best-effort title lookup.
"""

from .client import (
    YouTubeClient,
    extract_video_id,
    is_youtube_url,
    watch_url,
)

from .metadata import (
    resolve_video_title,
    fallback_title,
)

__all__ = [
    'YouTubeClient',
    'extract_video_id',
    'is_youtube_url',
    'watch_url',
    'resolve_video_title',
    'fallback_title',
]
