"""
Video metadata lookup for CaptionKit.

Title resolution is best-effort: any failure degrades to a title
synthesized from the video id and is never raised to the caller.
"""

import logging
from typing import Dict, Optional

import requests
import yt_dlp
from yt_dlp.utils import DownloadError

from .client import YouTubeClient, watch_url

logger = logging.getLogger(__name__)


def fallback_title(video_id: str) -> str:
    """
    Deterministic title used when metadata cannot be fetched.

    Example:
        >>> fallback_title("dQw4w9WgXcQ")
        'Video dQw4w9WgXcQ'
    """
    return f"Video {video_id}"


def _title_from_oembed(client: YouTubeClient, video_id: str) -> Optional[str]:
    data = client.fetch_oembed(video_id)
    if not isinstance(data, dict):
        raise ValueError(f"Unexpected oEmbed body: {type(data).__name__}")
    return data.get('title')


def _title_from_ytdlp(client: YouTubeClient, video_id: str) -> Optional[str]:
    ydl_opts: Dict = {
        'quiet': True,
        'no_warnings': True,
        'skip_download': True,
        'socket_timeout': client.config.timeout,
    }
    if not client.config.verify_ssl:
        ydl_opts['nocheckcertificate'] = True

    with yt_dlp.YoutubeDL(ydl_opts) as ydl:
        info = ydl.extract_info(watch_url(video_id), download=False)
    return (info or {}).get('title')


_BACKENDS = {
    'oembed': _title_from_oembed,
    'yt-dlp': _title_from_ytdlp,
}


def resolve_video_title(video_id: str, client: Optional[YouTubeClient] = None) -> str:
    """
    Fetch a human-readable title for a video.

    Uses the oEmbed endpoint by default, or yt-dlp when the client's
    config sets title_backend="yt-dlp".

    Args:
        video_id: YouTube video id
        client: YouTubeClient to use (a default one is created if omitted)

    Returns:
        The video title, or fallback_title(video_id) on any failure
    """
    client = client or YouTubeClient()
    backend = client.config.title_backend
    lookup = _BACKENDS.get(backend)
    if lookup is None:
        logger.warning(f"Unknown title backend {backend!r}, using fallback title")
        return fallback_title(video_id)

    try:
        title = lookup(client, video_id)
    except (requests.RequestException, ValueError, DownloadError) as e:
        logger.warning(f"Title lookup via {backend} failed for {video_id}: {str(e)}")
        return fallback_title(video_id)
    except Exception:
        logger.exception(f"Unexpected error during title lookup for {video_id}")
        return fallback_title(video_id)

    if not isinstance(title, str) or not title.strip():
        logger.warning(f"No title in {backend} metadata for {video_id}")
        return fallback_title(video_id)

    return title.strip()
