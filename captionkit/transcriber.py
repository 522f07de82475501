"""
End-to-end transcript fetching.

Extracts the video id, resolves the title and the captions concurrently,
and assembles the normalized transcript.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Set

import requests

from .assembler import assemble_transcript
from .models import NO_CAPTIONS_INFO, TranscriptConfig, VideoTranscript
from .resolver import CaptionSourceResolver
from .youtube import YouTubeClient, extract_video_id, resolve_video_title

logger = logging.getLogger(__name__)


class Transcriber:
    """
    Fetch normalized transcripts for YouTube videos.

    One transcribe() call is one independent unit of work. The title
    lookup and the caption matrix scan run in parallel; a failed title
    lookup never affects the transcript.
    """

    def __init__(self, config: Optional[TranscriptConfig] = None, session: Optional[requests.Session] = None):
        """
        Initialize transcriber.

        Args:
            config: TranscriptConfig (defaults apply if omitted)
            session: Optional shared requests session
        """
        self.config = config or TranscriptConfig()
        self.session = session
        self._active: Set[CaptionSourceResolver] = set()
        self._lock = threading.Lock()

    def _make_client(self) -> YouTubeClient:
        return YouTubeClient(config=self.config, session=self.session)

    def cancel(self):
        """Abort the caption searches of every transcribe() call in progress."""
        with self._lock:
            resolvers = list(self._active)
        for resolver in resolvers:
            resolver.cancel()

    @property
    def active_requests(self) -> int:
        with self._lock:
            return len(self._active)

    def transcribe(self, url_or_id: str) -> VideoTranscript:
        """
        Fetch title and transcript for a video.

        Args:
            url_or_id: YouTube URL (watch, youtu.be, embed) or bare video id

        Returns:
            VideoTranscript; no_captions_found is set when the video has no
            retrievable captions

        Raises:
            InvalidIdentifier: If the input is not a recognizable URL or id
            TransportError: If the caption endpoint could not be reached at all
            ResolutionCancelled: If cancel() was called
        """
        video_id = extract_video_id(url_or_id)
        logger.info(f"Processing video: {video_id}")

        with self._make_client() as client:
            resolver = CaptionSourceResolver(client=client)
            with self._lock:
                self._active.add(resolver)
            try:
                with ThreadPoolExecutor(max_workers=2, thread_name_prefix="captionkit") as pool:
                    title_future = pool.submit(resolve_video_title, video_id, client)
                    captions_future = pool.submit(resolver.resolve, video_id)
                    resolution = captions_future.result()
                    title = title_future.result()
            finally:
                with self._lock:
                    self._active.discard(resolver)

        transcript = assemble_transcript(resolution.cues, resolution.language)
        no_captions = transcript.no_captions_found
        if no_captions:
            logger.info(f"No captions available for {video_id}")
        else:
            logger.info(f"Transcript ready for {video_id}: {len(transcript.lines)} lines ({transcript.language})")

        return VideoTranscript(
            video_id=video_id,
            video_title=title,
            transcript=transcript.text,
            language=transcript.language,
            no_captions_found=no_captions,
            info=NO_CAPTIONS_INFO if no_captions else None,
        )


def fetch_transcript(
    url_or_id: str,
    languages=None,
    timeout: float = 5.0,
    title_backend: str = "oembed",
    prefetch_workers: int = 1,
    session: Optional[requests.Session] = None,
) -> VideoTranscript:
    """
    Fetch a normalized transcript for a YouTube video.

    Args:
        url_or_id: YouTube URL or bare video id
        languages: Language preference order (default: pt, pt-BR, en, es)
        timeout: Per-request timeout in seconds
        title_backend: "oembed" or "yt-dlp"
        prefetch_workers: Parallel speculative fetches (1 = sequential scan)
        session: Optional requests session

    Returns:
        VideoTranscript

    Example:
        >>> result = fetch_transcript("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
        >>> print(result.transcript.splitlines()[0])
        [00:18] ...
    """
    config = TranscriptConfig(
        timeout=timeout,
        title_backend=title_backend,
        prefetch_workers=prefetch_workers,
    )
    if languages:
        config.languages = tuple(languages)
    return Transcriber(config=config, session=session).transcribe(url_or_id)


def fetch_transcript_from_config(url_or_id: str, config: TranscriptConfig) -> VideoTranscript:
    """Fetch a transcript using a TranscriptConfig object."""
    return Transcriber(config=config).transcribe(url_or_id)
