"""
Caption source resolution for CaptionKit.

Scans the (language, variant) retrieval matrix in priority order against
the timedtext endpoint and returns the cues of the first attempt that
parses to at least one usable cue.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, List, Optional, Sequence, Union

import requests

from .exceptions import ResolutionCancelled, TransportError
from .models import CaptionPayload, CaptionResolution, Hit, Miss, RetrievalAttempt
from .parsers import detect_format, get_parser
from .youtube import YouTubeClient

logger = logging.getLogger(__name__)

Outcome = Union[Hit, Miss]


class CaptionSourceResolver:
    """
    Resolve the captions of a video by walking the retrieval matrix.

    Each attempt is either a Hit or a Miss. Non-2xx responses, blank
    bodies, payloads that parse to nothing, and per-attempt timeouts or
    connection errors are all misses. The first hit in matrix order wins.
    Only when no attempt got an HTTP response at all is TransportError
    raised.
    """

    def __init__(
        self,
        client: Optional[YouTubeClient] = None,
        matrix: Optional[Sequence[RetrievalAttempt]] = None,
        prefetch_workers: Optional[int] = None,
    ):
        """
        Initialize the resolver.

        Args:
            client: YouTubeClient used for HTTP (default client if omitted)
            matrix: Ordered retrieval attempts (defaults to client.config.matrix())
            prefetch_workers: Fetch this many attempts speculatively in parallel.
                Results are still consumed in matrix order. 1 disables prefetch.
        """
        self.client = client or YouTubeClient()
        self.matrix: List[RetrievalAttempt] = list(matrix) if matrix is not None else self.client.config.matrix()
        if prefetch_workers is None:
            prefetch_workers = self.client.config.prefetch_workers
        self.prefetch_workers = max(1, int(prefetch_workers))
        self._cancelled = threading.Event()

    def cancel(self):
        """
        Abort the scan before its next attempt.

        In-flight connections are released by closing the session, unless
        the session belongs to the caller.
        """
        self._cancelled.set()
        if self.client.owns_session:
            self.client.close()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def _check_cancelled(self):
        if self._cancelled.is_set():
            raise ResolutionCancelled("Caption search cancelled")

    def evaluate(self, attempt: RetrievalAttempt, status: int, body: Optional[str]) -> Outcome:
        """Classify one HTTP response as a Hit or a Miss."""
        if not 200 <= status < 300:
            return Miss(attempt, f"HTTP {status}")
        if not body or not body.strip():
            return Miss(attempt, "empty body")

        payload = CaptionPayload(attempt=attempt, text=body, format=detect_format(body))
        parser = get_parser(payload.format)
        try:
            cues = parser.parse(payload.text)
        except Exception as e:
            logger.warning(f"{type(parser).__name__} failed on {attempt}: {str(e)}")
            cues = None

        if not cues:
            return Miss(attempt, f"no usable cues in {payload.format.value} payload")
        return Hit(attempt, tuple(cues))

    def try_attempt(self, video_id: str, attempt: RetrievalAttempt) -> Outcome:
        """Fetch and evaluate a single matrix entry. Never raises on transport failures."""
        try:
            status, body = self.client.fetch_captions(video_id, attempt)
        except requests.RequestException as e:
            logger.warning(f"Caption request {attempt} for {video_id} failed: {str(e)}")
            return Miss(attempt, f"transport: {str(e)}", transport_failure=True, error=e)
        return self.evaluate(attempt, status, body)

    def _sequential(self, video_id: str) -> Iterator[Outcome]:
        for attempt in self.matrix:
            self._check_cancelled()
            yield self.try_attempt(video_id, attempt)

    def _prefetched(self, video_id: str) -> Iterator[Outcome]:
        pool = ThreadPoolExecutor(max_workers=self.prefetch_workers, thread_name_prefix="captionkit-prefetch")
        futures = [pool.submit(self.try_attempt, video_id, attempt) for attempt in self.matrix]
        try:
            for future in futures:
                self._check_cancelled()
                yield future.result()
        finally:
            for future in futures:
                future.cancel()
            pool.shutdown(wait=False)

    def resolve(self, video_id: str) -> CaptionResolution:
        """
        Run the matrix scan for a video.

        Args:
            video_id: Extracted YouTube video id

        Returns:
            CaptionResolution with the winning language and cues, or the
            "nothing found" resolution (language "unknown", no cues)

        Raises:
            TransportError: If every attempt failed without an HTTP response
            ResolutionCancelled: If cancel() was called during the scan
        """
        logger.info(f"Resolving captions for {video_id} ({len(self.matrix)} attempts)")

        outcomes = self._prefetched(video_id) if self.prefetch_workers > 1 else self._sequential(video_id)
        attempts_made = 0
        transport_misses: List[Miss] = []
        try:
            for outcome in outcomes:
                attempts_made += 1
                if isinstance(outcome, Hit):
                    logger.info(
                        f"Captions found for {video_id}: {outcome.attempt} "
                        f"({len(outcome.cues)} cues, attempt {attempts_made})"
                    )
                    return CaptionResolution(
                        language=outcome.attempt.language,
                        cues=list(outcome.cues),
                        attempt=outcome.attempt,
                        attempts_made=attempts_made,
                    )
                logger.debug(f"Miss {outcome.attempt} for {video_id}: {outcome.reason}")
                if outcome.transport_failure:
                    transport_misses.append(outcome)
        finally:
            outcomes.close()

        if attempts_made and len(transport_misses) == attempts_made:
            cause = transport_misses[-1].error
            logger.error(f"Caption endpoint unreachable for {video_id}")
            raise TransportError(video_id, attempts_made, cause)

        logger.info(f"No captions found for {video_id} after {attempts_made} attempts")
        return CaptionResolution(attempts_made=attempts_made)
