"""
Data models for CaptionKit.

Defines the core data structures used throughout the package.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

UNKNOWN_LANGUAGE = "unknown"
NO_CAPTIONS_INFO = "No public or auto-generated captions are available for this video."


class CaptionFormat(Enum):
    """Sniffed format of a caption payload."""
    XML = "xml"
    VTT = "vtt"
    SRT_LIKE = "srtLike"
    RAW = "raw"


class AttemptVariant(Enum):
    """Caption track variant requested from the timedtext endpoint."""
    PLAIN = "plain"
    ASR = "asr"
    VTT = "vtt"
    ASR_VTT = "asr+vtt"

    @property
    def kind(self) -> Optional[str]:
        if self in (AttemptVariant.ASR, AttemptVariant.ASR_VTT):
            return "asr"
        return None

    @property
    def fmt(self) -> Optional[str]:
        if self in (AttemptVariant.VTT, AttemptVariant.ASR_VTT):
            return "vtt"
        return None


DEFAULT_LANGUAGES: Tuple[str, ...] = ("pt", "pt-BR", "en", "es")
DEFAULT_VARIANTS: Tuple[AttemptVariant, ...] = (
    AttemptVariant.PLAIN,
    AttemptVariant.ASR,
    AttemptVariant.VTT,
    AttemptVariant.ASR_VTT,
)


@dataclass(frozen=True)
class Cue:
    """One captioned utterance anchored at an offset (seconds) from video start."""
    start: float
    text: str
    duration: Optional[float] = None


@dataclass(frozen=True)
class RetrievalAttempt:
    """A (language, variant) entry of the retrieval matrix."""
    language: str
    variant: AttemptVariant

    @property
    def kind(self) -> Optional[str]:
        return self.variant.kind

    @property
    def fmt(self) -> Optional[str]:
        return self.variant.fmt

    def __str__(self) -> str:
        return f"{self.language}/{self.variant.value}"


@dataclass
class CaptionPayload:
    """Raw body returned by one attempt, tagged with its sniffed format."""
    attempt: RetrievalAttempt
    text: str
    format: CaptionFormat


@dataclass(frozen=True)
class Hit:
    """Attempt that produced at least one usable cue."""
    attempt: RetrievalAttempt
    cues: Tuple[Cue, ...]


@dataclass(frozen=True)
class Miss:
    """Attempt that produced nothing usable. Not an error."""
    attempt: RetrievalAttempt
    reason: str
    transport_failure: bool = False
    error: Optional[BaseException] = field(default=None, compare=False, repr=False)


@dataclass
class CaptionResolution:
    """Outcome of a full matrix scan."""
    language: str = UNKNOWN_LANGUAGE
    cues: List[Cue] = field(default_factory=list)
    attempt: Optional[RetrievalAttempt] = None
    attempts_made: int = 0

    @property
    def found(self) -> bool:
        return bool(self.cues)


@dataclass(frozen=True)
class TranscriptResult:
    """Normalized transcript: one "[MM:SS] text" line per cue."""
    language: str
    lines: Tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def no_captions_found(self) -> bool:
        return not self.text.strip()


@dataclass
class VideoTranscript:
    """End-to-end result handed back to callers."""
    video_id: str
    video_title: str
    transcript: str
    language: str
    no_captions_found: bool
    info: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Render the JSON shape consumed by front ends."""
        data = {
            "success": True,
            "videoId": self.video_id,
            "videoTitle": self.video_title,
            "transcript": self.transcript,
            "language": self.language,
            "noCaptionsFound": self.no_captions_found,
        }
        if self.info:
            data["info"] = self.info
        return data


def build_attempt_matrix(
    languages: Iterable[str] = DEFAULT_LANGUAGES,
    variants: Iterable[AttemptVariant] = DEFAULT_VARIANTS,
) -> List[RetrievalAttempt]:
    """
    Build the priority-ordered retrieval matrix (language-major).

    Example:
        >>> [str(a) for a in build_attempt_matrix(["en"], [AttemptVariant.PLAIN, AttemptVariant.ASR])]
        ['en/plain', 'en/asr']
    """
    variants = list(variants)
    return [RetrievalAttempt(language, variant) for language in languages for variant in variants]


@dataclass
class TranscriptConfig:
    """Configuration for transcript fetch operations."""
    languages: Tuple[str, ...] = DEFAULT_LANGUAGES
    variants: Tuple[AttemptVariant, ...] = DEFAULT_VARIANTS
    timeout: float = 5.0
    timedtext_url: str = "https://www.youtube.com/api/timedtext"
    oembed_url: str = "https://www.youtube.com/oembed"
    user_agent: Optional[str] = None
    title_backend: str = "oembed"  # "oembed" or "yt-dlp"
    prefetch_workers: int = 1
    verify_ssl: bool = True

    def matrix(self) -> List[RetrievalAttempt]:
        return build_attempt_matrix(self.languages, self.variants)
