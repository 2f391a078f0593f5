"""
Video Identifier Resolution
Turns user input (watch URL, short link, embed URL or bare ID) into a video ID.
"""

import logging
import re
from typing import Callable, Optional, Sequence
from urllib.parse import urlparse

from .errors import ExtractionFailedError, InvalidSourceError

logger = logging.getLogger(__name__)

VIDEO_ID_CHARS = r"[a-zA-Z0-9_-]"
VIDEO_ID_RE = re.compile(rf"{VIDEO_ID_CHARS}{{11}}")

# Long-form and short-link domain families
YOUTUBE_DOMAINS = ("youtube.com", "youtu.be")

Extractor = Callable[[str], Optional[str]]


def _pattern_extractor(pattern: str) -> Extractor:
    compiled = re.compile(pattern)

    def extract(text: str) -> Optional[str]:
        match = compiled.search(text)
        return match.group(1) if match else None

    return extract


DEFAULT_EXTRACTORS: Sequence[Extractor] = (
    _pattern_extractor(rf"[?&]v=({VIDEO_ID_CHARS}{{11}})"),       # youtube.com/watch?v=...
    _pattern_extractor(rf"(?:be/)({VIDEO_ID_CHARS}{{11}})"),       # youtu.be/...
    _pattern_extractor(rf"(?:embed/)({VIDEO_ID_CHARS}{{11}})"),    # youtube.com/embed/...
    _pattern_extractor(rf"(?:shorts/)({VIDEO_ID_CHARS}{{11}})"),   # youtube.com/shorts/...
)


def is_video_id(text: str) -> bool:
    return bool(VIDEO_ID_RE.fullmatch(text))


class VideoIdentifierResolver:
    """
    Resolves free-text input into a canonical 11-character video ID.

    Accepted formats:
    - Bare video ID (11 characters of [A-Za-z0-9_-])
    - Watch URL (youtube.com/watch?v=...)
    - Short link (youtu.be/...)
    - Embed URL (youtube.com/embed/...)
    - Shorts URL (youtube.com/shorts/...)

    Extractors are tried in order and the first match wins.
    """

    def __init__(self, extractors: Sequence[Extractor] = DEFAULT_EXTRACTORS):
        self._extractors = tuple(extractors)

    def resolve(self, text: str) -> str:
        """
        Resolve input text to a video ID.

        Raises:
            InvalidSourceError: Input is not a video ID nor a YouTube URL.
            ExtractionFailedError: YouTube URL without an extractable ID.
        """
        candidate = text.strip()

        if is_video_id(candidate):
            return candidate

        if not self._is_youtube_url(candidate):
            raise InvalidSourceError(candidate, f"Not a YouTube URL or video ID: {candidate!r}")

        for extract in self._extractors:
            video_id = extract(candidate)
            if video_id:
                logger.debug(f"Extracted video ID {video_id} from {candidate}")
                return video_id

        raise ExtractionFailedError(candidate, f"No video ID found in URL: {candidate!r}")

    @staticmethod
    def _is_youtube_url(text: str) -> bool:
        """Checks the parsed hostname against the known domain families."""
        try:
            parsed = urlparse(text)
            hostname = parsed.hostname
        except ValueError:
            return False

        if not parsed.scheme or not hostname:
            return False

        return any(
            hostname == domain or hostname.endswith("." + domain)
            for domain in YOUTUBE_DOMAINS
        )


_default_resolver = VideoIdentifierResolver()


def resolve_video_id(text: str) -> str:
    """Resolve input text with the default extractor set."""
    return _default_resolver.resolve(text)
