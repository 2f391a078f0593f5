"""
Error taxonomy for video resolution and comment retrieval
"""

from enum import Enum


class ErrorReason(Enum):
    """Reason codes surfaced to callers, each with a user-facing message."""

    INVALID_SOURCE = "Please provide a valid YouTube URL or video ID."
    EXTRACTION_FAILED = "Unable to extract a valid YouTube video ID."
    FETCH_FAILED = "Failed to fetch comments. Please try again."

    @property
    def message(self) -> str:
        return self.value


class VideoResolutionError(Exception):
    """Raised when free-text input cannot be turned into a video ID."""

    reason = ErrorReason.INVALID_SOURCE

    def __init__(self, source: str, detail: str = ""):
        self.source = source
        self.detail = detail
        super().__init__(detail or self.reason.message)


class InvalidSourceError(VideoResolutionError):
    """Input is neither a video ID nor a recognized YouTube URL."""

    reason = ErrorReason.INVALID_SOURCE


class ExtractionFailedError(VideoResolutionError):
    """Input is a YouTube URL but no video ID could be extracted from it."""

    reason = ErrorReason.EXTRACTION_FAILED


class CommentFetchError(Exception):
    """Raised by the remote-fetch collaborator when a page cannot be retrieved."""
    pass
