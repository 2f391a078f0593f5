"""
YouTube comment retrieval module
"""

from .comment_info import CommentInfo
from .errors import (
    CommentFetchError,
    ErrorReason,
    ExtractionFailedError,
    InvalidSourceError,
    VideoResolutionError,
)
from .fetch_controller import CommentFetchController, FetchState, FetchStatus, clamp_page_size
from .video_identifier import VideoIdentifierResolver, resolve_video_id
from .youtube_client import YouTubeClient

__all__ = [
    "CommentInfo",
    "CommentFetchController",
    "CommentFetchError",
    "ErrorReason",
    "ExtractionFailedError",
    "FetchState",
    "FetchStatus",
    "InvalidSourceError",
    "VideoIdentifierResolver",
    "VideoResolutionError",
    "YouTubeClient",
    "clamp_page_size",
    "resolve_video_id",
]
