"""
Application Configuration Model
Represents a validated configuration state
"""

from typing import Optional


class AppConfig:
    """
    Immutable configuration object for the comment pipeline.

    Represents a VALID configuration state only.
    All validation must be performed before instantiation.
    """

    def __init__(
        self,
        api_key: str,
        video: Optional[str] = None,
        max_results: int = 100,
        max_pages: Optional[int] = None,
        storage_root: str = "./storage"
    ):
        """
        Initialize AppConfig with validated values.

        Args:
            api_key: YouTube API key (non-empty)
            video: Video URL or ID to fetch comments for (optional)
            max_results: Comments requested per page (1 - 100)
            max_pages: Maximum pages to load (optional, > 0 or None)
            storage_root: Root directory for storage (default: "./storage")
        """
        self._api_key = api_key
        self._video = video
        self._max_results = max_results
        self._max_pages = max_pages
        self._storage_root = storage_root

    @property
    def api_key(self) -> str:
        """YouTube API key."""
        return self._api_key

    @property
    def video(self) -> Optional[str]:
        """Video reference as entered (URL or ID)."""
        return self._video

    @property
    def max_results(self) -> int:
        """Comments requested per page."""
        return self._max_results

    @property
    def max_pages(self) -> Optional[int]:
        """Maximum number of pages to load (None = until exhausted)."""
        return self._max_pages

    @property
    def storage_root(self) -> str:
        """Root directory for storage."""
        return self._storage_root

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"AppConfig(video={self.video!r}, "
            f"max_results={self.max_results}, "
            f"max_pages={self.max_pages}, "
            f"storage_root={self.storage_root!r})"
        )
