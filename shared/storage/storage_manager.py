"""
Storage Manager for the YouTube comment pipeline
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class StorageManager:
    """
    Service responsible for managing local storage and organizing project files.

    Responsibilities:
    - Create and validate storage directory structure.
    - Provide canonical paths for exported comments and logs.
    """

    def __init__(self, storage_root: str = "./storage"):
        """
        Initialize the StorageManager.

        Args:
            storage_root (str): The base directory for all storage.
        """
        self._root = Path(storage_root).resolve()

        # Define subdirectories
        self._comments_dir = self._root / "comments"
        self._logs_dir = self._root / "logs"

        self._ensure_directories()

    def _ensure_directories(self):
        """Ensures that all required storage directories exist."""
        for d in (self._comments_dir, self._logs_dir):
            d.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Storage directory verified: {d}")

    @property
    def root(self) -> Path:
        return self._root

    @property
    def comments_path(self) -> Path:
        return self._comments_dir

    @property
    def logs_path(self) -> Path:
        return self._logs_dir

    def __repr__(self):
        return f"StorageManager(root={self._root})"
