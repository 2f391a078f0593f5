"""
YouTube API Client
Remote-fetch collaborator for comment threads (commentThreads.list).
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .errors import CommentFetchError

logger = logging.getLogger(__name__)


class YouTubeClient:
    """
    YouTube Data API client for paginated comment retrieval.

    Responsibilities:
    - Issue exactly one commentThreads.list call per requested page.
    - Normalize transport and API failures into CommentFetchError.
    - Offer an awaitable entry point for the fetch controller.
    """

    def __init__(self, api_key: str):
        """Initialize the YouTube API service."""
        # static_discovery=False prevents the 'file_cache' warning in logs
        self._service = build('youtube', 'v3', developerKey=api_key, static_discovery=False)

    def fetch_comment_threads(
        self,
        video_id: str,
        max_results: int = 100,
        page_token: Optional[str] = None
    ) -> Dict[str, Any]:
        """Low-level API call to commentThreads.list."""
        logger.info(f"Requesting comments for {video_id} (maxResults={max_results}, pageToken={page_token!r})")
        try:
            response = self._service.commentThreads().list(
                part="snippet",
                videoId=video_id,
                maxResults=max_results,
                pageToken=page_token
            ).execute()
        except HttpError as e:
            raise CommentFetchError(f"API error fetching comments for {video_id}: {e}") from e
        except (OSError, httplib2.HttpLib2Error) as e:
            raise CommentFetchError(f"Network error fetching comments for {video_id}: {e}") from e

        if not isinstance(response, dict) or not isinstance(response.get("items"), list):
            raise CommentFetchError(f"Malformed commentThreads response for {video_id}")

        return response

    async def fetch_comment_page(
        self,
        video_id: str,
        page_size: int,
        page_token: Optional[str] = None
    ) -> Dict[str, Any]:
        """Runs the blocking API call in a worker thread."""
        return await asyncio.to_thread(self.fetch_comment_threads, video_id, page_size, page_token)
