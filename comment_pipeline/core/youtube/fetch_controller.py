"""
Comment Fetch Controller
Drives paginated comment retrieval for one video at a time.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from .comment_info import CommentInfo
from .errors import ErrorReason

logger = logging.getLogger(__name__)

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100

FetchPage = Callable[[str, int, Optional[str]], Awaitable[Dict[str, Any]]]


def clamp_page_size(page_size: int) -> int:
    """Clamp a requested page size into the range accepted by the API."""
    return max(MIN_PAGE_SIZE, min(MAX_PAGE_SIZE, page_size))


class FetchStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


@dataclass(frozen=True)
class FetchState:
    """Read-only snapshot of the retrieval session."""
    status: FetchStatus
    video_id: Optional[str] = None
    comments: Tuple[CommentInfo, ...] = ()
    has_more: bool = False
    error_reason: Optional[ErrorReason] = None
    pages_loaded: int = 0


@dataclass(frozen=True)
class _RequestTag:
    generation: int
    video_id: str
    page_token: Optional[str]


@dataclass
class _Session:
    # page_token is None once the API reports no further pages
    video_id: Optional[str] = None
    page_size: int = MAX_PAGE_SIZE
    generation: int = 0
    status: FetchStatus = FetchStatus.IDLE
    comments: List[CommentInfo] = field(default_factory=list)
    page_token: Optional[str] = None
    pages_loaded: int = 0
    error_reason: Optional[ErrorReason] = None
    failed_tag: Optional[_RequestTag] = None


class CommentFetchController:
    """
    Owns the retrieval session for one video ID.

    Responsibilities:
    - Issue at most one page fetch at a time.
    - Accumulate comments page by page, all-or-nothing per page.
    - Track the continuation token and the loading/error state.
    - Discard results of fetches issued for a superseded session.

    The fetch callable receives (video_id, page_size, page_token) and either
    returns a commentThreads.list payload or raises; any exception fails the page.
    """

    def __init__(self, fetch_page: FetchPage):
        self._fetch_page = fetch_page
        self._session = _Session()

    def get_state(self) -> FetchState:
        session = self._session
        return FetchState(
            status=session.status,
            video_id=session.video_id,
            comments=tuple(session.comments),
            has_more=session.pages_loaded > 0 and session.page_token is not None,
            error_reason=session.error_reason,
            pages_loaded=session.pages_loaded,
        )

    async def resolve(self, video_id: str, page_size: int) -> FetchState:
        """
        Start a new session for video_id and fetch its first page.

        Any fetch still in flight for the previous session becomes stale.
        """
        generation = self._session.generation + 1
        self._session = _Session(video_id=video_id, page_size=page_size, generation=generation)
        logger.info(f"Starting comment session for {video_id} (page size {page_size})")
        return await self._fetch(_RequestTag(generation, video_id, None))

    async def load_more(self) -> FetchState:
        """Fetch the next page. No-op unless READY with a continuation token."""
        session = self._session
        if session.status is not FetchStatus.READY or session.page_token is None:
            logger.debug(f"load_more ignored in state {session.status.value}")
            return self.get_state()
        return await self._fetch(_RequestTag(session.generation, session.video_id, session.page_token))

    async def retry(self) -> FetchState:
        """Re-issue the request that last failed. No-op unless in ERROR."""
        session = self._session
        if session.status is not FetchStatus.ERROR or session.failed_tag is None:
            logger.debug(f"retry ignored in state {session.status.value}")
            return self.get_state()
        logger.info(f"Retrying page for {session.video_id} (pageToken={session.failed_tag.page_token!r})")
        return await self._fetch(session.failed_tag)

    async def _fetch(self, tag: _RequestTag) -> FetchState:
        self._transition(tag, FetchStatus.LOADING)

        try:
            response = await self._fetch_page(tag.video_id, self._session.page_size, tag.page_token)
            page = [CommentInfo.from_api_item(item) for item in response["items"]]
            next_token = response.get("nextPageToken") or None
        except Exception as e:
            # Any failure, including a malformed payload, fails the whole page
            return self._fail(tag, e)

        if not self._is_current(tag):
            logger.debug(f"Discarding stale page for {tag.video_id}")
            return self.get_state()

        self._transition(tag, FetchStatus.READY, page=page, next_token=next_token)
        logger.info(
            f"Loaded {len(page)} comments for {tag.video_id} "
            f"(total {len(self._session.comments)}, more={next_token is not None})"
        )
        return self.get_state()

    def _fail(self, tag: _RequestTag, error: Exception) -> FetchState:
        if not self._is_current(tag):
            logger.debug(f"Discarding stale failure for {tag.video_id}: {error}")
            return self.get_state()

        logger.error(f"Failed to fetch comments for {tag.video_id}: {error}")
        self._transition(tag, FetchStatus.ERROR, reason=ErrorReason.FETCH_FAILED)
        return self.get_state()

    def _is_current(self, tag: _RequestTag) -> bool:
        session = self._session
        return tag.generation == session.generation and tag.video_id == session.video_id

    def _transition(
        self,
        tag: _RequestTag,
        status: FetchStatus,
        page: Optional[List[CommentInfo]] = None,
        next_token: Optional[str] = None,
        reason: Optional[ErrorReason] = None
    ) -> None:
        """Single place where status, comments and token change together."""
        session = self._session
        session.status = status

        if status is FetchStatus.LOADING:
            session.error_reason = None
        elif status is FetchStatus.READY:
            session.comments.extend(page or [])
            session.page_token = next_token
            session.pages_loaded += 1
            session.error_reason = None
            session.failed_tag = None
        elif status is FetchStatus.ERROR:
            session.error_reason = reason
            session.failed_tag = tag
