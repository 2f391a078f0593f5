"""
Comment Domain Model
Projection of a commentThreads.list item
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass(frozen=True)
class CommentInfo:
    """
    Domain model representing a single top-level YouTube comment.
    Immutable dataclass, built only from an API item.
    """
    comment_id: str
    author_display_name: str
    author_avatar_url: str
    published_at: str
    text: str

    @classmethod
    def from_api_item(cls, item: Dict[str, Any]) -> "CommentInfo":
        """
        Map a raw comment thread item to a CommentInfo.

        Raises:
            KeyError, TypeError: The item does not have the expected shape.
        """
        snippet = item["snippet"]["topLevelComment"]["snippet"]
        return cls(
            comment_id=item["id"],
            author_display_name=snippet["authorDisplayName"],
            author_avatar_url=snippet["authorProfileImageUrl"],
            published_at=snippet["publishedAt"],
            text=snippet["textDisplay"],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert object to dictionary for serialization (e.g., CSV)."""
        return asdict(self)
