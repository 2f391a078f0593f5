"""
Comment Exporter
Writes a snapshot of collected comments to CSV.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

from ..youtube.comment_info import CommentInfo

logger = logging.getLogger(__name__)

COLUMNS = ["comment_id", "author_display_name", "author_avatar_url", "published_at", "text"]


class CommentExporter:
    """
    Service responsible for persisting a comment snapshot.

    Responsibilities:
    - Serialize comments in collection order.
    - Write one CSV per video, replacing any earlier snapshot.
    """

    def __init__(self, output_dir: Path):
        self._output_dir = output_dir
        self._output_dir.mkdir(parents=True, exist_ok=True)

    def output_path(self, video_id: str) -> Path:
        return self._output_dir / f"comments_{video_id}.csv"

    def export(self, video_id: str, comments: Sequence[CommentInfo]) -> Optional[Path]:
        """
        Saves the comments to comments_<video_id>.csv.

        Returns:
            Path of the written file, or None when there was nothing to write.
        """
        if not comments:
            logger.warning(f"No comments collected for {video_id}. CSV will not be created.")
            return None

        output_path = self.output_path(video_id)
        df = pd.DataFrame([c.to_dict() for c in comments], columns=COLUMNS)
        df.to_csv(output_path, index=False, encoding='utf-8')

        logger.info(f"Successfully saved {len(comments)} comments to {output_path}")
        return output_path
