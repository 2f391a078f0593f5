"""
YouTube Comment Pipeline
Resolves a video reference, pages through its comments and exports them.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from googleapiclient.errors import HttpError

from comment_pipeline.core.config import AppConfig, ConfigLoader, ConfigValidationError
from comment_pipeline.core.export import CommentExporter
from comment_pipeline.core.youtube import (
    CommentFetchController,
    FetchState,
    FetchStatus,
    VideoResolutionError,
    YouTubeClient,
    clamp_page_size,
    resolve_video_id,
)
from shared.storage.storage_manager import StorageManager

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging() -> logging.Logger:
    """Configure console logging; the log file is attached once storage is known."""
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[logging.StreamHandler()]
    )

    return logging.getLogger(__name__)


def attach_log_file(logs_dir: Path) -> Path:
    """Add a file handler writing into the storage logs directory."""
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / "comment_pipeline.log"

    handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logging.getLogger().addHandler(handler)

    return log_file


def positive_int(value: str) -> int:
    """argparse type accepting integers greater than 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {number}")
    return number


def load_configuration(logger: logging.Logger, config_path: Path) -> AppConfig:
    """Load and validate application configuration."""
    logger.info(f"Loading configuration from: {config_path}")

    try:
        config = ConfigLoader(config_path).load()
    except FileNotFoundError as e:
        logger.error(f"Configuration file not found: {e}")
        sys.exit(1)
    except ConfigValidationError as e:
        logger.error(f"Configuration validation failed: {e}")
        sys.exit(1)

    logger.info("Configuration validated successfully")
    logger.info(f"  Video: {config.video or '(from command line)'}")
    logger.info(f"  Max Results: {config.max_results}")
    logger.info(f"  Max Pages: {config.max_pages if config.max_pages else 'unlimited'}")

    return config


def resolve_video(logger: logging.Logger, video: Optional[str]) -> str:
    """Resolve the video reference to an ID or exit with the rejection message."""
    if not video:
        logger.error("No video given. Set 'video' in the config or pass --video.")
        sys.exit(1)

    logger.info(f"Resolving video: {video}")
    try:
        video_id = resolve_video_id(video)
    except VideoResolutionError as e:
        logger.error(f"{e.reason.message} ({e})")
        sys.exit(1)

    logger.info(f"  Video ID: {video_id}")
    return video_id


def create_client(logger: logging.Logger, api_key: str) -> YouTubeClient:
    """Build the API client (fetches the discovery document) or exit."""
    try:
        return YouTubeClient(api_key)
    except HttpError as e:
        logger.error(f"YouTube API rejected client initialization: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error initializing YouTube client: {e}")
        sys.exit(1)


async def collect_comments(
    controller: CommentFetchController,
    video_id: str,
    page_size: int,
    max_pages: Optional[int] = None
) -> FetchState:
    """
    Loads pages until the thread is exhausted or max_pages is reached.

    A failed page is retried once before giving up; comments gathered so far
    are kept either way.
    """
    state = await controller.resolve(video_id, page_size)
    retried = False

    while True:
        if state.status is FetchStatus.ERROR:
            if retried:
                break
            retried = True
            state = await controller.retry()
            continue

        retried = False
        if not state.has_more:
            break
        if max_pages is not None and state.pages_loaded >= max_pages:
            break
        state = await controller.load_more()

    return state


def main(argv: Optional[List[str]] = None):
    """Main execution entry for the Comment Pipeline."""
    parser = argparse.ArgumentParser(description="YouTube Comment Pipeline")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to the YAML config.")
    parser.add_argument("--video", type=str, help="Video URL or ID (overrides config).")
    parser.add_argument("--max-results", type=int, help="Comments per page, clamped to 1-100 (overrides config).")
    parser.add_argument("--max-pages", type=positive_int, help="Maximum pages to load (overrides config).")
    args = parser.parse_args(argv)

    logger = setup_logging()

    logger.info("=" * 60)
    logger.info("YouTube Comment Pipeline")
    logger.info("=" * 60)

    # 1. Configuration
    config = load_configuration(logger, args.config)

    storage_root = Path(config.storage_root)
    if not storage_root.is_absolute():
        storage_root = (Path.cwd() / storage_root).resolve()
    storage = StorageManager(str(storage_root))
    log_file = attach_log_file(storage.logs_path)
    logger.info(f"Logging to: {log_file}")

    page_size = clamp_page_size(args.max_results) if args.max_results is not None else config.max_results
    max_pages = args.max_pages if args.max_pages is not None else config.max_pages

    # 2. Video resolution
    video_id = resolve_video(logger, args.video or config.video)

    # 3. Comment retrieval
    client = create_client(logger, config.api_key)
    controller = CommentFetchController(client.fetch_comment_page)
    state = asyncio.run(collect_comments(controller, video_id, page_size, max_pages))

    if state.status is FetchStatus.ERROR:
        logger.error(state.error_reason.message)

    # 4. Export
    exporter = CommentExporter(storage.comments_path)
    output_path = exporter.export(video_id, state.comments)

    logger.info("=" * 60)
    logger.info(f"Comment Pipeline complete: {len(state.comments)} comments in {state.pages_loaded} pages")
    logger.info("=" * 60)

    print("\n" + "=" * 60)
    print(f"Comments collected: {len(state.comments)}")
    if output_path:
        print(f"Saved to: {output_path}")
    print("=" * 60 + "\n")

    if state.status is FetchStatus.ERROR and not state.comments:
        sys.exit(1)


if __name__ == "__main__":
    main()
