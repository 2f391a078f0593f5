import pandas as pd

from comment_pipeline.core.export import CommentExporter
from comment_pipeline.core.youtube import CommentInfo
from shared.storage.storage_manager import StorageManager


def test_export_writes_comments_in_order(tmp_path, item_factory):
    comments = [
        CommentInfo.from_api_item(item_factory("c2", text="second, with comma")),
        CommentInfo.from_api_item(item_factory("c1", text="first")),
    ]
    exporter = CommentExporter(tmp_path / "comments")

    path = exporter.export("FGMLcb9LX3Q", comments)

    assert path == tmp_path / "comments" / "comments_FGMLcb9LX3Q.csv"
    df = pd.read_csv(path)
    assert list(df.columns) == [
        "comment_id", "author_display_name", "author_avatar_url", "published_at", "text",
    ]
    assert df["comment_id"].tolist() == ["c2", "c1"]
    assert df["text"].tolist() == ["second, with comma", "first"]


def test_export_replaces_previous_snapshot(tmp_path, item_factory):
    exporter = CommentExporter(tmp_path)
    exporter.export("FGMLcb9LX3Q", [CommentInfo.from_api_item(item_factory("c1"))])

    path = exporter.export("FGMLcb9LX3Q", [CommentInfo.from_api_item(item_factory("c9"))])

    assert pd.read_csv(path)["comment_id"].tolist() == ["c9"]


def test_export_without_comments_writes_nothing(tmp_path):
    exporter = CommentExporter(tmp_path)

    assert exporter.export("FGMLcb9LX3Q", ()) is None
    assert list(tmp_path.iterdir()) == []


def test_storage_manager_creates_layout(tmp_path):
    storage = StorageManager(str(tmp_path / "store"))

    assert storage.comments_path == (tmp_path / "store" / "comments").resolve()
    assert storage.logs_path.is_dir()
    assert storage.comments_path.is_dir()
