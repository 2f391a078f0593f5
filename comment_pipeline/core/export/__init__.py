"""
Export module for collected comments
"""

from .comment_exporter import CommentExporter

__all__ = ["CommentExporter"]
