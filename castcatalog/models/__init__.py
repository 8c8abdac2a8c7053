"""Catalog data models (pure Python, no Qt dependency)."""

from castcatalog.models.media_node import MediaNode, append_child

__all__ = [
    "MediaNode",
    "append_child",
]
