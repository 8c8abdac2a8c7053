"""Catalog service - owns a catalog root and builds the media tree."""

from __future__ import annotations

import logging

from castcatalog.models.media_node import MediaNode
from castcatalog.models.media_tree import find_by_title, iter_leaves, total_duration, walk
from castcatalog.utils.config import DEFAULT_ROOT_TITLE

logger = logging.getLogger(__name__)


class CatalogService:
    """Holds the single strong reference to a catalog tree.

    Nodes only weakly reference their parents, so the tree lives exactly as
    long as this service (or another holder) keeps the root.
    """

    def __init__(self, root_title: str = DEFAULT_ROOT_TITLE):
        self._root = MediaNode(root_title)

    @property
    def root(self) -> MediaNode:
        return self._root

    # ------------------------------------------------------------------ Building

    def add_group(
        self,
        title: str,
        image_url: str | None = None,
        parent: MediaNode | None = None,
    ) -> MediaNode:
        """Create a group node under *parent* (the root by default)."""
        parent = self._resolve_parent(parent)
        group = MediaNode(title, image_url=image_url, parent=parent)
        parent.append_child(group)
        logger.debug(f"Added group '{title}' under '{parent.title}'")
        return group

    def add_media(
        self,
        parent: MediaNode | None,
        title: str,
        subtitle: str = "",
        studio: str = "",
        url: str | None = None,
        image_url: str | None = None,
        poster_url: str | None = None,
        duration: int = 0,
    ) -> MediaNode:
        """Create a playable node under *parent* (the root when None)."""
        parent = self._resolve_parent(parent)
        item = MediaNode(
            title=title,
            subtitle=subtitle,
            studio=studio,
            url=url,
            image_url=image_url,
            poster_url=poster_url,
            duration=duration,
            parent=parent,
        )
        parent.append_child(item)
        logger.debug(f"Added media '{title}' ({duration}s) under '{parent.title}'")
        return item

    def attach(self, parent: MediaNode, node: MediaNode) -> None:
        """Attach an already constructed node (and its subtree) under *parent*."""
        parent = self._resolve_parent(parent)
        parent.append_child(node)
        logger.debug(f"Attached '{node.title}' under '{parent.title}'")

    def clear(self) -> int:
        """Drop the whole tree and start over. Returns count of nodes removed."""
        count = len(self)
        self._root = MediaNode(self._root.title)
        logger.info(f"Catalog '{self._root.title}' cleared ({count} nodes dropped)")
        return count

    # ------------------------------------------------------------------ Queries

    def list_groups(self) -> list[MediaNode]:
        """Top-level groups, in display order."""
        return [node for node in self._root.items if node.is_group]

    def list_media(self, group: MediaNode | None = None) -> list[MediaNode]:
        """Playable nodes under *group* (the whole catalog by default)."""
        return list(iter_leaves(self._root if group is None else group))

    def find(self, title: str) -> MediaNode | None:
        return find_by_title(self._root, title)

    def total_duration(self) -> int:
        return total_duration(self._root)

    def __len__(self) -> int:
        return sum(1 for _ in walk(self._root)) - 1

    # ------------------------------------------------------------------ Internal

    def _resolve_parent(self, parent: MediaNode | None) -> MediaNode:
        if parent is None:
            return self._root
        if parent.root is not self._root:
            raise ValueError(
                f"'{parent.title}' is not part of catalog '{self._root.title}'"
            )
        return parent
