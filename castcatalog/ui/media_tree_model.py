"""Qt item model exposing a MediaNode catalog tree to views."""

from __future__ import annotations

import logging
from enum import Enum

from PySide6.QtCore import QAbstractItemModel, QModelIndex, QObject, Qt

from castcatalog.models.media_node import MediaNode

logger = logging.getLogger(__name__)


class MediaTreeRole(int, Enum):
    """Custom roles exposed by :class:`MediaTreeModel`."""

    NODE = Qt.ItemDataRole.UserRole + 1
    URL = Qt.ItemDataRole.UserRole + 2
    IMAGE_URL = Qt.ItemDataRole.UserRole + 3
    POSTER_URL = Qt.ItemDataRole.UserRole + 4
    DURATION = Qt.ItemDataRole.UserRole + 5
    STUDIO = Qt.ItemDataRole.UserRole + 6
    SUBTITLE = Qt.ItemDataRole.UserRole + 7
    IS_GROUP = Qt.ItemDataRole.UserRole + 8


class MediaTreeModel(QAbstractItemModel):
    """Tree model over a catalog; the root node itself stays invisible.

    Nodes constructed with a parent but never appended to it are not part of
    the model. A node listed twice under the same parent (possible through
    MediaNode.append_child) is not supported: every index of it maps back to
    its first row. append_child on the model refuses such repeats.
    """

    def __init__(self, root: MediaNode, parent: QObject | None = None) -> None:
        super().__init__(parent)
        # Strong reference: nodes only point weakly at their parents
        self._root = root

    # ------------------------------------------------------------------
    # QAbstractItemModel API
    # ------------------------------------------------------------------
    def columnCount(self, _parent: QModelIndex = QModelIndex()) -> int:  # noqa: N802
        return 1

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: N802
        if parent.isValid() and parent.column() != 0:
            return 0
        return len(self._node_from_index(parent))

    def index(self, row: int, column: int, parent: QModelIndex = QModelIndex()):  # noqa: N802
        if column != 0:
            return QModelIndex()
        parent_node = self._node_from_index(parent)
        if not 0 <= row < len(parent_node):
            return QModelIndex()
        return self.createIndex(row, column, parent_node[row])

    def parent(self, index: QModelIndex) -> QModelIndex:  # noqa: N802
        if not index.isValid():
            return QModelIndex()
        parent_node = self._node_from_index(index).parent
        if parent_node is None:
            return QModelIndex()
        return self.index_for_node(parent_node)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):  # noqa: N802
        if not index.isValid():
            return None
        node = self._node_from_index(index)
        if role == Qt.ItemDataRole.DisplayRole:
            return node.title
        if role == Qt.ItemDataRole.ToolTipRole:
            return node.subtitle or node.studio or None
        if role == MediaTreeRole.NODE:
            return node
        if role == MediaTreeRole.URL:
            return node.url
        if role == MediaTreeRole.IMAGE_URL:
            return node.image_url
        if role == MediaTreeRole.POSTER_URL:
            return node.poster_url
        if role == MediaTreeRole.DURATION:
            return node.duration
        if role == MediaTreeRole.STUDIO:
            return node.studio
        if role == MediaTreeRole.SUBTITLE:
            return node.subtitle
        if role == MediaTreeRole.IS_GROUP:
            return node.is_group
        return None

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:  # noqa: N802
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        flags = Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable
        if self._node_from_index(index).is_leaf:
            flags |= Qt.ItemFlag.ItemNeverHasChildren
        return flags

    def headerData(  # noqa: N802
        self,
        section: int,
        orientation: Qt.Orientation,
        role: int = Qt.ItemDataRole.DisplayRole,
    ):
        if (
            section == 0
            and orientation == Qt.Orientation.Horizontal
            and role == Qt.ItemDataRole.DisplayRole
        ):
            return "Title"
        return None

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------
    @property
    def root(self) -> MediaNode:
        return self._root

    def set_root(self, root: MediaNode) -> None:
        """Reset the model onto a different catalog tree."""
        self.beginResetModel()
        self._root = root
        self.endResetModel()
        logger.debug(f"Model reset to root '{root.title}' ({len(root)} top-level rows)")

    def append_child(self, parent: QModelIndex, node: MediaNode) -> QModelIndex:
        """Append *node* under the item at *parent* and notify attached views."""
        parent_node = self._node_from_index(parent)
        parent_node.validate_child(node)
        if any(child is node for child in parent_node):
            raise ValueError(f"'{node.title}' is already listed under '{parent_node.title}'")
        row = len(parent_node)
        self.beginInsertRows(parent, row, row)
        parent_node.append_child(node)
        self.endInsertRows()
        return self.index(row, 0, parent)

    def node_from_index(self, index: QModelIndex) -> MediaNode | None:
        """Expose the node behind *index*, or None for the invisible root."""
        if not index.isValid():
            return None
        return self._node_from_index(index)

    def index_for_node(self, node: MediaNode) -> QModelIndex:
        """Return the model index of *node*, or an invalid index if absent."""
        if node is self._root:
            return QModelIndex()
        row = self._row_of(node)
        if row is None:
            return QModelIndex()
        # Every hop up to the root must be listed in its parent's items
        hop = node.parent
        while hop is not self._root:
            if hop is None or self._row_of(hop) is None:
                return QModelIndex()
            hop = hop.parent
        return self.createIndex(row, 0, node)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _node_from_index(self, index: QModelIndex) -> MediaNode:
        if index.isValid():
            node = index.internalPointer()
            if isinstance(node, MediaNode):
                return node
        return self._root

    @staticmethod
    def _row_of(node: MediaNode) -> int | None:
        """Row of *node* among its parent's items, or None if it is not listed.

        Linear in the number of siblings; rows are not cached because nodes
        can be appended outside the model.
        """
        parent_node = node.parent
        if parent_node is None:
            return None
        for row, child in enumerate(parent_node):
            if child is node:
                return row
        return None


__all__ = ["MediaTreeModel", "MediaTreeRole"]
