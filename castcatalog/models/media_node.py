"""Media catalog node model (pure Python, no Qt dependency)."""

from __future__ import annotations

import weakref
from collections.abc import Iterator

_FIELDS = (
    "title",
    "subtitle",
    "studio",
    "url",
    "image_url",
    "poster_url",
    "duration",
)


class MediaNode:
    """A media item, or a group of media items, in a catalog tree.

    Descriptive fields are fixed at construction and have no setters. The
    child list is the only mutable part and only grows, through
    :meth:`append_child`. ``parent`` is held as a weak reference: a tree is
    owned from its root down, and a child never keeps an ancestor alive.
    """

    __slots__ = (
        "_title",
        "_subtitle",
        "_studio",
        "_url",
        "_image_url",
        "_poster_url",
        "_duration",
        "_items",
        "_parent_ref",
        "__weakref__",
    )

    def __init__(
        self,
        title: str,
        subtitle: str = "",
        studio: str = "",
        url: str | None = None,
        image_url: str | None = None,
        poster_url: str | None = None,
        duration: int = 0,         # Seconds (0 for groups)
        parent: MediaNode | None = None,
    ):
        self._title = title
        self._subtitle = subtitle
        self._studio = studio
        self._url = url
        self._image_url = image_url
        self._poster_url = poster_url
        self._duration = duration
        self._items: list[MediaNode] = []
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    # ------------------------------------------------------------------ Fields

    @property
    def title(self) -> str:
        return self._title

    @property
    def subtitle(self) -> str:
        return self._subtitle

    @property
    def studio(self) -> str:
        return self._studio

    @property
    def url(self) -> str | None:
        return self._url

    @property
    def image_url(self) -> str | None:
        return self._image_url

    @property
    def poster_url(self) -> str | None:
        return self._poster_url

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def items(self) -> tuple[MediaNode, ...]:
        """Children in display order (a snapshot; use append_child to grow)."""
        return tuple(self._items)

    @property
    def parent(self) -> MediaNode | None:
        """The owning node, or None for a root (or a parent that was dropped)."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    # ------------------------------------------------------------------ Tree

    @property
    def is_group(self) -> bool:
        return bool(self._items) or self._url is None

    @property
    def is_leaf(self) -> bool:
        return not self.is_group

    @property
    def root(self) -> MediaNode:
        node = self
        for node in self.ancestors():
            pass
        return node

    @property
    def depth(self) -> int:
        """Number of parent hops up to the root (0 for the root itself)."""
        return sum(1 for _ in self.ancestors())

    def ancestors(self) -> Iterator[MediaNode]:
        """Yield the parent, grandparent, ... up to and including the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def validate_child(self, child: MediaNode) -> None:
        """Raise ValueError if *child* cannot be appended to this node."""
        if child is self or any(node is child for node in self.ancestors()):
            raise ValueError(f"Cannot attach '{child.title}' beneath itself")
        current = child.parent
        if current is not None and current is not self:
            raise ValueError(
                f"'{child.title}' already belongs to '{current.title}'"
            )

    def append_child(self, child: MediaNode) -> None:
        """Append *child* to the end of this node's items.

        A detached child gets its parent bound to this node. Children are
        never deduplicated: appending the same node twice lists it twice.
        """
        self.validate_child(child)
        if child.parent is None:
            child._parent_ref = weakref.ref(self)
        self._items.append(child)

    def with_changes(self, **changes) -> MediaNode:
        """Return a new, childless node with the given fields replaced.

        The copy keeps this node's parent reference but is not attached to it.
        """
        unknown = set(changes) - set(_FIELDS)
        if unknown:
            raise TypeError(f"Unknown MediaNode field(s): {', '.join(sorted(unknown))}")
        values = {name: changes.get(name, getattr(self, name)) for name in _FIELDS}
        return MediaNode(**values, parent=self.parent)

    # ------------------------------------------------------------------ Sequence

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MediaNode]:
        return iter(self._items)

    def __getitem__(self, index: int) -> MediaNode:
        return self._items[index]

    def __repr__(self) -> str:
        return (
            f"MediaNode(title={self._title!r}, url={self._url!r}, "
            f"items={len(self._items)})"
        )


def append_child(node: MediaNode, child: MediaNode) -> None:
    """Append *child* to *node*'s items (see :meth:`MediaNode.append_child`)."""
    node.append_child(child)
