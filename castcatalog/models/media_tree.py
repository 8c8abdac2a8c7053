"""Read-only traversal helpers over a MediaNode tree."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from urllib.parse import urlsplit

from castcatalog.models.media_node import MediaNode
from castcatalog.utils.config import STREAM_MIME_TYPES


def walk(node: MediaNode) -> Iterator[MediaNode]:
    """Yield *node* and everything below it, depth-first in display order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.items))


def iter_leaves(node: MediaNode) -> Iterator[MediaNode]:
    return (n for n in walk(node) if n.is_leaf)


def iter_groups(node: MediaNode) -> Iterator[MediaNode]:
    return (n for n in walk(node) if n.is_group)


def find(node: MediaNode, predicate: Callable[[MediaNode], bool]) -> MediaNode | None:
    """Return the first node (pre-order) matching *predicate*, or None."""
    for candidate in walk(node):
        if predicate(candidate):
            return candidate
    return None


def find_by_title(node: MediaNode, title: str) -> MediaNode | None:
    """Case-insensitive exact title lookup."""
    wanted = title.strip().casefold()
    return find(node, lambda n: n.title.strip().casefold() == wanted)


def total_duration(node: MediaNode) -> int:
    """Sum of leaf durations under *node*, in seconds."""
    return sum(leaf.duration for leaf in iter_leaves(node))


def breadcrumb(node: MediaNode) -> list[str]:
    """Titles from the root down to *node*."""
    titles = [a.title for a in node.ancestors()]
    titles.reverse()
    titles.append(node.title)
    return titles


def stream_mime_type(node: MediaNode) -> str | None:
    """Content type for *node*'s stream, guessed from the URL suffix."""
    if not node.url:
        return None
    path = urlsplit(node.url).path.lower()
    for suffix, mime in STREAM_MIME_TYPES.items():
        if path.endswith(suffix):
            return mime
    return None
