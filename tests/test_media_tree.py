"""Tests for tree traversal helpers."""

from __future__ import annotations

import pytest

from castcatalog.models.media_node import MediaNode
from castcatalog.models.media_tree import (
    breadcrumb,
    find,
    find_by_title,
    iter_groups,
    iter_leaves,
    stream_mime_type,
    total_duration,
    walk,
)


@pytest.fixture
def catalog():
    root = MediaNode("Media")
    movies = MediaNode("Movies")
    shorts = MediaNode("Shorts")
    root.append_child(movies)
    root.append_child(shorts)
    movies.append_child(MediaNode("Sintel", url="sintel.m3u8", duration=888))
    movies.append_child(MediaNode("Tears of Steel", url="tos.m3u8", duration=734))
    shorts.append_child(MediaNode("Caminandes", url="cam.mp4", duration=146))
    return root


class TestWalk:
    def test_preorder(self, catalog):
        titles = [n.title for n in walk(catalog)]
        assert titles == [
            "Media", "Movies", "Sintel", "Tears of Steel", "Shorts", "Caminandes",
        ]

    def test_single_node(self):
        node = MediaNode("alone")
        assert list(walk(node)) == [node]


class TestFilters:
    def test_leaves(self, catalog):
        assert [n.title for n in iter_leaves(catalog)] == [
            "Sintel", "Tears of Steel", "Caminandes",
        ]

    def test_groups(self, catalog):
        assert [n.title for n in iter_groups(catalog)] == ["Media", "Movies", "Shorts"]

    def test_empty_group_is_not_a_leaf(self):
        root = MediaNode("root")
        root.append_child(MediaNode("empty"))
        assert list(iter_leaves(root)) == []


class TestFind:
    def test_find_predicate(self, catalog):
        node = find(catalog, lambda n: n.duration > 800)
        assert node.title == "Sintel"

    def test_find_missing(self, catalog):
        assert find(catalog, lambda n: n.duration > 10_000) is None

    def test_find_by_title_case_insensitive(self, catalog):
        assert find_by_title(catalog, "  tears of STEEL ").title == "Tears of Steel"

    def test_find_by_title_missing(self, catalog):
        assert find_by_title(catalog, "Elephants Dream") is None


class TestAggregates:
    def test_total_duration(self, catalog):
        assert total_duration(catalog) == 888 + 734 + 146

    def test_total_duration_of_leaf(self):
        assert total_duration(MediaNode("x", url="u", duration=42)) == 42

    def test_breadcrumb(self, catalog):
        leaf = find_by_title(catalog, "Caminandes")
        assert breadcrumb(leaf) == ["Media", "Shorts", "Caminandes"]
        assert breadcrumb(catalog) == ["Media"]


class TestStreamMimeType:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://example.com/hls/sintel/master.m3u8", "application/x-mpegurl"),
            ("https://example.com/dash/sintel.mpd?token=1", "application/dash+xml"),
            ("https://example.com/mp4/Sintel.MP4", "video/mp4"),
            ("https://example.com/stream", None),
        ],
    )
    def test_guess(self, url, expected):
        assert stream_mime_type(MediaNode("x", url=url)) == expected

    def test_group_has_no_stream(self):
        assert stream_mime_type(MediaNode("Movies")) is None
