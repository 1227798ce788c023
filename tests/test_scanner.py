"""Tests for placeholder scanning.

Validates:
  - Keyword-named and image-bearing nodes are both found
  - Nested placeholders get container-relative positions
  - Wrong kinds, small nodes, and fill-less nodes are skipped
  - Reading order: top-to-bottom, left-to-right within a row
"""

from __future__ import annotations

import unittest

from imageplacer.pipeline.document.models import Node, NodeKind, Paint
from imageplacer.pipeline.placer import scan_placeholders, child_areas
from imageplacer.pipeline.placer.scanner import is_placeholder, name_matches
from tests.frame_fixture import make_landing_document


def _rect(node_id, name, x, y, w=100, h=100, **kw):
    return Node(id=node_id, kind=NodeKind.RECTANGLE, name=name,
                x=x, y=y, width=w, height=h, **kw)


def _frame(children, w=800, h=600):
    return Node(id=1000, kind=NodeKind.FRAME, name="Frame",
                x=0, y=0, width=w, height=h, children=children)


class TestScanLandingFrame(unittest.TestCase):
    """Scan the landing fixture."""

    @classmethod
    def setUpClass(cls):
        cls.doc = make_landing_document()
        cls.container = cls.doc.require_node(1)
        cls.placeholders = scan_placeholders(cls.container)

    def test_finds_expected_nodes(self):
        """Hero (keyword), nested photo (keyword), thumb (has image)."""
        self.assertEqual([p.node_id for p in self.placeholders], [2, 4, 5])

    def test_nested_position_is_container_relative(self):
        photo = next(p for p in self.placeholders if p.node_id == 4)
        self.assertEqual((photo.x, photo.y), (520, 70))
        self.assertEqual((photo.width, photo.height), (200, 200))

    def test_skips_non_placeholders(self):
        ids = {p.node_id for p in self.placeholders}
        self.assertNotIn(1, ids)    # the container itself
        self.assertNotIn(3, ids)    # frame without keyword or image
        self.assertNotIn(6, ids)    # text node
        self.assertNotIn(7, ids)    # 40×40, too small
        self.assertNotIn(8, ids)    # solid fill, no keyword

    def test_scan_does_not_mutate(self):
        before = [c.name for c in self.container.children]
        scan_placeholders(self.container)
        self.assertEqual([c.name for c in self.container.children], before)

    def test_child_areas_are_direct_children_only(self):
        areas = child_areas(self.container)
        self.assertEqual(len(areas), 6)
        self.assertEqual((areas[0].x, areas[0].y), (20, 20))


class TestPlaceholderRules(unittest.TestCase):
    """Unit tests for the candidate and keyword rules."""

    def test_keywords_case_insensitive(self):
        self.assertTrue(name_matches("Product PHOTO"))
        self.assertTrue(name_matches("Picture 3"))
        self.assertTrue(name_matches("hero-img"))
        self.assertTrue(name_matches("メイン画像"))
        self.assertFalse(name_matches("Background"))

    def test_size_threshold_is_strict(self):
        self.assertFalse(is_placeholder(_rect(1, "img", 0, 0, 50, 200)))
        self.assertFalse(is_placeholder(_rect(1, "img", 0, 0, 200, 50)))
        self.assertTrue(is_placeholder(_rect(1, "img", 0, 0, 51, 51)))

    def test_image_content_makes_placeholder(self):
        node = _rect(1, "Rectangle 12", 0, 0,
                     fills=[Paint(type="IMAGE", content_handle="abc")])
        self.assertTrue(is_placeholder(node))

    def test_fill_capability_required(self):
        node = _rect(1, "img", 0, 0, supports_content_fill=False)
        self.assertFalse(is_placeholder(node))

    def test_mixed_fills_still_match_by_name(self):
        node = _rect(1, "photo slot", 0, 0, fills=None)
        self.assertTrue(is_placeholder(node))
        self.assertFalse(node.has_image_content)

    def test_instances_and_components_qualify(self):
        for kind in (NodeKind.COMPONENT, NodeKind.INSTANCE, NodeKind.FRAME):
            node = Node(id=1, kind=kind, name="Image", x=0, y=0,
                        width=100, height=100)
            self.assertTrue(is_placeholder(node), kind)

    def test_other_kind_never_qualifies(self):
        node = Node(id=1, kind=NodeKind.OTHER, name="image", x=0, y=0,
                    width=100, height=100)
        self.assertFalse(is_placeholder(node))


class TestReadingOrder(unittest.TestCase):

    def test_same_row_sorted_by_x(self):
        """Tops within 10 units share a row; the row reads left to right."""
        frame = _frame([
            _rect(1, "img a", 300, 0),
            _rect(2, "img b", 100, 8),
            _rect(3, "img c", 0, 30),
        ])
        self.assertEqual([p.node_id for p in scan_placeholders(frame)], [2, 1, 3])

    def test_rows_sorted_by_y(self):
        frame = _frame([
            _rect(1, "img", 0, 400),
            _rect(2, "img", 0, 200),
            _rect(3, "img", 0, 0),
        ])
        self.assertEqual([p.node_id for p in scan_placeholders(frame)], [3, 2, 1])

    def test_grandchildren_offsets_accumulate(self):
        inner = Node(id=2, kind=NodeKind.OTHER, name="Group",
                     x=10, y=20, width=300, height=300,
                     children=[_rect(3, "img", 5, 5)])
        outer = Node(id=1, kind=NodeKind.FRAME, name="Section",
                     x=100, y=200, width=400, height=400, children=[inner])
        (ph,) = scan_placeholders(_frame([outer]))
        self.assertEqual((ph.x, ph.y), (115, 225))

    def test_empty_container(self):
        self.assertEqual(scan_placeholders(_frame([])), [])


if __name__ == "__main__":
    unittest.main()
