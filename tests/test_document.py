"""Tests for the host document model, parsing, and validation."""

from __future__ import annotations

import json
import unittest

from imageplacer.pipeline.document import (
    Document, DocumentError, FillWriteError, Node, NodeKind,
    document_to_dict, parse_document, validate_document,
)
from tests.frame_fixture import make_landing_dict, make_landing_document


class TestParsing(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.doc = parse_document(make_landing_dict())

    def test_tree(self):
        frame = self.doc.require_node(1)
        self.assertEqual(frame.kind, NodeKind.FRAME)
        self.assertEqual([c.id for c in frame.children], [2, 3])
        self.assertEqual(self.doc.parent_of(2), 1)

    def test_unknown_type_is_other(self):
        self.assertEqual(self.doc.require_node(3).kind, NodeKind.OTHER)

    def test_mixed_fills(self):
        self.assertIsNone(self.doc.require_node(3).fills)
        self.assertEqual(self.doc.require_node(2).fills, [])

    def test_state(self):
        self.assertEqual(self.doc.selection, [1])
        self.assertEqual(self.doc.viewport_center, (400.0, 300.0))

    def test_missing_width(self):
        with self.assertRaises(DocumentError):
            parse_document({"children": [{"id": 1, "type": "FRAME", "height": 10}]})

    def test_malformed_page_state(self):
        with self.assertRaises(DocumentError):
            parse_document({"children": [], "viewport_center": {"x": "left"}})
        with self.assertRaises(DocumentError):
            parse_document({"children": [], "viewport_center": [1, 2]})
        with self.assertRaises(DocumentError):
            parse_document({"children": [{"id": 1, "type": "FRAME",
                                          "width": 10, "height": 10,
                                          "children": None}]})

    def test_round_trip(self):
        d = document_to_dict(self.doc)
        json.dumps(d)
        self.assertEqual(d["children"][0]["children"][1]["fills"], "mixed")
        self.assertEqual(parse_document(d), self.doc)


class TestValidation(unittest.TestCase):

    def test_valid(self):
        self.assertEqual(validate_document(make_landing_dict()), [])

    def test_duplicate_ids(self):
        data = make_landing_dict()
        data["children"][0]["children"][1]["id"] = 2
        errors = validate_document(data)
        self.assertTrue(any("duplicate id 2" in e for e in errors), errors)

    def test_negative_size(self):
        data = make_landing_dict()
        data["children"][0]["width"] = -5
        self.assertTrue(any("'width' must be >= 0" in e for e in validate_document(data)))

    def test_unknown_selection(self):
        data = make_landing_dict()
        data["selection"] = [77]
        self.assertEqual(validate_document(data), ["selection: unknown node id 77"])

    def test_bad_fills(self):
        data = make_landing_dict()
        data["children"][0]["fills"] = [{"content_handle": "x"}]
        self.assertTrue(any("paint needs a 'type'" in e for e in validate_document(data)))

    def test_children_not_a_list(self):
        data = make_landing_dict()
        data["children"][0]["children"] = None
        self.assertEqual(validate_document(data),
                         ["children[0]: 'children' must be a list"])

    def test_bad_viewport_center(self):
        data = make_landing_dict()
        data["viewport_center"] = {"x": "left", "y": 0}
        self.assertEqual(validate_document(data),
                         ["viewport_center: 'x' must be a number"])
        data["viewport_center"] = [400, 300]
        self.assertEqual(len(validate_document(data)), 1)

    def test_selection_not_a_list(self):
        data = make_landing_dict()
        data["selection"] = 1
        self.assertEqual(validate_document(data),
                         ["selection: expected a list of node ids"])


class TestDocumentOperations(unittest.TestCase):

    def setUp(self):
        self.doc = make_landing_document()

    def test_duplicate_id_rejected(self):
        with self.assertRaises(DocumentError):
            Document(children=[
                Node(id=1, kind=NodeKind.FRAME, name="a", x=0, y=0, width=1, height=1),
                Node(id=1, kind=NodeKind.FRAME, name="b", x=0, y=0, width=1, height=1),
            ])

    def test_set_image_fill_errors(self):
        with self.assertRaises(FillWriteError):
            self.doc.set_image_fill(404, "x", "FIT")
        with self.assertRaises(FillWriteError):
            self.doc.set_image_fill(6, "x", "FIT")   # text node
        self.doc.require_node(2).fills = None
        with self.assertRaises(FillWriteError) as ctx:
            self.doc.set_image_fill(2, "x", "FIT")
        self.assertEqual(ctx.exception.node_id, 2)
        self.assertIn("mixed", str(ctx.exception))

    def test_create_rectangle(self):
        new_id = self.doc.create_rectangle(3, 10, 20, 30, 40)
        self.assertEqual(new_id, 21)
        self.assertIn(new_id, self.doc)
        self.assertEqual(self.doc.parent_of(new_id), 3)
        self.assertEqual(self.doc.require_node(3).children[-1].id, new_id)

    def test_create_under_unknown_parent(self):
        with self.assertRaises(DocumentError):
            self.doc.create_rectangle(404, 0, 0, 10, 10)

    def test_select_drops_unknown_ids(self):
        self.doc.select([2, 404, 5])
        self.assertEqual(self.doc.selection, [2, 5])


if __name__ == "__main__":
    unittest.main()
