"""HTTP surface tests via FastAPI's TestClient."""

from __future__ import annotations

import unittest

from fastapi.testclient import TestClient

from imageplacer.pipeline.document import document_to_dict
from imageplacer.web.server import app
from tests.frame_fixture import make_landing_dict, make_landing_document


class TestServer(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_health(self):
        self.assertEqual(self.client.get("/api/health").json(), {"status": "ok"})

    def test_place(self):
        resp = self.client.post("/api/place", json={
            "document": document_to_dict(make_landing_document()),
            "images": [
                {"content_handle": "hero.png", "width": 400, "height": 300},
                {"content_handle": "banner.png", "width": 1000, "height": 200},
            ],
        })
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["report"]["updated_ids"], [2])
        self.assertEqual(len(body["report"]["created_ids"]), 1)
        self.assertEqual(body["document"]["selection"], body["report"]["affected_ids"])

    def test_place_from_records(self):
        resp = self.client.post("/api/place", json={
            "document": document_to_dict(make_landing_document()),
            "records": [{"src": "https://a.example/x.png", "w": 400, "h": 300}],
        })
        self.assertEqual(resp.status_code, 200)
        pairs = resp.json()["report"]["pairs"]
        self.assertEqual(pairs[0]["content_handle"], "https://a.example/x.png")

    def test_place_without_container(self):
        doc = make_landing_dict()
        doc["selection"] = []
        resp = self.client.post("/api/place", json={
            "document": doc,
            "images": [{"content_handle": "a", "width": 10, "height": 10}],
        })
        self.assertEqual(resp.status_code, 400)

    def test_invalid_document(self):
        doc = make_landing_dict()
        doc["selection"] = [99]
        resp = self.client.post("/api/place", json={"document": doc, "images": []})
        self.assertEqual(resp.status_code, 422)

    def test_null_children_rejected(self):
        doc = make_landing_dict()
        doc["children"][0]["children"] = None
        resp = self.client.post("/api/place", json={
            "document": doc,
            "images": [{"content_handle": "a", "width": 10, "height": 10}],
        })
        self.assertEqual(resp.status_code, 422)

    def test_bad_viewport_rejected(self):
        doc = make_landing_dict()
        doc["viewport_center"] = {"x": "left"}
        resp = self.client.post("/api/place", json={
            "document": doc,
            "images": [{"content_handle": "a", "width": 10, "height": 10}],
        })
        self.assertEqual(resp.status_code, 422)

    def test_non_positive_image_size(self):
        resp = self.client.post("/api/place", json={
            "document": make_landing_dict(),
            "images": [{"content_handle": "a", "width": 0, "height": 10}],
        })
        self.assertEqual(resp.status_code, 422)

    def test_apply_selection(self):
        doc = make_landing_dict()
        doc["selection"] = [2]
        resp = self.client.post("/api/apply_selection",
                                json={"document": doc, "content_handle": "pick"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["updated_ids"], [2])

    def test_apply_selection_nothing_fillable(self):
        doc = make_landing_dict()
        doc["selection"] = [3]
        resp = self.client.post("/api/apply_selection",
                                json={"document": doc, "content_handle": "pick"})
        self.assertEqual(resp.status_code, 400)

    def test_insert(self):
        resp = self.client.post("/api/insert", json={
            "document": make_landing_dict(),
            "image": {"content_handle": "big", "width": 3000, "height": 1500},
        })
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        new = body["document"]["children"][-1]
        self.assertEqual(new["id"], body["node_id"])
        self.assertEqual((new["width"], new["height"]), (1000, 500))

    def test_merge(self):
        resp = self.client.post("/api/images/merge", json={
            "existing": [{"src": "a"}],
            "incoming": [{"src": "a"}, {"src": "b", "w": 10, "h": 20}],
        })
        body = resp.json()
        self.assertEqual(body["added"], 1)
        self.assertEqual([r["src"] for r in body["images"]], ["a", "b"])

    def test_sizes(self):
        resp = self.client.post("/api/images/sizes", json={
            "images": [
                {"src": "a", "width": 10, "height": 20, "service": "X"},
                {"src": "b", "width": 30, "height": 20},
            ],
            "sizes": [[30, 20]],
        })
        body = resp.json()
        self.assertEqual(body["sizes"], [[10, 20], [30, 20]])
        self.assertEqual([r["src"] for r in body["images"]], ["b"])
        self.assertEqual(body["services"], {"Unknown": 1})


if __name__ == "__main__":
    unittest.main()
