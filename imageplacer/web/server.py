"""
FastAPI web server — placement endpoints for the design-tool plugin.

Every request carries a full document snapshot and gets the updated
snapshot back; the server keeps no state between requests.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from imageplacer.pipeline.document import (
    Document, DocumentError, document_to_dict, parse_document, validate_document,
)
from imageplacer.pipeline.images import (
    ImageItem, available_sizes, filter_by_sizes, group_by_service,
    merge_images, parse_image_records, record_to_dict, service_favicons,
    to_image_items, validate_image_records,
)
from imageplacer.pipeline.placer import (
    NoContainerError, NoSelectionError, apply_to_selection, insert_image,
    place_images, report_to_dict,
)

log = logging.getLogger(__name__)

# ── .env loader ────────────────────────────────────────────────────

def _load_env():
    root = Path(__file__).resolve().parents[2]
    for name in (".env", ".env.local"):
        p = root / name
        if p.exists():
            for line in p.read_text(encoding="utf-8").splitlines():
                line = line.strip()
                if line and "=" in line and not line.startswith("#"):
                    k, v = line.split("=", 1)
                    k = k.strip()
                    v = v.strip().strip('"').strip("'")
                    if k and k not in os.environ:
                        os.environ[k] = v

_load_env()

# ── App ────────────────────────────────────────────────────────────

app = FastAPI(title="ImagePlacer")

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("IMAGEPLACER_CORS_ORIGINS", "*").split(","),
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Models ─────────────────────────────────────────────────────────

class ImageItemModel(BaseModel):
    content_handle: str
    width: float = Field(gt=0)
    height: float = Field(gt=0)

    def to_item(self) -> ImageItem:
        return ImageItem(self.content_handle, self.width, self.height)


class PlaceRequest(BaseModel):
    document: dict
    images: list[ImageItemModel] = []
    records: list[dict] | None = None     # raw scraped records instead of items
    container_id: int | None = None


class ApplySelectionRequest(BaseModel):
    document: dict
    content_handle: str


class InsertRequest(BaseModel):
    document: dict
    image: ImageItemModel
    parent_id: int | None = None


class MergeRequest(BaseModel):
    existing: list[dict] = []
    incoming: list[dict]


class SizesRequest(BaseModel):
    images: list[dict]
    sizes: list[tuple[float, float]] | None = None


# ── Helpers ────────────────────────────────────────────────────────

def _load_document(data: dict) -> Document:
    errors = validate_document(data)
    if errors:
        raise HTTPException(422, {"errors": errors})
    try:
        return parse_document(data)
    except DocumentError as exc:
        raise HTTPException(422, {"errors": [str(exc)]}) from exc


def _load_records(data: list[dict]):
    errors = validate_image_records(data)
    if errors:
        raise HTTPException(422, {"errors": errors})
    return parse_image_records(data)


# ── Routes ─────────────────────────────────────────────────────────

@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.post("/api/place")
def place(req: PlaceRequest):
    """Match images onto placeholders in a frame and grid-pack the rest."""
    doc = _load_document(req.document)
    if req.records is not None:
        images = to_image_items(_load_records(req.records))
    else:
        images = [m.to_item() for m in req.images]

    try:
        report = place_images(doc, images, req.container_id)
    except NoContainerError as exc:
        raise HTTPException(400, exc.reason) from exc

    return {
        "report": report_to_dict(report),
        "document": document_to_dict(doc),
    }


@app.post("/api/apply_selection")
def apply_selection(req: ApplySelectionRequest):
    """Write one image into every selected node that can take it."""
    doc = _load_document(req.document)
    try:
        updated = apply_to_selection(doc, req.content_handle)
    except NoSelectionError as exc:
        raise HTTPException(400, str(exc)) from exc

    if not updated:
        raise HTTPException(400, "None of the selected nodes can hold an image")
    return {
        "updated_ids": updated,
        "message": f"Applied image to {len(updated)} node(s)",
        "document": document_to_dict(doc),
    }


@app.post("/api/insert")
def insert(req: InsertRequest):
    """Create one image node at the viewport centre."""
    doc = _load_document(req.document)
    try:
        node_id = insert_image(doc, req.image.to_item(), req.parent_id)
    except DocumentError as exc:
        raise HTTPException(400, str(exc)) from exc
    return {"node_id": node_id, "document": document_to_dict(doc)}


@app.post("/api/images/merge")
def merge(req: MergeRequest):
    """Merge newly received records into the stored list, dropping dupes."""
    existing = _load_records(req.existing)
    incoming = _load_records(req.incoming)
    merged = merge_images(existing, incoming)
    added = len(merged) - len(existing)
    log.info("Merged %d new image(s), %d total", added, len(merged))
    return {
        "images": [record_to_dict(r) for r in merged],
        "added": added,
        "total": len(merged),
    }


@app.post("/api/images/sizes")
def sizes(req: SizesRequest):
    """List available sizes and services, optionally filtered by size."""
    records = _load_records(req.images)
    wanted = {tuple(s) for s in req.sizes} if req.sizes else None
    filtered = filter_by_sizes(records, wanted)
    return {
        "sizes": [list(s) for s in available_sizes(records)],
        "services": {
            name: len(group)
            for name, group in group_by_service(filtered).items()
        },
        "favicons": service_favicons(filtered),
        "images": [record_to_dict(r) for r in filtered],
    }


# ── Entry point ────────────────────────────────────────────────────

def main(host: str = "127.0.0.1", port: int = 8000):
    import uvicorn
    uvicorn.run("imageplacer.web.server:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
