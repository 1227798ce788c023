"""Document serialization — convert a Document to JSON-safe dicts."""

from __future__ import annotations

from .models import Document, Node


def document_to_dict(doc: Document) -> dict:
    """Convert a Document to a JSON-serializable dict."""
    return {
        "children": [node_to_dict(n) for n in doc.children],
        "selection": list(doc.selection),
        "viewport_center": {
            "x": doc.viewport_center[0],
            "y": doc.viewport_center[1],
        },
    }


def node_to_dict(node: Node) -> dict:
    return {
        "id": node.id,
        "type": node.kind.value,
        "name": node.name,
        "x": node.x,
        "y": node.y,
        "width": node.width,
        "height": node.height,
        **({} if node.supports_content_fill else {"supports_content_fill": False}),
        "fills": "mixed" if node.fills is None else [
            {
                "type": p.type,
                **({"content_handle": p.content_handle} if p.content_handle else {}),
                **({"scale_mode": p.scale_mode} if p.scale_mode else {}),
            }
            for p in node.fills
        ],
        "children": [node_to_dict(c) for c in node.children],
    }
