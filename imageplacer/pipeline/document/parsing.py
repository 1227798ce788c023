"""Document parsing — convert raw snapshot dicts/JSON into a Document."""

from __future__ import annotations

from .models import Document, DocumentError, Node, NodeKind, Paint


def parse_document(data: dict) -> Document:
    """Parse a page snapshot dict into a Document.

    Format::

        {
          "children": [{"id": 1, "type": "FRAME", "name": "Hero", ...}],
          "selection": [1],
          "viewport_center": {"x": 0, "y": 0}
        }
    """
    children = [_parse_node(n) for n in data.get("children", [])]

    try:
        center = data.get("viewport_center") or {}
        viewport_center = (float(center.get("x", 0.0)),
                           float(center.get("y", 0.0)))
        selection = [int(i) for i in data.get("selection", [])]
    except (AttributeError, TypeError, ValueError) as exc:
        raise DocumentError(f"Malformed page state: {exc}") from exc

    return Document(
        children=children,
        selection=selection,
        viewport_center=viewport_center,
    )


def _parse_node(data: dict) -> Node:
    try:
        node_id = int(data["id"])
        kind = NodeKind.parse(str(data.get("type", "OTHER")))
        raw_fills = data.get("fills", [])
        return Node(
            id=node_id,
            kind=kind,
            name=str(data.get("name", "")),
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
            width=float(data["width"]),
            height=float(data["height"]),
            supports_content_fill=bool(data.get("supports_content_fill", True)),
            fills=_parse_fills(raw_fills),
            children=[_parse_node(c) for c in data.get("children", [])],
        )
    except KeyError as exc:
        raise DocumentError(f"Node {data.get('id', '?')} is missing field {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise DocumentError(f"Node {data.get('id', '?')} is malformed: {exc}") from exc


def _parse_fills(raw: list | str | None) -> list[Paint] | None:
    """``"mixed"`` (or null) is the indeterminate fill state."""
    if raw is None or raw == "mixed":
        return None
    return [
        Paint(
            type=str(p["type"]).upper(),
            content_handle=p.get("content_handle"),
            scale_mode=p.get("scale_mode"),
        )
        for p in raw
    ]
