"""Placement serialization — JSON conversion."""

from __future__ import annotations

from .models import (
    MatchedPair, OccupiedArea, PackedPlacement, Placeholder, PlacementReport,
    PlacementResult,
)


def placeholder_to_dict(ph: Placeholder) -> dict:
    return {
        "node_id": ph.node_id,
        "x": ph.x,
        "y": ph.y,
        "width": ph.width,
        "height": ph.height,
    }


def area_to_dict(a: OccupiedArea) -> dict:
    return {"x": a.x, "y": a.y, "width": a.width, "height": a.height}


def pair_to_dict(p: MatchedPair) -> dict:
    return {
        "content_handle": p.image.content_handle,
        "placeholder": placeholder_to_dict(p.placeholder),
        "score": round(p.score, 4),
    }


def packed_to_dict(p: PackedPlacement) -> dict:
    return {
        "content_handle": p.image.content_handle,
        **area_to_dict(p.area_rect),
    }


def placement_to_dict(result: PlacementResult) -> dict:
    """Serialize a PlacementResult to a JSON-safe dict."""
    return {
        "container_id": result.container_id,
        "writes": [
            {"node_id": w.node_id, "content_handle": w.content_handle}
            for w in result.writes
        ],
        "new_nodes": [packed_to_dict(p) for p in result.new_nodes],
    }


def report_to_dict(report: PlacementReport) -> dict:
    """Serialize a PlacementReport to a JSON-safe dict."""
    return {
        "container_id": report.container_id,
        "pairs": [pair_to_dict(p) for p in report.pairs],
        "placements": [packed_to_dict(p) for p in report.placements],
        "updated_ids": list(report.updated_ids),
        "created_ids": list(report.created_ids),
        "affected_ids": report.affected_ids,
        "dropped": report.dropped,
        "used_fallback": report.used_fallback,
        "message": report.summary(),
    }
