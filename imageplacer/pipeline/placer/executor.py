"""Apply placements to the host document."""

from __future__ import annotations

import logging

from imageplacer.pipeline.config import LAYOUT_RULES, LayoutRules
from imageplacer.pipeline.document.models import Document, FillWriteError
from imageplacer.pipeline.images.models import ImageItem

from .geometry import clamp_to_max_size
from .models import (
    FillWrite, MatchedPair, NoSelectionError, PackedPlacement, PlacementResult,
)


log = logging.getLogger(__name__)


def build_placement_result(
    container_id: int,
    pairs: list[MatchedPair],
    placements: list[PackedPlacement],
) -> PlacementResult:
    """Turn matcher and packer output into write instructions."""
    return PlacementResult(
        container_id=container_id,
        writes=[
            FillWrite(node_id=p.placeholder.node_id,
                      content_handle=p.image.content_handle)
            for p in pairs
        ],
        new_nodes=list(placements),
    )


def apply_placement(
    document: Document,
    result: PlacementResult,
    *,
    scale_mode: str = LAYOUT_RULES.scale_mode,
) -> tuple[list[int], list[int], int]:
    """Commit a PlacementResult.

    Existing nodes that can no longer take an image (deleted, mixed
    fills) are skipped and counted; every other write still happens.

    Returns (updated_ids, created_ids, dropped_count).
    """
    updated: list[int] = []
    created: list[int] = []
    dropped = 0

    for w in result.writes:
        try:
            document.set_image_fill(w.node_id, w.content_handle, scale_mode)
        except FillWriteError as exc:
            dropped += 1
            log.warning("Dropped write: %s", exc)
            continue
        updated.append(w.node_id)

    for p in result.new_nodes:
        node_id = document.create_rectangle(
            result.container_id, p.x, p.y, p.width, p.height,
        )
        document.set_image_fill(node_id, p.image.content_handle, scale_mode)
        created.append(node_id)

    log.info("Applied placement in %d: %d updated, %d created, %d dropped",
             result.container_id, len(updated), len(created), dropped)
    return updated, created, dropped


def apply_to_selection(
    document: Document,
    content_handle: str,
    *,
    scale_mode: str = LAYOUT_RULES.selection_scale_mode,
) -> list[int]:
    """Write one image into every selected node that accepts it.

    Returns the ids that were updated (possibly empty).

    Raises
    ------
    NoSelectionError
        If nothing is selected.
    """
    if not document.selection:
        raise NoSelectionError("Select at least one node first")

    updated: list[int] = []
    for node_id in document.selection:
        try:
            document.set_image_fill(node_id, content_handle, scale_mode)
        except FillWriteError as exc:
            log.info("Skipping selected node: %s", exc)
            continue
        updated.append(node_id)
    return updated


def insert_image(
    document: Document,
    image: ImageItem,
    parent_id: int | None = None,
    *,
    rules: LayoutRules = LAYOUT_RULES,
) -> int:
    """Create a node for one image centred on the viewport and select it.

    The node keeps the image's aspect ratio with its longer side clamped
    to ``rules.max_node_size``.
    """
    width, height = clamp_to_max_size(image.width, image.height,
                                      rules.max_node_size)
    cx, cy = document.viewport_center
    node_id = document.create_rectangle(
        parent_id, cx - width / 2, cy - height / 2, width, height,
    )
    document.set_image_fill(node_id, image.content_handle,
                            rules.selection_scale_mode)
    document.select([node_id])
    log.info("Inserted %s as node %d (%.0f×%.0f)",
             image.content_handle, node_id, width, height)
    return node_id
