"""Main placement engine — scan, match, pack, apply."""

from __future__ import annotations

import logging

from imageplacer.pipeline.config import LAYOUT_RULES, LayoutRules
from imageplacer.pipeline.document.models import CONTAINER_KINDS, Document, Node
from imageplacer.pipeline.images.models import ImageItem

from .executor import apply_placement, build_placement_result
from .matching import match_images
from .models import NoContainerError, PlacementReport
from .packing import pack_images
from .scanner import child_areas, scan_placeholders


log = logging.getLogger(__name__)


def resolve_target_container(
    document: Document,
    container_id: int | None = None,
) -> Node:
    """Return the frame to place into.

    An explicit *container_id* wins; otherwise the first selected node
    that can act as a container is used.

    Raises
    ------
    NoContainerError
        If the id is unknown, is not a container, or nothing eligible is
        selected.
    """
    if container_id is not None:
        node = document.get_node(container_id)
        if node is None:
            raise NoContainerError(f"Node {container_id} does not exist",
                                   container_id)
        if node.kind not in CONTAINER_KINDS:
            raise NoContainerError(
                f"Node {container_id} is a {node.kind.value}, not a frame",
                container_id,
            )
        return node

    for sid in document.selection:
        node = document.get_node(sid)
        if node is not None and node.kind in CONTAINER_KINDS:
            return node
    raise NoContainerError("Select a frame to place images into")


# ── Main placement function ───────────────────────────────────────


def place_images(
    document: Document,
    images: list[ImageItem],
    container_id: int | None = None,
    *,
    rules: LayoutRules = LAYOUT_RULES,
) -> PlacementReport:
    """Place a batch of images into a frame.

    Images are first matched onto placeholder nodes inside the frame;
    whatever is left is grid-packed around existing content.  If the
    frame has no placeholders at all, every image is grid-packed.

    Parameters
    ----------
    document : Document
        Host document; mutated in place.
    images : list[ImageItem]
        Fetched images, in caller order.
    container_id : int | None
        Target frame; defaults to the first selected frame.
    rules : LayoutRules
        Matching and packing rules.

    Returns
    -------
    PlacementReport
        Pairs, packed placements, and updated/created node ids.  The
        document selection is set to the affected nodes.

    Raises
    ------
    NoContainerError
        If no target frame can be resolved.  The document is untouched.
    """
    container = resolve_target_container(document, container_id)
    report = PlacementReport(container_id=container.id)

    if not images:
        log.info("Nothing to place in %d", container.id)
        return report

    # ── 1. Scan + match ────────────────────────────────────────────

    placeholders = scan_placeholders(container, rules=rules)
    obstacles = child_areas(container)

    if placeholders:
        pairs, unmatched = match_images(images, placeholders, rules=rules)
        obstacles.extend(p.placeholder.area_rect for p in pairs)
    else:
        log.info("No placeholders in %d; packing the whole frame",
                 container.id)
        pairs, unmatched = [], list(images)
        report.used_fallback = True

    # ── 2. Pack the rest ───────────────────────────────────────────

    placements = pack_images(
        unmatched, container.width, container.height, obstacles, rules=rules,
    )

    # ── 3. Apply ───────────────────────────────────────────────────

    result = build_placement_result(container.id, pairs, placements)
    updated, created, dropped = apply_placement(
        document, result, scale_mode=rules.scale_mode,
    )

    report.pairs = pairs
    report.placements = placements
    report.updated_ids = updated
    report.created_ids = created
    report.dropped = dropped
    document.select(report.affected_ids)

    log.info("%s", report.summary())
    return report
