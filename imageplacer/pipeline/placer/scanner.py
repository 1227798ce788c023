"""Placeholder scanning — find nodes inside a frame that can take an image."""

from __future__ import annotations

import logging
from functools import cmp_to_key

from imageplacer.pipeline.config import LAYOUT_RULES, LayoutRules
from imageplacer.pipeline.document.models import FILLABLE_KINDS, Node

from .models import OccupiedArea, Placeholder


log = logging.getLogger(__name__)


def is_candidate(node: Node, rules: LayoutRules = LAYOUT_RULES) -> bool:
    """Fillable kind, fill capability, and both sides above the minimum."""
    return (
        node.kind in FILLABLE_KINDS
        and node.supports_content_fill
        and node.width > rules.min_placeholder_size
        and node.height > rules.min_placeholder_size
    )


def name_matches(name: str, rules: LayoutRules = LAYOUT_RULES) -> bool:
    lowered = name.lower()
    return any(k in lowered for k in rules.placeholder_keywords)


def is_placeholder(node: Node, rules: LayoutRules = LAYOUT_RULES) -> bool:
    """A candidate that is named like an image slot or already holds one."""
    if not is_candidate(node, rules):
        return False
    return name_matches(node.name, rules) or node.has_image_content


def _reading_order(a: Placeholder, b: Placeholder, tolerance: float) -> int:
    # Same row when the tops are within tolerance; then left to right.
    if abs(a.y - b.y) < tolerance:
        return (a.x > b.x) - (a.x < b.x)
    return (a.y > b.y) - (a.y < b.y)


def scan_placeholders(
    container: Node,
    *,
    rules: LayoutRules = LAYOUT_RULES,
) -> list[Placeholder]:
    """Return every placeholder below *container* in reading order.

    Descendants are visited depth-first.  Positions are translated into
    the container's coordinate space by summing parent offsets.  Empty
    (keyword-named) and replaceable (image-bearing) placeholders are
    returned together.

    Parameters
    ----------
    container : Node
        The frame to scan.  The container itself is never a placeholder.
    rules : LayoutRules
        Size threshold, keywords, and row tolerance.

    Returns
    -------
    list[Placeholder]
        Sorted top-to-bottom, then left-to-right within a row.
    """
    found: list[Placeholder] = []

    def _visit(node: Node, ox: float, oy: float) -> None:
        for child in node.children:
            cx, cy = ox + child.x, oy + child.y
            if is_placeholder(child, rules):
                found.append(Placeholder(
                    node_id=child.id,
                    x=cx, y=cy,
                    width=child.width, height=child.height,
                ))
            _visit(child, cx, cy)

    _visit(container, 0.0, 0.0)

    found.sort(key=cmp_to_key(
        lambda a, b: _reading_order(a, b, rules.row_tolerance)))

    log.debug("Scanned container %d: %d placeholder(s)",
              container.id, len(found))
    return found


def child_areas(container: Node) -> list[OccupiedArea]:
    """Bounding boxes of the container's direct children."""
    return [OccupiedArea(c.x, c.y, c.width, c.height) for c in container.children]
