"""Low-level geometry helpers for the placer."""

from __future__ import annotations

from shapely.geometry import Polygon, box as shapely_box

from .models import OccupiedArea


def area_box(rect: OccupiedArea) -> Polygon:
    """Shapely box for an occupied area."""
    return shapely_box(rect.x, rect.y, rect.right, rect.bottom)


def rects_overlap(a: OccupiedArea, b: OccupiedArea) -> bool:
    """True if the interiors of two rectangles intersect.

    Rectangles that only share an edge or a corner do not overlap.
    """
    pa, pb = area_box(a), area_box(b)
    return pa.intersects(pb) and not pa.touches(pb)


def first_overlap(
    rect: OccupiedArea, occupied: list[OccupiedArea],
) -> OccupiedArea | None:
    """Return the first occupied area *rect* collides with, if any."""
    for other in occupied:
        if rects_overlap(rect, other):
            return other
    return None


def rect_inside_frame(
    rect: OccupiedArea,
    frame_width: float, frame_height: float,
    inset: float = 0.0,
) -> bool:
    """Check if a rectangle lies inside a frame shrunk by *inset*."""
    frame = shapely_box(inset, inset, frame_width - inset, frame_height - inset)
    return frame.covers(area_box(rect))


def fit_in_cell(
    width: float, height: float,
    cell_width: float, cell_height: float,
) -> tuple[float, float]:
    """Scale (width, height) down to fit a cell, keeping the aspect ratio.

    Whichever dimension binds first sets the scale.  Images already
    smaller than the cell keep their size.
    """
    scale = min(cell_width / width, cell_height / height, 1.0)
    return (width * scale, height * scale)


def clamp_to_max_size(
    width: float, height: float, max_size: float,
) -> tuple[float, float]:
    """Shrink so the longer side is at most *max_size*, keeping aspect."""
    if width <= max_size and height <= max_size:
        return (width, height)
    ratio = width / height
    if width > height:
        return (max_size, max_size / ratio)
    return (max_size * ratio, max_size)
