"""Grid packing for images that found no placeholder."""

from __future__ import annotations

import logging
import math

from imageplacer.pipeline.config import LAYOUT_RULES, LayoutRules
from imageplacer.pipeline.images.models import ImageItem

from .geometry import first_overlap, fit_in_cell, rect_inside_frame
from .models import OccupiedArea, PackedPlacement


log = logging.getLogger(__name__)

# Smallest usable cell side when the frame is too small for the grid.
MIN_CELL = 1.0


def grid_shape(
    images: list[ImageItem],
    available_width: float,
    gap: float,
) -> tuple[int, int]:
    """Return (columns, rows) for the average image size."""
    avg_w = sum(i.width for i in images) / len(images)
    columns = max(1, math.floor((available_width + gap) / (avg_w + gap)))
    rows = math.ceil(len(images) / columns)
    return columns, rows


def pack_images(
    images: list[ImageItem],
    container_width: float,
    container_height: float,
    occupied: list[OccupiedArea] | None = None,
    *,
    rules: LayoutRules = LAYOUT_RULES,
) -> list[PackedPlacement]:
    """Lay images out on an auto-sized grid inside the container.

    Each image is fitted into its cell (aspect kept) and centred.  If the
    result collides with an occupied area it is shifted once: right by
    its width plus the gap, or, past the right padding, back to the left
    padding and down by its height plus the gap.  The shifted rectangle
    is used as-is, so dense inputs can still overlap.

    Parameters
    ----------
    images : list[ImageItem]
        Images to pack, in order.
    container_width, container_height : float
        Frame size; positions are frame-relative.
    occupied : list[OccupiedArea] | None
        Areas to avoid.  Not modified; packed rectangles are tracked on
        a private copy.
    rules : LayoutRules
        Padding and gap.

    Returns
    -------
    list[PackedPlacement]
        One placement per image, in input order.
    """
    if not images:
        return []

    padding, gap = rules.padding, rules.gap
    taken = list(occupied or [])

    available_w = container_width - 2 * padding
    available_h = container_height - 2 * padding
    columns, rows = grid_shape(images, available_w, gap)

    cell_w = max(MIN_CELL, (available_w - gap * (columns - 1)) / columns)
    cell_h = max(MIN_CELL, (available_h - gap * (rows - 1)) / rows)

    log.info("Packing %d image(s) in %d×%d grid, cell %.1f×%.1f",
             len(images), columns, rows, cell_w, cell_h)

    right_limit = container_width - padding
    placements: list[PackedPlacement] = []

    for i, image in enumerate(images):
        row, col = divmod(i, columns)
        w, h = fit_in_cell(image.width, image.height, cell_w, cell_h)
        x = padding + col * (cell_w + gap) + (cell_w - w) / 2
        y = padding + row * (cell_h + gap) + (cell_h - h) / 2

        if first_overlap(OccupiedArea(x, y, w, h), taken) is not None:
            x += w + gap
            if x + w > right_limit:
                x = padding
                y += h + gap
            log.debug("Shifted %s to (%.1f, %.1f)", image.content_handle, x, y)

        rect = OccupiedArea(x, y, w, h)
        if first_overlap(rect, taken) is not None:
            log.warning("%s still overlaps after shift at (%.1f, %.1f)",
                        image.content_handle, x, y)
        if not rect_inside_frame(rect, container_width, container_height):
            log.warning("%s extends past the frame at (%.1f, %.1f)",
                        image.content_handle, x, y)

        taken.append(rect)
        placements.append(PackedPlacement(image=image, x=x, y=y, width=w, height=h))

    return placements
