"""Shared layout constants for the placement pipeline.

These values describe how images are matched to placeholder nodes and
how leftover images are laid out inside a frame.  The **scanner**, the
**matcher** and the **packer** all read their thresholds from this single
source of truth.

Change a value here and every stage will stay in sync automatically.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutRules:
    """Matching and packing rules.

    All distances are in canvas units.
    """

    padding: float = 20.0
    """Inset from every frame edge for grid-packed images."""

    gap: float = 16.0
    """Space between neighbouring grid cells."""

    min_placeholder_size: float = 50.0
    """Both sides of a placeholder must be strictly larger than this."""

    row_tolerance: float = 10.0
    """Placeholders whose y differs by less than this share a row."""

    placeholder_keywords: tuple[str, ...] = ("img", "image", "画像", "picture", "photo")
    """Case-insensitive name fragments that mark an empty placeholder."""

    aspect_tolerance: float = 0.3
    """Largest accepted |image aspect - placeholder aspect|."""

    square_min: float = 0.9
    square_max: float = 1.1
    """Aspect band (inclusive) treated as square-like."""

    size_ratio_min: float = 0.3
    size_ratio_max: float = 3.0
    """Accepted band for image/placeholder width and height ratios."""

    area_normaliser: float = 10000.0
    """Area difference that halves the area term of the match score."""

    size_bonus: float = 1.2
    """Bonus factor when the placeholder fully contains the image."""

    max_node_size: float = 1000.0
    """Longest side of a single inserted image node."""

    default_image_size: float = 200.0
    """Fallback width/height for records scraped without dimensions."""

    scale_mode: str = "FIT"
    """Scale policy for images placed into a frame by the engine."""

    selection_scale_mode: str = "FILL"
    """Scale policy for apply-to-selection and single-image insert."""

    # ── Derived helpers ────────────────────────────────────────────

    def is_square_like(self, aspect: float) -> bool:
        """True if *aspect* falls inside the inclusive square band."""
        return self.square_min <= aspect <= self.square_max

    def size_ratio_ok(self, ratio: float) -> bool:
        return self.size_ratio_min <= ratio <= self.size_ratio_max


# Module-level singleton.
LAYOUT_RULES = LayoutRules()
