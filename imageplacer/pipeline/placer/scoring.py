"""Image-to-placeholder gating and scoring."""

from __future__ import annotations

from imageplacer.pipeline.config import LAYOUT_RULES, LayoutRules
from imageplacer.pipeline.images.models import ImageItem

from .models import Placeholder, W_ASPECT, W_AREA, W_SIZE, ASPECT_SHARPNESS


def reject_reason(
    image: ImageItem,
    placeholder: Placeholder,
    rules: LayoutRules = LAYOUT_RULES,
) -> str | None:
    """Return why *image* may not go into *placeholder*, or None.

    Hard constraints, checked in order:
      1. aspect ratios differ by more than the tolerance
      2. exactly one side is square-like
      3. width or height ratio outside the accepted band
    """
    image_aspect = image.aspect
    ph_aspect = placeholder.aspect

    if abs(image_aspect - ph_aspect) > rules.aspect_tolerance:
        return "aspect mismatch"

    if rules.is_square_like(image_aspect) != rules.is_square_like(ph_aspect):
        return "square mismatch"

    if not rules.size_ratio_ok(image.width / placeholder.width):
        return "width ratio"
    if not rules.size_ratio_ok(image.height / placeholder.height):
        return "height ratio"

    return None


def score_pair(
    image: ImageItem,
    placeholder: Placeholder,
    rules: LayoutRules = LAYOUT_RULES,
) -> float:
    """Composite match score; higher is better.

    score = W_ASPECT · 1/(1 + 10·Δaspect)
          + W_AREA   · 1/(1 + Δarea / area_normaliser)
          + W_SIZE   · (size_bonus − 1)

    where size_bonus applies only if the placeholder is at least as large
    as the image in both dimensions.
    """
    aspect_diff = abs(image.aspect - placeholder.aspect)
    area_diff = abs(image.area - placeholder.area)
    contains = (placeholder.width >= image.width
                and placeholder.height >= image.height)
    size_bonus = rules.size_bonus if contains else 1.0

    return (
        W_ASPECT * (1.0 / (1.0 + ASPECT_SHARPNESS * aspect_diff))
        + W_AREA * (1.0 / (1.0 + area_diff / rules.area_normaliser))
        + W_SIZE * (size_bonus - 1.0)
    )
