"""Greedy image-to-placeholder matching."""

from __future__ import annotations

import logging

from imageplacer.pipeline.config import LAYOUT_RULES, LayoutRules
from imageplacer.pipeline.images.models import ImageItem

from .models import MatchedPair, Placeholder
from .scoring import reject_reason, score_pair


log = logging.getLogger(__name__)


def match_images(
    images: list[ImageItem],
    placeholders: list[Placeholder],
    *,
    rules: LayoutRules = LAYOUT_RULES,
) -> tuple[list[MatchedPair], list[ImageItem]]:
    """Assign images to placeholders in a single greedy pass.

    Images are taken in input order.  Each one claims the highest-scoring
    placeholder that passes every hard constraint and is not yet taken;
    on equal scores the placeholder seen first wins.  This is first-fit
    by score, not a global optimum: an early image can take the slot a
    later image would have fitted better.

    Parameters
    ----------
    images : list[ImageItem]
        Images to place, in caller order.
    placeholders : list[Placeholder]
        Scanned placeholders, in reading order.
    rules : LayoutRules
        Gate thresholds and score parameters.

    Returns
    -------
    tuple[list[MatchedPair], list[ImageItem]]
        Pairs sorted by descending score, and the images that found no
        placeholder, in their original order.
    """
    consumed: set[int] = set()
    pairs: list[MatchedPair] = []
    unmatched: list[ImageItem] = []

    for image in images:
        best_idx: int | None = None
        best_score = -float("inf")

        for idx, ph in enumerate(placeholders):
            if idx in consumed:
                continue
            reason = reject_reason(image, ph, rules)
            if reason is not None:
                log.debug("Reject %s -> node %d: %s",
                          image.content_handle, ph.node_id, reason)
                continue
            score = score_pair(image, ph, rules)
            if score > best_score:
                best_score = score
                best_idx = idx

        if best_idx is None:
            unmatched.append(image)
            continue

        consumed.add(best_idx)
        ph = placeholders[best_idx]
        pairs.append(MatchedPair(image=image, placeholder=ph, score=best_score))
        log.info("Matched %s -> node %d score=%.3f",
                 image.content_handle, ph.node_id, best_score)

    pairs.sort(key=lambda p: p.score, reverse=True)
    return pairs, unmatched
