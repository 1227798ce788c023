"""Placer — puts a batch of images into a frame.

Submodules:
  models        Value dataclasses, errors, and scoring weights.
  geometry      Rectangle helpers (overlap, containment, cell fitting).
  scanner       Placeholder discovery inside a frame.
  scoring       Hard gates and the composite match score.
  matching      Greedy image-to-placeholder assignment.
  packing       Grid layout with one-shot collision avoidance.
  executor      Writes into the host document.
  engine        End-to-end placement (scan → match → pack → apply).
  serialization JSON conversion (report_to_dict, placement_to_dict).
"""

from .models import (
    Placeholder, OccupiedArea, MatchedPair, PackedPlacement,
    FillWrite, PlacementResult, PlacementReport,
    NoContainerError, NoSelectionError,
)
from .scanner import scan_placeholders, child_areas
from .scoring import reject_reason, score_pair
from .matching import match_images
from .packing import pack_images
from .executor import (
    build_placement_result, apply_placement, apply_to_selection, insert_image,
)
from .engine import place_images, resolve_target_container
from .serialization import report_to_dict, placement_to_dict
from .geometry import rects_overlap, rect_inside_frame, fit_in_cell, clamp_to_max_size

__all__ = [
    # Models
    "Placeholder", "OccupiedArea", "MatchedPair", "PackedPlacement",
    "FillWrite", "PlacementResult", "PlacementReport",
    "NoContainerError", "NoSelectionError",
    # Stages
    "scan_placeholders", "child_areas",
    "reject_reason", "score_pair",
    "match_images",
    "pack_images",
    "build_placement_result", "apply_placement", "apply_to_selection",
    "insert_image",
    # Engine
    "place_images", "resolve_target_container",
    # Serialization
    "report_to_dict", "placement_to_dict",
    # Geometry
    "rects_overlap", "rect_inside_frame", "fit_in_cell", "clamp_to_max_size",
]
