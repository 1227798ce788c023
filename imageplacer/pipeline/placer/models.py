"""Placer dataclasses, errors, and scoring weights."""

from __future__ import annotations

from dataclasses import dataclass, field

from imageplacer.pipeline.images.models import ImageItem


# ── Geometry values ────────────────────────────────────────────────


@dataclass(frozen=True)
class Placeholder:
    """An existing node judged suitable to receive an image.

    ``x``/``y`` are relative to the scanned container.  ``node_id`` is a
    handle into the host document, never the node itself.
    """

    node_id: int
    x: float
    y: float
    width: float
    height: float

    @property
    def aspect(self) -> float:
        return self.width / self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def area_rect(self) -> OccupiedArea:
        return OccupiedArea(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class OccupiedArea:
    """Axis-aligned rectangle reserved against further grid placement."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class MatchedPair:
    image: ImageItem
    placeholder: Placeholder
    score: float


@dataclass(frozen=True)
class PackedPlacement:
    """A grid-packed image and its rectangle inside the container."""

    image: ImageItem
    x: float
    y: float
    width: float
    height: float

    @property
    def area_rect(self) -> OccupiedArea:
        return OccupiedArea(self.x, self.y, self.width, self.height)


# ── Apply-stage values ─────────────────────────────────────────────


@dataclass(frozen=True)
class FillWrite:
    """Write *content_handle* into the existing node *node_id*."""

    node_id: int
    content_handle: str


@dataclass
class PlacementResult:
    """Everything the executor will do to the host document."""

    container_id: int
    writes: list[FillWrite]
    new_nodes: list[PackedPlacement]


@dataclass
class PlacementReport:
    """Outcome of one placement run, for selection and user feedback."""

    container_id: int
    pairs: list[MatchedPair] = field(default_factory=list)
    placements: list[PackedPlacement] = field(default_factory=list)
    updated_ids: list[int] = field(default_factory=list)
    created_ids: list[int] = field(default_factory=list)
    dropped: int = 0
    used_fallback: bool = False

    @property
    def affected_ids(self) -> list[int]:
        return self.updated_ids + self.created_ids

    def summary(self) -> str:
        """One-line status message for the plugin UI."""
        parts: list[str] = []
        if self.updated_ids:
            parts.append(f"{len(self.updated_ids)} applied to existing nodes")
        if self.created_ids:
            parts.append(f"{len(self.created_ids)} placed as new nodes")
        if not parts:
            msg = "No images were placed"
        else:
            msg = "Images placed: " + ", ".join(parts)
        if self.dropped:
            msg += f" ({self.dropped} could not be written)"
        return msg


# ── Errors ─────────────────────────────────────────────────────────


class NoContainerError(Exception):
    """Raised when no frame is available to place images into."""

    def __init__(self, reason: str, container_id: int | None = None) -> None:
        self.container_id = container_id
        self.reason = reason
        super().__init__(reason)


class NoSelectionError(Exception):
    """Raised when an operation needs selected nodes and there are none."""


# ── Configuration ──────────────────────────────────────────────────

# Match-score weights; they sum to 1.0 for a perfect, containing fit.
W_ASPECT = 0.5              # MAIN driver: similar aspect ratio
W_AREA = 0.3                # prefer similar area
W_SIZE = 0.2                # prefer slots at least as large as the image
ASPECT_SHARPNESS = 10.0     # how quickly the aspect term decays
