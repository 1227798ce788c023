"""Working with a collected image list — merging, size filter, services."""

from __future__ import annotations

from .models import ImageRecord

UNKNOWN_SERVICE = "Unknown"


def is_duplicate(existing: ImageRecord, new: ImageRecord) -> bool:
    """Two records are the same image if they share an id or a src."""
    if existing.id and new.id and existing.id == new.id:
        return True
    return bool(existing.src and new.src and existing.src == new.src)


def merge_images(
    existing: list[ImageRecord],
    incoming: list[ImageRecord],
) -> list[ImageRecord]:
    """Append every incoming record not already present.

    Duplicates inside *incoming* itself are dropped as well; the first
    occurrence wins.
    """
    merged = list(existing)
    for rec in incoming:
        if not any(is_duplicate(m, rec) for m in merged):
            merged.append(rec)
    return merged


def available_sizes(records: list[ImageRecord]) -> list[tuple[float, float]]:
    """Distinct (width, height) pairs, sorted by width then height."""
    return sorted({
        (r.width, r.height) for r in records
        if r.width > 0 and r.height > 0
    })


def filter_by_sizes(
    records: list[ImageRecord],
    sizes: set[tuple[float, float]] | None,
) -> list[ImageRecord]:
    """Keep records whose size is in *sizes*.  Empty/None means all."""
    if not sizes:
        return list(records)
    return [
        r for r in records
        if r.width > 0 and r.height > 0 and (r.width, r.height) in sizes
    ]


def group_by_service(records: list[ImageRecord]) -> dict[str, list[ImageRecord]]:
    """Group records by source service, in first-seen order."""
    groups: dict[str, list[ImageRecord]] = {}
    for r in records:
        groups.setdefault(r.service or UNKNOWN_SERVICE, []).append(r)
    return groups


def service_favicons(records: list[ImageRecord]) -> dict[str, str]:
    """First favicon seen for each service."""
    icons: dict[str, str] = {}
    for r in records:
        name = r.service or UNKNOWN_SERVICE
        if r.favicon and name not in icons:
            icons[name] = r.favicon
    return icons


def remove_service(
    records: list[ImageRecord], service: str,
) -> tuple[list[ImageRecord], int]:
    """Drop every record from *service*.  Returns (kept, removed_count)."""
    kept = [r for r in records if (r.service or UNKNOWN_SERVICE) != service]
    return kept, len(records) - len(kept)
