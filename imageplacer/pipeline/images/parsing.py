"""Image record parsing — raw dicts from the transport layer."""

from __future__ import annotations

from imageplacer.pipeline.config import LAYOUT_RULES

from .models import ImageRecord, ImageItem


def parse_image_records(data: list[dict]) -> list[ImageRecord]:
    """Parse the decrypted record array into ImageRecords.

    Older scraper builds send ``w``/``h`` instead of ``width``/``height``;
    both spellings are accepted.  Missing dimensions become 0.
    """
    return [
        ImageRecord(
            src=str(r.get("src") or ""),
            alt=r.get("alt") or "",
            width=float(r.get("w") or r.get("width") or 0),
            height=float(r.get("h") or r.get("height") or 0),
            id=r.get("id"),
            class_name=r.get("className") or r.get("class_name"),
            type=r.get("type"),
            base64=r.get("base64"),
            service=r.get("service"),
            favicon=r.get("favicon"),
            added_at=r.get("addedAt") or r.get("added_at"),
        )
        for r in data
    ]


def record_to_dict(rec: ImageRecord) -> dict:
    """Convert an ImageRecord back to the scraper's wire shape."""
    return {
        "src": rec.src,
        "alt": rec.alt,
        "width": rec.width,
        "height": rec.height,
        **({"id": rec.id} if rec.id else {}),
        **({"className": rec.class_name} if rec.class_name else {}),
        **({"type": rec.type} if rec.type else {}),
        **({"base64": rec.base64} if rec.base64 else {}),
        **({"service": rec.service} if rec.service else {}),
        **({"favicon": rec.favicon} if rec.favicon else {}),
        **({"addedAt": rec.added_at} if rec.added_at else {}),
    }


def to_image_items(
    records: list[ImageRecord],
    *,
    default_size: float = LAYOUT_RULES.default_image_size,
) -> list[ImageItem]:
    """Build placement inputs from records.

    The content handle is the record id, then its src, then its base64
    data URL.  Unknown dimensions fall back to *default_size*.
    """
    return [
        ImageItem(
            content_handle=rec.id or rec.src or rec.base64 or "",
            width=rec.width or default_size,
            height=rec.height or default_size,
        )
        for rec in records
    ]


def validate_image_records(data: list) -> list[str]:
    """Validate raw record dicts. Returns error messages (empty = valid)."""
    errors: list[str] = []
    if not isinstance(data, list):
        return ["Expected an array of image records"]

    for i, r in enumerate(data):
        if not isinstance(r, dict):
            errors.append(f"Record {i}: expected an object")
            continue
        if not r.get("src") and not r.get("base64"):
            errors.append(f"Record {i}: needs 'src' or 'base64'")
        for key in ("width", "height", "w", "h"):
            if key not in r or r[key] is None:
                continue
            val = r[key]
            if not isinstance(val, (int, float)) or isinstance(val, bool):
                errors.append(f"Record {i}: '{key}' must be a number")
            elif val < 0:
                errors.append(f"Record {i}: '{key}' must be >= 0")
    return errors
