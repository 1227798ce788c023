"""Image record dataclasses — scraped descriptors and engine inputs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ImageRecord:
    """One image as collected from a web page."""

    src: str
    alt: str = ""
    width: float = 0        # 0 = unknown
    height: float = 0
    id: str | None = None
    class_name: str | None = None
    type: str | None = None
    base64: str | None = None     # data URL, preferred over src when fetching
    service: str | None = None    # site the image was collected from
    favicon: str | None = None
    added_at: str | None = None   # ISO 8601


@dataclass(frozen=True)
class ImageItem:
    """A fetched image, ready for placement.

    ``content_handle`` is opaque to the placer; the host resolves it to
    decoded image bytes.
    """

    content_handle: str
    width: float
    height: float

    @property
    def aspect(self) -> float:
        return self.width / self.height

    @property
    def area(self) -> float:
        return self.width * self.height
