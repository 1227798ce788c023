"""Image records — scraped descriptors, parsing, and list operations.

Submodules:
  models      ImageRecord (scraped) and ImageItem (placement input).
  parsing     Raw dict parsing, validation, and conversion to ImageItems.
  collection  Merge/dedupe, size filter, service grouping.
"""

from .models import ImageRecord, ImageItem
from .parsing import (
    parse_image_records, record_to_dict, to_image_items, validate_image_records,
)
from .collection import (
    is_duplicate, merge_images, available_sizes, filter_by_sizes,
    group_by_service, service_favicons, remove_service, UNKNOWN_SERVICE,
)

__all__ = [
    # Models
    "ImageRecord", "ImageItem",
    # Parsing
    "parse_image_records", "record_to_dict", "to_image_items",
    "validate_image_records",
    # Collection
    "is_duplicate", "merge_images", "available_sizes", "filter_by_sizes",
    "group_by_service", "service_favicons", "remove_service", "UNKNOWN_SERVICE",
]
