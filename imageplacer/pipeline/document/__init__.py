"""Host document — dataclasses, parsing, validation, and serialization."""

from .models import (
    NodeKind, Paint, Node, Document,
    DocumentError, FillWriteError,
    FILLABLE_KINDS, CONTAINER_KINDS,
)
from .parsing import parse_document
from .validation import validate_document
from .serialization import document_to_dict, node_to_dict

__all__ = [
    # Models
    "NodeKind", "Paint", "Node", "Document",
    "DocumentError", "FillWriteError",
    "FILLABLE_KINDS", "CONTAINER_KINDS",
    # Parsing / Validation / Serialization
    "parse_document", "validate_document", "document_to_dict", "node_to_dict",
]
