"""Host document dataclasses — node tree, paints, selection state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NodeKind(str, Enum):
    """Structural node kinds the placer distinguishes.

    Anything else the host reports (GROUP, TEXT, ELLIPSE, ...) is OTHER.
    """

    RECTANGLE = "RECTANGLE"
    FRAME = "FRAME"
    COMPONENT = "COMPONENT"
    INSTANCE = "INSTANCE"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, value: str) -> NodeKind:
        try:
            return cls(value.upper())
        except ValueError:
            return cls.OTHER


# Kinds that may receive image content or act as a placement container.
FILLABLE_KINDS = frozenset({
    NodeKind.RECTANGLE, NodeKind.FRAME, NodeKind.COMPONENT, NodeKind.INSTANCE,
})
CONTAINER_KINDS = frozenset({
    NodeKind.FRAME, NodeKind.COMPONENT, NodeKind.INSTANCE,
})


class DocumentError(Exception):
    """Raised for malformed snapshots or references to unknown nodes."""


class FillWriteError(Exception):
    """Raised when a node cannot accept new image content."""

    def __init__(self, node_id: int, reason: str) -> None:
        self.node_id = node_id
        self.reason = reason
        super().__init__(f"Cannot write image into node {node_id}: {reason}")


@dataclass
class Paint:
    type: str                           # "IMAGE", "SOLID", ...
    content_handle: str | None = None   # image paints only
    scale_mode: str | None = None       # "FIT", "FILL", ...


@dataclass
class Node:
    """A host node.  ``x``/``y`` are relative to the parent node.

    ``fills is None`` is the host's indeterminate ("mixed") fill state.
    """
    id: int
    kind: NodeKind
    name: str
    x: float
    y: float
    width: float
    height: float
    supports_content_fill: bool = True
    fills: list[Paint] | None = field(default_factory=list)
    children: list[Node] = field(default_factory=list)

    @property
    def has_image_content(self) -> bool:
        return bool(self.fills) and any(p.type == "IMAGE" for p in self.fills)


@dataclass
class Document:
    """A page snapshot plus the UI state that travels with it.

    Nodes are owned here; everything else refers to them by integer id
    and looks them up again at write time.
    """
    children: list[Node]
    selection: list[int] = field(default_factory=list)
    viewport_center: tuple[float, float] = (0.0, 0.0)
    _index: dict[int, Node] = field(
        default_factory=dict, init=False, repr=False, compare=False)
    _parents: dict[int, int | None] = field(
        default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.reindex()

    # ── Lookup ─────────────────────────────────────────────────────

    def reindex(self) -> None:
        """Rebuild the id → node and id → parent maps."""
        self._index.clear()
        self._parents.clear()
        stack: list[tuple[Node, int | None]] = [(n, None) for n in self.children]
        while stack:
            node, parent_id = stack.pop()
            if node.id in self._index:
                raise DocumentError(f"Duplicate node id {node.id}")
            self._index[node.id] = node
            self._parents[node.id] = parent_id
            stack.extend((c, node.id) for c in node.children)

    def get_node(self, node_id: int) -> Node | None:
        return self._index.get(node_id)

    def require_node(self, node_id: int) -> Node:
        node = self._index.get(node_id)
        if node is None:
            raise DocumentError(f"Unknown node id {node_id}")
        return node

    def parent_of(self, node_id: int) -> int | None:
        return self._parents.get(node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def __len__(self) -> int:
        return len(self._index)

    # ── Mutation ───────────────────────────────────────────────────

    def set_image_fill(
        self, node_id: int, content_handle: str, scale_mode: str,
    ) -> None:
        """Replace a node's fills with a single image paint."""
        node = self._index.get(node_id)
        if node is None:
            raise FillWriteError(node_id, "node no longer exists")
        if not node.supports_content_fill or node.kind not in FILLABLE_KINDS:
            raise FillWriteError(node_id, f"{node.kind.value} node has no fills")
        if node.fills is None:
            raise FillWriteError(node_id, "fill state is mixed")
        node.fills = [Paint(type="IMAGE", content_handle=content_handle,
                            scale_mode=scale_mode)]

    def next_id(self) -> int:
        return max(self._index, default=0) + 1

    def create_rectangle(
        self,
        parent_id: int | None,
        x: float, y: float,
        width: float, height: float,
        name: str = "Image",
    ) -> int:
        """Append a new empty rectangle under *parent_id* (None = page)."""
        if parent_id is not None and parent_id not in self._index:
            raise DocumentError(f"Unknown parent id {parent_id}")
        node = Node(
            id=self.next_id(),
            kind=NodeKind.RECTANGLE,
            name=name,
            x=x, y=y,
            width=width, height=height,
        )
        if parent_id is None:
            self.children.append(node)
        else:
            self._index[parent_id].children.append(node)
        self._index[node.id] = node
        self._parents[node.id] = parent_id
        return node.id

    def select(self, node_ids: list[int]) -> None:
        """Replace the selection, dropping ids that no longer exist."""
        self.selection = [i for i in node_ids if i in self._index]
