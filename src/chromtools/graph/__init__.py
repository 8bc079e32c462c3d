from .snapshot import (
    Edge,
    GraphSnapshot,
    canon_edge,
    snapshot_from_edges,
    snapshot_from_nx,
    snapshot_to_nx,
)
from .editable import EditableGraph

__all__ = [
    "Edge",
    "GraphSnapshot",
    "canon_edge",
    "snapshot_from_edges",
    "snapshot_from_nx",
    "snapshot_to_nx",
    "EditableGraph",
]
