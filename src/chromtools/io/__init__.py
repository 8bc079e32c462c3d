from .graph6 import strip_graph6_header, g6_to_nx, g6_to_snapshot, snapshot_to_g6

__all__ = [
    "strip_graph6_header",
    "g6_to_nx",
    "g6_to_snapshot",
    "snapshot_to_g6",
]
