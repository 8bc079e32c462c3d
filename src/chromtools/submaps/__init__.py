from .core import (
    Block,
    Submap,
    initial_submap,
    submap_from_snapshot,
    contract,
    direct_children,
)
from .closure import SubmapSet, enumerate_submaps

__all__ = [
    "Block",
    "Submap",
    "initial_submap",
    "submap_from_snapshot",
    "contract",
    "direct_children",
    "SubmapSet",
    "enumerate_submaps",
]
