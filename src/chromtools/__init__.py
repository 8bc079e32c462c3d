"""
chromtools: chromatic polynomials of small simple graphs via the lattice of
edge contractions, with a background recomputation worker for live editing.
"""

from .errors import (
    ChromtoolsError,
    GraphInputError,
    ComputationCancelled,
    ComputationFailed,
)

# Graphs
from .graph.snapshot import (
    GraphSnapshot,
    snapshot_from_edges,
    snapshot_from_nx,
    snapshot_to_nx,
)
from .graph.editable import EditableGraph
from .io.graph6 import g6_to_nx, g6_to_snapshot, snapshot_to_g6

# Pipeline stages
from .submaps.core import Submap, initial_submap, direct_children, contract
from .submaps.closure import SubmapSet, enumerate_submaps
from .poset.order import is_coarsening, order_matrix
from .poset.mobius import mobius_vector, mobius_identity_holds
from .invariants.chromatic import (
    ChromaticPolynomial,
    chromatic_coefficients,
    compute_chromatic_polynomial,
    chromatic_polynomial,
    chromatic_polynomial_nx,
    chromatic_polynomial_g6,
)

# Background recomputation
from .scheduler.recompute import CycleState, Progress, RecomputeScheduler

# Shared utilities
from .utils.formatting import format_polynomial
from .utils.colorings import count_proper_colorings

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ChromtoolsError",
    "GraphInputError",
    "ComputationCancelled",
    "ComputationFailed",
    # Graphs
    "GraphSnapshot",
    "snapshot_from_edges",
    "snapshot_from_nx",
    "snapshot_to_nx",
    "EditableGraph",
    "g6_to_nx",
    "g6_to_snapshot",
    "snapshot_to_g6",
    # Submaps
    "Submap",
    "initial_submap",
    "direct_children",
    "contract",
    "SubmapSet",
    "enumerate_submaps",
    # Poset
    "is_coarsening",
    "order_matrix",
    "mobius_vector",
    "mobius_identity_holds",
    # Invariants
    "ChromaticPolynomial",
    "chromatic_coefficients",
    "compute_chromatic_polynomial",
    "chromatic_polynomial",
    "chromatic_polynomial_nx",
    "chromatic_polynomial_g6",
    # Scheduler
    "CycleState",
    "Progress",
    "RecomputeScheduler",
    # Utils
    "format_polynomial",
    "count_proper_colorings",
]
