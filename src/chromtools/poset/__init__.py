from .order import OrderMatrix, is_coarsening, order_matrix
from .mobius import mobius_vector, mobius_identity_holds

__all__ = [
    "OrderMatrix",
    "is_coarsening",
    "order_matrix",
    "mobius_vector",
    "mobius_identity_holds",
]
