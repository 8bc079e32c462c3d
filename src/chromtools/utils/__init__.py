from .formatting import format_polynomial
from .colorings import count_proper_colorings

__all__ = [
    "format_polynomial",
    "count_proper_colorings",
]
