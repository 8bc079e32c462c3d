from .chromatic import (
    ChromaticPolynomial,
    chromatic_coefficients,
    compute_chromatic_polynomial,
    chromatic_polynomial,
    chromatic_polynomial_nx,
    chromatic_polynomial_g6,
)

__all__ = [
    "ChromaticPolynomial",
    "chromatic_coefficients",
    "compute_chromatic_polynomial",
    "chromatic_polynomial",
    "chromatic_polynomial_nx",
    "chromatic_polynomial_g6",
]
