"""Exception taxonomy for polymat.

Every error is raised synchronously at the call site. Each class also
derives from the built-in exception a caller would naturally catch, so
``except ValueError`` keeps working for code that does not care about the
distinction.
"""


class PolymatError(Exception):
    """Base class for all polymat errors."""


class InvalidDimensionsError(PolymatError, ValueError):
    """Raised when a vector or matrix is constructed with unusable dimensions."""


class DimensionMismatchError(PolymatError, ValueError):
    """Raised when operand shapes are incompatible for an operation."""


class CoordinateError(PolymatError, IndexError, ValueError):
    """Raised when an index lies outside the valid range."""


class SingularMatrixError(PolymatError, ValueError):
    """Raised when inverting a matrix whose determinant is zero."""


class RankDeficientError(PolymatError, ValueError):
    """Raised when QR decomposition meets linearly dependent columns."""


class DegeneratePolynomialError(PolymatError, ValueError):
    """Raised when root finding is requested for a polynomial below rank 2."""


__all__ = [
    "CoordinateError",
    "DegeneratePolynomialError",
    "DimensionMismatchError",
    "InvalidDimensionsError",
    "PolymatError",
    "RankDeficientError",
    "SingularMatrixError",
]
