"""
Exception hierarchy for vecspace.

All exceptions inherit from VecspaceError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - User-input errors (ValidationError) are kept apart from
      programming-contract errors (PreconditionError)
"""


class VecspaceError(Exception):
    """Base exception for all vecspace errors."""
    pass


class ValidationError(VecspaceError):
    """
    Input validation failed.

    Raised when user-provided vectors fail validation checks: non-numeric
    data, non-finite components, all-zero input, or out-of-range counts.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised for ragged vector lists (rows of different length), empty
    matrices, and inputs that are not two-dimensional.
    """
    pass


class PreconditionError(VecspaceError):
    """
    An operation was called outside its contract.

    This is a programming error on the caller's side, not a problem with
    the user's data. The canonical case is asking for the determinant of
    a non-square matrix.

    Attributes:
        operation: Name of the operation whose precondition failed
        shape: Shape of the offending matrix, if applicable
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape

