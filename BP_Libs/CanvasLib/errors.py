"""
Picture error taxonomy.

Classes:
    PictureError: Base class for every failure raised by the canvas model
    OperationError: A single operation could not be applied or costed
    MissingBlockError: The operation refers to a block id that does not exist
    InvalidCutError: The cut does not lie strictly inside the block shape
    ShapeMismatchError: Swap between blocks of different sizes
    MalformedPictureError: The picture no longer tiles the canvas
    UnsupportedOperationError: The operation is defined but not implemented
"""

from typing import Any


class PictureError(Exception):
    """Base class for canvas model failures."""


class OperationError(PictureError, ValueError):
    """
    An operation failed; carries the operation and the reason.

    Args:
        operation: The operation that failed
        reason: Human-readable description of the failure
    """

    def __init__(self, operation: Any, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"{reason} (operation: {operation})")


class MissingBlockError(OperationError):
    pass


class InvalidCutError(OperationError):
    pass


class ShapeMismatchError(OperationError):
    pass


class MalformedPictureError(PictureError, RuntimeError):
    pass


class UnsupportedOperationError(PictureError, NotImplementedError):
    pass
