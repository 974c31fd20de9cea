from typing import Optional

from .enums import ErrorCode


class MerkleTreeError(Exception):
    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        super().__init__(message)
        self.code = code or ErrorCode.INTERNAL_ERROR


class ValidationError(MerkleTreeError):
    """Raised when caller input fails validation."""


class EntryTypeError(ValidationError, TypeError):
    """Raised when an entry is not a bytes-like object."""

    def __init__(self, position: int, value: object):
        super().__init__(
            f"Entry {position} must be bytes-like, got {type(value).__name__}",
            ErrorCode.INVALID_ENTRY,
        )
        self.position = position


class IndexTypeError(ValidationError, TypeError):
    """Raised when a leaf index or snapshot size is not an integer."""

    def __init__(self, value: object):
        super().__init__(
            f"Index must be an integer, got {type(value).__name__}",
            ErrorCode.INVALID_INDEX,
        )


class IndexOutOfRangeError(MerkleTreeError, IndexError):
    """
    Raised when a path or proof is requested outside its valid domain.

    Attributes:
        index: The rejected index (or snapshot size)
        size: Number of entries in the tree
    """

    def __init__(self, operation: str, index: int, size: int):
        super().__init__(
            f"{operation} index {index} out of range for tree of size {size}",
            ErrorCode.INDEX_OUT_OF_RANGE,
        )
        self.index = index
        self.size = size
