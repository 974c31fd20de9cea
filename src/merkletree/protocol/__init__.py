from .enums import ErrorCode
from .errors import (
    MerkleTreeError,
    ValidationError,
    EntryTypeError,
    IndexTypeError,
    IndexOutOfRangeError,
)

__all__ = [
    "ErrorCode",
    "MerkleTreeError",
    "ValidationError",
    "EntryTypeError",
    "IndexTypeError",
    "IndexOutOfRangeError",
]
