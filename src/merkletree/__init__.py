"""
merkletree

RFC 6962 Merkle Tree Hash with audit paths and consistency proofs.
"""

from .core.hashing import (
    DIGEST_SIZE,
    HASH_ALGORITHM,
    LEAF_PREFIX,
    NODE_PREFIX,
    hash_children,
    hash_empty,
    hash_leaf,
)
from .core.log import configure_logging
from .core.settings import MerkleTreeSettings, get_settings
from .core.tree import MerkleTree, largest_power_of_two_less_than
from .protocol import (
    ErrorCode,
    MerkleTreeError,
    ValidationError,
    EntryTypeError,
    IndexTypeError,
    IndexOutOfRangeError,
)

__version__ = "0.1.0"

__all__ = [
    "MerkleTree",
    "largest_power_of_two_less_than",
    "hash_empty",
    "hash_leaf",
    "hash_children",
    "DIGEST_SIZE",
    "HASH_ALGORITHM",
    "LEAF_PREFIX",
    "NODE_PREFIX",
    "configure_logging",
    "MerkleTreeSettings",
    "get_settings",
    "ErrorCode",
    "MerkleTreeError",
    "ValidationError",
    "EntryTypeError",
    "IndexTypeError",
    "IndexOutOfRangeError",
]
