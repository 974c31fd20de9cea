from .hashing import (
    DIGEST_SIZE,
    HASH_ALGORITHM,
    LEAF_PREFIX,
    NODE_PREFIX,
    hash_children,
    hash_empty,
    hash_leaf,
)
from .log import configure_logging
from .settings import MerkleTreeSettings, get_settings
from .tree import MerkleTree, largest_power_of_two_less_than

__all__ = [
    "DIGEST_SIZE",
    "HASH_ALGORITHM",
    "LEAF_PREFIX",
    "NODE_PREFIX",
    "hash_children",
    "hash_empty",
    "hash_leaf",
    "configure_logging",
    "MerkleTreeSettings",
    "get_settings",
    "MerkleTree",
    "largest_power_of_two_less_than",
]
