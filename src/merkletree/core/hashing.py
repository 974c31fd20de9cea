"""
RFC 6962 Hashing Primitives

Domain-separated SHA-256 hashing for Merkle Hash Trees:
- MTH({})           = SHA-256()
- LeafHash(d)       = SHA-256(0x00 || d)
- NodeHash(l, r)    = SHA-256(0x01 || l || r)

The digest algorithm and both prefixes are fixed. Any verifier that
interoperates with these trees must use the same constants.
"""

from __future__ import annotations

import hashlib


# ===========================================================================
# Constants
# ===========================================================================

HASH_ALGORITHM = "sha256"
DIGEST_SIZE = 32

LEAF_PREFIX = b"\x00"
NODE_PREFIX = b"\x01"


# ===========================================================================
# Hash Functions
# ===========================================================================


def hash_empty() -> bytes:
    """Hash of an empty tree: SHA-256 of the empty string."""
    return hashlib.new(HASH_ALGORITHM).digest()


def hash_leaf(data: bytes) -> bytes:
    """
    Hash a leaf entry.

    Leaves are prefixed with 0x00 so a leaf can never collide with an
    internal node.
    """
    hasher = hashlib.new(HASH_ALGORITHM)
    hasher.update(LEAF_PREFIX)
    hasher.update(data)
    return hasher.digest()


def hash_children(left: bytes, right: bytes) -> bytes:
    """
    Hash an internal node from its two child digests.

    Internal nodes are prefixed with 0x01.
    """
    hasher = hashlib.new(HASH_ALGORITHM)
    hasher.update(NODE_PREFIX)
    hasher.update(left)
    hasher.update(right)
    return hasher.digest()
