"""
Merkle Hash Tree (RFC 6962 section 2.1)

Computes the Merkle Tree Hash over an ordered list of opaque entries and
generates audit paths and consistency proofs against it.

Key properties:
- Tree shape is a function of the entry count only
- Leaf and node hashes are domain-separated (see merkletree.core.hashing)
- Entries are snapshotted at construction; a tree never changes
- All recursion works on (start, end) windows into the snapshot

Paths and proofs are plain lists of 32-byte digests ordered from the leaf
level up to the root. They carry no left/right tags: a verifier recovers
each digest's side by repeating the same split arithmetic over the index.
"""

from __future__ import annotations

import logging
import numbers
import threading
from typing import Dict, Iterable, List, Optional, Tuple, Union

from merkletree.core.hashing import hash_children, hash_empty, hash_leaf
from merkletree.core.settings import get_settings
from merkletree.protocol.errors import (
    EntryTypeError,
    IndexOutOfRangeError,
    IndexTypeError,
)

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


# ===========================================================================
# Range Splitter
# ===========================================================================


def largest_power_of_two_less_than(n: int) -> int:
    """
    Return the split point k for a range of n entries.

    For n < 2 this is 0. Otherwise k is the power of two with k < n <= 2k.
    """
    if n < 2:
        return 0
    k = 1
    while k << 1 < n:
        k <<= 1
    return k


def _coerce_entry(position: int, entry: object) -> bytes:
    if isinstance(entry, bytes):
        return entry
    if isinstance(entry, (bytearray, memoryview)):
        return bytes(entry)
    raise EntryTypeError(position, entry)


def _coerce_index(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise IndexTypeError(value)
    return int(value)


# ===========================================================================
# Merkle Tree
# ===========================================================================


class MerkleTree:
    """
    Immutable Merkle Hash Tree over a snapshot of entries.

    The constructor copies the entries into a tuple of bytes, so mutating
    the caller's sequence afterwards has no effect on this tree. A tree may
    be shared between threads.

    Usage:
        tree = MerkleTree([b"d0", b"d1", b"d2"])
        root = tree.hash()
        audit_path = tree.path(1)
        consistency = tree.proof(2)
    """

    def __init__(
        self,
        entries: Iterable[BytesLike],
        *,
        cache: Optional[bool] = None,
    ):
        """
        Initialize a tree.

        Args:
            entries: Ordered leaf contents
            cache: Memoize sub-range digests; defaults to MERKLETREE_CACHE_ENABLED

        Raises:
            EntryTypeError: If an entry is not bytes-like
        """
        self._entries: Tuple[bytes, ...] = tuple(
            _coerce_entry(position, entry) for position, entry in enumerate(entries)
        )

        if cache is None:
            cache = get_settings().cache_enabled
        self._memo: Optional[Dict[Tuple[int, int], bytes]] = {} if cache else None
        self._memo_lock = threading.Lock()

        logger.debug("Merkle tree created: size=%d cache=%s", len(self._entries), cache)

    @property
    def size(self) -> int:
        return len(self._entries)

    @property
    def root_hex(self) -> str:
        return self.hash().hex()

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MerkleTree(size={len(self._entries)})"

    # -----------------------------------------------------------------------
    # Public operations
    # -----------------------------------------------------------------------

    def hash(self) -> bytes:
        """Return the Merkle Tree Hash of all entries."""
        return self._mth(0, len(self._entries))

    def path(self, index: int) -> List[bytes]:
        """
        Get the audit path for one leaf.

        At every level the digest of the subtree not containing the leaf is
        appended. When verifying, a digest sits on the right if the leaf index
        (rebased into the current window) is below the split point, and on the
        left otherwise.

        Args:
            index: 0-based leaf index

        Returns:
            Sibling digests ordered from the leaf level to the root

        Raises:
            IndexTypeError: If index is not an integer
            IndexOutOfRangeError: If index is not in [0, size)
        """
        m = _coerce_index(index)
        n = len(self._entries)
        if m < 0 or m >= n:
            logger.warning("Audit path requested for leaf %d of %d", m, n)
            raise IndexOutOfRangeError("Audit path", m, n)

        audit_path = self._path(m, 0, n)
        logger.debug("Audit path generated: leaf=%d size=%d length=%d", m, n, len(audit_path))
        return audit_path

    def proof(self, m: int) -> List[bytes]:
        """
        Get a consistency proof between the first m entries and the whole tree.

        A proof is only meaningful for 0 < m < size. For m == 0 and m == size
        nothing needs proving and an empty list is returned. Negative sizes
        are not snapshots and raise instead of returning an empty list.

        Args:
            m: Size of the earlier snapshot

        Returns:
            Digests ordered from the deepest subtree to the root

        Raises:
            IndexTypeError: If m is not an integer
            IndexOutOfRangeError: If m is negative, exceeds the size, or the tree is empty
        """
        m = _coerce_index(m)
        n = len(self._entries)
        if n == 0 or m < 0 or m > n:
            logger.warning("Consistency proof requested for size %d of %d", m, n)
            raise IndexOutOfRangeError("Consistency proof", m, n)

        if m == 0 or m == n:
            return []

        consistency = self._subproof(m, 0, n, True)
        logger.debug(
            "Consistency proof generated: old_size=%d size=%d length=%d",
            m, n, len(consistency),
        )
        return consistency

    # -----------------------------------------------------------------------
    # Recursive walks over [start, end)
    # -----------------------------------------------------------------------

    def _mth(self, start: int, end: int) -> bytes:
        if self._memo is not None:
            with self._memo_lock:
                cached = self._memo.get((start, end))
            if cached is not None:
                return cached

        n = end - start
        if n == 0:
            digest = hash_empty()
        elif n == 1:
            digest = hash_leaf(self._entries[start])
        else:
            k = largest_power_of_two_less_than(n)
            digest = hash_children(
                self._mth(start, start + k),
                self._mth(start + k, end),
            )

        if self._memo is not None:
            with self._memo_lock:
                self._memo[(start, end)] = digest
        return digest

    def _path(self, m: int, start: int, end: int) -> List[bytes]:
        n = end - start
        if n == 1:
            return []

        k = largest_power_of_two_less_than(n)
        if m < k:
            audit_path = self._path(m, start, start + k)
            audit_path.append(self._mth(start + k, end))
        else:
            audit_path = self._path(m - k, start + k, end)
            audit_path.append(self._mth(start, start + k))
        return audit_path

    def _subproof(self, m: int, start: int, end: int, boundary_exact: bool) -> List[bytes]:
        n = end - start
        if m == n:
            # An exact boundary is the old root itself, which the verifier already has.
            if boundary_exact:
                return []
            return [self._mth(start, end)]

        k = largest_power_of_two_less_than(n)
        if m <= k:
            consistency = self._subproof(m, start, start + k, boundary_exact)
            consistency.append(self._mth(start + k, end))
        else:
            # Old boundary now lies strictly inside the right subtree.
            consistency = self._subproof(m - k, start + k, end, False)
            consistency.append(self._mth(start, start + k))
        return consistency
