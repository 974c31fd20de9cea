"""
Test-only root reconstruction for audit paths and consistency proofs.

Both walks repeat the split arithmetic used to generate the digests and
consume them from the root end of the list.
"""

from typing import List, Tuple

from merkletree import hash_children, largest_power_of_two_less_than


class ProofMismatch(Exception):
    """Raised when a path or proof has the wrong number of digests."""


def root_from_path(leaf_hash: bytes, index: int, size: int, audit_path: List[bytes]) -> bytes:
    remaining = list(audit_path)
    root = _climb(leaf_hash, index, size, remaining)
    if remaining:
        raise ProofMismatch(f"{len(remaining)} unused digests")
    return root


def _climb(leaf_hash: bytes, m: int, n: int, remaining: List[bytes]) -> bytes:
    if n == 1:
        return leaf_hash
    if not remaining:
        raise ProofMismatch("audit path too short")

    k = largest_power_of_two_less_than(n)
    sibling = remaining.pop()
    if m < k:
        return hash_children(_climb(leaf_hash, m, k, remaining), sibling)
    return hash_children(sibling, _climb(leaf_hash, m - k, n - k, remaining))


def roots_from_proof(
    old_root: bytes,
    old_size: int,
    size: int,
    consistency: List[bytes],
) -> Tuple[bytes, bytes]:
    """Return (old root, new root) as rebuilt from the proof."""
    remaining = list(consistency)
    roots = _walk(old_root, old_size, size, True, remaining)
    if remaining:
        raise ProofMismatch(f"{len(remaining)} unused digests")
    return roots


def _walk(
    old_root: bytes,
    m: int,
    n: int,
    boundary_exact: bool,
    remaining: List[bytes],
) -> Tuple[bytes, bytes]:
    if m == n:
        if boundary_exact:
            return old_root, old_root
        if not remaining:
            raise ProofMismatch("consistency proof too short")
        node = remaining.pop()
        return node, node

    if not remaining:
        raise ProofMismatch("consistency proof too short")

    k = largest_power_of_two_less_than(n)
    sibling = remaining.pop()
    if m <= k:
        old, new = _walk(old_root, m, k, boundary_exact, remaining)
        return old, hash_children(new, sibling)

    # k < m < n <= 2k, so the old tree splits at k as well
    old, new = _walk(old_root, m - k, n - k, False, remaining)
    return hash_children(sibling, old), hash_children(sibling, new)
