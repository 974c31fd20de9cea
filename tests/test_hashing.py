"""
Tests for the RFC 6962 hashing primitives.
"""

import hashlib

from merkletree import (
    DIGEST_SIZE,
    HASH_ALGORITHM,
    LEAF_PREFIX,
    NODE_PREFIX,
    hash_children,
    hash_empty,
    hash_leaf,
)


class TestConstants:
    """Prefixes and digest parameters shared with verifiers."""

    def test_prefixes(self):
        assert LEAF_PREFIX == b"\x00"
        assert NODE_PREFIX == b"\x01"
        assert LEAF_PREFIX != NODE_PREFIX

    def test_digest_parameters(self):
        assert HASH_ALGORITHM == "sha256"
        assert DIGEST_SIZE == hashlib.new(HASH_ALGORITHM).digest_size


class TestHashFunctions:
    """Tests for hash_empty, hash_leaf and hash_children."""

    def test_hash_empty(self):
        assert hash_empty() == hashlib.sha256(b"").digest()

    def test_hash_leaf(self):
        assert hash_leaf(b"hello") == hashlib.sha256(b"\x00hello").digest()
        assert len(hash_leaf(b"hello")) == DIGEST_SIZE

    def test_hash_children(self):
        left = hash_leaf(b"a")
        right = hash_leaf(b"b")

        assert hash_children(left, right) == hashlib.sha256(b"\x01" + left + right).digest()

    def test_children_order_matters(self):
        left = hash_leaf(b"a")
        right = hash_leaf(b"b")

        assert hash_children(left, right) != hash_children(right, left)

    def test_leaf_differs_from_raw_sha256(self):
        assert hash_leaf(b"a") != hashlib.sha256(b"a").digest()
