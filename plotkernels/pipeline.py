"""Simple pipeline steps: identity fill, gathers, permutation and stable merge."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from operator import itemgetter

_U32_MASK = 0xFFFFFFFF


def identity_u32(count: int) -> list[int]:
    """Return ``[0, 1, ..., count-1]`` truncated to 32-bit values."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return [i & _U32_MASK for i in range(count)]


def _check_indices(indices: Sequence[int], size: int) -> None:
    for i in indices:
        if not 0 <= i < size:
            raise IndexError(f"index {i} out of range for source of length {size}")


def gather(src: Sequence[int], indices: Sequence[int]) -> list[int]:
    """Return ``[src[i] for i in indices]``; indices must lie within ``src``."""
    _check_indices(indices, len(src))
    return [src[i] for i in indices]


def permute_t2(
    meta: Sequence[int], xbits: Sequence[int], indices: Sequence[int]
) -> tuple[list[int], list[int]]:
    """Apply the same permutation to the parallel ``meta`` and ``xbits`` columns."""
    if len(meta) != len(xbits):
        raise ValueError("meta and xbits must have the same length")
    _check_indices(indices, len(meta))
    return [meta[i] for i in indices], [xbits[i] for i in indices]


def merge_pairs_stable(
    a_keys: Sequence[int],
    a_vals: Sequence[int],
    b_keys: Sequence[int],
    b_vals: Sequence[int],
) -> tuple[list[int], list[int]]:
    """Merge two key-sorted (key, value) runs; on equal keys run A comes first."""
    if len(a_keys) != len(a_vals):
        raise ValueError("a_keys and a_vals must have the same length")
    if len(b_keys) != len(b_vals):
        raise ValueError("b_keys and b_vals must have the same length")
    merged = list(
        heapq.merge(zip(a_keys, a_vals), zip(b_keys, b_vals), key=itemgetter(0))
    )
    return [k for k, _ in merged], [v for _, v in merged]