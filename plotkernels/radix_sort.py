"""Stable LSD radix sort over 4-bit digits, for u32 key/value pairs and u64 keys.

Passes start at ``begin_bit`` and advance four bits at a time while the pass
start is below ``end_bit``. The last pass can therefore read up to three bits
above ``end_bit``. Each pass is stable, so records with equal digits keep
their input order.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import chain
from typing import TypeVar

RADIX_BITS = 4
RADIX = 1 << RADIX_BITS
RADIX_MASK = RADIX - 1
WG_SIZE = 256
ITEMS_PER_THREAD = 4
TILE_SIZE = WG_SIZE * ITEMS_PER_THREAD

_U32_BYTES = 4
_U32_MAX = (1 << 32) - 1
_U64_MAX = (1 << 64) - 1

_T = TypeVar("_T")


def tile_count(count: int) -> int:
    """Return the number of ``TILE_SIZE`` tiles needed to cover ``count`` items."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return -(-count // TILE_SIZE)


def sort_temp_bytes(count: int) -> int:
    """Return the scratch size in bytes: a per-tile histogram plus its scanned offsets."""
    return _U32_BYTES * RADIX * tile_count(count) * 2


def _check_bits(begin_bit: int, end_bit: int, width: int) -> None:
    if begin_bit < 0:
        raise ValueError(f"begin_bit must be non-negative, got {begin_bit}")
    if end_bit > width:
        raise ValueError(f"end_bit must be at most {width}, got {end_bit}")


def _check_keys(keys: Iterable[int], limit: int, width: int) -> None:
    for key in keys:
        if not 0 <= key <= limit:
            raise ValueError(f"key {key} does not fit in {width} bits")


def _radix_passes(
    records: list[_T], key_of, begin_bit: int, end_bit: int
) -> list[_T]:
    for bit in range(begin_bit, end_bit, RADIX_BITS):
        buckets: list[list[_T]] = [[] for _ in range(RADIX)]
        for record in records:
            buckets[(key_of(record) >> bit) & RADIX_MASK].append(record)
        records = list(chain.from_iterable(buckets))
    return records


def sort_pairs_u32(
    keys: Sequence[int], vals: Sequence[int], begin_bit: int, end_bit: int
) -> tuple[list[int], list[int]]:
    """Stably sort u32 ``(key, value)`` pairs by the key digits in the bit range.

    Returns new key and value lists; the inputs are left unchanged.
    """
    if len(keys) != len(vals):
        raise ValueError("keys and vals must have the same length")
    _check_bits(begin_bit, end_bit, 32)
    _check_keys(keys, _U32_MAX, 32)
    _check_keys(vals, _U32_MAX, 32)
    pairs = _radix_passes(
        list(zip(keys, vals)), lambda pair: pair[0], begin_bit, end_bit
    )
    return [k for k, _ in pairs], [v for _, v in pairs]


def sort_keys_u64(keys: Sequence[int], begin_bit: int, end_bit: int) -> list[int]:
    """Stably sort u64 keys by their digits in the bit range; returns a new list."""
    _check_bits(begin_bit, end_bit, 64)
    _check_keys(keys, _U64_MAX, 64)
    return _radix_passes(list(keys), lambda key: key, begin_bit, end_bit)