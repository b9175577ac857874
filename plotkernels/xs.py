"""Xs construction: scratch layout, tiling, and the sort-and-pack step.

Building the Xs table takes three steps. First the generator writes pairs of
``(match_info, x)``. Next the pairs are stably radix sorted by the low ``k``
bits of the match info. Last, the sorted columns are packed into
``XsCandidate`` records. The generator hashes with AES and is not part of
this module. What is here is the scratch sizing, the tiling of the work, and
the sort-and-pack that follows generation.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from plotkernels.radix_sort import sort_pairs_u32, sort_temp_bytes

TESTNET_G_XOR_CONST = 0xA3B1C4D7
SCRATCH_ALIGNMENT = 256
TILE_ITEMS = 1 << 18
MIN_K = 18
MAX_K = 32
_U32_BYTES = 4


@dataclass(frozen=True)
class XsCandidate:
    """One Xs entry: the match info computed for ``x``, and ``x`` itself."""

    match_info: int
    x: int


@dataclass(frozen=True)
class ScratchLayout:
    """Byte offsets of the regions in the Xs construction scratch buffer.

    The sort scratch comes first. After it come the key and value
    double-buffers, each region aligned to 256 bytes. When the first key
    buffer is supplied from outside the scratch, ``keys_a_off`` is ``None``.
    """

    sort_bytes: int
    keys_a_off: int | None
    keys_b_off: int
    vals_a_off: int
    vals_b_off: int
    total_bytes: int


def align_up(value: int, alignment: int) -> int:
    """Round ``value`` up to the next multiple of ``alignment``."""
    if alignment <= 0:
        raise ValueError(f"alignment must be positive, got {alignment}")
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return -(-value // alignment) * alignment


def layout_for(total: int, sort_bytes: int, split_keys_a: bool) -> ScratchLayout:
    """Lay out the sort scratch and the four ``total``-entry u32 columns."""
    if total < 0:
        raise ValueError(f"total must be non-negative, got {total}")
    if sort_bytes < 0:
        raise ValueError(f"sort_bytes must be non-negative, got {sort_bytes}")
    column = _U32_BYTES * total
    cur = align_up(sort_bytes, SCRATCH_ALIGNMENT)

    def claim() -> int:
        nonlocal cur
        start = cur
        cur = align_up(cur + column, SCRATCH_ALIGNMENT)
        return start

    keys_a_off = None if split_keys_a else claim()
    keys_b_off = claim()
    vals_a_off = claim()
    vals_b_off = claim()
    return ScratchLayout(
        sort_bytes=sort_bytes,
        keys_a_off=keys_a_off,
        keys_b_off=keys_b_off,
        vals_a_off=vals_a_off,
        vals_b_off=vals_b_off,
        total_bytes=cur,
    )


def _check_k(k: int) -> None:
    if not MIN_K <= k <= MAX_K or k % 2:
        raise ValueError(f"k must be even and in [{MIN_K}, {MAX_K}], got {k}")


def construct_xs_temp_bytes(k: int, split_keys_a: bool = False) -> int:
    """Return the scratch bytes needed to construct Xs for ``2**k`` entries."""
    _check_k(k)
    total = 1 << k
    return layout_for(total, sort_temp_bytes(total), split_keys_a).total_bytes


def xor_const_for(testnet: bool) -> int:
    """Return the constant XORed into ``x`` before hashing (non-zero on testnet)."""
    return TESTNET_G_XOR_CONST if testnet else 0


def tile_ranges(total: int, tile_items: int = TILE_ITEMS) -> Iterator[tuple[int, int]]:
    """Yield ``(begin, end)`` spans that cover ``[0, total)`` in tiles of ``tile_items``."""
    if total < 0:
        raise ValueError(f"total must be non-negative, got {total}")
    if tile_items <= 0:
        raise ValueError(f"tile_items must be positive, got {tile_items}")
    for begin in range(0, total, tile_items):
        yield begin, min(begin + tile_items, total)


def pack_xs(keys: Sequence[int], vals: Sequence[int]) -> list[XsCandidate]:
    """Zip match-info keys and x values into ``XsCandidate`` records."""
    if len(keys) != len(vals):
        raise ValueError("keys and vals must have the same length")
    return [XsCandidate(match_info=key, x=val) for key, val in zip(keys, vals)]


def sort_and_pack(
    match_infos: Sequence[int], xs: Sequence[int], k: int
) -> list[XsCandidate]:
    """Stably sort ``(match_info, x)`` by the low ``k`` bits of the match info, then pack."""
    if not 1 <= k <= 32:
        raise ValueError(f"k must be in [1, 32], got {k}")
    sorted_keys, sorted_vals = sort_pairs_u32(match_infos, xs, 0, k)
    return pack_xs(sorted_keys, sorted_vals)