"""Bucket and fine-bucket offset tables over sorted match-info columns.

A match-info word splits into a bucket id (the bits above
``num_match_target_bits``) and a match target (the bits below). For a column
sorted by match info, the bucket offsets give where each bucket starts. The
fine offsets split each bucket further by the top ``fine_bits`` of the
target.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence

_U32_MASK = 0xFFFFFFFF


def target_mask_for(num_match_target_bits: int) -> int:
    """Return the mask that selects the low ``num_match_target_bits`` of a u32."""
    if num_match_target_bits < 0:
        raise ValueError(
            f"num_match_target_bits must be non-negative, got {num_match_target_bits}"
        )
    if num_match_target_bits >= 32:
        return _U32_MASK
    return (1 << num_match_target_bits) - 1


def matching_section(section_l: int, num_section_bits: int) -> int:
    """Return the right-hand section that pairs with ``section_l``.

    The section id is rotated left by one bit, incremented, and rotated back,
    all within ``num_section_bits`` bits.
    """
    if num_section_bits < 1:
        raise ValueError(
            f"num_section_bits must be at least 1, got {num_section_bits}"
        )
    mask = (1 << num_section_bits) - 1
    if not 0 <= section_l <= mask:
        raise ValueError(
            f"section {section_l} out of range for {num_section_bits} section bits"
        )
    rotated = ((section_l << 1) | (section_l >> (num_section_bits - 1))) & mask
    bumped = (rotated + 1) & mask
    return ((bumped >> 1) | (bumped << (num_section_bits - 1))) & mask


def compute_bucket_offsets(
    match_infos: Sequence[int], num_match_target_bits: int, num_buckets: int
) -> list[int]:
    """Return ``num_buckets + 1`` offsets: where each bucket starts, then the total.

    ``match_infos`` must be sorted by bucket id (``mi >> num_match_target_bits``).
    """
    if num_match_target_bits < 0:
        raise ValueError(
            f"num_match_target_bits must be non-negative, got {num_match_target_bits}"
        )
    if num_buckets < 0:
        raise ValueError(f"num_buckets must be non-negative, got {num_buckets}")

    def bucket_of(mi: int) -> int:
        return mi >> num_match_target_bits

    offsets = [bisect_left(match_infos, b, key=bucket_of) for b in range(num_buckets)]
    offsets.append(len(match_infos))
    return offsets


def compute_fine_bucket_offsets(
    match_infos: Sequence[int],
    bucket_offsets: Sequence[int],
    num_match_target_bits: int,
    fine_bits: int,
    num_buckets: int,
) -> list[int]:
    """Return ``num_buckets * 2**fine_bits + 1`` fine offsets.

    Entry ``b * 2**fine_bits + f`` is the first row of bucket ``b`` whose
    target has top ``fine_bits`` bits ``>= f``; the last entry is the total
    row count taken from ``bucket_offsets[num_buckets]``.
    """
    if fine_bits < 0:
        raise ValueError(f"fine_bits must be non-negative, got {fine_bits}")
    if fine_bits > num_match_target_bits:
        raise ValueError(
            f"fine_bits ({fine_bits}) exceeds num_match_target_bits "
            f"({num_match_target_bits})"
        )
    if num_buckets < 0:
        raise ValueError(f"num_buckets must be non-negative, got {num_buckets}")
    if len(bucket_offsets) < num_buckets + 1:
        raise ValueError(
            f"bucket_offsets needs {num_buckets + 1} entries, got {len(bucket_offsets)}"
        )

    fine_count = 1 << fine_bits
    target_mask = target_mask_for(num_match_target_bits)
    shift = num_match_target_bits - fine_bits

    def fine_key_of(mi: int) -> int:
        return (mi & target_mask) >> shift

    fine_offsets = [
        bisect_left(
            match_infos,
            fine_key,
            bucket_offsets[r_bucket],
            bucket_offsets[r_bucket + 1],
            key=fine_key_of,
        )
        for r_bucket in range(num_buckets)
        for fine_key in range(fine_count)
    ]
    fine_offsets.append(bucket_offsets[num_buckets])
    return fine_offsets