# plotkernels

Pure-Python reference implementations of some of the building blocks used
when constructing proof-of-space plot tables. Every function takes ordinary
Python sequences of integers and returns new lists. That makes the package a
simple, readable baseline to check accelerated implementations against.
Invalid arguments raise `ValueError`. Out-of-range indices raise
`IndexError`.

## Installation

Install from a checkout of the package:

```
pip install .
```

The `test` extra also installs `pytest` and `hypothesis`, which the test
suite needs:

```
pip install ".[test]"
```

## Modules

### `plotkernels.pipeline`

Small array primitives:

- `identity_u32(count)` returns `[0, 1, ..., count-1]`.
- `gather(src, indices)` returns `[src[i] for i in indices]` and checks
  every index.
- `permute_t2(meta, xbits, indices)` applies one permutation to two parallel
  columns.
- `merge_pairs_stable(a_keys, a_vals, b_keys, b_vals)` merges two
  key-sorted key/value runs. Where keys are equal, entries from run A come
  first.

### `plotkernels.radix_sort`

A stable LSD radix sort that works in 4-bit passes:

- `sort_pairs_u32(keys, vals, begin_bit, end_bit)` sorts u32 key/value
  pairs.
- `sort_keys_u64(keys, begin_bit, end_bit)` sorts u64 keys.

Passes start at `begin_bit` and move up four bits at a time while the start
of the pass is below `end_bit`.

Two helpers give the scratch sizing that goes with a tiled implementation:

- `tile_count(count)` gives the number of 1024-item tiles.
- `sort_temp_bytes(count)` gives the scratch size in bytes: a per-tile
  16-bucket histogram plus its scanned offsets.

### `plotkernels.offsets`

Helpers for columns sorted by match info:

- `target_mask_for(num_match_target_bits)` returns the mask for the low
  match-target bits.
- `matching_section(section_l, num_section_bits)` gives the right-hand
  section that pairs with a left-hand section.
- `compute_bucket_offsets(match_infos, num_match_target_bits, num_buckets)`
  returns `num_buckets + 1` offsets: where each bucket starts, then the
  total.
- `compute_fine_bucket_offsets(match_infos, bucket_offsets,
  num_match_target_bits, fine_bits, num_buckets)` splits each bucket by the
  top `fine_bits` of the match target.

### `plotkernels.xs`

Sizing and post-processing for building the Xs table:

- `XsCandidate` is a frozen record with fields `match_info` and `x`.
- `ScratchLayout`, `align_up`, `layout_for` and `construct_xs_temp_bytes`
  lay out the scratch buffer: the sort scratch comes first, then four u32
  columns, each aligned to 256 bytes. When the first key column is supplied
  from outside the buffer, `keys_a_off` is `None`.
- `xor_const_for(testnet)` returns `0xA3B1C4D7` on testnet and `0`
  otherwise.
- `tile_ranges(total, tile_items=TILE_ITEMS)` yields `(begin, end)` spans
  of 2**18 items by default.
- `pack_xs(keys, vals)` zips the sorted columns into `XsCandidate` records.
- `sort_and_pack(match_infos, xs, k)` stably sorts by the low `k` bits of
  the match info, then packs.

## Example

```python
from plotkernels.offsets import compute_bucket_offsets
from plotkernels.radix_sort import sort_pairs_u32
from plotkernels.xs import sort_and_pack

keys, vals = sort_pairs_u32([5, 3, 5, 1], [0, 1, 2, 3], 0, 8)
# keys == [1, 3, 5, 5], vals == [3, 1, 0, 2]  (equal keys keep input order)

offsets = compute_bucket_offsets(keys, 2, 2)
# offsets == [0, 2, 4]

candidates = sort_and_pack([7, 2], [100, 200], 4)
# [XsCandidate(match_info=2, x=200), XsCandidate(match_info=7, x=100)]
```

## What this package does not do

- It contains no AES hashing. It does not generate match-info values for
  `x`, compute matching targets, or pair entries, so it cannot build the
  Xs, T1, T2 or T3 tables on its own. `sort_and_pack` expects you to supply
  match-info values you have already computed.
- It does not derive per-table match parameters and has no matching
  kernels.
- It does not write plot files, provides no command-line program, and does
  not run on a GPU.