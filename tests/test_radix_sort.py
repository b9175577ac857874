import pytest
from hypothesis import given
from hypothesis import strategies as st

from plotkernels.radix_sort import (
    TILE_SIZE,
    sort_keys_u64,
    sort_pairs_u32,
    sort_temp_bytes,
    tile_count,
)

u32 = st.integers(min_value=0, max_value=(1 << 32) - 1)
u64 = st.integers(min_value=0, max_value=(1 << 64) - 1)


def test_tile_count_boundaries():
    assert tile_count(0) == 0
    assert tile_count(TILE_SIZE) == 1
    assert tile_count(TILE_SIZE + 1) == tile_count(TILE_SIZE) + 1


def test_tile_count_rejects_negative():
    with pytest.raises(ValueError):
        tile_count(-1)


def test_sort_temp_bytes_one_tile():
    assert sort_temp_bytes(TILE_SIZE) == 128


def test_sort_temp_bytes_scales_with_tiles():
    assert sort_temp_bytes(TILE_SIZE * 3) == 3 * sort_temp_bytes(TILE_SIZE)
    assert sort_temp_bytes(0) == 0
    assert sort_temp_bytes(TILE_SIZE * 2 - 1) == sort_temp_bytes(TILE_SIZE * 2)


@given(st.lists(st.tuples(u32, u32), max_size=200))
def test_sort_pairs_full_width_matches_stable_sort(pairs):
    keys = [k for k, _ in pairs]
    vals = [v for _, v in pairs]
    out_keys, out_vals = sort_pairs_u32(keys, vals, 0, 32)
    expected = sorted(pairs, key=lambda p: p[0])
    assert list(zip(out_keys, out_vals)) == expected


@given(st.lists(u64, max_size=200))
def test_sort_keys_u64_full_width(keys):
    assert sort_keys_u64(keys, 0, 64) == sorted(keys)


def test_sort_pairs_is_stable_for_equal_keys():
    keys = [5, 3, 5, 3, 5]
    vals = [10, 20, 30, 40, 50]
    out_keys, out_vals = sort_pairs_u32(keys, vals, 0, 32)
    assert out_keys == [3, 3, 5, 5, 5]
    assert out_vals == [20, 40, 10, 30, 50]


def test_sort_pairs_only_considers_bit_range():
    keys = [0x21, 0x12, 0x03]
    vals = [0, 1, 2]
    out_keys, out_vals = sort_pairs_u32(keys, vals, 4, 8)
    assert out_keys == [0x03, 0x12, 0x21]
    assert out_vals == [2, 1, 0]
    low_keys, low_vals = sort_pairs_u32([0x10, 0x01, 0x00], [0, 1, 2], 4, 8)
    assert low_keys == [0x01, 0x00, 0x10]
    assert low_vals == [1, 2, 0]


def test_last_pass_reads_a_whole_digit():
    # end_bit 6 still runs a pass at bit 4, which covers bits 4..7.
    keys = [0x80, 0x00]
    out_keys, out_vals = sort_pairs_u32(keys, [0, 1], 0, 6)
    assert out_keys == [0x00, 0x80]
    assert out_vals == [1, 0]


def test_empty_bit_range_returns_copy_in_input_order():
    keys = [3, 1, 2]
    vals = [7, 8, 9]
    out_keys, out_vals = sort_pairs_u32(keys, vals, 8, 8)
    assert out_keys == keys
    assert out_vals == vals
    assert out_keys is not keys


def test_inputs_are_not_modified():
    keys = [9, 4, 7]
    vals = [1, 2, 3]
    sort_pairs_u32(keys, vals, 0, 32)
    assert keys == [9, 4, 7]
    assert vals == [1, 2, 3]
    u64_keys = [1 << 40, 5]
    sort_keys_u64(u64_keys, 0, 64)
    assert u64_keys == [1 << 40, 5]


@given(st.lists(u64, max_size=100), st.integers(min_value=0, max_value=15))
def test_sort_keys_u64_partial_range_orders_digits(keys, digit_index):
    begin = digit_index * 4
    out = sort_keys_u64(keys, begin, begin + 4)
    digits = [(k >> begin) & 0xF for k in out]
    assert digits == sorted(digits)
    assert sorted(out) == sorted(keys)


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        sort_pairs_u32([1, 2], [1], 0, 32)


def test_out_of_range_keys_rejected():
    with pytest.raises(ValueError):
        sort_pairs_u32([1 << 32], [0], 0, 32)
    with pytest.raises(ValueError):
        sort_keys_u64([-1], 0, 64)


def test_bad_bit_range_rejected():
    with pytest.raises(ValueError):
        sort_pairs_u32([1], [1], 0, 33)
    with pytest.raises(ValueError):
        sort_keys_u64([1], -4, 8)