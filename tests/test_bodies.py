import pytest

from enginebravo.bodies import (
    BodyFlags,
    BodyID,
    BodyProperties,
    FilterCategory,
    WorldID,
    category_bits,
    mask_bits,
)


def test_filter_category_values_match_category_bits():
    assert category_bits(1) == FilterCategory.PLAYER
    assert category_bits(5) == FilterCategory.BULLET
    assert FilterCategory(0x00000008) is FilterCategory.WALLACTIVE


def test_filter_categories_cover_bits_one_to_five():
    total = sum(c.value for c in FilterCategory)
    assert mask_bits([1, 2, 3, 4, 5]) == total
    assert total == 0x3E


def test_body_id_default_is_unassigned():
    assert BodyID() == BodyID(-1, 0, 0)


@pytest.mark.parametrize(
    "args",
    [(2**31, 0, 0), (-(2**31) - 1, 0, 0), (0, 0x10000, 0), (0, 0, -1)],
)
def test_body_id_out_of_range(args):
    with pytest.raises(ValueError):
        BodyID(*args)


def test_world_id_out_of_range():
    with pytest.raises(ValueError):
        WorldID(0x10000, 0)


def test_world_id_equality():
    assert WorldID(3, 1) == WorldID(3, 1)
    assert WorldID(3, 1) != WorldID(3, 2)


def test_flags_and_properties_defaults():
    assert BodyFlags() == BodyFlags(False, False, False)
    assert BodyProperties() == BodyProperties(0, 0, 0, 0, 0)


def test_category_bits_zero_is_lowest_bit():
    assert category_bits(0) == 1


def test_category_bits_negative_raises():
    with pytest.raises(ValueError):
        category_bits(-1)


def test_mask_bits_empty():
    assert mask_bits([]) == 0


@pytest.mark.parametrize("c", range(16))
def test_single_category_mask_matches_category_bits(c):
    assert mask_bits([c]) == category_bits(c)


def test_mask_bits_is_union():
    assert mask_bits([1, 3, 5]) == category_bits(1) | category_bits(3) | category_bits(5)


def test_mask_bits_ignores_duplicates_and_order():
    assert mask_bits([4, 2, 4, 2]) == mask_bits([2, 4])


def test_mask_bits_truncated_to_16_bits():
    assert mask_bits([16]) == 0
    assert mask_bits([2, 20]) == mask_bits([2])


def test_mask_bits_negative_raises():
    with pytest.raises(ValueError):
        mask_bits([1, -3])