import pytest
from pydantic import ValidationError

from splitfile.exceptions import (
    EmptySourceError,
    InvalidArgumentError,
    TooManyPartsError,
)
from splitfile.planner import (
    plan_by_count,
    plan_by_size,
    round_half_up,
    validate_plan,
)
from splitfile.structs import PartDescriptor


def sizes(descriptors):
    return [d.size for d in descriptors]


def test_plan_by_count_last_part_takes_remainder():
    plan = plan_by_count(10, 3)

    assert [(d.index, d.start, d.end) for d in plan] == [
        (1, 0, 3),
        (2, 3, 6),
        (3, 6, 10),
    ]


def test_plan_by_count_remainder_can_nearly_double_last_part():
    plan = plan_by_count(19, 10)

    assert sizes(plan) == [1] * 9 + [10]


def test_plan_by_count_single_part():
    assert sizes(plan_by_count(42, 1)) == [42]


def test_plan_by_count_one_byte_per_part():
    plan = plan_by_count(5, 5)
    assert sizes(plan) == [1, 1, 1, 1, 1]


@pytest.mark.parametrize(
    "total_size,part_count",
    [(1, 1), (100, 7), (1000, 999), (100_000, 512), (123_457, 14)],
)
def test_plan_by_count_covers_whole_file(total_size, part_count):
    plan = plan_by_count(total_size, part_count)

    assert len(plan) == part_count
    assert sum(sizes(plan)) == total_size
    validate_plan(plan, total_size)


@pytest.mark.parametrize("part_count", [0, -3, 2.5, True, "4"])
def test_plan_by_count_rejects_invalid_part_count(part_count):
    with pytest.raises(InvalidArgumentError, match="parts"):
        plan_by_count(100, part_count)


def test_plan_by_count_rejects_empty_source():
    with pytest.raises(EmptySourceError):
        plan_by_count(0, 3)


def test_plan_by_count_rejects_more_parts_than_bytes():
    with pytest.raises(TooManyPartsError, match="Too many parts"):
        plan_by_count(3, 4)


def test_plan_by_size_short_last_part():
    plan = plan_by_size(250_000, 100_000)

    assert sizes(plan) == [100_000, 100_000, 50_000]
    validate_plan(plan, 250_000)


def test_plan_by_size_exact_multiple():
    assert sizes(plan_by_size(300, 100)) == [100, 100, 100]


def test_plan_by_size_larger_than_file():
    assert sizes(plan_by_size(100_000, 100_000)) == [100_000]
    assert sizes(plan_by_size(10, 1_000)) == [10]


@pytest.mark.parametrize(
    "total_size,max_size",
    [(1, 1), (999, 10), (100_000, 4096), (65_537, 65_536)],
)
def test_plan_by_size_respects_max_size(total_size, max_size):
    plan = plan_by_size(total_size, max_size)

    assert all(d.size <= max_size for d in plan)
    assert sum(sizes(plan)) == total_size
    validate_plan(plan, total_size)


def test_plan_by_size_rounds_half_up():
    # 2.5 rounds to 3, not to 2 as round() would
    plan = plan_by_size(10, 2.5)

    assert sizes(plan) == [3, 3, 3, 1]


def test_plan_by_size_rounds_down_below_half():
    plan = plan_by_size(10, 2.4)

    assert sizes(plan) == [2, 2, 2, 2, 2]


def test_plan_by_size_rounded_down_last_part_can_exceed_max_size():
    # ceil(11 / 2.4) = 5 parts of 2 bytes; the last one absorbs the rest
    plan = plan_by_size(11, 2.4)

    assert sizes(plan) == [2, 2, 2, 2, 3]
    validate_plan(plan, 11)


@pytest.mark.parametrize("max_size", [0, -5, 0.4])
def test_plan_by_size_rejects_sub_byte_parts(max_size):
    with pytest.raises(TooManyPartsError):
        plan_by_size(100, max_size)


def test_plan_by_size_rejects_fraction_leaving_last_part_empty():
    with pytest.raises(InvalidArgumentError, match="empty"):
        plan_by_size(10, 0.5)


@pytest.mark.parametrize("max_size", ["100", None, float("nan"), float("inf")])
def test_plan_by_size_rejects_non_numbers(max_size):
    with pytest.raises(InvalidArgumentError):
        plan_by_size(100, max_size)


def test_plan_by_size_rejects_empty_source():
    with pytest.raises(EmptySourceError):
        plan_by_size(0, 10)


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(0.49) == 0
    assert round_half_up(7) == 7


def test_validate_plan_detects_gap():
    plan = [
        PartDescriptor(index=1, start=0, end=5),
        PartDescriptor(index=2, start=6, end=10),
    ]
    with pytest.raises(InvalidArgumentError, match="not contiguous"):
        validate_plan(plan, 10)


def test_validate_plan_detects_short_coverage():
    plan = [PartDescriptor(index=1, start=0, end=5)]
    with pytest.raises(InvalidArgumentError, match="expected 10"):
        validate_plan(plan, 10)


def test_validate_plan_detects_bad_indices():
    plan = [
        PartDescriptor(index=1, start=0, end=5),
        PartDescriptor(index=3, start=5, end=10),
    ]
    with pytest.raises(InvalidArgumentError, match="position 2"):
        validate_plan(plan, 10)


def test_validate_plan_rejects_empty_plan():
    with pytest.raises(InvalidArgumentError):
        validate_plan([], 10)


def test_part_descriptor_rejects_empty_range():
    with pytest.raises(ValidationError):
        PartDescriptor(index=1, start=5, end=5)


def test_part_descriptor_rejects_zero_index():
    with pytest.raises(ValidationError):
        PartDescriptor(index=0, start=0, end=1)


def test_part_descriptor_is_frozen():
    descriptor = PartDescriptor(index=1, start=0, end=8)

    assert descriptor.size == 8
    with pytest.raises(ValidationError):
        descriptor.end = 9
