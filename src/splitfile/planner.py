"""
Byte-range planning for split operations.

Both strategies are pure: they take the source size and return an ordered,
contiguous list of :class:`PartDescriptor` covering ``[0, total_size)``.
All rounding slack is pushed onto the last part so that existing part sets
can be reproduced byte for byte.
"""

import math
import numbers

from splitfile.exceptions import (
    EmptySourceError,
    InvalidArgumentError,
    TooManyPartsError,
)
from splitfile.structs import PartDescriptor


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positive values."""
    return math.floor(value + 0.5)


def _check_total_size(total_size: int) -> None:
    if total_size < 0:
        raise InvalidArgumentError(f"Invalid total size: {total_size}")
    if total_size == 0:
        raise EmptySourceError("File is empty")


def check_part_count(part_count: int) -> None:
    if (
        isinstance(part_count, bool)
        or not isinstance(part_count, numbers.Integral)
        or part_count < 1
    ):
        raise InvalidArgumentError(
            'Parameter "parts" is invalid, must be an integer >= 1 '
            f"(got {part_count!r})"
        )


def plan_by_count(total_size: int, part_count: int) -> list[PartDescriptor]:
    """
    Plan exactly ``part_count`` parts.

    Every part spans ``total_size // part_count`` bytes except the last one,
    which also takes the remainder.

    Raises:
        InvalidArgumentError: ``part_count`` is not an integer >= 1.
        EmptySourceError: ``total_size`` is zero.
        TooManyPartsError: more parts than bytes were requested.
    """
    check_part_count(part_count)
    _check_total_size(total_size)

    split_size = total_size // part_count
    if split_size < 1:
        raise TooManyPartsError("Too many parts, or file too small!")

    last_split_size = split_size + total_size % part_count

    descriptors = []
    for i in range(part_count):
        start = i * split_size
        size = last_split_size if i == part_count - 1 else split_size
        descriptors.append(PartDescriptor(index=i + 1, start=start, end=start + size))
    return descriptors


def plan_by_size(total_size: int, max_size: float) -> list[PartDescriptor]:
    """
    Plan parts of ``round(max_size)`` bytes each.

    The part count is ``ceil(total_size / max_size)`` and the end of the last
    part is forced to ``total_size``. ``max_size`` is rounded half up before
    use, so a fractional value may make the last part differ from the others.

    Raises:
        InvalidArgumentError: ``max_size`` is not a number, or a fractional
            ``max_size`` leaves the last part empty.
        EmptySourceError: ``total_size`` is zero.
        TooManyPartsError: ``max_size`` rounds to less than one byte.
    """
    if isinstance(max_size, bool) or not isinstance(max_size, numbers.Real):
        raise InvalidArgumentError(f"Invalid max size: {max_size!r}")
    if not math.isfinite(max_size):
        raise InvalidArgumentError(f"Invalid max size: {max_size!r}")
    _check_total_size(total_size)

    split_size = round_half_up(max_size)
    if split_size < 1:
        raise TooManyPartsError("Too many parts or file too small!")

    if isinstance(max_size, numbers.Integral):
        part_count = -(-total_size // max_size)
    else:
        part_count = math.ceil(total_size / max_size)

    last_start = (part_count - 1) * split_size
    if last_start >= total_size:
        raise InvalidArgumentError(
            f"Max size {max_size!r} rounds to {split_size} bytes, which leaves "
            f"the last of {part_count} parts empty"
        )

    descriptors = [
        PartDescriptor(index=i + 1, start=i * split_size, end=(i + 1) * split_size)
        for i in range(part_count - 1)
    ]
    descriptors.append(
        PartDescriptor(index=part_count, start=last_start, end=total_size)
    )
    return descriptors


def validate_plan(descriptors: list[PartDescriptor], total_size: int) -> None:
    """Check that ``descriptors`` cover ``[0, total_size)`` without gaps."""
    if not descriptors:
        raise InvalidArgumentError("Plan is empty")
    if descriptors[0].start != 0:
        raise InvalidArgumentError("Plan does not start at offset 0")

    for position, descriptor in enumerate(descriptors, start=1):
        if descriptor.index != position:
            raise InvalidArgumentError(
                f"Part {descriptor.index} found at position {position}"
            )

    for previous, current in zip(descriptors, descriptors[1:]):
        if previous.end != current.start:
            raise InvalidArgumentError(
                f"Parts {previous.index} and {current.index} are not contiguous"
            )

    if descriptors[-1].end != total_size:
        raise InvalidArgumentError(
            f"Plan ends at {descriptors[-1].end}, expected {total_size}"
        )


__all__ = [
    "check_part_count",
    "plan_by_count",
    "plan_by_size",
    "validate_plan",
    "round_half_up",
]
