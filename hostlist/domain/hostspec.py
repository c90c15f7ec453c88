# /hostlist/domain/hostspec.py
from __future__ import annotations

import string
from collections.abc import Iterator
from dataclasses import dataclass

U64_MAX = 2**64 - 1

# ==== Errors ====


class HostSpecError(ValueError):
    """Base for the ways a single host expression can be malformed."""

    message = "the expression could not be parsed"

    def __init__(self) -> None:
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__


class ExtraStuff(HostSpecError):
    message = (
        "the expression contained a spec with unknown extra characters "
        "(e.g after the closing ']' character)"
    )


class BadNumbers(HostSpecError):
    message = (
        "the expression contained a spec with numbers that couldn't be understood, "
        "or no numbers at all"
    )

    def __init__(self, reason: str) -> None:
        super().__init__()
        self.reason = reason


class NoRange(HostSpecError):
    message = (
        "the expression contained a spec that looked like a range[numbers], "
        "but was badly formed"
    )


# ==== Range-Spec ====


@dataclass(frozen=True, slots=True)
class RangeSpec:
    """A literal prefix plus an inclusive ``[low, high]`` interval.

    Iterating yields ``prefix + str(i)`` for each ``i`` in ascending order.
    Each ``iter()`` starts over; an inverted interval yields nothing.
    """

    prefix: str
    low: int
    high: int

    def __iter__(self) -> Iterator[str]:
        # range() is lazy and empty when low > high
        for i in range(self.low, self.high + 1):
            yield f"{self.prefix}{i}"

    @property
    def size(self) -> int:
        return max(0, self.high - self.low + 1)


# ==== Parsing ====


def parse_u64(text: str) -> int:
    """Parse an unsigned 64-bit decimal integer, optionally prefixed with '+'."""
    digits = text[1:] if text.startswith("+") else text
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not digits or any(c not in string.digits for c in digits):
        raise ValueError("invalid digit found in string")
    significant = digits.lstrip("0") or "0"
    # int() rejects strings past sys.get_int_max_str_digits()
    if len(significant) > len(str(U64_MAX)):
        raise ValueError("number too large to fit in target type")
    value = int(significant)
    if value > U64_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def parse_range(fragment: str) -> tuple[int, int]:
    """Turn ``"N"`` or ``"N-M"`` into an inclusive ``(low, high)`` pair.

    Splits on the first '-' only, so ``"1-2-3"`` fails on ``"2-3"``.
    """
    start, sep, end = fragment.partition("-")
    try:
        if sep:
            return parse_u64(start), parse_u64(end)
        n = parse_u64(fragment)
    except ValueError as e:
        raise BadNumbers(str(e)) from e
    return n, n


def _decompose_single(raw: str) -> RangeSpec:
    prefix = raw.rstrip(string.digits)
    try:
        n = parse_u64(raw[len(prefix):])
    except ValueError as e:
        raise BadNumbers(str(e)) from e
    return RangeSpec(prefix=prefix, low=n, high=n)


def decompose(raw: str) -> list[RangeSpec]:
    """Split one expression into its range-specs, in left-to-right order.

    ``host[1-3,7]`` gives two specs sharing the prefix ``host``; a bare
    ``web12`` gives one spec for the trailing digit run.
    """
    prefix, bracket, rest = raw.partition("[")
    if not bracket:
        return [_decompose_single(raw)]

    ranges, closing, suffix = rest.partition("]")
    if not closing:
        raise NoRange()
    if suffix:
        raise ExtraStuff()

    specs: list[RangeSpec] = []
    for fragment in ranges.split(","):
        low, high = parse_range(fragment)
        specs.append(RangeSpec(prefix=prefix, low=low, high=high))
    return specs
