"""
Unsigned integer base types and exact prefix tier selection.

Python int has arbitrary precision, so fixed-width unsigned types (u8 ... u128) are modelled
as range descriptors. A formatter checks its magnitude and prefix multiplier against the
descriptor, which keeps the behaviour of narrow integer types (a u8 cannot hold 1000)
without ever leaving exact integer arithmetic.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@runtime_checkable
class SupportsIndex(Protocol):
    """Protocol for duck-typed exact integers (NumPy integer scalars and the like)."""

    def __index__(self) -> int: ...


class BaseTypeTooSmall(OverflowError):
    """
    The prefix multiplier cannot be represented in the configured integer base type.

    This is a configuration defect (e.g. an 8-bit base type with SI prefixes), not a data
    condition, and is raised before any digits are produced.
    """

    def __init__(self, multiplier: int, int_type: "IntType"):
        self.multiplier = multiplier
        self.int_type = int_type
        super().__init__(
            f"multiplier too large for base type: {multiplier} does not fit into "
            f"{int_type.name} (max {int_type.max_value})"
        )


@dataclass(frozen=True)
class IntType:
    """
    Unsigned integer base type with an optional bit width.

    Attributes:
        name: display name, e.g. 'u64'.
        bits: bit width; None stands for arbitrary precision.

    Examples:
        >>> U16.max_value
        65535
        >>> U8.from_small(1000)
        Traceback (most recent call last):
            ...
        sizefmt.numeric.BaseTypeTooSmall: multiplier too large for base type: ...
        >>> UNBOUNDED.max_value is None
        True
    """
    name: str
    bits: int | None = None

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"name must be a non-empty str, but got {fmt_value(self.name)}")
        if self.bits is not None:
            if isinstance(self.bits, bool) or not isinstance(self.bits, int):
                raise TypeError(f"bits must be int | None, but got {fmt_type(self.bits)}")
            if self.bits < 1:
                raise ValueError(f"bits must be >= 1, got {self.bits}")

    @property
    def max_value(self) -> int | None:
        """Largest representable value, None if unbounded."""
        if self.bits is None:
            return None
        return (1 << self.bits) - 1

    def accepts(self, other: "IntType") -> bool:
        """True if every value of the other type is representable in this type."""
        if self.bits is None:
            return True
        if other.bits is None:
            return False
        return other.bits <= self.bits

    def coerce(self, value) -> int:
        """
        Validate a magnitude and return it as a Python int.

        Accepts int and types implementing __index__. Booleans, floats and other types are
        rejected since they are not exact unsigned integers.

        Raises:
            TypeError: If value is not an exact integer.
            ValueError: If value is negative or exceeds max_value.
        """
        if isinstance(value, bool):
            raise TypeError(f"magnitude must be an unsigned integer, boolean not supported: {value}")

        if isinstance(value, int):
            number = value
        elif isinstance(value, SupportsIndex):
            number = operator.index(value)
        else:
            raise TypeError(f"magnitude must be an unsigned integer, but got {fmt_type(value)}")

        if number < 0:
            raise ValueError(f"magnitude must be non-negative, got {number}")
        if not self.contains(number):
            raise ValueError(f"magnitude {number} out of range for {self.name} (max {self.max_value})")
        return number

    def contains(self, number: int) -> bool:
        """True if a non-negative int is representable."""
        return self.bits is None or number <= self.max_value

    def from_small(self, value: int) -> int:
        """
        Convert a small unsigned constant (a prefix multiplier) into this type.

        Raises:
            BaseTypeTooSmall: If the constant is not representable.
        """
        if not self.contains(value):
            raise BaseTypeTooSmall(value, self)
        return value


# Constants ------------------------------------------------------------------------------------------------------------

U8 = IntType("u8", 8)
U16 = IntType("u16", 16)
U32 = IntType("u32", 32)
U64 = IntType("u64", 64)
U128 = IntType("u128", 128)
UNBOUNDED = IntType("unbounded")

INT_TYPES = {t.name: t for t in (U8, U16, U32, U64, U128, UNBOUNDED)}


# Methods --------------------------------------------------------------------------------------------------------------

def get_int_type(name: str) -> IntType:
    """Lookup a predefined IntType by name, e.g. 'u64'."""
    try:
        return INT_TYPES[name]
    except KeyError:
        raise ValueError(f"unknown int type {name!r}, expected one of {tuple(INT_TYPES)}") from None


def select_tier(magnitude: int, multiplier: int, max_tier: int) -> int:
    """
    Return the prefix tier of a magnitude: how many times it divides by the multiplier
    before falling below it, saturated at max_tier.

    Equivalent to floor(log(magnitude, multiplier)) clamped to [0, max_tier], computed by
    repeated integer division so large magnitudes never go through float logarithms.

    Examples:
        >>> select_tier(999_999, 1000, 8)
        1
        >>> select_tier(0, 1000, 8)
        0
        >>> select_tier(10 ** 30, 1000, 8)
        8
    """
    if multiplier < 2:
        raise ValueError(f"multiplier must be >= 2, got {multiplier}")
    if max_tier < 0:
        raise ValueError(f"max_tier must be >= 0, got {max_tier}")

    tier = 0
    while tier < max_tier and magnitude >= multiplier:
        magnitude //= multiplier
        tier += 1
    return tier
