"""
Exact decimal rendering of scaled integer ratios.

Digits are extracted one at a time from an integer numerator/denominator pair, so the
output is truncated (never rounded) and free of floating point error at any precision.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class ExactRatio:
    """
    Non-negative rational number numer/denom held as two ints.

    Only the operations digit extraction needs are provided. The pair is not reduced.

    Examples:
        >>> r = ExactRatio(1_999, 1_000)
        >>> r.trunc(), r.fract()
        (1, ExactRatio(numer=999, denom=1000))
    """
    numer: int
    denom: int

    def __post_init__(self):
        for name in ("numer", "denom"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be int, but got {fmt_type(value)}")
        if self.denom <= 0:
            raise ValueError(f"denom must be positive, got {self.denom}")
        if self.numer < 0:
            raise ValueError(f"numer must be non-negative, got {self.numer}")

    def trunc(self) -> int:
        """Integer part, truncated toward zero."""
        return self.numer // self.denom

    def fract(self) -> Self:
        """Fractional part in [0, 1) over the same denominator."""
        return type(self)(self.numer % self.denom, self.denom)

    def is_integer(self) -> bool:
        return self.numer % self.denom == 0

    def scaled(self, factor: int) -> Self:
        """Multiply by a non-negative integer."""
        return type(self)(self.numer * factor, self.denom)


# Methods --------------------------------------------------------------------------------------------------------------

def render_ratio(ratio: ExactRatio, precision: int) -> tuple[str, str]:
    """
    Render a ratio as integer digits and exactly `precision` fractional digits.

    Each fractional digit is the truncated integer part of the remainder times ten.
    Once the remainder is exactly zero the rest is padded with '0'.

    Examples:
        >>> render_ratio(ExactRatio(1_999_999_999, 10 ** 9), 4)
        ('1', '9999')
        >>> render_ratio(ExactRatio(3, 2), 3)
        ('1', '500')
        >>> render_ratio(ExactRatio(1_999, 1_000), 0)
        ('1', '')
    """
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError(f"precision must be int, but got {fmt_type(precision)}")
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")

    digits = []
    frac = ratio.fract()
    for _ in range(precision):
        if frac.is_integer():
            # Exhausted, only zero padding remains
            digits.append("0")
        else:
            frac = frac.scaled(10)
            digits.append(str(frac.trunc()))
            frac = frac.fract()

    return str(ratio.trunc()), "".join(digits)


def fmt_ratio(ratio: ExactRatio, precision: int, separator: str = ".") -> str:
    """
    Format a ratio as a decimal string, the separator is present only if precision > 0.

    Examples:
        >>> fmt_ratio(ExactRatio(65_535, 1_024), 2, ",")
        '63,99'
        >>> fmt_ratio(ExactRatio(0, 1), 0)
        '0'
    """
    integer, fraction = render_ratio(ratio, precision)
    if precision > 0:
        return f"{integer}{separator}{fraction}"
    return integer
