"""
Human-readable scaled sizes with exact, truncating precision, e.g. "42.0Mi" or "1.9999G".

SizeFormatter renders only the number and the prefix label, the base unit symbol is left
to the caller:

    >>> f"{SizeFormatter.binary(42 * 1024 * 1024)}B"
    '42.0MiB'
    >>> f"{SizeFormatter.si(1_999_999_999):.4}B"
    '1.9999GB'
    >>> f"{SizeFormatter.si(1_999_999_999):.0}B"
    '1GB'

Precision never exceeds what the selected tier can carry:

    >>> f"{SizeFormatter.si(678):.10}B"
    '678B'
    >>> f"{SizeFormatter.si(1_999):.10}B"
    '1.999kB'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
from dataclasses import dataclass
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .config import BINARY_PREFIXES, SI_PREFIXES, FormatConf, PrefixSystem, Separator, get_separator
from .numeric import U64, IntType, select_tier
from .render import ExactRatio, render_ratio
from .utils import fmt_type, fmt_value

# Precision and presentation type split off a str format spec, the rest is fill/align/width
_FORMAT_SPEC = re.compile(r"(?P<head>.*?)(?:\.(?P<precision>\d+))?(?P<type>[a-zA-Z%]?)", re.DOTALL)


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class SizeFormatter:
    """
    Immutable unsigned magnitude formatted with a scaled unit prefix.

    The tier is recomputed on every call, so one instance may be formatted repeatedly
    with different precisions. Results are truncated toward zero, never rounded.

    Output grammar: <integer-digits>[<separator><fractional-digits>]<prefix-label>, where
    the fractional digits appear only if the effective precision is above zero.

    Attributes:
        magnitude: the unscaled value, e.g. a byte count.
        prefixes: prefix system providing labels and the tier multiplier.
        separator: decimal separator character.
        int_type: integer base type; magnitude and multiplier must fit into it.

    Raises:
        BaseTypeTooSmall: On formatting, if the prefix multiplier does not fit into int_type.

    Examples:
        >>> SizeFormatter(65_535, BINARY_PREFIXES, Separator.COMMA, U16).format(2)
        '63,99Ki'
        >>> SizeFormatter.si(999_999).format(0)
        '999k'
    """
    magnitude: int
    prefixes: PrefixSystem = SI_PREFIXES
    separator: str = Separator.POINT
    int_type: IntType = U64

    def __post_init__(self):
        if not isinstance(self.prefixes, PrefixSystem):
            raise TypeError(f"prefixes must be a PrefixSystem, but got {fmt_type(self.prefixes)}")
        if not isinstance(self.int_type, IntType):
            raise TypeError(f"int_type must be an IntType, but got {fmt_type(self.int_type)}")
        object.__setattr__(self, "separator", get_separator(self.separator))
        object.__setattr__(self, "magnitude", self.int_type.coerce(self.magnitude))

    @classmethod
    def si(cls, magnitude: int, *, separator: str = Separator.POINT, int_type: IntType = U64) -> Self:
        """Formatter with SI prefixes (k, M, G, ...; powers of 1000)."""
        return cls(magnitude, SI_PREFIXES, separator, int_type)

    @classmethod
    def binary(cls, magnitude: int, *, separator: str = Separator.POINT, int_type: IntType = U64) -> Self:
        """Formatter with binary prefixes (Ki, Mi, Gi, ...; powers of 1024)."""
        return cls(magnitude, BINARY_PREFIXES, separator, int_type)

    @classmethod
    def from_value(
            cls,
            value: int,
            *,
            source_type: IntType,
            prefixes: PrefixSystem = SI_PREFIXES,
            separator: str = Separator.POINT,
            int_type: IntType = U64,
    ) -> Self:
        """
        Create from a value of a compatible (not wider) integer type.

        Raises:
            TypeError: If source_type values may not fit into int_type.

        Examples:
            >>> f"{SizeFormatter.from_value(546_987, source_type=U32)}B"
            '546.9kB'
        """
        if not isinstance(source_type, IntType):
            raise TypeError(f"source_type must be an IntType, but got {fmt_type(source_type)}")
        if not int_type.accepts(source_type):
            raise TypeError(f"cannot convert {source_type.name} into narrower {int_type.name}")
        return cls(source_type.coerce(value), prefixes, separator, int_type)

    def __str__(self) -> str:
        return self.format()

    def __format__(self, format_spec: str) -> str:
        """
        Support the str format spec mini-language: '.N' selects the precision, fill, align
        and width apply to the whole output.

        Examples:
            >>> f"[{SizeFormatter.si(1_500_000):>8.2}]"
            '[   1.50M]'
        """
        match = _FORMAT_SPEC.fullmatch(format_spec)
        if match["type"] not in ("", "s"):
            raise ValueError(f"unknown format code {fmt_value(match['type'])} for {type(self).__name__}")
        head = match["head"]
        # Only a fill character may be a dot, anything else would truncate the output
        body = head[2:] if len(head) >= 2 and head[1] in "<>=^" else head
        if "." in body:
            raise ValueError(f"invalid format spec {fmt_value(format_spec)} for {type(self).__name__}")
        precision = match["precision"]
        text = self.format(None if precision is None else int(precision))
        return format(text, head)

    @property
    def tier(self) -> int:
        """Prefix tier of the magnitude, saturated at the last prefix."""
        return select_tier(self.magnitude, self._multiplier(), self.prefixes.max_tier)

    def effective_precision(self, precision: int | None = None) -> int:
        """Requested precision capped to DIGITS_PER_TIER fractional digits per tier."""
        return self._effective_precision(precision, self.tier)

    def format(self, precision: int | None = None) -> str:
        """
        Format the magnitude, precision defaults to FormatConf.DEFAULT_PRECISION.

        Examples:
            >>> [SizeFormatter.si(1_111).format(p) for p in range(5)]
            ['1k', '1.1k', '1.11k', '1.111k', '1.111k']
        """
        integer, fraction, label = self.parts(precision)
        if fraction:
            return f"{integer}{self.separator}{fraction}{label}"
        return f"{integer}{label}"

    def parts(self, precision: int | None = None) -> tuple[str, str, str]:
        """
        Integer digits, fractional digits and prefix label of the formatted value.

        Examples:
            >>> SizeFormatter.binary(1_536).parts(3)
            ('1', '500', 'Ki')
        """
        multiplier = self._multiplier()
        tier = select_tier(self.magnitude, multiplier, self.prefixes.max_tier)
        precision = self._effective_precision(precision, tier)
        ratio = ExactRatio(self.magnitude, multiplier ** tier)
        integer, fraction = render_ratio(ratio, precision)
        return integer, fraction, self.prefixes.label(tier)

    def _effective_precision(self, precision: int | None, tier: int) -> int:
        if precision is None:
            precision = FormatConf.DEFAULT_PRECISION
        if isinstance(precision, bool) or not isinstance(precision, int):
            raise TypeError(f"precision must be int | None, but got {fmt_type(precision)}")
        if precision < 0:
            raise ValueError(f"precision must be >= 0, got {precision}")
        return min(precision, FormatConf.DIGITS_PER_TIER * tier)

    def _multiplier(self) -> int:
        return self.int_type.from_small(self.prefixes.multiplier)


# Methods --------------------------------------------------------------------------------------------------------------

def format_size(
        magnitude: int,
        precision: int | None = None,
        *,
        binary: bool = False,
        separator: str = Separator.POINT,
        int_type: IntType = U64,
) -> str:
    """
    Shortcut for one-off formatting with SI or binary prefixes.

    Examples:
        >>> format_size(42_000_000) + "B"
        '42.0MB'
        >>> format_size(65_535, 2, binary=True, separator=",")
        '63,99Ki'
    """
    prefixes = BINARY_PREFIXES if binary else SI_PREFIXES
    return SizeFormatter(magnitude, prefixes, separator, int_type).format(precision)
