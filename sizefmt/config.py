"""
Formatting policy for sizefmt: prefix systems, decimal separators and defaults.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Any, Self

# Third-party ----------------------------------------------------------------------------------------------------------
import toml

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type, fmt_value


# @formatter:off

class FormatConf:
    """
    Default configuration constants for SizeFormatter.

    Attributes:
        DEFAULT_PRECISION: fractional digits shown when no precision is requested.
        DIGITS_PER_TIER: precision cap factor, a value at tier N shows at most
            DIGITS_PER_TIER * N fractional digits.
        PREFIX_TABLE: TOML table holding custom prefix systems, `[prefixes.<name>]`.
    """
    DEFAULT_PRECISION = 1
    DIGITS_PER_TIER = 3
    PREFIX_TABLE = "prefixes"

# @formatter:on


# Enums ----------------------------------------------------------------------------------------------------------------

@unique
class Separator(StrEnum):
    """Decimal separators, any other single character is accepted too."""
    COMMA = ","
    POINT = "."


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class PrefixSystem:
    """
    Ordered unit prefix labels and the multiplier between consecutive tiers.

    Label at index N applies to values scaled by multiplier**N. The first label need not be
    empty, which allows systems based on a sub-unit (see the millimetre example).

    Attributes:
        labels: prefix labels ordered by tier, at least one.
        multiplier: size of one tier step, e.g. 1000 or 1024.
        name: display name of the system.

    Examples:
        >>> SI_PREFIXES.label(2)
        'M'
        >>> mm = PrefixSystem(["m", "", "k"], 1000, name="millimetre")
        >>> mm.max_tier
        2
    """
    labels: tuple[str, ...]
    multiplier: int
    name: str = "custom"

    def __post_init__(self):
        labels = self.labels
        if isinstance(labels, (str, bytes)) or not isinstance(labels, Sequence):
            raise TypeError(f"labels must be a sequence of str, but got {fmt_type(labels)}")
        labels = tuple(labels)
        if not labels:
            raise ValueError("labels must contain at least one prefix")
        for label in labels:
            if not isinstance(label, str):
                raise TypeError(f"prefix labels must be str, but found {fmt_value(label)}")
        object.__setattr__(self, "labels", labels)

        if isinstance(self.multiplier, bool) or not isinstance(self.multiplier, int):
            raise TypeError(f"multiplier must be int, but got {fmt_type(self.multiplier)}")
        if self.multiplier < 2:
            raise ValueError(f"multiplier must be >= 2, got {self.multiplier}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], name: str = "custom") -> Self:
        """
        Create a prefix system from a mapping with 'labels' and 'multiplier' keys.

        Raises:
            ValueError: If a required key is missing.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"prefix system {name!r} must be a table, but got {fmt_type(data)}")
        missing = [key for key in ("labels", "multiplier") if key not in data]
        if missing:
            raise ValueError(f"prefix system {name!r} is missing keys: {', '.join(missing)}")
        return cls(labels=data["labels"], multiplier=data["multiplier"], name=name)

    @property
    def max_tier(self) -> int:
        return len(self.labels) - 1

    def label(self, tier: int) -> str:
        """Prefix label of a tier in [0, max_tier]."""
        if not 0 <= tier <= self.max_tier:
            raise IndexError(f"tier {tier} out of range [0, {self.max_tier}] for {self.name} prefixes")
        return self.labels[tier]


# Constants ------------------------------------------------------------------------------------------------------------

SI_PREFIXES = PrefixSystem(
    labels=("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    multiplier=1000,
    name="si",
)

BINARY_PREFIXES = PrefixSystem(
    labels=("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
    multiplier=1024,
    name="binary",
)

PREFIX_SYSTEMS = {p.name: p for p in (SI_PREFIXES, BINARY_PREFIXES)}


# Methods --------------------------------------------------------------------------------------------------------------

def get_separator(value: str) -> str:
    """
    Validate a decimal separator: a Separator member or any single character.

    Examples:
        >>> get_separator(Separator.COMMA)
        ','
        >>> get_separator("'")
        "'"
    """
    if not isinstance(value, str):
        raise TypeError(f"separator must be str, but got {fmt_type(value)}")
    if len(value) != 1:
        raise ValueError(f"separator must be a single character, but got {fmt_value(value)}")
    return str(value)


def load_prefix_systems(path: str | os.PathLike[str]) -> dict[str, PrefixSystem]:
    """
    Load custom prefix systems from a TOML file.

    Each system is a `[prefixes.<name>]` table with `labels` and `multiplier` keys:

        [prefixes.millimetre]
        labels = ["m", "", "k"]
        multiplier = 1000

    Returns:
        Mapping of system name to PrefixSystem, in file order.

    Raises:
        ValueError: If the file has no prefixes table or a system is malformed.
    """
    data = toml.load(path)
    table = data.get(FormatConf.PREFIX_TABLE)
    if not isinstance(table, Mapping) or not table:
        raise ValueError(f"no [{FormatConf.PREFIX_TABLE}.<name>] tables found in {os.fspath(path)}")
    return {name: PrefixSystem.from_mapping(system, name=name) for name, system in table.items()}


def get_prefix_system(name: str, custom: Mapping[str, PrefixSystem] | None = None) -> PrefixSystem:
    """
    Lookup a prefix system by name among custom and built-in systems, custom ones win.
    """
    systems = {**PREFIX_SYSTEMS, **(custom or {})}
    try:
        return systems[name]
    except KeyError:
        raise ValueError(f"unknown prefix system {name!r}, expected one of {tuple(systems)}") from None
