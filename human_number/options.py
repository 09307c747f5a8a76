#
# Human Number Formatting Options
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, replace
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass
class Options:
    """
    Set of options used for formatting numbers.

    Options are mutable: set_* methods change the instance in place, while with_* methods
    return a modified copy and leave the original untouched, so they can be chained:

        >>> opts = Options().with_unit("g").with_separator("").with_decimals(1)
        >>> opts
        Options(decimals=1, separator='', unit='g', force_sign=False)

    Attributes:
        decimals (int)      : Digits displayed after the decimal point, fixed-point notation.
        separator (str)     : Inserted between the number and the prefix/unit, may be empty.
        unit (str | None)   : Expected unit, like "B" for bytes or "g" for grams.
        force_sign (bool)   : Display "+" for non-negative numbers.
    """

    decimals: int = 2
    separator: str = " "
    unit: str | None = None
    force_sign: bool = False

    def __post_init__(self):
        _validate_decimals(self.decimals)
        _validate_separator(self.separator)
        _validate_unit(self.unit)
        self.force_sign = bool(self.force_sign)

    def set_decimals(self, decimals: int) -> None:
        """Sets the number of decimals to display."""
        _validate_decimals(decimals)
        self.decimals = decimals

    def with_decimals(self, decimals: int) -> Self:
        """Sets the number of decimals to display, returns a copy."""
        return replace(self, decimals=decimals)

    def set_separator(self, separator: str) -> None:
        """Sets the separator between the number and the prefix."""
        _validate_separator(separator)
        self.separator = separator

    def with_separator(self, separator: str) -> Self:
        """Sets the separator between the number and the prefix, returns a copy."""
        return replace(self, separator=separator)

    def set_unit(self, unit: str | None) -> None:
        """Sets the expected unit, like `B` for bytes or `g` for grams. None removes the unit."""
        _validate_unit(unit)
        self.unit = unit

    def with_unit(self, unit: str | None) -> Self:
        """Sets the expected unit, like `B` for bytes or `g` for grams, returns a copy."""
        return replace(self, unit=unit)

    def set_force_sign(self, force_sign: bool) -> None:
        """Forces the sign to be displayed."""
        self.force_sign = bool(force_sign)

    def with_force_sign(self, force_sign: bool) -> Self:
        """Forces the sign to be displayed, returns a copy."""
        return replace(self, force_sign=force_sign)


# Private Methods ------------------------------------------------------------------------------------------------------

def _validate_decimals(decimals: int):
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise TypeError(f"decimals must be an int, got {fmt_type(decimals)}")
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {fmt_value(decimals)}")


def _validate_separator(separator: str):
    if not isinstance(separator, str):
        raise TypeError(f"separator must be a str, got {fmt_type(separator)}")


def _validate_unit(unit: str | None):
    if unit is not None and not isinstance(unit, str):
        raise TypeError(f"unit must be a str or None, got {fmt_type(unit)}")
