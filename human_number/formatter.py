#
# Human Number Formatter
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Self, SupportsFloat

# Local ----------------------------------------------------------------------------------------------------------------
from .options import Options
from .scales import Scales, ScaledValue, SI_SCALE, BINARY_SCALE
from .tools import fmt_type


# Classes --------------------------------------------------------------------------------------------------------------

class Formatter:
    """
    Options and scales used to format numbers with the right scale prefix, separator and unit.

    The scales are immutable and shared; set_* methods mutate the owned options in place,
    with_* methods return a new Formatter with modified options copy.

    For most use cases, prefer the factory class methods:
    - Formatter.si() for decimal SI prefixes
    - Formatter.binary() for binary IEC prefixes

    Examples:
        >>> formatter = Formatter.si()
        >>> str(formatter.format(4_234.0))
        '4.23 k'
        >>> str(formatter.format(0.012_34))
        '12.34 m'

        >>> formatter = Formatter.si().with_unit("g").with_separator("").with_decimals(1)
        >>> str(formatter.format(4_234.0))
        '4.2kg'
        >>> formatter(0.012_34)
        '12.3mg'
    """

    def __init__(self, scales: Scales, options: Options | None = None):
        """Create a formatter with a given scale set and some options, default options if None."""
        if not isinstance(scales, Scales):
            raise TypeError(f"scales must be Scales, got {fmt_type(scales)}")
        if options is not None and not isinstance(options, Options):
            raise TypeError(f"options must be Options or None, got {fmt_type(options)}")

        self._scales = scales
        self._options = options if options is not None else Options()

    @classmethod
    def si(cls) -> Self:
        """
        Formatter that uses the SI format style.

        Examples:
            >>> str(Formatter.si().format(5_432_100.0))
            '5.43 M'
        """
        return cls(SI_SCALE, Options())

    @classmethod
    def binary(cls) -> Self:
        """
        Formatter that uses the binary format style.

        Examples:
            >>> str(Formatter.binary().with_unit("B").format(4_320_133.0))
            '4.12 MiB'
        """
        return cls(BINARY_SCALE, Options())

    def __call__(self, value: SupportsFloat) -> str:
        """Format value straight to str."""
        return str(self.format(value))

    def __eq__(self, other):
        if isinstance(other, Formatter):
            return self._scales == other._scales and self._options == other._options
        return NotImplemented

    def __repr__(self):
        return f"{type(self).__name__}(scales={self._scales!r}, options={self._options!r})"

    @property
    def options(self) -> Options:
        return self._options

    @property
    def scales(self) -> Scales:
        return self._scales

    def format(self, value: SupportsFloat) -> ScaledValue:
        """
        Formats a number and returns a scaled value that can be displayed with str().

        Raises:
            TypeError: If value is not a real number.
        """
        return self._scales.into_scaled(self._options, value)

    def set_decimals(self, decimals: int) -> None:
        """Sets the number of decimals to display."""
        self._options.set_decimals(decimals)

    def with_decimals(self, decimals: int) -> Self:
        """Sets the number of decimals to display, returns a new Formatter."""
        return type(self)(self._scales, self._options.with_decimals(decimals))

    def set_separator(self, separator: str) -> None:
        """Sets the separator between the number and the prefix."""
        self._options.set_separator(separator)

    def with_separator(self, separator: str) -> Self:
        """Sets the separator between the number and the prefix, returns a new Formatter."""
        return type(self)(self._scales, self._options.with_separator(separator))

    def set_unit(self, unit: str | None) -> None:
        """Sets the expected unit, like `B` for bytes or `g` for grams."""
        self._options.set_unit(unit)

    def with_unit(self, unit: str | None) -> Self:
        """Sets the expected unit, like `B` for bytes or `g` for grams, returns a new Formatter."""
        return type(self)(self._scales, self._options.with_unit(unit))

    def set_force_sign(self, force_sign: bool) -> None:
        """Forces the sign to be displayed."""
        self._options.set_force_sign(force_sign)

    def with_force_sign(self, force_sign: bool) -> Self:
        """Forces the sign to be displayed, returns a new Formatter."""
        return type(self)(self._scales, self._options.with_force_sign(force_sign))
