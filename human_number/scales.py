#
# Human Number Scales
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import math
from dataclasses import dataclass
from typing import Iterable, Mapping, Self, SupportsFloat

# Local ----------------------------------------------------------------------------------------------------------------
from .options import Options
from .tools import fmt_type, fmt_value

logger = logging.getLogger(__name__)


# @formatter:off

class ScalesConf:
    """
    Prefix data the shipped scale tables are built from.

    Attributes:
        SI_PREFIXES: SI decimal prefixes with 10^(3N) exponents, quecto to quetta.
            Maps exponents to prefixes: -3→"m", 3→"k", etc.

        BIN_PREFIXES: IEC binary prefixes (powers of 2) for binary units.
            Maps exponents to prefixes: 10→"ki", 20→"Mi", etc.
            No sub-unity prefixes exist, fractions of a byte are not scaled.
    """

    SI_PREFIXES = {
        -30: "q",       # quecto = 10⁻³⁰
        -27: "r",       # ronto
        -24: "y",       # yocto
        -21: "z",       # zepto
        -18: "a",       # atto
        -15: "f",       # femto
        -12: "p",       # pico  = 10⁻¹²
        -9: "n",        # nano  = 10⁻⁹
        -6: "μ",        # micro = 10⁻⁶, greek small letter mu
        -3: "m",        # milli = 10⁻³
        3: "k",         # kilo  = 10³
        6: "M",         # mega  = 10⁶
        9: "G",         # giga  = 10⁹
        12: "T",        # tera  = 10¹²
        15: "P",        # peta
        18: "E",        # exa
        21: "Z",        # zetta
        24: "Y",        # yotta
        27: "R",        # ronna
        30: "Q",        # quetta = 10³⁰
    }

    BIN_PREFIXES = {
        10: "ki",   # kibi = 2¹⁰ = 1,024
        20: "Mi",   # mebi = 2²⁰ = 1,048,576
        30: "Gi",   # gibi = 2³⁰ = 1,073,741,824
        40: "Ti",   # tebi = 2⁴⁰ = 1,099,511,627,776
        50: "Pi",   # pebi = 2⁵⁰
        60: "Ei",   # exbi = 2⁶⁰
        70: "Zi",   # zebi = 2⁷⁰
        80: "Yi",   # yobi = 2⁸⁰
        90: "Ri",   # robi = 2⁹⁰
        100: "Qi",  # quebi = 2¹⁰⁰
    }

# @formatter:on

# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Scale:
    """
    One step of a unit ladder: the threshold factor and the prefix displayed for it.

    Example:
        Scale(1000.0, "k") scales 4234 to 4.234 and labels it with "k".
    """

    factor: float
    prefix: str

    def __post_init__(self):
        if isinstance(self.factor, bool) or not isinstance(self.factor, (int, float)):
            raise TypeError(f"Scale factor must be int | float, got {fmt_type(self.factor)}")
        if not math.isfinite(self.factor) or self.factor <= 0:
            raise ValueError(f"Scale factor must be a positive finite number, got {fmt_value(self.factor)}")
        if not isinstance(self.prefix, str):
            raise TypeError(f"Scale prefix must be a str, got {fmt_type(self.prefix)}")

        object.__setattr__(self, "factor", float(self.factor))

    def __str__(self):
        return self.prefix


@dataclass(frozen=True)
class Scales:
    """
    Ordered pair of scale lists and the lookup picking the right one for a magnitude.

    The negatives hold sub-unity scales sorted by descending factor, closest to 1 first
    (milli, micro, nano...). The positives hold scales sorted by ascending factor (kilo, mega, giga...).
    Either list may be empty.

    Order is a precondition: the table neither sorts nor validates it, unsorted lists produce
    unspecified prefixes. Use Scales.from_exponents() to build a table from an exponent map.
    """

    negatives: tuple[Scale, ...] = ()
    positives: tuple[Scale, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "negatives", _as_scale_tuple(self.negatives, "negatives"))
        object.__setattr__(self, "positives", _as_scale_tuple(self.positives, "positives"))

    @classmethod
    def from_exponents(cls, base: int, prefixes: Mapping[int, str]) -> Self:
        """
        Build a correctly ordered table from an exponent → prefix mapping.

        Negative exponents become negatives (closest to 1 first), positive exponents become
        positives (ascending). Exponent 0 is skipped, unscaled numbers have no prefix.

        Args:
            base: Positive integer base, e.g. 10 for SI or 2 for binary prefixes.
            prefixes: Mapping of integer exponents to prefix strings.

        Examples:
            >>> Scales.from_exponents(10, {-3: "m", 0: "", 3: "k"})
            Scales(negatives=(Scale(factor=0.001, prefix='m'),), positives=(Scale(factor=1000.0, prefix='k'),))
        """
        if isinstance(base, bool) or not isinstance(base, int) or base < 2:
            raise ValueError(f"base must be an int >= 2, got {fmt_value(base)}")

        exponents = sorted(prefixes)
        # Integer true division is correctly rounded: 1 / 10**30 == 1e-30
        negatives = [Scale(1 / base ** -exp, prefixes[exp]) for exp in reversed(exponents) if exp < 0]
        positives = [Scale(float(base ** exp), prefixes[exp]) for exp in exponents if exp > 0]
        return cls(negatives, positives)

    @property
    def all(self) -> tuple[Scale, ...]:
        """All scales ordered from the smallest to the largest factor."""
        return tuple(reversed(self.negatives)) + self.positives

    def get_scale(self, value: float) -> Scale | None:
        """
        Find the scale applicable to value.

        Magnitudes below 1 use the first negative scale not exceeding them, and saturate at
        the smallest negative scale when closer to zero than every threshold. Magnitudes of 1
        and above use the largest positive scale not exceeding them.

        Returns:
            The applicable Scale, or None when the value is not scaled: no negatives for a
            sub-unity magnitude, or a magnitude below the first positive threshold.
        """
        absolute = abs(value)
        if absolute < 1.0:
            return self._get_negative_scale(absolute)
        return self._get_positive_scale(absolute)

    def into_scaled(self, options: Options, value: SupportsFloat) -> "ScaledValue":
        """
        Scale value with the applicable scale and attach the options used to render it.

        Non-finite values pass through: NaN finds no scale and renders "nan", infinities
        take the largest positive scale and render "inf".

        Raises:
            TypeError: If value is not a real number (str and bool are rejected).
        """
        value = _as_float(value)
        if not math.isfinite(value):
            logger.debug("Non-finite value %r passed through scaling", value)

        scale = self.get_scale(value)
        if scale is None:
            return ScaledValue(value, None, options)
        return ScaledValue(value / scale.factor, scale, options)

    def _get_negative_scale(self, absolute: float) -> Scale | None:
        for current in self.negatives:
            if absolute >= current.factor:
                return current

        if self.negatives:
            logger.debug("Magnitude %r below smallest scale, saturating to %r", absolute, self.negatives[-1].prefix)
            return self.negatives[-1]
        return None

    def _get_positive_scale(self, absolute: float) -> Scale | None:
        previous = None
        for current in self.positives:
            # NaN compares false and stops the scan unscaled
            if not current.factor <= absolute:
                break
            previous = current
        return previous


@dataclass(frozen=True)
class ScaledValue:
    """
    Scaled number ready for display, produced by Scales.into_scaled() or Formatter.format().

    Rendered text is obtained with str(): the fixed-point number, then the separator when a
    prefix or a unit follows, then the prefix, then the unit.

    The options are held by reference, render the value before mutating them.

    Examples:
        >>> str(SI_SCALE.into_scaled(Options(), 4_234.0))
        '4.23 k'
        >>> f"[{SI_SCALE.into_scaled(Options(), 100.0):>8}]"
        '[  100.00]'
    """

    value: float
    scale: Scale | None
    options: Options

    def __str__(self):
        return self.as_str

    def __format__(self, format_spec: str) -> str:
        return format(self.as_str, format_spec)

    @property
    def as_str(self) -> str:
        """Number with prefix and units as a string."""
        options = self.options
        if options.force_sign:
            text = f"{self.value:+.{options.decimals}f}"
        else:
            text = f"{self.value:.{options.decimals}f}"

        if self.scale is None and options.unit is None:
            return text

        return f"{text}{options.separator}{self.prefix}{options.unit or ''}"

    @property
    def prefix(self) -> str:
        """The chosen scale prefix, empty when the value is not scaled."""
        return self.scale.prefix if self.scale is not None else ""


# Private Methods ------------------------------------------------------------------------------------------------------

def _as_float(value: SupportsFloat) -> float:
    """Convert a real number to float, rejecting str, bytes and bool."""
    if isinstance(value, (bool, str, bytes)) or not isinstance(value, SupportsFloat):
        raise TypeError(f"value must be a real number, got {fmt_type(value)}")
    return float(value)


def _as_scale_tuple(scales: Iterable[Scale], name: str) -> tuple[Scale, ...]:
    if isinstance(scales, (str, bytes)) or not isinstance(scales, Iterable):
        raise TypeError(f"Scales.{name} must be an iterable of Scale, got {fmt_type(scales)}")

    scales = tuple(scales)
    for scale in scales:
        if not isinstance(scale, Scale):
            raise TypeError(f"Scales.{name} must contain Scale items only, got {fmt_type(scale)}")
    return scales


# Constants ------------------------------------------------------------------------------------------------------------

SI_SCALE = Scales.from_exponents(10, ScalesConf.SI_PREFIXES)
"""Decimal SI scale table, milli to quecto below 1 and kilo to quetta above."""

BINARY_SCALE = Scales.from_exponents(2, ScalesConf.BIN_PREFIXES)
"""Binary IEC scale table, kibi to quebi, no sub-unity prefixes."""

# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Ensure the shipped SI prefixes step by 10³.
if any(exp % 3 for exp in ScalesConf.SI_PREFIXES):
    raise AssertionError("Configuration Error: SI prefix exponents must be multiples of 3.")

# Ensure the shipped binary prefixes step by 2¹⁰ and stay above unity.
if any(exp % 10 or exp <= 0 for exp in ScalesConf.BIN_PREFIXES):
    raise AssertionError("Configuration Error: binary prefix exponents must be positive multiples of 10.")
