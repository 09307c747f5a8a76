"""
Human-readable numbers: a mantissa plus a metric or binary prefix.

    >>> from human_number import Formatter
    >>> str(Formatter.si().format(4_234.0))
    '4.23 k'
    >>> str(Formatter.binary().with_unit("B").format(4_320_133.0))
    '4.12 MiB'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging

# Local ----------------------------------------------------------------------------------------------------------------
from .formatter import Formatter
from .options import Options
from .scales import BINARY_SCALE, SI_SCALE, Scale, ScaledValue, Scales, ScalesConf

__all__ = [
    'BINARY_SCALE',
    'SI_SCALE',
    'Formatter',
    'Options',
    'Scale',
    'ScaledValue',
    'Scales',
    'ScalesConf',
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
