#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from human_number import Formatter, Options, Scale, Scales


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def empty_scales() -> Scales:
    """Scale table without negatives and positives, numbers are never scaled."""
    return Scales([], [])


@pytest.fixture
def custom_scales() -> Scales:
    """Non-standard table built at runtime: a single micro-like and a single kilo scale."""
    negatives = [Scale(0.000_001, "x")]
    positives = [Scale(1_000.0, "k")]
    return Scales(negatives, positives)


@pytest.fixture
def crab_formatter(custom_scales) -> Formatter:
    """Formatter on custom scales with a non-ASCII unit, no separator and 1 decimal."""
    options = Options().with_unit("🦀").with_separator("").with_decimals(1)
    return Formatter(custom_scales, options)
