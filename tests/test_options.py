#
# Human Number - Options Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from human_number import Options


# Tests ----------------------------------------------------------------------------------------------------------------

class TestOptions:

    def test_defaults(self):
        options = Options()
        assert options.decimals == 2
        assert options.separator == " "
        assert options.unit is None
        assert options.force_sign is False

    def test_positional(self):
        options = Options(3, "-", "B")
        assert (options.decimals, options.separator, options.unit) == (3, "-", "B")
        assert options.force_sign is False

    def test_force_sign_coerced(self):
        assert Options(force_sign=1).force_sign is True
        options = Options()
        options.set_force_sign(0)
        assert options.force_sign is False

    def test_equality(self):
        assert Options() == Options()
        assert Options(unit="B") != Options()

    def test_setters_mutate(self):
        options = Options()
        options.set_decimals(0)
        options.set_separator("")
        options.set_unit("g")
        options.set_force_sign(True)
        assert options == Options(0, "", "g", True)

    def test_set_unit_none_clears(self):
        options = Options(unit="B")
        options.set_unit(None)
        assert options.unit is None

    def test_with_returns_copy(self):
        options = Options()
        chained = options.with_unit("g").with_separator("").with_decimals(1).with_force_sign(True)
        assert chained == Options(1, "", "g", True)
        assert chained is not options
        assert options == Options()

    @pytest.mark.parametrize(
        "kwargs, error, match",
        [
            pytest.param({"decimals": -1}, ValueError, "decimals must be >= 0", id="negative-decimals"),
            pytest.param({"decimals": 2.0}, TypeError, "decimals must be an int", id="float-decimals"),
            pytest.param({"decimals": True}, TypeError, "decimals must be an int", id="bool-decimals"),
            pytest.param({"separator": None}, TypeError, "separator must be a str", id="none-separator"),
            pytest.param({"unit": 5}, TypeError, "unit must be a str or None", id="int-unit"),
        ],
    )
    def test_invalid_init(self, kwargs, error, match):
        with pytest.raises(error, match=match):
            Options(**kwargs)

    def test_invalid_setters(self):
        options = Options()
        with pytest.raises(TypeError, match="decimals must be an int"):
            options.set_decimals("3")
        with pytest.raises(ValueError, match="decimals must be >= 0"):
            options.set_decimals(-2)
        with pytest.raises(TypeError, match="separator must be a str"):
            options.set_separator(0)
        with pytest.raises(TypeError, match="unit must be a str or None"):
            options.set_unit(b"B")
        assert options == Options()

    def test_invalid_with(self):
        with pytest.raises(ValueError, match="decimals must be >= 0"):
            Options().with_decimals(-1)
        with pytest.raises(TypeError, match="unit must be a str or None"):
            Options().with_unit(["B"])

    def test_large_decimals_pass_through(self):
        options = Options().with_decimals(40)
        assert options.decimals == 40
