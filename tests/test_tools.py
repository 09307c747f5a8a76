#
# Human Number - Tools Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from human_number import Scale
from human_number.tools import fmt_type, fmt_value, print_title


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFmtType:

    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param(42, "<type: int>", id="instance"),
            pytest.param(int, "<type: int>", id="type"),
            pytest.param(Scale(1000.0, "k"), "<type: Scale>", id="user-instance"),
            pytest.param(None, "<type: NoneType>", id="none"),
        ],
    )
    def test_basic(self, obj, expected):
        assert fmt_type(obj) == expected

    def test_truncate(self):
        assert fmt_type(ValueError, max_repr=6) == "<type: Val...>"


class TestFmtValue:

    def test_basic(self):
        assert fmt_value(42) == "<int: 42>"
        assert fmt_value("k") == "<str: 'k'>"

    def test_truncate(self):
        assert fmt_value("kilo", max_repr=5) == "<str: 'k...>"

    def test_escape(self):
        class Angle:
            def __repr__(self):
                return "<Angle>"

        assert fmt_value(Angle()) == "<Angle: <Angle\\>>"

    def test_broken_repr(self):
        class Broken:
            def __repr__(self):
                raise RuntimeError("boom")

        assert fmt_value(Broken()) == "<Broken: <Broken object (repr failed: RuntimeError)\\>>"


class TestPrintTitle:

    def test_output(self, capsys):
        print_title("Scales")
        assert capsys.readouterr().out == "\n------- Scales -------\n"
