import io

import pytest

from process_flow.core.stream import Stream


def test_auto_name_from_index():
    """Test Stream.from_index() names the stream "s<index>"."""
    assert Stream.from_index(1).get_name() == "s1"
    assert Stream.from_index(42).get_name() == "s42"


def test_default_mass_flow_is_zero():
    assert Stream(name="feed").get_mass_flow() == 0.0


@pytest.mark.parametrize("value", [12.5, 0.0, -3.0])
def test_mass_flow_round_trip(value):
    """Test set/get of mass flow, including zero and negative values."""
    s = Stream.from_index(2)
    s.set_mass_flow(value)
    assert s.get_mass_flow() == value


def test_name_round_trip_allows_empty():
    s = Stream.from_index(1)
    s.set_name("product")
    assert s.get_name() == "product"

    s.set_name("")
    assert s.get_name() == ""


def test_from_index_with_mass_flow():
    s = Stream.from_index(3, mass_flow=7.5)
    assert s.name == "s3"
    assert s.mass_flow == 7.5


def test_print_format():
    """Test print() writes "Stream <name> flow = <value>" and a line break."""
    s = Stream.from_index(1)
    s.set_mass_flow(10.0)

    buffer = io.StringIO()
    s.print(file=buffer)

    assert buffer.getvalue() == "Stream s1 flow = 10\n"


def test_print_defaults_to_stdout(capsys):
    s = Stream(name="s7", mass_flow=2.5)
    s.print()

    assert capsys.readouterr().out == "Stream s7 flow = 2.5\n"


def test_print_does_not_mutate():
    s = Stream(name="s1", mass_flow=3.0)
    s.print(file=io.StringIO())
    assert s.get_state() == {"name": "s1", "mass_flow": 3.0}


def test_copy_is_independent():
    s = Stream(name="s1", mass_flow=3.0)
    clone = s.copy()
    clone.set_mass_flow(9.0)

    assert s.get_mass_flow() == 3.0
    assert clone.get_name() == "s1"
