import pytest

from uninst.idb import Flag, IdbLine


def test_image_name_is_middle_component():
    line = IdbLine(subsystem="prod.sw.eoe")
    assert line.image_name() == "sw"


def test_image_name_with_other_components():
    line = IdbLine(subsystem="mypackage.man.pages")
    assert line.image_name() == "man"


def test_image_name_without_dots_fails():
    with pytest.raises(ValueError, match="no last dot"):
        IdbLine(subsystem="nodots").image_name()


def test_image_name_with_one_dot_fails():
    with pytest.raises(ValueError, match="no first dot"):
        IdbLine(subsystem="one.dot").image_name()


def test_image_name_with_too_many_dots_fails():
    with pytest.raises(ValueError, match="image name has dots"):
        IdbLine(subsystem="a.b.c.d").image_name()


def test_absent_numeric_fields_default_to_none():
    line = IdbLine(install_path="usr/bin/x", subsystem="p.i.s")
    assert (line.cmpsize, line.off, line.size, line.sum, line.f) == (
        None,
        None,
        None,
        None,
        None,
    )


def test_all_flags_fit_in_one_byte():
    combined = Flag(0)
    for member in Flag:
        combined |= member
    assert int(combined) <= 0xFF
    assert all(member in combined for member in Flag)
    assert len(list(Flag)) == 8


def test_flags_are_the_eight_low_bits():
    from_values = {int(Flag(1 << bit)) for bit in range(8)}
    assert from_values == {1, 2, 4, 8, 16, 32, 64, 128}
    assert {int(member) for member in Flag} == from_values