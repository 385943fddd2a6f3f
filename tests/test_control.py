import dataclasses

import pytest

from eyecam.control import (
    Bitmask,
    Boolean,
    Descriptor,
    Flags,
    Menu,
    Number,
    Stateless,
    Text,
)


@pytest.mark.parametrize(
    "flags, readable, writable",
    [
        (Flags.NONE, False, False),
        (Flags.READ, True, False),
        (Flags.WRITE, False, True),
        (Flags.READ | Flags.WRITE, True, True),
    ],
)
def test_access_flags(flags, readable, writable):
    desc = Descriptor(1, "Brightness", Boolean(), flags)
    assert desc.readable() is readable
    assert desc.writable() is writable


def test_default_flags_deny_access():
    desc = Descriptor(2, "Trigger", Stateless())
    assert desc.flags == Flags.NONE
    assert not desc.readable()
    assert not desc.writable()


def test_removing_write_flag():
    flags = Flags.READ | Flags.WRITE
    flags &= ~Flags.WRITE
    desc = Descriptor(3, "Gain", Number((0, 255), 1), flags)
    assert desc.readable()
    assert not desc.writable()


def test_number_range_and_step_are_floats():
    num = Number((-128, 127), 1)
    assert num.range == (-128.0, 127.0)
    assert num.step == 1.0
    assert all(isinstance(v, float) for v in num.range)


def test_menu_items_are_kept_in_order():
    menu = Menu(["Manual", "Auto", "ShutterPriority", "AperturePriority"])
    assert menu.items == ("Manual", "Auto", "ShutterPriority", "AperturePriority")


def test_menu_with_numeric_items():
    menu = Menu([50.0, 60.0])
    assert menu.items == (50.0, 60.0)


def test_empty_menu():
    assert Menu().items == ()


def test_types_compare_by_value():
    assert Number((0, 10), 2) == Number((0.0, 10.0), 2.0)
    assert Text() == Text()
    assert Bitmask() != Boolean()
    assert Menu(["Interlaced"]) != Menu(["Progressive"])


def test_descriptor_is_immutable():
    desc = Descriptor(4, "Focus (Absolute)", Number((0, 65535), 1), Flags.READ)
    with pytest.raises(dataclasses.FrozenInstanceError):
        desc.name = "other"
    assert desc.name == "Focus (Absolute)"
    assert desc.id == 4


def test_descriptor_keeps_kind():
    kind = Menu(["Constant", "Variable"])
    desc = Descriptor(3, "Auto Exposure Priority", kind, Flags.READ)
    assert desc.kind is kind
    assert desc.id == 3