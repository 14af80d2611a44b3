import pytest

from enginecore.input import KEY_COUNT, ControllerState, InputState


def keys_with(*pressed):
    table = bytearray(KEY_COUNT)
    for key in pressed:
        table[key] = 0x80
    return bytes(table)


def test_nothing_pressed_initially():
    state = InputState()
    assert state.push_key(57) is False
    assert state.trigger_key(57) is False
    assert state.push_button(0x1000) is False


def test_key_trigger_only_on_first_frame():
    state = InputState()
    state.update(keys_with(57))
    assert state.push_key(57) is True
    assert state.trigger_key(57) is True
    state.update(keys_with(57))
    assert state.push_key(57) is True
    assert state.trigger_key(57) is False


def test_key_release():
    state = InputState()
    state.update(keys_with(57))
    state.update(keys_with())
    assert state.push_key(57) is False
    assert state.trigger_key(57) is False


def test_only_high_bit_counts_as_pressed():
    state = InputState()
    table = bytearray(KEY_COUNT)
    table[10] = 0x7F
    state.update(bytes(table))
    assert state.push_key(10) is False


def test_key_table_length_checked():
    with pytest.raises(ValueError):
        InputState().update(bytes(10))


def test_key_out_of_range():
    state = InputState()
    with pytest.raises(IndexError):
        state.push_key(KEY_COUNT)


def test_button_trigger_and_push():
    state = InputState()
    state.update(keys_with(), ControllerState(buttons=0x1000 | 0x0001))
    assert state.push_button(0x1000) is True
    assert state.trigger_button(0x0001) is True
    assert state.push_button(0x2000) is False
    state.update(keys_with(), ControllerState(buttons=0x1000))
    assert state.trigger_button(0x1000) is False
    assert state.push_button(0x0001) is False


def test_missing_controller_reads_as_released():
    state = InputState()
    state.update(keys_with(), ControllerState(buttons=0x1000, left_stick_x=500))
    state.update(keys_with())
    assert state.push_button(0x1000) is False
    assert state.left_stick_x() == 0


def test_sticks_reported():
    state = InputState()
    state.update(
        keys_with(),
        ControllerState(left_stick_x=-32768, left_stick_y=32767, right_stick_x=-5, right_stick_y=7),
    )
    assert (state.left_stick_x(), state.left_stick_y()) == (-32768, 32767)
    assert (state.right_stick_x(), state.right_stick_y()) == (-5, 7)


@pytest.mark.parametrize(
    "kwargs",
    [{"buttons": 0x10000}, {"buttons": -1}, {"left_stick_x": 32768}, {"right_stick_y": -32769}],
)
def test_controller_ranges_checked(kwargs):
    with pytest.raises(ValueError):
        ControllerState(**kwargs)


def test_set_vibration_records_speeds():
    state = InputState()
    state.set_vibration(65535, 0)
    assert state.vibration == (65535, 0)


def test_set_vibration_range_checked():
    with pytest.raises(ValueError):
        InputState().set_vibration(70000, 0)