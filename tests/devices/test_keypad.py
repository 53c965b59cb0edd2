import pytest

from chip8_core.devices.keypad import Keypad
from chip8_core.common.errors import InvalidKeyError


class TestKeypad:
    def test_set_and_query(self):
        keypad = Keypad()
        keypad.set_key(0xF, True)
        assert keypad.is_pressed(0xF)
        keypad.set_key(0xF, False)
        assert not keypad.is_pressed(0xF)

    @pytest.mark.parametrize("index", [-1, 16, 255])
    def test_out_of_range(self, index):
        keypad = Keypad()
        with pytest.raises(InvalidKeyError):
            keypad.set_key(index, True)
        with pytest.raises(InvalidKeyError):
            keypad.is_pressed(index)

    def test_first_pressed(self):
        keypad = Keypad()
        assert keypad.first_pressed() is None
        keypad.set_key(9, True)
        keypad.set_key(4, True)
        assert keypad.first_pressed() == 4

    def test_release_all(self):
        keypad = Keypad()
        keypad.set_key(1, True)
        keypad.release_all()
        assert keypad.snapshot() == (False,) * 16
