# chip8_core/devices/keypad.py
"""
16キーの16進キーパッド。
"""
from typing import List, Optional

from chip8_core.common.errors import InvalidKeyError


# @intent:responsibility 各キーの押下状態を保持します。範囲外のキー番号は拒否します。
class Keypad:
    def __init__(self, key_count: int = 16):
        self._keys: List[bool] = [False] * key_count

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._keys):
            raise InvalidKeyError(index)

    def set_key(self, index: int, pressed: bool) -> None:
        self._check(index)
        self._keys[index] = bool(pressed)

    def is_pressed(self, index: int) -> bool:
        self._check(index)
        return self._keys[index]

    # @intent:responsibility 押されているキーのうち最も番号の小さいものを返します。なければNone。
    def first_pressed(self) -> Optional[int]:
        for index, pressed in enumerate(self._keys):
            if pressed:
                return index
        return None

    def release_all(self) -> None:
        self._keys = [False] * len(self._keys)

    def snapshot(self) -> tuple:
        return tuple(self._keys)
