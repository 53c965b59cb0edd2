# chip8_core/common/entropy.py
"""
乱数バイト供給元。

CXNN 命令が依存する外部のエントロピー源を抽象化します。
テストでは固定列を返す実装に差し替えることで、実行結果を決定的にできます。
"""
import random
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional


# @intent:responsibility 8bit乱数を1つずつ供給するインターフェースを定義します。
class RandomSource(ABC):
    @abstractmethod
    def next_byte(self) -> int:
        """0x00-0xFF の一様乱数を返します。"""
        pass


# @intent:responsibility 標準の擬似乱数生成器による供給元です。seedを与えると再現可能になります。
class SystemRandomSource(RandomSource):
    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def next_byte(self) -> int:
        return self._random.randrange(0x100)


# @intent:responsibility 与えられたバイト列を循環して返す決定的な供給元です。
class SequenceRandomSource(RandomSource):
    """
    テスト用。列の末尾に達すると先頭へ戻ります。
    """
    def __init__(self, values: Iterable[int]):
        self._values: List[int] = [v & 0xFF for v in values]
        if not self._values:
            raise ValueError("SequenceRandomSource requires at least one value.")
        self._position = 0

    def next_byte(self) -> int:
        value = self._values[self._position]
        self._position = (self._position + 1) % len(self._values)
        return value
