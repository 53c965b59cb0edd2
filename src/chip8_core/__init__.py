"""
CHIP-8 インタプリタのコア。

ホストは :class:`Chip8Machine` を生成し、プログラムをロードしてから
tick / tick_timers / keypress で駆動します。
"""
from chip8_core.machine import Chip8Machine
from chip8_core.core.operation import Operation
from chip8_core.common.entropy import RandomSource, SystemRandomSource, SequenceRandomSource
from chip8_core.common.errors import (
    Chip8Error,
    MemoryAccessError,
    StackOverflowError,
    StackUnderflowError,
    UnsupportedInstructionError,
    ProgramTooLargeError,
    InvalidKeyError,
)
from chip8_core.arch.chip8.constants import SCREEN_WIDTH, SCREEN_HEIGHT, START_ADDR

__all__ = [
    "Chip8Machine",
    "Operation",
    "RandomSource",
    "SystemRandomSource",
    "SequenceRandomSource",
    "Chip8Error",
    "MemoryAccessError",
    "StackOverflowError",
    "StackUnderflowError",
    "UnsupportedInstructionError",
    "ProgramTooLargeError",
    "InvalidKeyError",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "START_ADDR",
]
