# chip8_core/arch/chip8/state.py
"""
CHIP-8 CPU固有の状態定義。
"""
from dataclasses import dataclass, field
from typing import List

from chip8_core.core.state import CpuState
from chip8_core.common.errors import StackOverflowError, StackUnderflowError
from chip8_core.devices.display import Framebuffer
from chip8_core.devices.keypad import Keypad
from chip8_core.arch.chip8.constants import (
    START_ADDR, NUM_REGS, FLAG_REG, STACK_SIZE, NUM_KEYS, SCREEN_WIDTH, SCREEN_HEIGHT,
)

# @intent:responsibility CHIP-8 の全てのレジスタ（V0-VF, I, PC, SP）、スタック、タイマー、画面、キー状態を保持します。
@dataclass
class Chip8CpuState(CpuState):
    """
    CHIP-8 の可変マシン状態。
    sp はスタックに積まれている戻りアドレスの個数 (0 <= sp <= STACK_SIZE) です。
    """
    pc: int = START_ADDR
    v: List[int] = field(default_factory=lambda: [0] * NUM_REGS)
    i: int = 0x0000
    stack: List[int] = field(default_factory=lambda: [0] * STACK_SIZE)
    delay_timer: int = 0
    sound_timer: int = 0
    display: Framebuffer = field(default_factory=lambda: Framebuffer(SCREEN_WIDTH, SCREEN_HEIGHT))
    keypad: Keypad = field(default_factory=lambda: Keypad(NUM_KEYS))

    # @intent:accessor フラグレジスタ VF へのアクセスを提供します。
    @property
    def vf(self) -> int:
        return self.v[FLAG_REG]

    @vf.setter
    def vf(self, value: int) -> None:
        self.v[FLAG_REG] = value & 0xFF

    # @intent:responsibility 戻りアドレスをスタックに積みます。
    # @intent:pre-condition sp < STACK_SIZE。満杯の場合は状態を変更せずに StackOverflowError を送出します。
    def push(self, address: int) -> None:
        if self.sp >= STACK_SIZE:
            raise StackOverflowError(f"Call stack overflow: {STACK_SIZE} return addresses already stored.")
        self.stack[self.sp] = address & 0xFFFF
        self.sp += 1

    # @intent:responsibility スタックから戻りアドレスを取り出します。
    # @intent:pre-condition sp > 0。空の場合は StackUnderflowError を送出します。
    def pop(self) -> int:
        if self.sp <= 0:
            raise StackUnderflowError("Return with an empty call stack.")
        self.sp -= 1
        return self.stack[self.sp]
