# chip8_core/arch/chip8/cpu.py
"""
CHIP-8 CPUエミュレーションの中心モジュール。
"""
from typing import Optional

from chip8_core.core.cpu import AbstractCpu
from chip8_core.core.operation import Operation
from chip8_core.transport.bus import Bus
from chip8_core.common.entropy import RandomSource, SystemRandomSource
from chip8_core.arch.chip8.state import Chip8CpuState
from chip8_core.arch.chip8.instructions import decode_opcode, execute_instruction
from chip8_core.arch.chip8.instructions.base import read_word

# @intent:responsibility CHIP-8 の具体的なエミュレーションロジック（フェッチ、デコード、実行、タイマー）を提供します。
class Chip8Cpu(AbstractCpu):
    """
    CHIP-8 インタプリタをエミュレートするクラス。
    """
    # @intent:responsibility 乱数供給元を受け取って初期化します。省略時はシステム乱数を使います。
    def __init__(self, bus: Bus, rng: Optional[RandomSource] = None):
        self._rng: RandomSource = rng or SystemRandomSource()
        super().__init__(bus)

    def _create_initial_state(self) -> Chip8CpuState:
        return Chip8CpuState()

    def get_state(self) -> Chip8CpuState:
        return self._state

    # @intent:responsibility レジスタ類を初期状態に戻し、画面とキーパッドは同じオブジェクトのまま消去します。
    # @intent:rationale ホストが保持している display / keypad への参照がリセット後も有効であるようにします。
    #                  レジスタやタイマーを保持する state オブジェクト自体は作り直されるため、get_state() で取り直す必要があります。
    def reset(self) -> None:
        display = self._state.display
        keypad = self._state.keypad
        super().reset()
        display.clear()
        keypad.release_all()
        self._state.display = display
        self._state.keypad = keypad

    # @intent:responsibility PC から2バイトをビッグエンディアンで読み出します。
    # @intent:pre-condition PC+1 がメモリ内であること。範囲外は MemoryAccessError になります。
    def _fetch(self) -> int:
        return read_word(self._bus, self._state.pc)

    def _decode(self, opcode: int) -> Operation:
        return decode_opcode(opcode)

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self._state, self._bus, self._rng)

    # @intent:responsibility 遅延タイマーとサウンドタイマーを1つずつ減算します（0で下げ止まり）。
    # @intent:post-condition サウンドタイマーが 1→0 に変化した場合 True を返します（ビープ発音の瞬間）。
    def tick_timers(self) -> bool:
        s = self._state
        if s.delay_timer > 0:
            s.delay_timer -= 1
        beep = False
        if s.sound_timer > 0:
            beep = s.sound_timer == 1
            s.sound_timer -= 1
        return beep
