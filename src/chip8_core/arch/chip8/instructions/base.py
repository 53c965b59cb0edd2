# chip8_core/arch/chip8/instructions/base.py
"""
CHIP-8 命令実装用の共通ユーティリティ。
"""
from chip8_core.transport.bus import Bus
from chip8_core.arch.chip8.state import Chip8CpuState

# @intent:utility_function バスから16ビットワードをビッグエンディアン形式で読み込みます。
# @intent:rationale アドレスは折り返さず、メモリ末尾を越える読み出しはバスがMemoryAccessErrorとして拒否します。
def read_word(bus: Bus, addr: int) -> int:
    """Big-endian 16-bit read."""
    return (bus.read(addr) << 8) | bus.read(addr + 1)

# @intent:utility_function 次の命令を読み飛ばします。
def skip_next(state: Chip8CpuState) -> None:
    state.pc = (state.pc + 2) & 0xFFFF

# @intent:utility_function 演算結果を VX に書き込んでから VF にフラグを設定します。
# @intent:rationale X が F の場合はフラグの値が残ります。
def set_with_flag(state: Chip8CpuState, x: int, value: int, flag: int) -> None:
    state.v[x] = value & 0xFF
    state.vf = flag
