# chip8_core/arch/chip8/instructions/load.py
"""
インデックスレジスタとメモリ転送命令 (ANNN, FX1E, FX29, FX33, FX55, FX65) の実装。
"""
from chip8_core.core.operation import Operation
from chip8_core.transport.bus import Bus
from chip8_core.common.entropy import RandomSource
from chip8_core.arch.chip8.state import Chip8CpuState
from chip8_core.arch.chip8.constants import FONT_ADDR, FONT_GLYPH_SIZE

# --- ANNN LD I, NNN ---
def execute_ld_i(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.i = op.nnn

# --- FX1E ADD I, VX ---
# @intent:responsibility I += VX。16bitで折り返し、VFは変化しません。
def execute_add_i_vx(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.i = (state.i + state.v[op.x]) & 0xFFFF

# --- FX29 LD F, VX ---
# @intent:responsibility I を VX の値に対応するフォントスプライトのアドレスに設定します。
def execute_ld_f_vx(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.i = (FONT_ADDR + state.v[op.x] * FONT_GLYPH_SIZE) & 0xFFFF

# --- FX33 LD B, VX ---
# @intent:responsibility VX を10進3桁に分解し、I, I+1, I+2 に百の位から順に格納します。
# @intent:rationale 一括書き込みで範囲の両端を先に検証し、範囲外の場合はメモリを一切変更しません。
def execute_ld_b_vx(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    vx = state.v[op.x]
    bus.load_block(state.i, bytes([vx // 100, (vx // 10) % 10, vx % 10]))

# --- FX55 LD [I], VX ---
# @intent:responsibility V0..VX（両端含む）を I から順にメモリへ格納します。I は変化しません。
def execute_store_registers(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    bus.load_block(state.i, bytes(state.v[:op.x + 1]))

# --- FX65 LD VX, [I] ---
# @intent:responsibility I から順にメモリを V0..VX（両端含む）へ読み込みます。I は変化しません。
# @intent:rationale 全て読み出してからレジスタへ反映し、範囲外の場合はレジスタを変更しません。
def execute_load_registers(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    values = [bus.read(state.i + idx) for idx in range(op.x + 1)]
    state.v[:op.x + 1] = values
