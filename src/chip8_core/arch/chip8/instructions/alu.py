# chip8_core/arch/chip8/instructions/alu.py
"""
レジスタ演算命令 (6XNN, 7XNN, 8XY_) の実装。
"""
from chip8_core.core.operation import Operation
from chip8_core.transport.bus import Bus
from chip8_core.common.entropy import RandomSource
from chip8_core.arch.chip8.state import Chip8CpuState
from .base import set_with_flag

# --- 6XNN LD VX, NN ---
def execute_ld_vx_nn(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.v[op.x] = op.nn

# --- 7XNN ADD VX, NN ---
# @intent:responsibility 即値を加算します。8bitで折り返し、VFは変化しません。
def execute_add_vx_nn(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.v[op.x] = (state.v[op.x] + op.nn) & 0xFF

# --- 8XY0 LD VX, VY ---
def execute_ld_vx_vy(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.v[op.x] = state.v[op.y]

# --- 8XY1 OR / 8XY2 AND / 8XY3 XOR ---
# VFは変更しない
def execute_or(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.v[op.x] |= state.v[op.y]

def execute_and(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.v[op.x] &= state.v[op.y]

def execute_xor(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.v[op.x] ^= state.v[op.y]

# --- 8XY4 ADD VX, VY ---
# @intent:responsibility VX += VY。キャリーが発生した場合 VF=1、それ以外は VF=0。
def execute_add_vx_vy(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    total = state.v[op.x] + state.v[op.y]
    set_with_flag(state, op.x, total, 1 if total > 0xFF else 0)

# --- 8XY5 SUB VX, VY ---
# @intent:responsibility VX -= VY。ボローが発生しなかった場合 VF=1、発生した場合 VF=0。
def execute_sub_vx_vy(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    vx, vy = state.v[op.x], state.v[op.y]
    set_with_flag(state, op.x, vx - vy, 1 if vx >= vy else 0)

# --- 8XY6 SHR VX ---
# @intent:responsibility VX を1ビット右シフトし、押し出されたLSBを VF に格納します。
def execute_shr(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    vx = state.v[op.x]
    set_with_flag(state, op.x, vx >> 1, vx & 0x01)

# --- 8XY7 SUBN VX, VY ---
# @intent:responsibility VX = VY - VX。ボローの扱いは SUB と同じ（ボローなしで VF=1）。
def execute_subn_vx_vy(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    vx, vy = state.v[op.x], state.v[op.y]
    set_with_flag(state, op.x, vy - vx, 1 if vy >= vx else 0)

# --- 8XYE SHL VX ---
# @intent:responsibility VX を1ビット左シフトし、押し出されたMSBを VF に格納します。
def execute_shl(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    vx = state.v[op.x]
    set_with_flag(state, op.x, vx << 1, (vx >> 7) & 0x01)
