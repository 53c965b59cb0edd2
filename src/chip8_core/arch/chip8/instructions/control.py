# chip8_core/arch/chip8/instructions/control.py
"""
制御命令（画面クリア、分岐、ジャンプ、サブルーチン、条件スキップ）の実装。

実行時点で state.pc は既に次の命令を指しています。
"""
from chip8_core.core.operation import Operation
from chip8_core.transport.bus import Bus
from chip8_core.common.entropy import RandomSource
from chip8_core.arch.chip8.state import Chip8CpuState
from .base import skip_next

# --- 0000 NOP ---
def execute_nop(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    # Intentional: NOP (No Operation)
    pass

# --- 00E0 CLS ---
# @intent:responsibility 画面を全て消灯します。
def execute_cls(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.display.clear()

# --- 00EE RET ---
# @intent:responsibility スタックから戻りアドレスをポップしてPCに設定します。
def execute_ret(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.pc = state.pop()

# --- 1NNN JP ---
def execute_jp(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.pc = op.nnn

# --- 2NNN CALL ---
# @intent:responsibility 戻りアドレス（次の命令）をプッシュしてからジャンプします。
def execute_call(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.push(state.pc)
    state.pc = op.nnn

# --- 3XNN SE VX, NN ---
def execute_se_vx_nn(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    if state.v[op.x] == op.nn:
        skip_next(state)

# --- 4XNN SNE VX, NN ---
def execute_sne_vx_nn(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    if state.v[op.x] != op.nn:
        skip_next(state)

# --- 5XY0 SE VX, VY ---
def execute_se_vx_vy(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    if state.v[op.x] == state.v[op.y]:
        skip_next(state)

# --- 9XY0 SNE VX, VY ---
def execute_sne_vx_vy(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    if state.v[op.x] != state.v[op.y]:
        skip_next(state)

# --- BNNN JP V0, NNN ---
def execute_jp_v0(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.pc = (state.v[0] + op.nnn) & 0xFFFF
