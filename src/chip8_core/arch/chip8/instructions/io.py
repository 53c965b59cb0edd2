# chip8_core/arch/chip8/instructions/io.py
"""
周辺デバイスに関わる命令（乱数、描画、キー入力、タイマー）の実装。
"""
from chip8_core.core.operation import Operation
from chip8_core.transport.bus import Bus
from chip8_core.common.entropy import RandomSource
from chip8_core.arch.chip8.state import Chip8CpuState
from .base import skip_next

# --- CXNN RND VX, NN ---
def execute_rnd(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.v[op.x] = rng.next_byte() & op.nn

# --- DXYN DRW VX, VY, N ---
# @intent:responsibility I から N 行のスプライトを読み、(VX, VY) にXOR描画します。
# @intent:post-condition 点灯→消灯したピクセルが1つでもあれば VF=1、なければ VF=0。
def execute_drw(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    x_coord = state.v[op.x]
    y_coord = state.v[op.y]
    # スプライトを先に全て読み出し、範囲外アクセス時に画面を中途半端に変更しない
    rows = [bus.read(state.i + row) for row in range(op.n)]
    collision = False
    for row, bits in enumerate(rows):
        if state.display.draw_row(x_coord, y_coord + row, bits):
            collision = True
    state.vf = 1 if collision else 0

# --- EX9E SKP VX ---
def execute_skp(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    if state.keypad.is_pressed(state.v[op.x]):
        skip_next(state)

# --- EXA1 SKNP VX ---
def execute_sknp(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    if not state.keypad.is_pressed(state.v[op.x]):
        skip_next(state)

# --- FX0A LD VX, K ---
# @intent:responsibility キーが押されるまで待機します。
# @intent:rationale ホストのスレッドはブロックせず、PCを2戻して次のtickで同じ命令を再実行します。
def execute_wait_key(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    key = state.keypad.first_pressed()
    if key is None:
        state.pc = (state.pc - 2) & 0xFFFF
    else:
        state.v[op.x] = key

# --- FX07 LD VX, DT ---
def execute_ld_vx_dt(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.v[op.x] = state.delay_timer

# --- FX15 LD DT, VX ---
def execute_ld_dt_vx(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.delay_timer = state.v[op.x]

# --- FX18 LD ST, VX ---
def execute_ld_st_vx(state: Chip8CpuState, bus: Bus, op: Operation, rng: RandomSource) -> None:
    state.sound_timer = state.v[op.x]
