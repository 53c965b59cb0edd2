# chip8_core/arch/chip8/instructions/maps.py
"""
命令ワードのパターンと命令実装のマッピング定義。
"""
from . import alu
from . import control
from . import io
from . import load

# @intent:map (マスク, 値, ニーモニック) のデコードテーブル。上から順に照合し、最初に一致したものを採用します。
# @intent:rationale 0x0000/0x00E0/0x00EE のような完全一致を先に置きます。
DECODE_PATTERNS = [
    (0xFFFF, 0x0000, "NOP"),
    (0xFFFF, 0x00E0, "CLS"),
    (0xFFFF, 0x00EE, "RET"),
    (0xF000, 0x1000, "JP"),
    (0xF000, 0x2000, "CALL"),
    (0xF000, 0x3000, "SE_VX_NN"),
    (0xF000, 0x4000, "SNE_VX_NN"),
    (0xF00F, 0x5000, "SE_VX_VY"),
    (0xF000, 0x6000, "LD_VX_NN"),
    (0xF000, 0x7000, "ADD_VX_NN"),
    (0xF00F, 0x8000, "LD_VX_VY"),
    (0xF00F, 0x8001, "OR"),
    (0xF00F, 0x8002, "AND"),
    (0xF00F, 0x8003, "XOR"),
    (0xF00F, 0x8004, "ADD_VX_VY"),
    (0xF00F, 0x8005, "SUB"),
    (0xF00F, 0x8006, "SHR"),
    (0xF00F, 0x8007, "SUBN"),
    (0xF00F, 0x800E, "SHL"),
    (0xF00F, 0x9000, "SNE_VX_VY"),
    (0xF000, 0xA000, "LD_I"),
    (0xF000, 0xB000, "JP_V0"),
    (0xF000, 0xC000, "RND"),
    (0xF000, 0xD000, "DRW"),
    (0xF0FF, 0xE09E, "SKP"),
    (0xF0FF, 0xE0A1, "SKNP"),
    (0xF0FF, 0xF007, "LD_VX_DT"),
    (0xF0FF, 0xF00A, "LD_VX_K"),
    (0xF0FF, 0xF015, "LD_DT_VX"),
    (0xF0FF, 0xF018, "LD_ST_VX"),
    (0xF0FF, 0xF01E, "ADD_I_VX"),
    (0xF0FF, 0xF029, "LD_F_VX"),
    (0xF0FF, 0xF033, "LD_B_VX"),
    (0xF0FF, 0xF055, "LD_MEM_VX"),
    (0xF0FF, 0xF065, "LD_VX_MEM"),
]

# @intent:map ニーモニックから実行関数へのマッピングテーブル。
EXECUTE_MAP = {
    # Control
    "NOP": control.execute_nop,
    "CLS": control.execute_cls,
    "RET": control.execute_ret,
    "JP": control.execute_jp,
    "CALL": control.execute_call,
    "SE_VX_NN": control.execute_se_vx_nn,
    "SNE_VX_NN": control.execute_sne_vx_nn,
    "SE_VX_VY": control.execute_se_vx_vy,
    "SNE_VX_VY": control.execute_sne_vx_vy,
    "JP_V0": control.execute_jp_v0,

    # ALU
    "LD_VX_NN": alu.execute_ld_vx_nn,
    "ADD_VX_NN": alu.execute_add_vx_nn,
    "LD_VX_VY": alu.execute_ld_vx_vy,
    "OR": alu.execute_or,
    "AND": alu.execute_and,
    "XOR": alu.execute_xor,
    "ADD_VX_VY": alu.execute_add_vx_vy,
    "SUB": alu.execute_sub_vx_vy,
    "SHR": alu.execute_shr,
    "SUBN": alu.execute_subn_vx_vy,
    "SHL": alu.execute_shl,

    # Index / Memory
    "LD_I": load.execute_ld_i,
    "ADD_I_VX": load.execute_add_i_vx,
    "LD_F_VX": load.execute_ld_f_vx,
    "LD_B_VX": load.execute_ld_b_vx,
    "LD_MEM_VX": load.execute_store_registers,
    "LD_VX_MEM": load.execute_load_registers,

    # Devices
    "RND": io.execute_rnd,
    "DRW": io.execute_drw,
    "SKP": io.execute_skp,
    "SKNP": io.execute_sknp,
    "LD_VX_K": io.execute_wait_key,
    "LD_VX_DT": io.execute_ld_vx_dt,
    "LD_DT_VX": io.execute_ld_dt_vx,
    "LD_ST_VX": io.execute_ld_st_vx,
}
