# chip8_core/arch/chip8/instructions/__init__.py
"""
CHIP-8 命令セット実装パッケージ。
"""
from chip8_core.transport.bus import Bus
from chip8_core.core.operation import Operation
from chip8_core.common.entropy import RandomSource
from chip8_core.common.errors import UnsupportedInstructionError
from chip8_core.arch.chip8.state import Chip8CpuState
from .maps import DECODE_PATTERNS, EXECUTE_MAP

# @intent:responsibility 16bitの命令ワードをニブルに分解し、Operationを返します。
# @intent:post-condition どのパターンにも一致しない場合は UnsupportedInstructionError を送出します。
def decode_opcode(opcode: int) -> Operation:
    """
    CHIP-8 の命令ワードをデコードし、Operationオブジェクトを返します。
    """
    for mask, value, mnemonic in DECODE_PATTERNS:
        if opcode & mask == value:
            return Operation(
                opcode=opcode,
                mnemonic=mnemonic,
                x=(opcode >> 8) & 0xF,
                y=(opcode >> 4) & 0xF,
                n=opcode & 0xF,
                nn=opcode & 0xFF,
                nnn=opcode & 0xFFF,
            )
    raise UnsupportedInstructionError(opcode)

# @intent:responsibility デコードされた命令を実行します。
def execute_instruction(operation: Operation, state: Chip8CpuState, bus: Bus, rng: RandomSource) -> None:
    """
    デコードされた命令を実行し、CPUの状態を変更します。
    """
    executor = EXECUTE_MAP.get(operation.mnemonic)
    if executor is None:
        raise UnsupportedInstructionError(operation.opcode)
    executor(state, bus, operation, rng)
