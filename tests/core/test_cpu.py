# tests/core/test_cpu.py
"""
chip8_core.core.cpuモジュールの単体テスト。
"""
import pytest

from chip8_core.core.state import CpuState
from chip8_core.core.cpu import AbstractCpu
from chip8_core.core.operation import Operation
from chip8_core.transport.bus import Bus, RAM

# @intent:test_suite 抽象CPUのテンプレートメソッド（フェッチ→デコード→PC更新→実行）を検証します。

class DummyCpu(AbstractCpu):
    def __init__(self, bus: Bus):
        super().__init__(bus)
        self.executed = []

    def _create_initial_state(self) -> CpuState:
        return CpuState(pc=0x0010, sp=0x0000)

    def _fetch(self) -> int:
        return self._bus.read(self._state.pc)

    def _decode(self, opcode: int) -> Operation:
        return Operation(opcode=opcode, mnemonic="NOP" if opcode == 0 else "UNKNOWN", length=1)

    def _execute(self, operation: Operation) -> None:
        # 実行時点でPCは更新済みであること
        self.executed.append((operation.mnemonic, self._state.pc))


@pytest.fixture
def cpu():
    bus = Bus()
    bus.register_device(0x0000, 0x00FF, RAM(0x100))
    return DummyCpu(bus)


class TestCpuState:
    def test_cpu_state_init_default(self):
        state = CpuState()
        assert state.pc == 0x0000
        assert state.sp == 0x0000


class TestAbstractCpu:
    def test_step_updates_pc_before_execute(self, cpu):
        op = cpu.step()
        assert op.mnemonic == "NOP"
        assert cpu.executed == [("NOP", 0x0011)]
        assert cpu.get_state().pc == 0x0011
        assert cpu.cycle_count == 1

    def test_reset_recreates_state(self, cpu):
        cpu.step()
        cpu.get_state().sp = 0x42
        cpu.reset()
        assert cpu.get_state().pc == 0x0010
        assert cpu.get_state().sp == 0x0000
        assert cpu.cycle_count == 0

    def test_abstract_cpu_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            AbstractCpu(Bus())
