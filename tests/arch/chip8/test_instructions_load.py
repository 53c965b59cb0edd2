import unittest
import pytest
from chip8_core.machine import Chip8Machine
from chip8_core.arch.chip8.instructions import decode_opcode, execute_instruction
from chip8_core.common.entropy import SequenceRandomSource
from chip8_core.common.errors import MemoryAccessError

class TestChip8LoadInstructions(unittest.TestCase):
    def setUp(self):
        self.rng = SequenceRandomSource([0x00])
        self.machine = Chip8Machine(rng=self.rng)
        self.bus = self.machine.bus
        self.state = self.machine.state

    def _execute(self, opcode):
        op = decode_opcode(opcode)
        self.state.pc += op.length
        execute_instruction(op, self.state, self.bus, self.rng)

    def test_ld_i(self):
        self._execute(0xA123)
        self.assertEqual(self.state.i, 0x123)

    def test_add_i_vx_wraps_16bit(self):
        self.state.i = 0xFFFF
        self.state.v[2] = 0x02
        self.state.vf = 0x03
        self._execute(0xF21E)
        self.assertEqual(self.state.i, 0x0001)
        self.assertEqual(self.state.vf, 0x03)

    def test_ld_f_vx(self):
        self.state.v[4] = 0x0A
        self._execute(0xF429)
        self.assertEqual(self.state.i, 50)
        # 'A' glyph starts with 0xF0, 0x90
        self.assertEqual(self.bus.read(self.state.i), 0xF0)
        self.assertEqual(self.bus.read(self.state.i + 1), 0x90)

    def test_ld_b_vx(self):
        self.state.i = 0x300
        self.state.v[0] = 254
        self._execute(0xF033)
        self.assertEqual([self.bus.read(0x300 + k) for k in range(3)], [2, 5, 4])

    def test_ld_b_vx_out_of_bounds(self):
        self.state.i = 0xFFE
        self.state.v[0] = 123
        with self.assertRaises(MemoryAccessError):
            self._execute(0xF033)
        self.assertEqual(self.bus.read(0xFFE), 0)
        self.assertEqual(self.bus.read(0xFFF), 0)

    def test_store_registers_out_of_bounds_writes_nothing(self):
        self.state.i = 0xFFE
        self.state.v[:4] = [0x11, 0x22, 0x33, 0x44]
        with self.assertRaises(MemoryAccessError):
            self._execute(0xF355)
        self.assertEqual(self.machine.memory_dump()[0xFFE:], bytes(2))

    def test_store_registers_inclusive(self):
        self.state.i = 0x400
        for idx in range(16):
            self.state.v[idx] = idx + 1
        self._execute(0xF355)
        self.assertEqual([self.bus.read(0x400 + k) for k in range(5)], [1, 2, 3, 4, 0])
        self.assertEqual(self.state.i, 0x400)

    def test_load_registers_inclusive(self):
        self.state.i = 0x400
        for k, value in enumerate([9, 8, 7, 6]):
            self.bus.write(0x400 + k, value)
        self._execute(0xF265)
        self.assertEqual(self.state.v[:4], [9, 8, 7, 0])
        self.assertEqual(self.state.i, 0x400)

    def test_load_registers_out_of_bounds(self):
        self.state.i = 0xFFF
        self.bus.write(0xFFF, 0x77)
        self.state.v[0] = 0x01
        with pytest.raises(MemoryAccessError):
            self._execute(0xF165)
        self.assertEqual(self.state.v[:2], [0x01, 0])

if __name__ == '__main__':
    unittest.main()
