import unittest
from chip8_core.machine import Chip8Machine
from chip8_core.arch.chip8.instructions import decode_opcode, execute_instruction
from chip8_core.arch.chip8.constants import START_ADDR, STACK_SIZE
from chip8_core.common.entropy import SequenceRandomSource
from chip8_core.common.errors import StackOverflowError, StackUnderflowError

class TestChip8ControlInstructions(unittest.TestCase):
    def setUp(self):
        self.rng = SequenceRandomSource([0x00])
        self.machine = Chip8Machine(rng=self.rng)
        self.bus = self.machine.bus
        self.state = self.machine.state

    def _execute(self, opcode):
        op = decode_opcode(opcode)
        self.state.pc += op.length
        execute_instruction(op, self.state, self.bus, self.rng)

    def test_nop(self):
        self._execute(0x0000)
        self.assertEqual(self.state.pc, START_ADDR + 2)

    def test_cls(self):
        self.state.display.toggle_pixel(3, 4)
        self.state.display.toggle_pixel(63, 31)
        self._execute(0x00E0)
        self.assertFalse(any(self.machine.get_display()))

    def test_jp(self):
        self._execute(0x1ABC)
        self.assertEqual(self.state.pc, 0x0ABC)

    def test_call_and_ret(self):
        self._execute(0x2300)
        self.assertEqual(self.state.pc, 0x300)
        self.assertEqual(self.state.sp, 1)
        self.assertEqual(self.state.stack[0], START_ADDR + 2)
        self._execute(0x00EE)
        self.assertEqual(self.state.pc, START_ADDR + 2)
        self.assertEqual(self.state.sp, 0)

    def test_call_overflow(self):
        # 0x200: CALL 0x200 を繰り返し、17回目でスタックが溢れる
        self.machine.load(bytes([0x22, 0x00]))
        for _ in range(STACK_SIZE):
            self.machine.tick()
        with self.assertRaises(StackOverflowError):
            self.machine.tick()
        self.assertEqual(self.state.sp, STACK_SIZE)
        self.assertEqual(self.state.pc, START_ADDR)

    def test_ret_underflow(self):
        with self.assertRaises(StackUnderflowError):
            self._execute(0x00EE)
        self.assertEqual(self.state.sp, 0)

    def test_se_vx_nn(self):
        self.state.v[3] = 0x12
        self._execute(0x3312)
        self.assertEqual(self.state.pc, START_ADDR + 4)
        self._execute(0x3313)
        self.assertEqual(self.state.pc, START_ADDR + 6)

    def test_sne_vx_nn(self):
        self.state.v[3] = 0x12
        self._execute(0x4312)
        self.assertEqual(self.state.pc, START_ADDR + 2)
        self._execute(0x4313)
        self.assertEqual(self.state.pc, START_ADDR + 6)

    def test_se_and_sne_vx_vy(self):
        self.state.v[1] = 7
        self.state.v[2] = 7
        self._execute(0x5120)
        self.assertEqual(self.state.pc, START_ADDR + 4)
        self._execute(0x9120)
        self.assertEqual(self.state.pc, START_ADDR + 6)
        self.state.v[2] = 8
        self._execute(0x9120)
        self.assertEqual(self.state.pc, START_ADDR + 10)

    def test_jp_v0(self):
        self.state.v[0] = 0x10
        self._execute(0xB300)
        self.assertEqual(self.state.pc, 0x310)

if __name__ == '__main__':
    unittest.main()
