# chip8_core/machine.py
"""
ホスト向けのマシン・ファサード。

CPU、メモリ、画面、キーパッドを1つのマシンとしてまとめ、ホストが呼び出す操作
（ロード、リセット、tick、タイマーtick、キー入力、画面取得）を提供します。
描画、音声、入力デバイスのポーリング、ファイル読み込みはホストの責務です。
"""
import logging
from typing import Optional

from chip8_core.transport.bus import Bus, RAM
from chip8_core.core.operation import Operation
from chip8_core.common.entropy import RandomSource
from chip8_core.common.errors import Chip8Error, ProgramTooLargeError
from chip8_core.common.types import DisplayView
from chip8_core.arch.chip8.cpu import Chip8Cpu
from chip8_core.arch.chip8.state import Chip8CpuState
from chip8_core.arch.chip8.constants import RAM_SIZE, START_ADDR, FONT_ADDR, FONTSET

logger = logging.getLogger(__name__)

DEFAULT_TICKS_PER_FRAME = 10
DEFAULT_TIMER_HZ = 60

# @intent:responsibility CHIP-8 マシン全体の状態を所有し、ホストからの駆動を受け付けます。
class Chip8Machine:
    """
    CHIP-8 仮想マシン。

    ホストは一定周期で :meth:`tick_timers` を、1フレームあたり任意回数 :meth:`tick` を呼び出します。
    :meth:`run_frame` はその典型的な組み合わせです。内部でのロックは行いません。
    """
    def __init__(self, rng: Optional[RandomSource] = None, ticks_per_frame: int = DEFAULT_TICKS_PER_FRAME,
                 timer_hz: int = DEFAULT_TIMER_HZ):
        if ticks_per_frame <= 0:
            raise ValueError("ticks_per_frame must be a positive integer.")
        if timer_hz <= 0:
            raise ValueError("timer_hz must be a positive integer.")
        self.ticks_per_frame = ticks_per_frame
        # ホストが tick_timers / run_frame を呼び出すべき周期 (Hz)
        self.timer_hz = timer_hz
        self._ram = RAM(RAM_SIZE)
        self._bus = Bus()
        self._bus.register_device(0x000, RAM_SIZE - 1, self._ram)
        self._cpu = Chip8Cpu(self._bus, rng)
        self._load_fontset()
        logger.debug("CHIP-8 machine created (%d bytes RAM, program at %#05x)", RAM_SIZE, START_ADDR)

    def _load_fontset(self) -> None:
        self._ram.load_block(FONT_ADDR, FONTSET)

    @property
    def cpu(self) -> Chip8Cpu:
        return self._cpu

    @property
    def bus(self) -> Bus:
        return self._bus

    @property
    def state(self) -> Chip8CpuState:
        return self._cpu.get_state()

    # @intent:responsibility プログラムイメージを 0x200 から書き込みます。
    # @intent:pre-condition イメージがプログラム領域に収まること。収まらない場合は何も書き込まずに ProgramTooLargeError を送出します。
    def load(self, data: bytes) -> None:
        capacity = RAM_SIZE - START_ADDR
        if len(data) > capacity:
            raise ProgramTooLargeError(len(data), capacity)
        self._bus.load_block(START_ADDR, bytes(data))
        logger.debug("Loaded %d byte program at %#05x", len(data), START_ADDR)

    # @intent:responsibility 構築直後と同一の状態に戻します（フォント再ロード、その他は全てゼロ）。
    def reset(self) -> None:
        """
        画面とキーパッドは同じオブジェクトのまま消去されます。
        レジスタやタイマーを保持する state は作り直されるため、リセット後は :attr:`state` を取り直してください。
        """
        self._ram.clear()
        self._load_fontset()
        self._cpu.reset()
        logger.debug("CHIP-8 machine reset")

    def get_display(self) -> DisplayView:
        return self.state.display.view()

    # @intent:responsibility 1つのキーの押下状態を更新します。範囲外の番号は InvalidKeyError になります。
    def keypress(self, index: int, pressed: bool) -> None:
        self.state.keypad.set_key(index, pressed)

    # @intent:responsibility フェッチ・デコード・実行を1サイクル行い、実行した命令を返します。
    def tick(self) -> Operation:
        pc = self.state.pc
        try:
            return self._cpu.step()
        except Chip8Error:
            logger.error("Emulation fault at PC %#06x", pc)
            raise

    # @intent:responsibility タイマーを1回減算します。サウンドタイマーが 1→0 になったとき True を返します。
    def tick_timers(self) -> bool:
        return self._cpu.tick_timers()

    # @intent:responsibility 1ビデオフレーム分（ticks_per_frame 回の tick と1回のタイマー tick）を進めます。
    def run_frame(self) -> bool:
        for _ in range(self.ticks_per_frame):
            self.tick()
        return self.tick_timers()

    # @intent:responsibility メモリ内容のコピーを返します。
    def memory_dump(self) -> bytes:
        return self._ram.dump()
