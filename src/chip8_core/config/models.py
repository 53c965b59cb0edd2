from dataclasses import dataclass
from typing import Optional

@dataclass
class MachineConfig:
    ticks_per_frame: int = 10  # 1ビデオフレームあたりの命令実行回数
    timer_hz: int = 60         # タイマー減算の周期。Chip8Machine.timer_hz としてホストに渡される
    random_seed: Optional[int] = None  # 指定すると乱数列が再現可能になる
