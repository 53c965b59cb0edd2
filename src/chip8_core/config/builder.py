import logging
from typing import Optional

from chip8_core.common.entropy import RandomSource, SystemRandomSource
from chip8_core.machine import Chip8Machine
from .models import MachineConfig

logger = logging.getLogger(__name__)

# @intent:responsibility 構成（Config）に基づいて、乱数供給元とマシンを生成・接続します。
class SystemBuilder:
    def build_machine(self, config: MachineConfig, rng: Optional[RandomSource] = None) -> Chip8Machine:
        if rng is None:
            rng = SystemRandomSource(config.random_seed)
        if config.timer_hz != 60:
            logger.warning("timer_hz=%d differs from the standard 60 Hz timer rate", config.timer_hz)
        return Chip8Machine(rng=rng, ticks_per_frame=config.ticks_per_frame, timer_hz=config.timer_hz)
