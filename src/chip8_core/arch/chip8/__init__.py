from .cpu import Chip8Cpu
from .state import Chip8CpuState

__all__ = ["Chip8Cpu", "Chip8CpuState"]
