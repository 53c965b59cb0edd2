from .models import MachineConfig
from .loader import ConfigLoader
from .builder import SystemBuilder

__all__ = ["MachineConfig", "ConfigLoader", "SystemBuilder"]
