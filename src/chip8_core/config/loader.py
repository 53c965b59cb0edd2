import yaml
from typing import Dict, Any, Optional
from .models import MachineConfig

class ConfigLoader:
    def load_from_file(self, path: str) -> MachineConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return self._parse_config(data or {})

    def load_from_string(self, text: str) -> MachineConfig:
        return self._parse_config(yaml.safe_load(text) or {})

    def _parse_config(self, data: Dict[str, Any]) -> MachineConfig:
        if not isinstance(data, dict):
            raise ValueError("Machine configuration must be a mapping.")
        defaults = MachineConfig()

        ticks_per_frame = self._parse_int(data.get("ticks_per_frame", defaults.ticks_per_frame))
        timer_hz = self._parse_int(data.get("timer_hz", defaults.timer_hz))
        if ticks_per_frame <= 0:
            raise ValueError(f"ticks_per_frame must be positive: {ticks_per_frame}")
        if timer_hz <= 0:
            raise ValueError(f"timer_hz must be positive: {timer_hz}")

        seed_value = data.get("random_seed")
        random_seed: Optional[int] = None if seed_value is None else self._parse_int(seed_value)

        return MachineConfig(
            ticks_per_frame=ticks_per_frame,
            timer_hz=timer_hz,
            random_seed=random_seed,
        )

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")
