# tests/config/test_config.py
"""
YAML構成の読み込みとマシン構築のテスト。
"""
import pytest

from chip8_core.config import ConfigLoader, MachineConfig, SystemBuilder
from chip8_core.common.entropy import SequenceRandomSource, SystemRandomSource


class TestConfigLoader:
    def test_load_from_file(self, tmp_path):
        path = tmp_path / "machine.yaml"
        path.write_text("ticks_per_frame: 12\ntimer_hz: 60\nrandom_seed: '0x2A'\n")
        config = ConfigLoader().load_from_file(str(path))
        assert config == MachineConfig(ticks_per_frame=12, timer_hz=60, random_seed=42)

    def test_empty_document_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert ConfigLoader().load_from_file(str(path)) == MachineConfig()

    def test_hex_and_decimal_strings(self):
        config = ConfigLoader().load_from_string("ticks_per_frame: '0x10'\ntimer_hz: '30'\n")
        assert config.ticks_per_frame == 16
        assert config.timer_hz == 30
        assert config.random_seed is None

    @pytest.mark.parametrize("text", [
        "ticks_per_frame: 0\n",
        "timer_hz: -5\n",
        "ticks_per_frame: [1, 2]\n",
        "ticks_per_frame: true\n",
        "- not a mapping\n",
    ])
    def test_invalid_values(self, text):
        with pytest.raises(ValueError):
            ConfigLoader().load_from_string(text)


class TestSystemBuilder:
    def test_build_machine_applies_config(self):
        machine = SystemBuilder().build_machine(MachineConfig(ticks_per_frame=7))
        assert machine.ticks_per_frame == 7

    def test_seeded_machines_are_reproducible(self):
        program = bytes([0xC0, 0xFF, 0xC1, 0xFF, 0xC2, 0xFF])
        results = []
        for _ in range(2):
            machine = SystemBuilder().build_machine(MachineConfig(random_seed=1234))
            machine.load(program)
            for _ in range(3):
                machine.tick()
            results.append(machine.state.v[:3])
        assert results[0] == results[1]

    def test_explicit_rng_wins(self):
        machine = SystemBuilder().build_machine(MachineConfig(random_seed=1), rng=SequenceRandomSource([0x81]))
        machine.load(bytes([0xC3, 0x0F]))
        machine.tick()
        assert machine.state.v[3] == 0x01

    def test_nonstandard_timer_rate_warns(self, caplog):
        with caplog.at_level("WARNING", logger="chip8_core.config.builder"):
            machine = SystemBuilder().build_machine(MachineConfig(timer_hz=50))
        assert "timer_hz=50" in caplog.text
        assert machine.timer_hz == 50


class TestRandomSources:
    def test_sequence_cycles(self):
        source = SequenceRandomSource([1, 2, 0x1FF])
        assert [source.next_byte() for _ in range(4)] == [1, 2, 0xFF, 1]

    def test_sequence_requires_values(self):
        with pytest.raises(ValueError):
            SequenceRandomSource([])

    def test_system_source_range_and_seed(self):
        a, b = SystemRandomSource(7), SystemRandomSource(7)
        values = [a.next_byte() for _ in range(50)]
        assert values == [b.next_byte() for _ in range(50)]
        assert all(0 <= v <= 0xFF for v in values)
