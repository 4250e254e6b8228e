import dataclasses

import pytest

from transitsim.config import DEFAULTS, SimulationDefaults, load_config
from transitsim.core.exceptions import ConfigError


class TestSimulationDefaults:
    """Test the built-in defaults."""

    def test_documented_values(self):
        assert DEFAULTS.depth == 0.001
        assert DEFAULTS.duration == 0.02
        assert DEFAULTS.impact_parameter == 0.3
        assert DEFAULTS.a_rs == 10.0
        assert DEFAULTS.u1 == 0.0 and DEFAULTS.u2 == 0.0
        assert DEFAULTS.ingress_fraction == pytest.approx(1 / 6)
        assert DEFAULTS.photometric_noise == 0.001
        assert DEFAULTS.red_noise_factor == 0.3
        assert DEFAULTS.red_noise_decay == 0.95
        assert DEFAULTS.noisy_num_points == 150
        assert DEFAULTS.gap_fraction == 0.05
        assert DEFAULTS.fold_bins_per_phase == 500

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULTS.depth = 0.01

    def test_replace(self):
        custom = DEFAULTS.replace(photometric_noise=0.002)

        assert custom.photometric_noise == 0.002
        assert DEFAULTS.photometric_noise == 0.001
        assert custom.depth == DEFAULTS.depth

    def test_to_dict(self):
        d = SimulationDefaults().to_dict()
        assert d["fold_bins_per_phase"] == 500
        assert set(d) == {f.name for f in dataclasses.fields(SimulationDefaults)}


class TestLoadConfig:
    """Test YAML overrides."""

    def test_overrides(self, temp_dir):
        path = temp_dir / "defaults.yaml"
        path.write_text("photometric_noise: 0.002\nfold_bins_per_phase: 250\n")

        config = load_config(path)

        assert config.photometric_noise == 0.002
        assert config.fold_bins_per_phase == 250
        assert config.depth == DEFAULTS.depth

    def test_blank_entries_keep_base(self, temp_dir):
        path = temp_dir / "defaults.yaml"
        path.write_text("depth:\nduration: None\nu1: 0.4\n")

        config = load_config(path)

        assert config.depth == DEFAULTS.depth
        assert config.duration == DEFAULTS.duration
        assert config.u1 == 0.4

    def test_custom_base(self, temp_dir):
        path = temp_dir / "defaults.yaml"
        path.write_text("u2: 0.1\n")
        base = DEFAULTS.replace(u1=0.5)

        config = load_config(path, base=base)

        assert config.u1 == 0.5
        assert config.u2 == 0.1

    def test_empty_file(self, temp_dir):
        path = temp_dir / "empty.yaml"
        path.write_text("")
        assert load_config(path) == DEFAULTS

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_config(temp_dir / "nope.yaml")

    def test_not_a_mapping(self, temp_dir):
        path = temp_dir / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_unknown_key(self, temp_dir):
        path = temp_dir / "typo.yaml"
        path.write_text("photometric_nosie: 0.002\n")
        with pytest.raises(ConfigError, match="photometric_nosie"):
            load_config(path)

    def test_invalid_yaml(self, temp_dir):
        path = temp_dir / "bad.yaml"
        path.write_text("depth: [0.1\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_values_take_field_type(self, temp_dir):
        path = temp_dir / "defaults.yaml"
        path.write_text("fold_bins_per_phase: 250.0\nphotometric_noise: 1\n")

        config = load_config(path)

        assert config.fold_bins_per_phase == 250
        assert isinstance(config.fold_bins_per_phase, int)
        assert isinstance(config.photometric_noise, float)

    @pytest.mark.parametrize("text", [
        "fold_bins_per_phase: lots\n",
        "fold_bins_per_phase: 2.5\n",
        "photometric_noise: [0.1, 0.2]\n",
        "gap_fraction: true\n",
    ])
    def test_wrong_type(self, temp_dir, text):
        path = temp_dir / "defaults.yaml"
        path.write_text(text)
        with pytest.raises(ConfigError):
            load_config(path)
