import pytest

from transitsim.data import PlanetRecord, in_habitable_zone, planet_type
from transitsim.parameters import TransitParameters


class TestPlanetRecord:
    """Test archive record conversion."""

    @pytest.fixture
    def row(self):
        return {
            "pl_name": "Test b",
            "pl_trandep": 1.0,
            "pl_trandur": 3.0,
            "pl_orbper": 3.0,
            "pl_ratror": 0.1,
            "pl_imppar": float("nan"),
            "pl_ratdor": 8.5,
            "pl_rade": 11.2,
            "pl_eqt": 1450.0,
            "sy_vmag": 11.0,
            "ld_u1": None,
            "ld_u2": None,
            "hostname": "Test",
        }

    def test_from_mapping(self, row):
        record = PlanetRecord.from_mapping(row)

        assert record.pl_name == "Test b"
        assert record.pl_imppar is None
        assert record.ld_u1 is None

    def test_depth_percent_to_fraction(self, row):
        assert PlanetRecord.from_mapping(row).depth == pytest.approx(0.01)

    def test_duration_in_phase_units(self, row):
        # 3 hours of a 3 day orbit
        assert PlanetRecord.from_mapping(row).duration_phase == pytest.approx(1 / 24)

    def test_duration_needs_period(self):
        assert PlanetRecord(pl_trandur=3.0).duration_phase is None
        assert PlanetRecord(pl_trandur=3.0, pl_orbper=-1.0).duration_phase is None

    def test_to_parameters(self, row):
        params = PlanetRecord.from_mapping(row).to_parameters()

        assert isinstance(params, TransitParameters)
        assert params.depth == pytest.approx(0.01)
        assert params.rprs == 0.1
        assert params.b is None
        assert params.aRs == 8.5
        assert params.vmag == 11.0

        resolved = params.resolve()
        assert resolved.b == 0.3
        assert resolved.u1 == 0.0

    def test_empty_record(self):
        record = PlanetRecord()

        assert record.depth is None
        assert record.planet_type == "Unknown"
        assert record.habitable is False

    def test_properties(self, row):
        record = PlanetRecord.from_mapping(row)

        assert record.planet_type == "Gas Giant"
        assert record.habitable is False


@pytest.mark.parametrize("radius, expected", [
    (None, "Unknown"),
    (1.0, "Terrestrial"),
    (1.5, "Super-Earth"),
    (3.0, "Sub-Neptune"),
    (6.0, "Neptune-like"),
    (12.0, "Gas Giant"),
])
def test_planet_type(radius, expected):
    assert planet_type(radius) == expected


def test_habitable_zone():
    assert in_habitable_zone(288.0)
    assert not in_habitable_zone(150.0)
    assert not in_habitable_zone(400.0)
    assert not in_habitable_zone(None)


def test_empty_string_cells_are_missing():
    record = PlanetRecord.from_mapping({"pl_name": "CSV b", "pl_trandep": "", "pl_imppar": " ", "sy_vmag": "11.5"})

    assert record.pl_trandep is None
    assert record.pl_imppar is None
    assert record.sy_vmag == 11.5
    assert record.depth is None
