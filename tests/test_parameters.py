import math
import warnings

import pytest

from transitsim.config import DEFAULTS
from transitsim.noise import estimate_noise
from transitsim.parameters import ResolvedParameters, TransitParameters


class TestTransitParameters:
    """Test parameter defaults and validation."""

    def test_all_defaults(self):
        p = TransitParameters().resolve()

        assert isinstance(p, ResolvedParameters)
        assert p.depth == 0.001
        assert p.duration == 0.02
        assert p.rprs == pytest.approx(math.sqrt(0.001))
        assert p.b == 0.3
        assert p.aRs == 10.0
        assert p.u1 == 0.0 and p.u2 == 0.0
        assert p.ingress_duration == pytest.approx(0.02 / 6)
        assert p.photometric_noise == 0.001

    def test_rprs_from_depth(self):
        p = TransitParameters(depth=0.01).resolve()
        assert p.rprs == pytest.approx(0.1)

    def test_explicit_rprs_wins(self):
        p = TransitParameters(depth=0.01, rprs=0.2).resolve()
        assert p.rprs == 0.2

    def test_ingress_follows_duration(self):
        p = TransitParameters(duration=0.06).resolve()
        assert p.ingress_duration == pytest.approx(0.01)

    def test_noise_from_vmag(self):
        p = TransitParameters(vmag=14.0).resolve()
        assert p.photometric_noise == pytest.approx(estimate_noise(14.0))

    def test_explicit_noise_overrides_vmag(self):
        p = TransitParameters(vmag=14.0, photometric_noise=0.003).resolve()
        assert p.photometric_noise == 0.003

    def test_nan_is_missing(self):
        p = TransitParameters(b=float("nan"), aRs=float("nan")).resolve()

        assert p.b == DEFAULTS.impact_parameter
        assert p.aRs == DEFAULTS.a_rs

    def test_custom_defaults(self):
        defaults = DEFAULTS.replace(impact_parameter=0.0, u1=0.4)
        p = TransitParameters().resolve(defaults)

        assert p.b == 0.0
        assert p.u1 == 0.4

    def test_negative_rprs_clamped(self):
        with pytest.warns(RuntimeWarning):
            params = TransitParameters(rprs=-0.1)
        assert params.resolve().rprs == 0.0

    @pytest.mark.parametrize("kwargs", [
        {"depth": 1.5},
        {"depth": -0.01},
        {"duration": 0.0},
        {"aRs": 0.5},
    ])
    def test_unphysical_values_warn(self, kwargs):
        with pytest.warns(RuntimeWarning):
            TransitParameters(**kwargs)

    def test_physical_values_do_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            TransitParameters(depth=0.01, duration=0.05, rprs=0.1, b=0.3, aRs=10.0)

    def test_keyword_only(self):
        with pytest.raises(TypeError):
            TransitParameters(0.01)

    def test_from_mapping_ignores_extra_keys(self):
        params = TransitParameters.from_mapping({"rprs": 0.1, "pl_name": "X", "b": 0.2})

        assert params.rprs == 0.1
        assert params.b == 0.2
        assert params.depth is None

    def test_to_dict(self):
        d = TransitParameters(rprs=0.1).to_dict()

        assert d["rprs"] == 0.1
        assert d["vmag"] is None
        assert TransitParameters.from_mapping(d) == TransitParameters(rprs=0.1)

    def test_resolved_to_dict(self):
        d = TransitParameters().resolve().to_dict()
        assert set(d) == {
            "depth", "duration", "ingress_duration", "rprs",
            "b", "aRs", "u1", "u2", "photometric_noise",
        }

    def test_limb_darkening_sum_above_one_warns(self):
        with pytest.warns(RuntimeWarning, match="u1 \\+ u2"):
            TransitParameters(u1=0.6, u2=0.6)

    def test_limb_darkening_sum_of_one_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            TransitParameters(u1=0.6, u2=0.4)
            TransitParameters(u1=0.6)
