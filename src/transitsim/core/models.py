"""Phase curve containers shared by every model and noise routine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, NamedTuple, Tuple, Union

import numpy as np

from transitsim.core.exceptions import InvalidCurveError


class ModelKind(str, Enum):
    """Supported clean transit models."""

    ANALYTIC = "analytic"
    TRAPEZOID = "trapezoid"


class TransitPoint(NamedTuple):
    """A single (phase, relative flux) sample."""

    phase: float
    flux: float


@dataclass(eq=False)
class PhaseCurve:
    """Ordered phase/flux samples of a light curve.

    Phase is in units of the orbital period with 0 at mid-transit; flux is
    relative to the out-of-transit level.
    """

    phase: Iterable[float]
    flux: Iterable[float]

    def __post_init__(self) -> None:
        self.phase = np.asarray(self.phase, dtype=float).reshape(-1)
        self.flux = np.asarray(self.flux, dtype=float).reshape(-1)
        if self.phase.shape != self.flux.shape:
            raise InvalidCurveError(
                f"phase and flux lengths differ: {self.phase.size} != {self.flux.size}"
            )

    @classmethod
    def from_points(cls, points: Iterable[Tuple[float, float]]) -> "PhaseCurve":
        pairs = [(float(p), float(f)) for p, f in points]
        if not pairs:
            return cls(phase=np.empty(0), flux=np.empty(0))
        phase, flux = zip(*pairs)
        return cls(phase=phase, flux=flux)

    def __len__(self) -> int:
        return int(self.phase.size)

    def __iter__(self) -> Iterator[TransitPoint]:
        for p, f in zip(self.phase, self.flux):
            yield TransitPoint(float(p), float(f))

    @property
    def points(self) -> List[TransitPoint]:
        return list(self)

    @property
    def domain(self) -> Tuple[float, float]:
        """First and last phase of the curve."""
        if len(self) == 0:
            raise InvalidCurveError("empty curve has no phase domain")
        return float(self.phase[0]), float(self.phase[-1])

    def interpolate(self, phase: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Linearly interpolate flux at ``phase``, clamping outside the domain."""
        if len(self) == 0:
            raise InvalidCurveError("cannot interpolate an empty curve")
        result = np.interp(phase, self.phase, self.flux)
        if np.ndim(result) == 0:
            return float(result)
        return result

    def to_dict(self) -> Dict[str, List[float]]:
        return {"phase": self.phase.tolist(), "flux": self.flux.tolist()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PhaseCurve):
            return NotImplemented
        return np.array_equal(self.phase, other.phase) and np.array_equal(self.flux, other.flux)
