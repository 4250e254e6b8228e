"""Disk geometry used by the transit models."""

from __future__ import annotations

from typing import Union

import numpy as np


def circle_overlap(
    d: Union[float, np.ndarray], r: float
) -> Union[float, np.ndarray]:
    """
    Overlap area of a circle of radius ``r`` with the unit (stellar) disk.

    Parameters
    ----------
    d : float or array
        Centre-to-centre separation in stellar radii (d >= 0).
    r : float
        Radius of the occulting circle in stellar radii.

    Returns
    -------
    overlap : float or array
        Overlapping area divided by pi, i.e. the covered fraction of the
        unit disk for r <= 1.
    """
    scalar = np.ndim(d) == 0
    d = np.atleast_1d(np.asarray(d, dtype=float))
    r = float(r)

    overlap = np.zeros_like(d)

    inside = d <= abs(1.0 - r)
    overlap[inside] = min(r, 1.0) ** 2

    partial = (d < 1.0 + r) & ~inside
    if np.any(partial):
        dp = d[partial]
        d2 = dp * dp
        r2 = r * r

        # Rounding can push the cosines just outside [-1, 1]
        cos_planet = np.clip((d2 + r2 - 1.0) / (2.0 * dp * r), -1.0, 1.0)
        cos_star = np.clip((d2 + 1.0 - r2) / (2.0 * dp), -1.0, 1.0)

        kite = (r + 1.0 + dp) * (r + 1.0 - dp) * (dp + r - 1.0) * (dp - r + 1.0)
        area = (
            r2 * np.arccos(cos_planet)
            + np.arccos(cos_star)
            - 0.5 * np.sqrt(np.maximum(kite, 0.0))
        )
        overlap[partial] = area / np.pi

    if scalar:
        return float(overlap[0])
    return overlap
