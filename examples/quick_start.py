"""
transitsim Quick Start Example

Builds a clean transit model, draws one noisy observation of it and then
folds many observations to show the noise beating down.
"""

import numpy as np
import transitsim as ts

print("=" * 60)
print("transitsim - Quick Start Example")
print("=" * 60)

# -------------------------
# 1) Clean model
# -------------------------
print("Building analytic transit model...")

params = ts.TransitParameters(
    rprs=0.1,       # planet-to-star radius ratio
    b=0.05,         # impact parameter
    aRs=10.0,       # semi-major axis in stellar radii
    u1=0.3,         # limb-darkening coefficients
    u2=0.2,
    vmag=12.0,      # sets the photometric noise
)
sim = ts.TransitSimulator(params, rng=42)

model = sim.model_curve()
print(f"Model points: {len(model)}")
print(f"Minimum flux: {model.flux.min():.5f}")
print(f"Noise for V={params.vmag}: {sim.noise_sigma * 1e6:.0f} ppm")

# -------------------------
# 2) One noisy transit
# -------------------------
print("\nSimulating a single transit...")

single = sim.noisy_curve()
single_stats = ts.fold_scatter(single, model)
print(f"Observed samples: {single_stats.n_points}")
print(f"Scatter about model: {single_stats.rms * 1e6:.0f} ppm")

# -------------------------
# 3) Fold many transits
# -------------------------
print("\nFolding transits...")

for n in (5, 20, 50):
    folded = sim.folded_curve(n)
    stats = ts.fold_scatter(folded, model)
    print(f"  {n:3d} transits: {stats.n_points:4d} bins, "
          f"scatter {stats.rms * 1e6:6.0f} ppm, "
          f"deepest bin {folded.flux.min():.5f}")

# -------------------------
# 4) Trapezoid comparison
# -------------------------
print("\nTrapezoid approximation...")

trap = ts.generate_transit_curve(depth=0.01, duration=0.03)
diff = np.max(np.abs(model.interpolate(trap.phase) - trap.flux))
print(f"Largest difference from analytic model: {diff * 1e6:.0f} ppm")

print("\nDone.")
