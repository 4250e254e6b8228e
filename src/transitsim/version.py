"""Version information for transitsim."""

__version__ = "1.0.0"
__version_info__ = tuple(int(num) for num in __version__.split("."))
__license__ = "MIT"
__description__ = "Synthetic exoplanet transit light curves with noise and phase folding"
__long_description__ = """
transitsim computes the dimming of a star while a planet crosses its disk,
synthesizes noisy photometry of that dip and folds many noisy transits
together to recover the clean signal.
"""
