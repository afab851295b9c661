"""Customer purchase tracking and tiered loyalty rewards."""

__version__ = "0.1.0"
