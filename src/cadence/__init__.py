"""Cadence: spaced-repetition practice queue for coding problems."""

from cadence.consts import VERSION

__version__ = VERSION
