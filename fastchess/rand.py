"""Shared pseudo-random generator and fresh random numbers."""

from __future__ import annotations

import logging
import random
import secrets

_log = logging.getLogger(__name__)

mersenne_rand = random.Random()
"""Process-wide Mersenne Twister used wherever reproducible randomness is needed."""


def random_uint64() -> int:
    """Return an unpredictable integer in ``[0, 2**64)``."""
    return secrets.randbits(64)


def seed(value: int) -> None:
    """Reseed the shared generator so later draws are reproducible."""
    _log.info("Setting seed to: %d", value)
    mersenne_rand.seed(value)