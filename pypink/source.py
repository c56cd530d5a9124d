"""Uniform random sources feeding the noise generators.

A source is any zero-argument callable returning a real value in [0, 1).
"""

import logging
from typing import Iterable, Optional

import numpy as np

from .types import RandomSource

log = logging.getLogger(__name__)


class RandomSourceError(RuntimeError):
    """The random source failed or produced a value outside [0, 1)."""


def default_source(seed: Optional[int] = None) -> RandomSource:
    log.debug("numpy source, seed=%s", seed)
    return np.random.default_rng(seed).random


def sequence_source(values: Iterable[float]) -> RandomSource:
    """Replay ``values`` one per call; raises RandomSourceError when exhausted."""
    it = iter(list(values))

    def draw() -> float:
        try:
            return next(it)
        except StopIteration:
            raise RandomSourceError("sequence source exhausted") from None

    return draw
