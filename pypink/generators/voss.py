"""Voss-McCartney pink noise, one sample at a time.

A bank of white-noise cells where cell k is redrawn every 2**k samples,
plus one extra cell redrawn on every sample. The cell to redraw is the
number of trailing zero bits of a rolling counter, so cell 0 updates on
odd counts, cell 1 on counts 2 mod 4, and so on. Their running sum has a
roughly 1/f spectrum.

See https://www.firstpr.com.au/dsp/pink-noise/

Usage:
    p = PinkGenerator()
    s = p.next_sample()       # one sample in [-1, 1]
    block = p.render(1024)    # float32 array
"""

import logging
import numbers
from typing import Iterator, Optional, Tuple

import numpy as np

from ..source import default_source
from ..types import RandomSource
from .unit import UnitNoise

log = logging.getLogger(__name__)

DEFAULT_GENERATORS = 15
# counter is a uint32, so rollover = 2**(n - 1) has to fit in 32 bits
MAX_GENERATORS = 32


class PinkGenerator:
    def __init__(self, generator_count: int = DEFAULT_GENERATORS,
                 source: Optional[RandomSource] = None):
        if isinstance(generator_count, bool) or not isinstance(generator_count, numbers.Integral):
            raise ValueError(f"generator_count must be an int, got {generator_count!r}")
        generator_count = int(generator_count)
        if not 1 <= generator_count <= MAX_GENERATORS:
            raise ValueError(
                f"generator_count must be in [1, {MAX_GENERATORS}], got {generator_count}")

        self._source = source if source is not None else default_source()
        self._generator_count = generator_count
        self._rollover = 1 << (generator_count - 1)
        self._noise = tuple(UnitNoise(self._source) for _ in range(generator_count))
        self._white = UnitNoise(self._source)
        self._sum = np.float32(0.0)
        self._counter = 1
        log.debug("pink generator: %d cells, rollover %d", generator_count, self._rollover)

    @property
    def generator_count(self) -> int:
        return self._generator_count

    @property
    def rollover(self) -> int:
        return self._rollover

    @property
    def counter(self) -> int:
        return self._counter

    @property
    def running_sum(self) -> np.float32:
        return self._sum

    @property
    def noise(self) -> Tuple[UnitNoise, ...]:
        return self._noise

    @property
    def white(self) -> UnitNoise:
        return self._white

    def _select_index(self) -> int:
        """Trailing zero count of the counter."""
        assert self._counter > 0
        assert self._counter <= self._rollover
        return (self._counter & -self._counter).bit_length() - 1

    def _advance_counter(self):
        """Count up, wrapping from rollover back to 1."""
        assert self._counter > 0
        assert self._counter <= self._rollover
        self._counter = (self._counter & (self._rollover - 1)) + 1

    def next_sample(self) -> np.float32:
        index = self._select_index()
        assert index < self._generator_count

        # draw before touching the sum so a failed draw leaves it consistent
        cell = self._noise[index]
        old = cell.value
        cell.refresh()
        self._sum = self._sum - old
        self._sum = self._sum + cell.value

        old = self._white.value
        self._white.refresh()
        self._sum = self._sum - old
        self._sum = self._sum + self._white.value

        self._advance_counter()

        return self._sum / np.float32(self._generator_count + 1)

    def render(self, n: int) -> np.ndarray:
        """Collect ``n`` consecutive samples into a float32 array."""
        if n < 0:
            raise ValueError(f"sample count must be non-negative, got {n}")
        out = np.empty(n, dtype=np.float32)
        for i in range(n):
            out[i] = self.next_sample()
        return out

    def reset(self):
        """Return to the freshly constructed state, keeping the random source."""
        self._noise = tuple(UnitNoise(self._source) for _ in range(self._generator_count))
        self._white = UnitNoise(self._source)
        self._sum = np.float32(0.0)
        self._counter = 1
        log.debug("pink generator reset")

    def __iter__(self) -> Iterator[np.float32]:
        while True:
            yield self.next_sample()

    def __repr__(self):
        return (f"PinkGenerator(generator_count={self._generator_count}, "
                f"counter={self._counter}, running_sum={float(self._sum)!r})")
