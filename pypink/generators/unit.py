import numbers
from typing import Optional

import numpy as np

from ..source import RandomSourceError, default_source
from ..types import RandomSource

# Largest float32 strictly below 1.0.
_BELOW_ONE = np.nextafter(np.float32(1.0), np.float32(0.0))


class UnitNoise:
    """A single white-noise cell holding one value in [-1, 1).

    The value is 0.0 until the first ``refresh()`` and only ever changes
    through it.
    """

    __slots__ = ("_value", "_source")

    def __init__(self, source: Optional[RandomSource] = None):
        self._value = np.float32(0.0)
        self._source = source if source is not None else default_source()

    @property
    def value(self) -> np.float32:
        return self._value

    def refresh(self):
        """Draw a fresh value, mapping u in [0, 1) onto [-1, 1)."""
        try:
            u = self._source()
        except RandomSourceError:
            raise
        except Exception as exc:
            raise RandomSourceError(f"random source failed: {exc}") from exc

        if isinstance(u, bool) or not isinstance(u, numbers.Real) or not 0.0 <= u < 1.0:
            raise RandomSourceError(f"random source returned {u!r}, expected a value in [0, 1)")

        # float32 rounding can push u up to exactly 1.0
        u = min(np.float32(u), _BELOW_ONE)
        self._value = u * np.float32(2.0) - np.float32(1.0)

    def __repr__(self):
        return f"UnitNoise(value={float(self._value)!r})"
