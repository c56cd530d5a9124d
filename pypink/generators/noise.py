import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .base import GenBase
from .voss import DEFAULT_GENERATORS, PinkGenerator

log = logging.getLogger(__name__)

KINDS = ("white", "pink")


@dataclass
class NoiseSpec(GenBase):
    kind: str = "pink"  # "white" | "pink"
    generators: int = DEFAULT_GENERATORS
    seed: Optional[int] = None

    def generator(self, duration: float):
        """Yield stereo float32 chunks of at most ``frame`` rows each.

        Pink channels come from two independent Voss-McCartney generators
        sharing one seeded numpy stream.
        """
        kind = self.kind.lower()
        if kind not in KINDS:
            raise ValueError(f"unknown noise kind {self.kind!r}, expected one of {KINDS}")

        rng = np.random.default_rng(self.seed)
        if kind == "pink":
            left = PinkGenerator(self.generators, source=rng.random)
            right = PinkGenerator(self.generators, source=rng.random)

        num = self._num_frames(duration)
        a = self._amp_scale()
        info = {"type": "noise", "kind": kind, "generators": self.generators if kind == "pink" else 0}
        log.debug("%s noise: %d frames at %d Hz", kind, num, self.sample_rate)
        for i in range(0, num, self.frame):
            n = min(self.frame, num - i)
            if kind == "pink":
                w = self._stereo(left.render(n), right.render(n))
            else:
                w = rng.random((n, 2), dtype=np.float32) * np.float32(2.0) - np.float32(1.0)
            yield (w * a).astype(np.float32), dict(info)
