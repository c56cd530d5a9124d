import re
from typing import List, Optional

from .generators import NoiseSpec
from .generators.noise import KINDS


def parse_noise_component(spec: str) -> Optional[NoiseSpec]:
    """Parses a ``KIND[:GENERATORS][/AMP]`` string into a noise spec.

    ``pink/50``, ``pink:12/40`` and ``white`` are all valid; ``-`` and
    ``off`` mean silence and give None.
    """
    spec = spec.strip()
    if spec.lower() in {"-", "off"}:
        return None

    amp = 100.0
    core = spec
    if "/" in spec:
        core, amp_str = spec.rsplit("/", 1)
        try:
            amp = float(amp_str)
        except ValueError:
            raise ValueError(f"bad amplitude {amp_str!r} in {spec!r}") from None

    kind = core
    generators = None
    if ":" in core:
        kind, gen_str = core.split(":", 1)
        if not gen_str.isdigit():
            raise ValueError(f"bad generator count {gen_str!r} in {spec!r}")
        generators = int(gen_str)

    kind = kind.lower()
    if kind not in KINDS:
        raise ValueError(f"unknown noise kind {kind!r} in {spec!r}")
    if generators is not None and kind != "pink":
        raise ValueError(f"generator count only applies to pink noise: {spec!r}")

    if generators is None:
        return NoiseSpec(kind=kind, amp=amp)
    return NoiseSpec(kind=kind, generators=generators, amp=amp)


def parse_mix(s: str) -> List[NoiseSpec]:
    parts = [p for p in re.split(r"[\s,]+", s) if p]
    return [c for p in parts if (c := parse_noise_component(p)) is not None]
