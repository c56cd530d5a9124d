from .unit import UnitNoise
from .voss import PinkGenerator, DEFAULT_GENERATORS, MAX_GENERATORS
from .noise import NoiseSpec

__all__ = [
    "UnitNoise",
    "PinkGenerator",
    "NoiseSpec",
    "DEFAULT_GENERATORS",
    "MAX_GENERATORS",
]
