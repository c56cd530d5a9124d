"""Pink (1/f) noise via the Voss-McCartney algorithm."""

from .generators import UnitNoise, PinkGenerator, NoiseSpec, DEFAULT_GENERATORS
from .source import RandomSourceError, default_source, sequence_source

__all__ = [
    "UnitNoise",
    "PinkGenerator",
    "NoiseSpec",
    "DEFAULT_GENERATORS",
    "RandomSourceError",
    "default_source",
    "sequence_source",
]
