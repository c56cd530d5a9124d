from typing import Callable, Generator, TypedDict, Protocol
import numpy as np

RandomSource = Callable[[], float]


class ChunkInfo(TypedDict, total=False):
    type: str
    kind: str
    generators: int


class AudioGen(Protocol):
    def generator(self, duration: float) -> Generator[tuple[np.ndarray, ChunkInfo], None, None]: ...
