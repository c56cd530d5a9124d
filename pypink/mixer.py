import logging
from typing import Generator, Iterable, List, Tuple
import numpy as np

from .types import AudioGen, ChunkInfo

log = logging.getLogger(__name__)


def _pad_chunk(chunk: np.ndarray, frame_len: int) -> np.ndarray:
    """Pad a chunk to ``frame_len`` without modifying the input."""
    if chunk.shape[0] == frame_len:
        return chunk
    padded = np.zeros((frame_len, chunk.shape[1]), dtype=chunk.dtype)
    padded[: chunk.shape[0]] = chunk
    return padded


def mix_generators(gens: Iterable[AudioGen], duration: float) -> Generator[Tuple[np.ndarray, List[ChunkInfo]], None, None]:
    gens = list(gens)
    if not gens or duration <= 0:
        return

    streams = [g.generator(duration) for g in gens]
    while True:
        try:
            chunks: List[np.ndarray] = []
            infos: List[ChunkInfo] = []
            for stream in streams:
                chunk, info = next(stream)
                chunks.append(chunk)
                infos.append(info)
        except StopIteration:
            break

        frame_len = max(chunk.shape[0] for chunk in chunks)
        acc = np.zeros((frame_len, 2), dtype=np.float32)
        for chunk in chunks:
            acc += _pad_chunk(chunk.astype(np.float32), frame_len)

        peak = float(np.max(np.abs(acc)))
        if peak > 1.0:
            log.debug("limiter: peak %.3f", peak)
            acc /= peak

        yield acc, infos


def render(gens: Iterable[AudioGen], duration: float) -> np.ndarray:
    """Run the whole mix and stack it into one (n, 2) float32 array."""
    chunks = [c for c, _ in mix_generators(gens, duration)]
    if not chunks:
        return np.zeros((0, 2), dtype=np.float32)
    return np.vstack(chunks)
