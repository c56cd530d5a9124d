from dataclasses import dataclass
import numpy as np

DEFAULT_SAMPLE_RATE = 44100
FRAME = 1024

@dataclass
class GenBase:
    amp: float = 100.0
    sample_rate: int = DEFAULT_SAMPLE_RATE
    frame: int = FRAME

    def _stereo(self, left: np.ndarray, right: np.ndarray) -> np.ndarray:
        return np.vstack((left, right)).T

    def _amp_scale(self) -> float:
        return max(self.amp, 0.0) / 100.0

    def _num_frames(self, duration: float) -> int:
        return max(int(self.sample_rate * duration), 0)
