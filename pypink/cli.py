import argparse
import logging
import sys

import numpy as np

from .analysis import spectral_slope
from .generators.base import DEFAULT_SAMPLE_RATE
from .mixer import render
from .parser import parse_mix
from .source import RandomSourceError

log = logging.getLogger(__name__)


def main(argv=None):
    p = argparse.ArgumentParser(prog="pypink", description="Voss-McCartney pink noise generator")
    p.add_argument("components", nargs="*", default=["pink/100"],
                   help="noise components, KIND[:GENERATORS][/AMP] (default pink/100)")
    p.add_argument("-d", "--duration", type=float, required=True)
    p.add_argument("-r", "--rate", type=int, default=DEFAULT_SAMPLE_RATE)
    p.add_argument("--seed", type=int)
    p.add_argument("-o", "--outfile", help="write the (n, 2) float32 array as .npy")
    p.add_argument("--slope", action="store_true", help="report the spectral slope of the left channel")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(name)s %(levelname)s: %(message)s")

    if args.duration <= 0:
        p.error("--duration must be positive")
    if args.rate <= 0:
        p.error("--rate must be positive")

    try:
        gens = parse_mix(" ".join(args.components))
    except ValueError as e:
        p.error(str(e))
    for i, spec in enumerate(gens):
        spec.sample_rate = args.rate
        if args.seed is not None:
            spec.seed = args.seed + i
    if not gens:
        p.error("No generators specified.")

    try:
        audio = render(gens, args.duration)
    except ValueError as e:
        p.error(str(e))
    except RandomSourceError as e:
        log.error("random source failed: %s", e)
        return 1
    log.debug("rendered %d frames from %d components", len(audio), len(gens))

    if args.outfile:
        np.save(args.outfile, audio)
        print(f"Wrote {len(audio)/args.rate:.2f}s to {args.outfile}")
    else:
        np.savetxt(sys.stdout, audio, fmt="%.6f")

    if args.slope:
        try:
            print(f"slope: {spectral_slope(audio[:, 0], args.rate):.3f}")
        except ValueError as e:
            log.error("cannot estimate slope: %s", e)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
