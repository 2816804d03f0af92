"""
Command-Line Interface
======================
Samples random positions on a mesh within a sphere and prints them,
one `x y z` line per point.

Usage:
    $ meshsampler mesh.obj --center 0.5 0.5 0 --radius 0.2 --count 10 --seed 1
    $ python -m meshsampler --center 0.5 0.5 0 --radius 0.2   # bundled unit square
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from meshsampler.config import DEFAULT_MAX_ATTEMPTS, DEFAULT_MESH_PATH
from meshsampler.io import load_mesh, save_samples
from meshsampler.logging_config import setup_logging
from meshsampler.sampling.point_sampler import MeshSphereSampler

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meshsampler",
        description="Sample random points on a triangle mesh inside a sphere.",
    )
    parser.add_argument("mesh", nargs="?", default=DEFAULT_MESH_PATH,
                        help="Mesh file readable by PyVista (default: bundled unit square).")
    parser.add_argument("--center", type=float, nargs=3, required=True, metavar=("X", "Y", "Z"),
                        help="Sphere center.")
    parser.add_argument("--radius", type=float, required=True, help="Sphere radius (>= 0).")
    parser.add_argument("--count", type=int, default=1, help="Number of points to sample.")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the random generator.")
    parser.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS,
                        help="Triangle selections per point before falling back to the center.")
    parser.add_argument("--output", default=None, help="Optional HDF5 file to store the samples.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level.")
    parser.add_argument("--log-file", default=None, help="Optional log file.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)

    try:
        vertices, indices = load_mesh(args.mesh)
        sampler = MeshSphereSampler(vertices, indices, args.center, args.radius,
                                    max_attempts=args.max_attempts)
        results = sampler.sample_many(args.count, rng=args.seed)
    except (OSError, ValueError, IndexError) as e:
        logger.error(f"Sampling failed: {e}")
        return 1

    n_fallback = sum(r.fallback for r in results)
    if n_fallback:
        logger.warning(f"{n_fallback} of {len(results)} samples fell back to the sphere center.")

    for r in results:
        print(f"{r.point.x:.9g} {r.point.y:.9g} {r.point.z:.9g}")

    if args.output:
        try:
            save_samples(args.output, [r.point.to_array() for r in results], args.center, args.radius)
        except OSError as e:
            logger.error(f"Could not write samples: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
