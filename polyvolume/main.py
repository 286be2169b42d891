"""
Main entry point for the Polyhedron Volume Calculator

Reports the volume of the canonical solids and of mesh files given on the
command line.
"""

import argparse
import logging
import sys
from typing import List, Optional

from polyvolume.errors import PolyhedronVolumeError
from polyvolume.shapes import SOLID_NAMES, canonical_solids
from polyvolume.utils.config_manager import ConfigManager, VALID_METHODS
from polyvolume.utils.mesh_loader import load_mesh
from polyvolume.volume.volume_calculator import VolumeCalculator


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the volume calculator."""
    parser = argparse.ArgumentParser(
        description="Compute the volume of triangulated polyhedra"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration file"
    )

    parser.add_argument(
        "--solid",
        action="append",
        choices=SOLID_NAMES,
        help="Canonical solid to report (repeatable; default: all unless --mesh is given)"
    )

    parser.add_argument(
        "--mesh",
        action="append",
        default=[],
        help="YAML mesh file with 'vertices' and 'faces' (repeatable)"
    )

    parser.add_argument(
        "--method",
        choices=VALID_METHODS,
        help="Summation method (overrides configuration)"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    # Load configuration
    try:
        config = ConfigManager(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading configuration: {e}")
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.get_log_level(),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    if args.method:
        config.set('volume.method', args.method)

    calculator = VolumeCalculator(config)

    solid_names = args.solid or ([] if args.mesh else list(SOLID_NAMES))
    builders = canonical_solids(config.get_solid_params())

    for name in solid_names:
        vertices, faces = builders[name]()
        result = calculator.calculate(vertices, faces)
        print(f"{name:<24} {result.volume:12.6f}  ({result.num_faces} faces)")

    for mesh_path in args.mesh:
        try:
            vertices, faces = load_mesh(mesh_path)
            result = calculator.calculate(vertices, faces)
        except PolyhedronVolumeError as e:
            print(f"Error in mesh {mesh_path}: {e}")
            return 1
        print(f"{mesh_path:<24} {result.volume:12.6f}  ({result.num_faces} faces)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
