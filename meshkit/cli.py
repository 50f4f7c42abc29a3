from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from .errors import MeshLoadError
from .logging_config import setup_logging
from .mesh import Mesh

_DEF_HELP = """
Examples:
  python -m meshkit info cube.ply
  python -m meshkit convert cube.ply cube.dae
  python -m meshkit convert scan.stl scan.ply --center --scale 0.001 --overwrite
  python -m meshkit convert cube.ply smooth.stl --subdivide 2 --binary-stl
  python -m meshkit convert cube.ply rough.ply --noise 0.05 --seed 7
"""


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="meshkit", description="meshkit: triangle mesh converter",
                                epilog=_DEF_HELP, formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p.add_argument("--log-file", metavar="PATH", help="Also write log records to PATH")
    sub = p.add_subparsers(dest="command", required=True)

    info = sub.add_parser("info", help="Print mesh statistics")
    info.add_argument("path")

    conv = sub.add_parser("convert", help="Load, optionally transform, and save a mesh")
    conv.add_argument("src")
    conv.add_argument("dst", help="Output path (.ply/.stl/.dae)")
    conv.add_argument("--overwrite", action="store_true")
    conv.add_argument("--center", action="store_true")
    conv.add_argument("--scale", type=float)
    conv.add_argument("--invert", action="store_true", help="Flip face winding")
    conv.add_argument("--noise", type=float, metavar="C", help="Uniform jitter in [-C, C] per axis")
    conv.add_argument("--seed", type=int, help="Seed for --noise")
    conv.add_argument("--subdivide", type=int, default=0, metavar="N", help="Loop subdivision steps")
    conv.add_argument("--binary-stl", action="store_true", help="Write binary STL when dst is .stl")
    return p


def _info(mesh: Mesh) -> None:
    print(f"name:     {mesh.name}")
    print(f"vertices: {len(mesh.vertices)}")
    print(f"faces:    {len(mesh.faces)}")
    print(f"area:     {mesh.area():.6f}")
    print(f"closed:   {mesh.is_closed()}")
    if mesh.vertices:
        lo, hi = mesh.bounds()
        print(f"bounds:   ({lo.x:g}, {lo.y:g}, {lo.z:g}) .. ({hi.x:g}, {hi.y:g}, {hi.z:g})")


def _convert(mesh: Mesh, args: argparse.Namespace) -> int:
    if args.center and mesh.vertices:
        mesh.center()
    if args.scale is not None:
        mesh.scale(args.scale)
    if args.invert:
        mesh.invert()
    if args.noise:
        mesh.noise(args.noise, np.random.default_rng(args.seed))
    for _ in range(args.subdivide):
        mesh.subdivide()

    if args.binary_stl and args.dst.lower().endswith(".stl"):
        outcome = mesh.save_stl(args.dst, can_overwrite=args.overwrite, binary=True)
    else:
        outcome = mesh.write(args.dst, can_overwrite=args.overwrite)
    if outcome:
        print(f"error: cannot write {args.dst}: {outcome.message}", file=sys.stderr)
        return 1
    print(f"wrote {args.dst} ({len(mesh.vertices)} vertices, {len(mesh.faces)} faces)")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    src = args.path if args.command == "info" else args.src
    try:
        mesh = Mesh.from_file(src)
    except MeshLoadError as e:
        print(f"error: {src}: {e}", file=sys.stderr)
        return 1

    if args.command == "info":
        _info(mesh)
        return 0
    return _convert(mesh, args)
