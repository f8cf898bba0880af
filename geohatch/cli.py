"""
Command-line front end: hatch a GeoJSON polygon and write GeoJSON lines.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .base import Fidelity, HatchingError, HatchParameters
from .constants import DEFAULT_BEARING, DEFAULT_FIDELITY, DEFAULT_OFFSET, DEFAULT_SPACING, MAX_SCAN_LINES
from .engine import ParallelHatcher

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geohatch",
        description="Fill a polygon with parallel lines at a bearing.",
    )
    parser.add_argument(
        "input", nargs="?", default="-",
        help="GeoJSON file with a Polygon, MultiPolygon, Feature or FeatureCollection (default: stdin)",
    )
    parser.add_argument("-o", "--output", default="-", help="Output GeoJSON file (default: stdout)")
    parser.add_argument(
        "-s", "--spacing", "--step", dest="spacing", type=float, default=DEFAULT_SPACING,
        help=f"Distance between lines in meters (default: {DEFAULT_SPACING:g})",
    )
    parser.add_argument(
        "-b", "--bearing", type=float, default=DEFAULT_BEARING,
        help=f"Line bearing in degrees clockwise from north (default: {DEFAULT_BEARING:g})",
    )
    parser.add_argument(
        "--offset", type=float, default=DEFAULT_OFFSET,
        help=f"Extension past the polygon boundary in meters (default: {DEFAULT_OFFSET:g})",
    )
    parser.add_argument(
        "--fidelity", choices=[f.value for f in Fidelity], default=DEFAULT_FIDELITY,
        help="Coordinate math: planar approximation or ellipsoidal geodesics",
    )
    parser.add_argument(
        "--max-lines", type=int, default=MAX_SCAN_LINES,
        help=f"Refuse sweeps needing more scan lines than this (default: {MAX_SCAN_LINES})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _read_geojson(path: str):
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _write_geojson(path: str, data) -> None:
    if path == "-":
        json.dump(data, sys.stdout)
        sys.stdout.write("\n")
        return
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(data, handle)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line tool.

    Returns:
        Process exit code: 0 on success, 1 for unreadable input or an
        unwritable output, 2 for invalid parameters or geometry
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        data = _read_geojson(args.input)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Cannot read %s: %s", args.input, exc)
        return 1

    try:
        parameters = HatchParameters(
            spacing=args.spacing,
            bearing=args.bearing,
            offset=args.offset,
            fidelity=Fidelity(args.fidelity),
            max_lines=args.max_lines,
        )
        segments = ParallelHatcher().generate_hatching(data, parameters)
    except HatchingError as exc:
        logger.error("%s", exc)
        return 2

    logger.info("Generated %d segments", len(segments))
    try:
        _write_geojson(args.output, segments.to_geojson({
            "spacing": parameters.spacing,
            "bearing": parameters.normalized_bearing,
            "offset": parameters.offset,
        }))
    except OSError as exc:
        logger.error("Cannot write %s: %s", args.output, exc)
        return 1
    return 0
