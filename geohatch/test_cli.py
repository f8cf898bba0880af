"""
Tests for the command line front end.
"""

import json

from geohatch.cli import build_parser, main
from geohatch.constants import DEFAULT_FIDELITY

SQUARE_FEATURE = {
    "type": "FeatureCollection",
    "features": [{
        "type": "Feature",
        "properties": {"name": "unit square"},
        "geometry": {"type": "Polygon", "coordinates": [[[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]]},
    }],
}


def _write(tmp_path, data, name="polygon.geojson"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_parser_defaults():
    args = build_parser().parse_args(["in.geojson"])
    assert args.spacing == 100.0
    assert args.bearing == 0.0
    assert args.offset == 50.0
    assert args.fidelity == "planar"
    assert args.fidelity == DEFAULT_FIDELITY
    assert args.output == "-"


def test_step_alias():
    args = build_parser().parse_args(["in.geojson", "--step", "250"])
    assert args.spacing == 250.0


def test_hatch_to_file(tmp_path):
    source = _write(tmp_path, SQUARE_FEATURE)
    target = str(tmp_path / "lines.geojson")

    code = main([source, "-o", target, "--spacing", "80000", "--offset", "0", "--bearing", "90"])

    assert code == 0
    with open(target, encoding="utf-8") as handle:
        result = json.load(handle)
    assert result["type"] == "FeatureCollection"
    assert len(result["features"]) == 1
    feature = result["features"][0]
    assert feature["geometry"]["type"] == "LineString"
    assert feature["properties"]["bearing"] == 90.0
    (lon1, lat1), (lon2, lat2) = feature["geometry"]["coordinates"]
    assert abs(lon1) < 1e-9 and abs(lon2 - 1) < 1e-9
    assert abs(lat1 - 0.5) < 1e-9 and abs(lat2 - 0.5) < 1e-9


def test_geodesic_to_stdout(tmp_path, capsys):
    source = _write(tmp_path, SQUARE_FEATURE)

    code = main([source, "--spacing", "20000", "--fidelity", "geodesic"])

    assert code == 0
    result = json.loads(capsys.readouterr().out)
    assert len(result["features"]) > 1


def test_invalid_spacing_exit_code(tmp_path):
    source = _write(tmp_path, SQUARE_FEATURE)
    assert main([source, "--spacing", "0"]) == 2


def test_unsupported_geometry_exit_code(tmp_path):
    source = _write(tmp_path, {"type": "Point", "coordinates": [0, 0]})
    assert main([source]) == 2


def test_missing_file_exit_code(tmp_path):
    assert main([str(tmp_path / "missing.geojson")]) == 1


def test_unwritable_output_exit_code(tmp_path):
    source = _write(tmp_path, SQUARE_FEATURE)
    target = str(tmp_path / "no-such-dir" / "lines.geojson")
    assert main([source, "-o", target, "--spacing", "80000"]) == 1
