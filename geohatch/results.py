"""
Assembly of per-scan-line emissions into the final segment sequence.
"""

from collections.abc import Sequence
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from shapely.geometry import MultiLineString

from .base import Segment
from .utils import segments_to_multilinestring


class SegmentSequence(Sequence):
    """
    Immutable, re-iterable sequence of hatch segments.

    Order is part of the contract: segments follow scan order (ascending
    sweep position) and, within a scan line, ascending position along the
    line direction.
    """

    def __init__(self, segments: Iterable[Segment] = ()):
        self._segments: Tuple[Segment, ...] = tuple(segments)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return SegmentSequence(self._segments[index])
        return self._segments[index]

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __eq__(self, other) -> bool:
        if isinstance(other, SegmentSequence):
            return self._segments == other._segments
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._segments)

    def __repr__(self) -> str:
        return f"SegmentSequence({len(self._segments)} segments)"

    def to_coordinates(self) -> List[List[List[float]]]:
        """Segments as nested [[lon, lat], [lon, lat]] lists."""
        return [[list(s.start.as_tuple()), list(s.end.as_tuple())] for s in self._segments]

    def to_multilinestring(self) -> MultiLineString:
        return segments_to_multilinestring(self._segments)

    def to_geojson(self, properties: Dict[str, Any] = None) -> Dict[str, Any]:
        """
        GeoJSON FeatureCollection with one LineString feature per segment.

        Args:
            properties: Properties copied onto every feature, plus its index
        """
        features = []
        for index, segment in enumerate(self._segments):
            props = dict(properties or {})
            props["index"] = index
            features.append({
                "type": "Feature",
                "geometry": {
                    "type": "LineString",
                    "coordinates": [list(segment.start.as_tuple()), list(segment.end.as_tuple())],
                },
                "properties": props,
            })
        return {"type": "FeatureCollection", "features": features}


def assemble(emissions: Iterable[Iterable[Segment]]) -> SegmentSequence:
    """
    Concatenate per-scan-line emissions in scan order.

    Args:
        emissions: One iterable of segments per scan line, in scan order

    Returns:
        SegmentSequence of all segments
    """
    return SegmentSequence(segment for line in emissions for segment in line)
