"""
Value types, parameters and errors shared by the hatching engine.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Tuple

import numpy as np

from .constants import (
    DEFAULT_BEARING,
    DEFAULT_FIDELITY,
    DEFAULT_OFFSET,
    DEFAULT_SPACING,
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
    MAX_SCAN_LINES,
)


class HatchingError(Exception):
    """Base class for errors raised while hatching a polygon."""


class HatchConfigurationError(HatchingError, ValueError):
    """Raised when hatch parameters cannot produce a finite sweep."""


class HatchInputError(HatchingError, ValueError):
    """Raised when the polygon input is malformed."""


class Fidelity(Enum):
    """Coordinate math used for one hatching call."""
    PLANAR = "planar"
    GEODESIC = "geodesic"


@dataclass(frozen=True)
class GeoPoint:
    """
    A geographic position.

    Attributes:
        lon: Longitude in degrees, (-180, 180]
        lat: Latitude in degrees, [-90, 90]
    """
    lon: float
    lat: float

    def validate(self) -> "GeoPoint":
        """
        Check that the point is finite and within the geographic ranges.

        Returns:
            The point itself, so calls can be chained

        Raises:
            HatchInputError: If a coordinate is out of range or not finite
        """
        if not (math.isfinite(self.lon) and math.isfinite(self.lat)):
            raise HatchInputError(f"Non-finite coordinate: ({self.lon}, {self.lat})")
        if not LATITUDE_RANGE[0] <= self.lat <= LATITUDE_RANGE[1]:
            raise HatchInputError(f"Latitude out of range: {self.lat}")
        if not LONGITUDE_RANGE[0] <= self.lon <= LONGITUDE_RANGE[1]:
            raise HatchInputError(f"Longitude out of range: {self.lon}")
        return self

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lon, self.lat)


@dataclass(frozen=True)
class Segment:
    """
    One hatch line piece between two geographic endpoints.

    Attributes:
        start: Endpoint lying first along the line direction
        end: Endpoint lying last along the line direction
    """
    start: GeoPoint
    end: GeoPoint

    def as_tuple(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        return (self.start.as_tuple(), self.end.as_tuple())

    def bearing(self) -> float:
        """
        Approximate initial bearing from start to end in degrees [0, 360).

        Longitude differences are scaled by the cosine of the mean latitude,
        which is accurate enough to tell line orientations apart.
        """
        mean_lat = np.radians((self.start.lat + self.end.lat) / 2)
        dx = (self.end.lon - self.start.lon) * np.cos(mean_lat)
        dy = self.end.lat - self.start.lat
        return float(np.degrees(np.arctan2(dx, dy)) % 360.0)


@dataclass(frozen=True)
class HatchParameters:
    """
    Parameters for one hatching call.

    Attributes:
        spacing: Distance between adjacent hatch lines in meters
        bearing: Line orientation in degrees, clockwise from north
        offset: Distance each segment extends past the boundary in meters
        fidelity: Planar (equirectangular) or geodesic (ellipsoidal) math
        max_lines: Upper limit on the number of scan lines for one call
    """
    spacing: float = DEFAULT_SPACING  # m
    bearing: float = DEFAULT_BEARING  # degrees
    offset: float = DEFAULT_OFFSET  # m
    fidelity: Fidelity = Fidelity(DEFAULT_FIDELITY)
    max_lines: int = MAX_SCAN_LINES

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "HatchParameters":
        """
        Build parameters from loosely typed keyword data.

        Accepts ``step`` as an alias of ``spacing`` and fidelity either as a
        ``Fidelity`` member or its string value. Missing keys keep defaults.

        Raises:
            HatchConfigurationError: If a value cannot be converted
        """
        if data.get("step") is not None and data.get("spacing") is not None:
            raise HatchConfigurationError("Give either spacing or step, not both")

        values = {}
        for key, value in data.items():
            if value is None:
                continue
            name = "spacing" if key == "step" else key
            if name in ("spacing", "bearing", "offset"):
                try:
                    values[name] = float(value)
                except (TypeError, ValueError) as exc:
                    raise HatchConfigurationError(f"Invalid {key}: {value!r}") from exc
            elif name == "fidelity":
                values[name] = _coerce_fidelity(value)
            elif name == "max_lines":
                try:
                    values[name] = int(value)
                except (TypeError, ValueError) as exc:
                    raise HatchConfigurationError(f"Invalid max_lines: {value!r}") from exc
            else:
                raise HatchConfigurationError(f"Unknown hatch parameter: {key}")

        return cls(**values)

    @property
    def normalized_bearing(self) -> float:
        """Bearing folded into [0, 360)."""
        return self.bearing % 360.0

    def validate(self) -> "HatchParameters":
        """
        Validate the parameters before any computation starts.

        Returns:
            The parameters themselves

        Raises:
            HatchConfigurationError: If any parameter is out of range
        """
        if not math.isfinite(self.spacing) or self.spacing <= 0:
            raise HatchConfigurationError(f"Spacing must be positive, got {self.spacing}")
        if not math.isfinite(self.offset) or self.offset < 0:
            raise HatchConfigurationError(f"Offset must be non-negative, got {self.offset}")
        if not math.isfinite(self.bearing):
            raise HatchConfigurationError(f"Bearing must be finite, got {self.bearing}")
        if not isinstance(self.fidelity, Fidelity):
            raise HatchConfigurationError(f"Unknown fidelity: {self.fidelity!r}")
        if self.max_lines <= 0:
            raise HatchConfigurationError(f"max_lines must be positive, got {self.max_lines}")
        return self


def _coerce_fidelity(value: Any) -> Fidelity:
    if isinstance(value, Fidelity):
        return value
    try:
        return Fidelity(str(value).lower())
    except ValueError as exc:
        raise HatchConfigurationError(f"Unknown fidelity: {value!r}") from exc
