"""
Fast approximate distances and headings on a plane tangent to the WGS84 ellipsoid.

A PlaneProjection provides 0.1% precision on distances under 500km for reference
latitudes up to 65 degrees. See
https://blog.mapbox.com/fast-geodesic-approximations-with-cheap-ruler-106f229ad016
for the principle and formulas behind.
"""

__all__ = ['PlaneProjection', 'lon_diff']

import math
from typing import Tuple

import numpy as np

from planeprojection._const import MAX_ACCURATE_LATITUDE, WGS84_A, WGS84_E2
from planeprojection._types import CoordinateSequence, LatLon, Segment
from planeprojection.utils.logging import warn_once


def lon_diff(a: float, b: float) -> float:
    """
    The difference between two longitudes, wrapped across the antimeridian into the
    range [-180, 180]. A difference of exactly +/-180 is left as is.

    Args:
        a:
            A longitude, in degrees

        b:
            The longitude to subtract from `a`, in degrees

    Returns:
        (float) the signed difference in degrees
    """
    diff = a - b
    if diff > 180:
        diff -= 360
    elif diff < -180:
        diff += 360
    return diff


def _lon_diff_array(a: np.ndarray, b: float) -> np.ndarray:
    """Vectorized lon_diff"""
    diff = a - b
    return np.where(diff > 180, diff - 360, np.where(diff < -180, diff + 360, diff))


class PlaneProjection:
    """
    A plane projection of the Earth at a reference latitude, for fast approximate
    distance calculations between (latitude, longitude) pairs.

    The expensive trigonometry happens once, at construction; every subsequent
    calculation is flat-plane arithmetic. Build one projection per reference latitude
    and reuse it. Instances are immutable and may be shared freely between threads.

    Inputs are not validated. Out-of-range or NaN values propagate through the
    floating point math rather than raising.

        >>> proj = PlaneProjection(55.65)
        >>> int(proj.distance((55.704141722528554, 13.191304107330561),
        ...                   (55.60330902847681, 13.001973666557435)))
        16373

    Args:
        latitude:
            The reference latitude, in degrees. Accuracy is best for points near it.
    """

    __slots__ = ('_lon_scale', '_lat_scale')

    def __init__(self, latitude: float):
        if abs(latitude) > MAX_ACCURATE_LATITUDE:
            warn_once(
                f'Plane projections beyond {MAX_ACCURATE_LATITUDE} degrees latitude '
                'lose accuracy; expect errors above 0.1%. (this warning will not repeat)'
            )

        # Based on https://en.wikipedia.org/wiki/Earth_radius#Meridional
        cos_lat = math.cos(math.radians(latitude))
        w2 = 1 / (1 - WGS84_E2 * (1 - cos_lat * cos_lat))
        w = math.sqrt(w2)

        # Meters per degree; longitude from the normal radius of curvature,
        # latitude from the meridional radius of curvature
        self._lon_scale = math.radians(WGS84_A * w * cos_lat)
        self._lat_scale = math.radians(WGS84_A * w * w2 * (1 - WGS84_E2))

    def __eq__(self, other):
        if not isinstance(other, PlaneProjection):
            return False

        return (
            self._lon_scale == other._lon_scale and
            self._lat_scale == other._lat_scale
        )

    def __hash__(self):
        return hash((self._lon_scale, self._lat_scale))

    def __repr__(self):
        return f'<PlaneProjection(lon_scale={self._lon_scale}, lat_scale={self._lat_scale})>'

    @property
    def lon_scale(self) -> float:
        """Meters per degree of longitude at the reference latitude"""
        return self._lon_scale

    @property
    def lat_scale(self) -> float:
        """Meters per degree of latitude at the reference latitude"""
        return self._lat_scale

    @classmethod
    def from_coordinates(cls, *coords: LatLon) -> 'PlaneProjection':
        """
        Creates a projection centered on the latitude range spanned by a set of
        coordinates, which gives the best accuracy for distances between them.

        Args:
            *coords:
                One or more (latitude, longitude) pairs

        Returns:
            PlaneProjection
        """
        if not coords:
            raise ValueError('At least one coordinate is required to build a projection.')

        latitudes = [coord[0] for coord in coords]
        return cls((min(latitudes) + max(latitudes)) / 2)

    def project(self, coord: LatLon) -> Tuple[float, float]:
        """
        Converts a coordinate into raw (x, y) meters in projection space, x pointing
        east and y north. No antimeridian handling is applied, so only differences
        between nearby projected points are meaningful.
        """
        return coord[1] * self._lon_scale, coord[0] * self._lat_scale

    def square_distance(self, a: LatLon, b: LatLon) -> float:
        """Square distance in meters between two (latitude, longitude) points"""
        lat_dist = (a[0] - b[0]) * self._lat_scale
        lon_dist = lon_diff(a[1], b[1]) * self._lon_scale
        return lat_dist * lat_dist + lon_dist * lon_dist

    def distance(self, a: LatLon, b: LatLon) -> float:
        """Distance in meters between two (latitude, longitude) points"""
        return math.sqrt(self.square_distance(a, b))

    def square_distance_to_segment(self, point: LatLon, segment: Segment) -> float:
        """
        Square distance in meters from a point to the nearest point of a line segment.

        Args:
            point:
                A (latitude, longitude) pair

            segment:
                A (start, end) pair of (latitude, longitude) pairs

        Returns:
            (float) the square distance in meters
        """
        start, end = segment

        # Plane coordinates relative to the segment start
        x = lon_diff(point[1], start[1]) * self._lon_scale
        y = (point[0] - start[0]) * self._lat_scale
        seg_x = lon_diff(end[1], start[1]) * self._lon_scale
        seg_y = (end[0] - start[0]) * self._lat_scale

        if seg_x != 0 or seg_y != 0:
            t = (x * seg_x + y * seg_y) / (seg_x * seg_x + seg_y * seg_y)
            if t > 1:
                # Nearest to the segment end
                x -= seg_x
                y -= seg_y
            elif t > 0:
                x -= t * seg_x
                y -= t * seg_y

        return x * x + y * y

    def distance_to_segment(self, point: LatLon, segment: Segment) -> float:
        """Distance in meters from a point to the nearest point of a line segment"""
        return math.sqrt(self.square_distance_to_segment(point, segment))

    def heading(self, a: LatLon, b: LatLon) -> float:
        """
        Heading (azimuth) in degrees from point `a` to point `b`, clockwise in the range
        [0, 360) where 0 is North, 90 is East, 180 is South and 270 is West.

        Calculated in single precision, which is ample for a compass bearing.
        """
        dx = np.float32((a[0] - b[0]) * self._lat_scale)
        dy = np.float32(lon_diff(b[1], a[1]) * self._lon_scale)
        # Together with the inverted dx this maps the (-180, 180] atan2 range
        # onto [0, 360) without branching
        return float(np.float32(180) - np.degrees(np.arctan2(dy, dx)))

    def distances(self, origin: LatLon, coords: CoordinateSequence) -> np.ndarray:
        """
        Distances in meters from one point to each of many points.

        Args:
            origin:
                A (latitude, longitude) pair

            coords:
                A sequence (or (n, 2) array) of (latitude, longitude) pairs

        Returns:
            A numpy array of distances, in the order of `coords`
        """
        arr = np.asarray(coords, dtype=float).reshape(-1, 2)
        lat_dist = (arr[:, 0] - origin[0]) * self._lat_scale
        lon_dist = _lon_diff_array(arr[:, 1], origin[1]) * self._lon_scale
        return np.sqrt(lat_dist * lat_dist + lon_dist * lon_dist)

    def nearest_segment(self, point: LatLon, coords: CoordinateSequence) -> Tuple[int, float]:
        """
        Finds the segment of a polyline nearest to a point.

        Args:
            point:
                A (latitude, longitude) pair

            coords:
                The polyline vertices, as a sequence of at least two (latitude, longitude)
                pairs

        Returns:
            A 2-tuple of the index `i` of the nearest segment (coords[i], coords[i + 1])
            and the distance to it in meters. Ties resolve to the lowest index.
        """
        if len(coords) < 2:
            raise ValueError('A polyline requires at least two coordinates.')

        best_idx, best_sq = 0, math.inf
        for idx in range(len(coords) - 1):
            sq_dist = self.square_distance_to_segment(point, (coords[idx], coords[idx + 1]))
            if sq_dist < best_sq:
                best_idx, best_sq = idx, sq_dist

        return best_idx, math.sqrt(best_sq)
