from typing import Sequence, Tuple


# A (latitude, longitude) pair, in degrees
LatLon = Tuple[float, float]

# An ordered (start, end) pair of coordinates
Segment = Tuple[LatLon, LatLon]

CoordinateSequence = Sequence[LatLon]
