"""
GeoJSON helpers: feature constructors, a point map function and a segment
reduce function for turning tracks of positions into line segments.
"""

from typing import Any, Hashable, List, Optional

from datadata.mappers import get_attr


def point_feature(lon, lat, properties: Any = None) -> dict:
    """Build a GeoJSON Point feature."""
    return {
        'type': 'Feature',
        'geometry': {
            'type': 'Point',
            'coordinates': [lon, lat]
        },
        'properties': properties
    }


def line_string_feature(coordinates: List[list], properties: Any = None) -> dict:
    """Build a GeoJSON LineString feature."""
    return {
        'type': 'Feature',
        'geometry': {
            'type': 'LineString',
            'coordinates': coordinates
        },
        'properties': properties
    }


class PointMapper:
    """
    Map function emitting a Point feature per record.

    Features are keyed by record[key_attr], or by a running integer starting
    at 0 when no key attribute is given. The counter belongs to the instance,
    so every pipeline should build its own mapper.
    """

    def __init__(self, lat_attr: str, lon_attr: str, key_attr: Optional[str] = None):
        self.lat_attr = lat_attr
        self.lon_attr = lon_attr
        self.key_attr = key_attr
        self.next_id = 0

    def __call__(self, record, emit):
        if self.key_attr:
            key = get_attr(record, self.key_attr)
        else:
            key = self.next_id
            self.next_id += 1
        emit(key, point_feature(get_attr(record, self.lon_attr),
                                get_attr(record, self.lat_attr),
                                record))


class SegmentReducer:
    """
    Reduce function emitting one LineString feature per pair of consecutive
    positions in a group, keyed "<key>-<index>" where index is the position
    of the second point.
    """

    def __init__(self, lat_attr: str = 'lat', lon_attr: str = 'lon'):
        self.lat_attr = lat_attr
        self.lon_attr = lon_attr

    def _coordinates(self, record) -> list:
        return [get_attr(record, self.lon_attr), get_attr(record, self.lat_attr)]

    def __call__(self, key: Hashable, values: list, emit):
        for i in range(1, len(values)):
            prev, cur = values[i - 1], values[i]
            emit(f"{key}-{i}",
                 line_string_feature([self._coordinates(prev), self._coordinates(cur)], prev))


def point(lat_attr: str, lon_attr: str, key_attr: Optional[str] = None) -> PointMapper:
    return PointMapper(lat_attr, lon_attr, key_attr)


def segments(lat_attr: str = 'lat', lon_attr: str = 'lon') -> SegmentReducer:
    return SegmentReducer(lat_attr, lon_attr)
