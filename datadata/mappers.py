"""
Reusable map functions.

A map function is called as map_fn(record, emit) and calls emit(key, value)
zero or more times per record.
"""

from typing import Any, Hashable, Mapping, Optional


def get_attr(record, attribute: str):
    """Return record[attribute] for mappings, the attribute for objects, or None"""
    if isinstance(record, Mapping):
        return record.get(attribute)
    return getattr(record, attribute, None)


class KeyMapper:
    """Groups records by the value of one attribute"""

    def __init__(self, attribute: str, remap: Optional[Mapping] = None):
        """
        Args:
            attribute: Name of the attribute whose value is the group key
            remap: Optional mapping from extracted value to replacement key
        """
        self.attribute = attribute
        self.remap = remap

    def __call__(self, record, emit):
        key = get_attr(record, self.attribute)
        if self.remap and self.remap.get(key) is not None:
            key = self.remap[key]
        emit(key, record)

    def __repr__(self):
        return f"KeyMapper({self.attribute!r})"


class DictionaryMapper:
    """Uses each record as a key into a mapping and emits the looked-up value"""

    def __init__(self, mapping: Mapping):
        self.mapping = mapping

    def __call__(self, record: Hashable, emit):
        emit(record, self.mapping.get(record))


def key(attribute: str, remap: Optional[Mapping] = None) -> KeyMapper:
    """Map function emitting (record[attribute], record)."""
    return KeyMapper(attribute, remap)


def dictionary(mapping: Mapping[Hashable, Any]) -> DictionaryMapper:
    """
    Map function for iterating over the keys of a mapping: emits
    (record, mapping[record]).
    """
    return DictionaryMapper(mapping)


def geo_point(lat_attr: str, lon_attr: str, key_attr: Optional[str] = None):
    """Map function emitting GeoJSON Point features, see datadata.geo.point."""
    from datadata.geo import PointMapper
    return PointMapper(lat_attr, lon_attr, key_attr)


class IndexMapper:
    """Keys records by their position in the input, starting at 0"""

    def __init__(self):
        self.next_id = 0

    def __call__(self, record, emit):
        emit(self.next_id, record)
        self.next_id += 1


def index() -> IndexMapper:
    """Map function emitting (position, record)."""
    return IndexMapper()
