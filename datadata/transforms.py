"""
Record transform helpers.

Each helper returns a function record -> record. An optional inner transform
func is applied to the record first, so helpers can be chained:

    prefix('geo_', envelope('data', 'id'))
"""

from typing import Callable, Mapping, Optional, Union

Transform = Callable[[dict], dict]


def envelope(key: str, pull: Union[str, Transform, None] = None, func: Optional[Transform] = None) -> Transform:
    """
    Nest the record under key. If pull is given, record[pull] is moved out of
    the nested record to the top level. envelope(key, func) is accepted too.
    """
    if callable(pull):
        pull, func = None, pull

    def transform(d):
        if func:
            d = func(d)
        d = dict(d)
        val = {key: d}
        if pull:
            val[pull] = d.pop(pull, None)
        return val
    return transform


def prefix(prefix_str: str, func: Optional[Transform] = None) -> Transform:
    """Prepend prefix_str to every field name."""
    def transform(d):
        if func:
            d = func(d)
        return {prefix_str + k: v for k, v in d.items()}
    return transform


def prefix_attr(attribute: str, func: Optional[Transform] = None) -> Transform:
    """Prepend record[attribute] + '_' to every field name (nothing if falsy)."""
    def transform(d):
        if func:
            d = func(d)
        value = d.get(attribute)
        pre = f"{value}_" if value else ''
        return {pre + k: v for k, v in d.items()}
    return transform


def map_attr(attr_map: Union[Mapping, Transform], func: Optional[Transform] = None) -> Transform:
    """
    Derive or rename fields.

    If attr_map is callable the record is passed to it. Otherwise attr_map maps each
    new field name to either a function of the record, or the name of an old
    field to rename; the old field is only moved when its value is truthy.
    """
    def transform(d):
        if func:
            d = func(d)
        if callable(attr_map):
            return attr_map(d)
        d = dict(d)
        for new_name, source in attr_map.items():
            if callable(source):
                d[new_name] = source(d)
            elif d.get(source):
                d[new_name] = d.pop(source)
        return d
    return transform


def reverse(data):
    """Return a reversed copy of a list; other values are returned as they are."""
    if isinstance(data, (list, tuple)):
        return list(reversed(data))
    return data
