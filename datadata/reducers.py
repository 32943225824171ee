"""
Reusable reduce functions.

A reduce function is called once per group as reduce_fn(key, values, emit)
and calls emit(key, value), conventionally once. The factories below return
new reduce functions; reducers.last() is the engine default.
"""

import logging

from datadata import utils
from datadata.errors import EmptyGroupError
from datadata.utils import is_number, wildcards

logger = logging.getLogger(__name__)


def ident():
    """Emit the whole group unchanged."""
    def reduce_fn(key, values, emit):
        emit(key, values)
    return reduce_fn


def first():
    """Emit the first value of the group."""
    def reduce_fn(key, values, emit):
        emit(key, values[0] if values else None)
    return reduce_fn


def last():
    """Emit the last value of the group."""
    def reduce_fn(key, values, emit):
        emit(key, values[-1] if values else None)
    return reduce_fn


def merge():
    """
    Shallow-merge all records of the group, later fields overwriting earlier
    ones, and emit the merged dict.

    The group must not be empty; EmptyGroupError is raised otherwise.
    """
    def reduce_fn(key, values, emit):
        if not values:
            raise EmptyGroupError(f"merge() cannot reduce empty group {key!r}")
        emit(key, utils.merge(*values))
    return reduce_fn


def to_attr(attribute: str, reduce_fn=None):
    """
    Wrap another reduce function (default last()), emitting each of its
    values as {attribute: value}.
    """
    inner = reduce_fn or last()

    def wrapped(key, values, emit):
        inner(key, values, lambda k, v: emit(k, {attribute: v}))
    return wrapped


class SumReducer:
    """Sums numeric fields of the records in a group"""

    def __init__(self, include=None, exclude=None):
        """
        Args:
            include: Glob pattern(s) or regex(es) of fields to sum, default '*'
            exclude: Glob pattern(s) or regex(es) of fields never to sum
        """
        self.include = wildcards(include or '*')
        self.exclude = wildcards(exclude)

    def is_summable(self, field) -> bool:
        name = str(field)
        if not any(p.match(name) for p in self.include):
            return False
        return not any(p.match(name) for p in self.exclude)

    def __call__(self, key, values, emit):
        if not values:
            raise EmptyGroupError(f"sum_fields() cannot reduce empty group {key!r}")
        total = dict(values[0])
        for record in values[1:]:
            for field, value in record.items():
                summable = self.is_summable(field)
                if summable and is_number(total.get(field)) and is_number(value):
                    total[field] = total[field] + value
                    continue
                total[field] = value
                if summable:
                    logger.warning(f"sum_fields(): Cannot add field {field!r} for key {key!r}")
        emit(key, total)


def sum_fields(include=None, exclude=None) -> SumReducer:
    """
    Reduce function summing the numeric fields of a group.

    Fields matching an include pattern and no exclude pattern are added when
    both values are numbers; any other field is overwritten by later records.
    A summable field that cannot be added is overwritten and logged as a
    warning.
    """
    return SumReducer(include, exclude)
