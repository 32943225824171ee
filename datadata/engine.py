"""
Map/Reduce Engine
Runs the map phase (grouping records by emitted key) and the reduce phase
(combining each group into emitted values) over a materialized sequence of
records, collecting the output in an OrderedHash.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Dict, Hashable, List, Optional

from datadata import mappers, reducers
from datadata.metrics import RunMetrics
from datadata.ordered_hash import OrderedHash

logger = logging.getLogger(__name__)

Emit = Callable[[Hashable, Any], None]
MapFunction = Callable[[Any, Emit], None]
ReduceFunction = Callable[[Hashable, List[Any], Emit], None]


def resolve_map(map_fn) -> MapFunction:
    """
    Turn the map argument into a map function.

    Args:
        map_fn: A map function, or the name of an attribute to group by

    Raises:
        TypeError: If map_fn is neither callable nor a string
    """
    if isinstance(map_fn, str):
        return mappers.key(map_fn)
    if callable(map_fn):
        return map_fn
    raise TypeError(f"map must be a function or an attribute name, got {type(map_fn).__name__}")


def _check_records(records):
    if (not isinstance(records, Sequence)
            or isinstance(records, (str, bytes, bytearray, Mapping))):
        raise TypeError(f"records must be a sequence, got {type(records).__name__}")


class MapReduceExecutor:
    """Executes one map/reduce run over a sequence of records"""

    def __init__(self, records: Sequence, map_fn, reduce_fn: Optional[ReduceFunction] = None):
        """
        Initialize the executor

        Args:
            records: Materialized sequence of input records
            map_fn: Map function, or attribute name to group by
            reduce_fn: Reduce function; defaults to last value wins
        """
        _check_records(records)
        self.records = records
        self.map_fn = resolve_map(map_fn)
        self.reduce_fn = reduce_fn or reducers.last()
        self.metrics = RunMetrics()

    def execute(self) -> OrderedHash:
        """
        Run the map phase then the reduce phase

        Returns:
            OrderedHash of reduced values, keyed in first-emitted order
        """
        self.metrics.start(len(self.records))
        logger.debug(f"Map phase: processing {len(self.records)} records")
        groups = self._map_phase()
        self.metrics.end_map_phase(len(groups))

        logger.debug(f"Reduce phase: reducing {len(groups)} groups")
        result = self._reduce_phase(groups)
        self.metrics.end(result.length())
        logger.debug(f"Run completed with {result.length()} results "
                     f"in {self.metrics.total_time_seconds * 1000:.3f}ms")
        return result

    def _map_phase(self) -> Dict[Hashable, List[Any]]:
        """
        Apply the map function to every record, grouping emitted values by key

        Returns:
            Dict mapping key to the list of values emitted for it; dict order
            is the order in which keys were first emitted
        """
        groups: Dict[Hashable, List[Any]] = {}

        def emit(key, value):
            if key is None:
                self.metrics.num_dropped += 1
                return
            self.metrics.num_emitted += 1
            if key not in groups:
                groups[key] = []
            groups[key].append(value)

        try:
            for record in self.records:
                self.map_fn(record, emit)
        except Exception as e:
            logger.error(f"Map phase failed: {e}")
            raise
        return groups

    def _reduce_phase(self, groups: Dict[Hashable, List[Any]]) -> OrderedHash:
        result = OrderedHash()
        try:
            for key, values in groups.items():
                self.reduce_fn(key, values, result.push)
        except Exception as e:
            logger.error(f"Reduce phase failed: {e}")
            raise
        return result


def mapreduce(records: Sequence, map_fn, reduce_fn: Optional[ReduceFunction] = None) -> OrderedHash:
    """
    Group records with map_fn and combine each group with reduce_fn.

    Args:
        records: Materialized sequence of input records
        map_fn: map_fn(record, emit), or the name of an attribute to group by
        reduce_fn: reduce_fn(key, values, emit); defaults to reducers.last()

    Returns:
        OrderedHash with one entry per emitted reduce key
    """
    return MapReduceExecutor(records, map_fn, reduce_fn).execute()


def mapreducer(map_fn, reduce_fn: Optional[ReduceFunction] = None) -> Callable[[Sequence], None]:
    """
    Return a function that runs mapreduce over its argument and discards the
    result. Only useful with reducers that have side effects.
    """
    def run(records):
        mapreduce(records, map_fn, reduce_fn)
    return run
