"""
datadata - load data from files, URLs or memory and map/reduce it into
ordered key/value results.
"""

from datadata import geo, mappers, reducers, transforms
from datadata.engine import MapReduceExecutor, mapreduce, mapreducer
from datadata.errors import (
    DatadataError,
    EmptyGroupError,
    InvalidDataError,
    LoadError,
    NoDataSpecificationError,
    UnknownFileTypeError,
    UnknownSpecificationError,
)
from datadata.loading import datadata, load, register_file_handler
from datadata.ordered_hash import OrderedHash

__version__ = '0.3.0'

__all__ = [
    'DatadataError',
    'EmptyGroupError',
    'InvalidDataError',
    'LoadError',
    'MapReduceExecutor',
    'NoDataSpecificationError',
    'OrderedHash',
    'UnknownFileTypeError',
    'UnknownSpecificationError',
    'datadata',
    'geo',
    'load',
    'mappers',
    'mapreduce',
    'mapreducer',
    'reducers',
    'register_file_handler',
    'transforms',
]
