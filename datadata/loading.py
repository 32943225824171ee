"""
Data loading: reads CSV/TSV/JSON from files or URLs, or takes in-memory data,
and hands the records to the map/reduce engine.

Loads run on a shared thread pool and return concurrent.futures.Future
objects, so several sources can load at the same time. Errors about the
specification itself are raised immediately; errors while reading or parsing
are delivered through the future.
"""

import csv
import io
import json
import logging
import os
import threading
import urllib.error
import urllib.request
from collections.abc import Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Optional
from urllib.parse import urlparse

from datadata import config, mappers
from datadata.engine import MapReduceExecutor, resolve_map
from datadata.errors import (
    InvalidDataError,
    LoadError,
    NoDataSpecificationError,
    UnknownFileTypeError,
    UnknownSpecificationError,
)
from datadata.ordered_hash import OrderedHash
from datadata.utils import is_numeric, to_number

logger = logging.getLogger(__name__)

FileHandler = Callable[[str, dict], Any]

_executor = None
_executor_lock = threading.Lock()


def _get_executor() -> ThreadPoolExecutor:
    global _executor
    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(max_workers=config.MAX_WORKERS,
                                           thread_name_prefix='datadata-load')
        return _executor


def is_url(path: str) -> bool:
    return urlparse(path).scheme in ('http', 'https')


def read_source(path: str) -> str:
    """
    Read the full text of a local file or an http(s) URL

    Raises:
        OSError: If the file cannot be read (urllib.error.URLError included)
    """
    if is_url(path):
        logger.debug(f"Fetching {path}")
        with urllib.request.urlopen(path, timeout=config.URL_TIMEOUT) as response:
            charset = response.headers.get_content_charset() or config.ENCODING
            return response.read().decode(charset)
    with open(path, 'r', encoding=config.ENCODING) as f:
        return f.read()


def default_accessor(row: dict) -> dict:
    """Convert numeric strings in a parsed row to numbers."""
    return {k: to_number(v) if is_numeric(v) else v for k, v in row.items()}


def _row_accessor(options: dict) -> Optional[Callable[[dict], dict]]:
    # An explicit None disables conversion
    if 'accessor' in options:
        return options['accessor']
    return default_accessor


def dsv_handler(delimiter: str) -> FileHandler:
    """
    Build a file handler for delimiter-separated text with a header line.

    Rows are passed through the row accessor from options['accessor'],
    default_accessor when absent.
    """
    def handler(path: str, options: dict) -> list:
        text = read_source(path)
        accessor = _row_accessor(options)
        rows = csv.DictReader(io.StringIO(text), delimiter=delimiter)
        if accessor is None:
            return [dict(row) for row in rows]
        return [accessor(dict(row)) for row in rows]
    return handler


def json_handler(path: str, options: dict):
    return json.loads(read_source(path))


_handlers: Dict[str, FileHandler] = {
    'csv': dsv_handler(','),
    'tsv': dsv_handler('\t'),
    'json': json_handler,
    'geojson': json_handler,
    'topojson': json_handler,
}


def register_file_handler(file_type: str, handler: FileHandler):
    """Register a handler(path, options) for files of the given type/extension."""
    _handlers[file_type.lower()] = handler


def guess_file_type(path: str) -> str:
    """Return the lowercased extension of a path or URL, '' if there is none."""
    name = urlparse(path).path if is_url(path) else path
    ext = os.path.splitext(name)[1]
    return ext[1:].lower()


def _resolve_handler(path: str, options: dict) -> FileHandler:
    if options.get('file_handler'):
        return options['file_handler']
    file_type = (options.get('type') or guess_file_type(path)).lower()
    if file_type not in _handlers:
        raise UnknownFileTypeError(file_type, path)
    logger.debug(f"Using {file_type} handler for {path}")
    return _handlers[file_type]


def _read(handler: FileHandler, path: str, options: dict):
    logger.info(f"Loading {path}")
    try:
        return handler(path, options)
    except (OSError, ValueError, csv.Error) as e:
        # URLError is an OSError, JSONDecodeError a ValueError
        logger.error(f"Failed to load {path}: {e}")
        raise LoadError(path, e) from e


def process_data(data, map_fn=None, reduce_fn=None, on_metrics=None) -> OrderedHash:
    """
    Mapreduce loaded data.

    Sequences are mapreduced directly, keyed by position when there is no
    map function. For a mapping the keys are the records: without a map
    function each key is emitted with its value, otherwise each value gets
    its key stored as '__key__' before the map function sees it.

    Args:
        on_metrics: Optional callback receiving the RunMetrics of the run

    Raises:
        InvalidDataError: If data is neither a list/tuple nor a mapping
    """
    if isinstance(data, Mapping):
        if map_fn is None:
            records, map_fn = list(data), mappers.dictionary(data)
        else:
            user_map = resolve_map(map_fn)

            def keyed_map(k, emit):
                obj = data[k]
                if isinstance(obj, dict):
                    obj = dict(obj, __key__=k)
                user_map(obj, emit)
            records, map_fn = list(data), keyed_map
    elif isinstance(data, (list, tuple)):
        records = data
        if map_fn is None:
            map_fn = mappers.index()
    else:
        raise InvalidDataError(data)

    executor = MapReduceExecutor(records, map_fn, reduce_fn)
    result = executor.execute()
    if on_metrics is not None:
        on_metrics(executor.metrics)
    return result


def _check_spec(spec):
    if spec is None:
        raise NoDataSpecificationError()
    if callable(spec) and not isinstance(spec, Future):
        raise UnknownSpecificationError(spec)


def load(spec, options: Optional[dict] = None) -> Future:
    """
    Load data without map/reducing it.

    Args:
        spec: Path or URL, in-memory data, or a Future (returned as is)
        options: 'type' to override the file type, 'file_handler' to use a
            custom handler(path, options), 'accessor' for delimited rows

    Returns:
        Future resolving to the parsed data
    """
    options = options or {}
    _check_spec(spec)
    if isinstance(spec, Future):
        return spec
    if isinstance(spec, str):
        handler = _resolve_handler(spec, options)
        return _get_executor().submit(_read, handler, spec, options)
    if isinstance(spec, (list, tuple, Mapping)):
        future = Future()
        future.set_result(spec)
        return future
    raise UnknownSpecificationError(spec)


def datadata(spec, map=None, reduce=None, options: Optional[dict] = None) -> Future:
    """
    Load data and map/reduce it.

    Args:
        spec: Path or URL of a CSV/TSV/JSON file, a list of records, a dict,
            or a Future resolving to one of those
        map: Map function or attribute name to group by
        reduce: Reduce function, default datadata.reducers.last()
        options: See load(), plus 'on_metrics', a callback receiving
            the RunMetrics of the run

    Returns:
        Future resolving to an OrderedHash

    Raises:
        NoDataSpecificationError: spec is None
        UnknownSpecificationError: spec is of an unsupported type
        UnknownFileTypeError: no handler for the file's type
    """
    options = options or {}
    _check_spec(spec)
    if map is not None:
        map = resolve_map(map)
    on_metrics = options.get('on_metrics')

    if isinstance(spec, Future):
        return _get_executor().submit(
            lambda: process_data(spec.result(), map, reduce, on_metrics))
    if isinstance(spec, str):
        handler = _resolve_handler(spec, options)
        return _get_executor().submit(
            lambda: process_data(_read(handler, spec, options), map, reduce, on_metrics))
    if isinstance(spec, (list, tuple, Mapping)):
        return _get_executor().submit(process_data, spec, map, reduce, on_metrics)
    raise UnknownSpecificationError(spec)
