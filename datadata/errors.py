"""
Exception types raised by datadata.
"""


class DatadataError(Exception):
    """Base class for all datadata errors"""


class EmptyGroupError(DatadataError, ValueError):
    """A reducer that folds without a seed was called with an empty group"""


class NoDataSpecificationError(DatadataError, ValueError):
    """datadata() was called without a data specification"""

    def __init__(self, message: str = "No data specification"):
        super().__init__(message)


class UnknownSpecificationError(DatadataError, TypeError):
    """The data specification is not a path, URL, sequence or mapping"""

    def __init__(self, spec):
        super().__init__(f"Unknown data specification: {spec!r}")
        self.spec = spec


class UnknownFileTypeError(DatadataError, ValueError):
    """No file handler is registered for the requested type"""

    def __init__(self, file_type: str, path: str = None):
        message = f"Unknown file type: {file_type!r}"
        if path:
            message += f" (for {path})"
        super().__init__(message)
        self.file_type = file_type
        self.path = path


class LoadError(DatadataError):
    """Reading or parsing a data source failed"""

    def __init__(self, source: str, cause: Exception):
        super().__init__(f"Failed to load {source}: {cause}")
        self.source = source
        self.cause = cause


class InvalidDataError(DatadataError, TypeError):
    """Loaded data is neither a sequence of records nor a mapping"""

    def __init__(self, data):
        super().__init__(f"Cannot map/reduce data of type {type(data).__name__}")
        self.data = data
