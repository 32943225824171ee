"""
Dynamic loader for user job files.

A job file is a Python module defining map_function(record, emit) and,
optionally, reduce_function(key, values, emit).
"""

import importlib.util
import logging
import os

logger = logging.getLogger(__name__)


class FunctionLoader:
    """Dynamically loads user-provided map/reduce functions from Python files"""

    def __init__(self, job_file: str):
        """
        Args:
            job_file: Path to the user's Python file containing map/reduce functions
        """
        self.job_file = job_file
        self.module = None

    def load_module(self):
        """
        Load the job module

        Returns:
            The loaded module object

        Raises:
            FileNotFoundError: If the job file doesn't exist
            ImportError: If the file cannot be loaded as a Python module
        """
        if not os.path.exists(self.job_file):
            raise FileNotFoundError(f"Job file not found: {self.job_file}")

        module_name = "datadata_job_" + os.path.splitext(os.path.basename(self.job_file))[0]
        spec = importlib.util.spec_from_file_location(module_name, self.job_file)
        if spec is None or spec.loader is None:
            raise ImportError(f"Failed to load job file: {self.job_file}")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        logger.debug(f"Loaded job file {self.job_file}")
        self.module = module
        return module

    def get_map_function(self):
        """
        Get map function from loaded module

        Raises:
            AttributeError: If module doesn't define 'map_function'
        """
        if not self.module:
            self.load_module()

        if not hasattr(self.module, 'map_function'):
            raise AttributeError("Job file must define 'map_function'")
        return self.module.map_function

    def get_reduce_function(self):
        """
        Get reduce function from loaded module

        Returns:
            The reduce_function callable, or None so the engine default applies
        """
        if not self.module:
            self.load_module()
        return getattr(self.module, 'reduce_function', None)
