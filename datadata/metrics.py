"""
Performance metrics collection for map/reduce runs.
"""

import json
import time
from dataclasses import dataclass, asdict

import psutil


def current_memory_usage() -> int:
    """Get current resident memory of this process in bytes."""
    return psutil.Process().memory_info().rss


@dataclass
class RunMetrics:
    """Metrics for a single map/reduce run."""

    start_time: float = 0.0
    end_time: float = 0.0
    map_phase_start: float = 0.0
    map_phase_end: float = 0.0
    reduce_phase_start: float = 0.0
    reduce_phase_end: float = 0.0
    num_records: int = 0
    num_emitted: int = 0
    num_dropped: int = 0
    num_groups: int = 0
    num_results: int = 0
    memory_before_bytes: int = 0
    memory_after_bytes: int = 0

    @property
    def total_time_seconds(self) -> float:
        """Total run time in seconds."""
        return self.end_time - self.start_time

    @property
    def map_phase_time_seconds(self) -> float:
        """Map phase time in seconds."""
        return self.map_phase_end - self.map_phase_start

    @property
    def reduce_phase_time_seconds(self) -> float:
        """Reduce phase time in seconds."""
        return self.reduce_phase_end - self.reduce_phase_start

    @property
    def memory_delta_bytes(self) -> int:
        return self.memory_after_bytes - self.memory_before_bytes

    def start(self, num_records: int):
        """Mark the start of a run and of its map phase."""
        self.num_records = num_records
        self.memory_before_bytes = current_memory_usage()
        self.start_time = self.map_phase_start = time.perf_counter()

    def end_map_phase(self, num_groups: int):
        self.num_groups = num_groups
        self.map_phase_end = self.reduce_phase_start = time.perf_counter()

    def end(self, num_results: int):
        """Mark the end of the reduce phase and of the run."""
        self.num_results = num_results
        self.reduce_phase_end = self.end_time = time.perf_counter()
        self.memory_after_bytes = current_memory_usage()

    def to_dict(self) -> dict:
        """Convert metrics to dictionary, including derived timings."""
        data = asdict(self)
        data['total_time_seconds'] = self.total_time_seconds
        data['map_phase_time_seconds'] = self.map_phase_time_seconds
        data['reduce_phase_time_seconds'] = self.reduce_phase_time_seconds
        data['memory_delta_bytes'] = self.memory_delta_bytes
        return data

    def save_to_file(self, filepath: str):
        """Save metrics to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
