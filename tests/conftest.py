"""
Pytest configuration and shared fixtures
"""

import json
import os
import shutil
import tempfile

import pytest

EXAMPLES_DIR = os.path.join(os.path.dirname(__file__), '..', 'examples')


@pytest.fixture
def temp_dir():
    """Create temporary directory for test files"""
    dirpath = tempfile.mkdtemp()
    yield dirpath
    shutil.rmtree(dirpath)


def write_file(dirpath, name, content):
    filepath = os.path.join(dirpath, name)
    with open(filepath, 'w') as f:
        f.write(content)
    return filepath


@pytest.fixture
def sample_csv_file(temp_dir):
    """Small CSV file with a header and two numeric rows"""
    return write_file(temp_dir, 'data.csv', 'first,second,third\n1,1,1\n2,2,2\n')


@pytest.fixture
def sample_tsv_file(temp_dir):
    """Same data as sample_csv_file, tab separated"""
    return write_file(temp_dir, 'data.tsv', 'first\tsecond\tthird\n1\t1\t1\n2\t2\t2\n')


@pytest.fixture
def population_records():
    """Records with a grouping attribute and summable fields"""
    return [
        {'country': 'AT', 'city': 'Vienna', 'population': 1900000, 'area': 415},
        {'country': 'DE', 'city': 'Berlin', 'population': 3600000, 'area': 891},
        {'country': 'AT', 'city': 'Graz', 'population': 290000, 'area': 127},
        {'country': 'DE', 'city': 'Hamburg', 'population': 1800000, 'area': 755},
        {'country': 'CH', 'city': 'Zurich', 'population': 420000, 'area': 88},
    ]


@pytest.fixture
def sample_json_array_file(temp_dir, population_records):
    return write_file(temp_dir, 'cities.json', json.dumps(population_records))


@pytest.fixture
def sample_json_object_file(temp_dir):
    data = {
        'AT': {'name': 'Austria', 'capital': 'Vienna'},
        'DE': {'name': 'Germany', 'capital': 'Berlin'},
    }
    return write_file(temp_dir, 'countries.json', json.dumps(data))


@pytest.fixture
def track_records():
    """GPS fixes of two vehicles"""
    return [
        {'vehicle': 'a', 'lat': 48.20, 'lon': 16.37},
        {'vehicle': 'b', 'lat': 47.07, 'lon': 15.44},
        {'vehicle': 'a', 'lat': 48.21, 'lon': 16.38},
        {'vehicle': 'a', 'lat': 48.22, 'lon': 16.40},
    ]


@pytest.fixture
def word_count_job_file():
    """Path to word count example job file"""
    return os.path.join(EXAMPLES_DIR, 'word_count.py')


@pytest.fixture
def track_segments_job_file():
    """Path to GPS track example job file"""
    return os.path.join(EXAMPLES_DIR, 'track_segments.py')
