"""
Runtime configuration, read from the environment.
"""

import os

LOG_LEVEL = os.getenv('DATADATA_LOG_LEVEL', 'WARNING').upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Loader thread pool size and network/file settings
MAX_WORKERS = int(os.getenv('DATADATA_MAX_WORKERS', '4'))
URL_TIMEOUT = float(os.getenv('DATADATA_URL_TIMEOUT', '30'))
ENCODING = os.getenv('DATADATA_ENCODING', 'utf-8')
