"""Project-wide settings and defaults."""

import os
from pathlib import Path

# Base paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Paging defaults
DEFAULT_ROWS_PER_PAGE = int(os.environ.get("WEBGRID_ROWS_PER_PAGE", "10"))

# Query-string parameter names read by the web helpers
SORT_FIELD_NAME = os.environ.get("WEBGRID_SORT_FIELD", "sort")
SORT_DIRECTION_FIELD_NAME = os.environ.get("WEBGRID_SORT_DIRECTION_FIELD", "sortdir")
PAGE_FIELD_NAME = os.environ.get("WEBGRID_PAGE_FIELD", "page")

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
