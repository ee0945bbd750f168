"""
Shared test setup.

Settings are read from the environment at import time, so the in-memory
annotation backend is selected here before any compoundwatch module loads.
"""

import os

os.environ.setdefault("COMPOUNDWATCH_STORAGE", "memory")
os.environ.setdefault("COMPOUNDWATCH_LOG_FORMAT", "text")
