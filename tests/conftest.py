"""
Pytest fixtures for the form_binding test suite.

Every test starts with an empty descriptor cache and unconfigured logging.
"""

import pytest

from form_binding.binding.descriptors import clear_descriptor_cache
from form_binding.logging_config import LogContext, reset_logging


@pytest.fixture(autouse=True)
def _isolated_state():
    clear_descriptor_cache()
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()
    clear_descriptor_cache()
