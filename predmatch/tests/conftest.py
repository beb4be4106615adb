# Path: predmatch/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for predmatch

Provides common test fixtures used across all test modules.
"""

import logging
import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'PREDMATCH_ENVIRONMENT': 'test',
        'PREDMATCH_DEBUG': 'true',
        'PREDMATCH_LOG_LEVEL': 'DEBUG',
        'PREDMATCH_LOG_CONSOLE': 'false',
        'PREDMATCH_STRICT_SPECS': 'false',
        'PREDMATCH_DIAGNOSTICS': 'true',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reset_singletons():
    """Reset the ConfigLoader singleton before and after a test."""
    from predmatch.config_loader import ConfigLoader

    ConfigLoader._instance = None
    ConfigLoader._initialized = False
    yield
    ConfigLoader._instance = None
    ConfigLoader._initialized = False


@pytest.fixture
def restore_root_logger():
    """Close handlers installed by a logging test and restore the root level."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


# ==============================================================================
# PREDICATE FIXTURES
# ==============================================================================

class CallRecorder:
    """Wraps predicates and records every invocation in order."""

    def __init__(self):
        self.calls = []

    def track(self, name, predicate):
        """Return a predicate that records (name, value) then delegates."""
        def _tracked(value):
            self.calls.append((name, value))
            return predicate(value)
        return _tracked

    def names(self):
        return [name for name, _ in self.calls]


@pytest.fixture
def recorder():
    """Provide a fresh CallRecorder."""
    return CallRecorder()


# ==============================================================================
# SAMPLE DATA FIXTURES
# ==============================================================================

@pytest.fixture
def sample_payload():
    """Provide a sample API payload."""
    return {
        'id': 'evt-001',
        'date': '2024-01-15',
        'author': {
            'name': 'Test User',
            'email': 'test@example.com',
        },
        'tags': ['finance', 'quarterly'],
        'lines': [
            {'sku': 'A-1', 'qty': 2},
            {'sku': 'B-7', 'qty': 1},
        ],
        'deep': {'deeper': {'deepest': 42}},
    }


@pytest.fixture
def sports_payload():
    """Provide the list-of-balls payload."""
    return {'list': ['football', 'baseball', 'beachball']}
