"""
conftest.py — Shared pytest fixtures for the tensor_rot test suite
"""

import logging

import pytest
import numpy as np

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tensor_rot.codec import volume_size
from tensor_rot.quartets import AXES


@pytest.fixture(params=[3, 4, 5, 8])
def N(request):
    """Cube dimension: odd and even, smallest allowed upward."""
    return request.param


@pytest.fixture(params=AXES)
def axis(request):
    return request.param


@pytest.fixture
def index_buffer():
    """Factory for a flat buffer whose element i holds i (all distinct)."""
    def _make(N):
        return np.arange(volume_size(N), dtype=np.int64)
    return _make


@pytest.fixture
def reset_logging():
    """Drop handlers that setup_logging() attached during a test."""
    yield
    logger = logging.getLogger("tensor_rot")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
