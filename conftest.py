"""Root conftest.py — exhaustive N=3..50 sweeps only run with --runslow."""

import pytest

pytest_plugins = ["pytester"]


def pytest_addoption(parser):
    parser.addoption("--runslow", action="store_true", default=False,
                     help="also run the sweeps over every dimension N=3..50")


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: sweep over every supported dimension")


def pytest_runtest_setup(item):
    if item.get_closest_marker("slow") and not item.config.getoption("--runslow"):
        pytest.skip("dimension sweep; pass --runslow to run it")
