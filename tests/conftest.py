"""Shared fixtures and markers for BQC tests."""

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: walks the whole token space")
