"""
Unit Test Layer Configuration

Structure:
    tests/unit/
    └── wish/        Models, registry, config, publishers (no I/O)

Usage:
    pytest tests/unit -v
"""
import pytest


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
