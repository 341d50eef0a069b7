"""
Component Test Layer Configuration

Structure:
    tests/component/
    ├── wish/        Wish service component tests
    └── mocks/       Mock implementations

Usage:
    pytest tests/component -v
    pytest tests/component/wish -v
"""
import pytest

from tests.component.mocks import MockEventBus, MockTransferClient


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# Shared Mocks
# =============================================================================

@pytest.fixture
def mock_event_bus() -> MockEventBus:
    """Mock NATS event bus"""
    return MockEventBus()


@pytest.fixture
def mock_transfer_client() -> MockTransferClient:
    """Mock transfer service"""
    return MockTransferClient()
