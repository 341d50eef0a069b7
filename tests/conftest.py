"""
Root conftest.py - Global configuration for all test layers.

Test Layers:
    - component/: Component tests (service with mocked collaborators)
    - unit/      : Unit tests (pure functions, models, registry, no I/O)
    - contracts/ : Test data factories and request builders
"""
import os
import sys

# Set testing environment BEFORE any project imports
os.environ.setdefault("ENV", "testing")
os.environ.setdefault("NATS_ENABLED", "false")

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)
