#!/usr/bin/env python3
"""
Core Module for Microservices Architecture

Shared infrastructure for the wish service.

COMPONENTS:
    - config/: Dataclass configuration loaded from the environment (.env aware)
    - logger.py: Service logger setup
    - nats_client.py: NATS event bus for event-driven notifications

USAGE:
    from core.config import settings
    from core.logger import setup_service_logger
    from core.nats_client import get_event_bus
"""

__version__ = "2.0.0"
