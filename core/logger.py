#!/usr/bin/env python3
"""Service logger setup

Configures a named logger from LoggingConfig: console handler, optional
file handler, shared format. Modules keep using logging.getLogger(__name__)
and inherit the handlers through the logger hierarchy.
"""
import logging
import sys
from typing import Optional

from core.config.logging_config import LoggingConfig


def setup_service_logger(
    service_name: str,
    level: Optional[str] = None,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Create (or reconfigure) the logger for a service.

    Args:
        service_name: Logger name, usually the service package name
        level: Overrides config.log_level when given
        config: Logging configuration, loaded from env if omitted

    Returns:
        Configured logger
    """
    config = config or LoggingConfig.from_env()
    logger = logging.getLogger(service_name)
    logger.setLevel((level or config.log_level).upper())

    # Reconfiguring must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.log_format)

    if config.enable_console:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(formatter)
        logger.addHandler(console)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


__all__ = ["setup_service_logger"]
