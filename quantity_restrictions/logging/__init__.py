"""
Logging configuration and utilities for quantity restriction processing.
"""
from .config import configure_logging, get_logger, get_validation_logger

__all__ = ["configure_logging", "get_logger", "get_validation_logger"]
