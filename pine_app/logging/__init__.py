"""
Logging configuration and utilities for the script engine.
"""
from .config import configure_logging, get_engine_logger, get_logger

__all__ = ["configure_logging", "get_logger", "get_engine_logger"]
