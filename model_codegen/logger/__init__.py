"""Centralized logging configuration for the model code generator.

This module provides a configured logger instance that can be imported and used
throughout the application. Handlers are configured from logging_config.json
when setup_logger() is called by the command line entry point.

Usage:
    from model_codegen.logger import logger

    logger.info("Generated model for %s", table_name)
"""

from .logger import logger, setup_logger

__all__ = ["logger", "setup_logger"]
