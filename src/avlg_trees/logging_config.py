"""Centralized logging configuration for the avlg-trees project."""

import logging
import sys
from typing import Optional


def setup_logging(
    level: int = logging.WARNING,
    format_string: Optional[str] = None,
    handler_type: str = "stream"
) -> logging.Logger:
    """
    Set up centralized logging configuration for the project.
    
    Args:
        level: Logging level (default: WARNING)
        format_string: Custom format string (optional)
        handler_type: Type of handler - "stream" or "none"
        
    Returns:
        Configured logger instance
    """
    if format_string is None:
        format_string = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    
    logger = logging.getLogger("avlg_trees")
    
    # Avoid duplicate configuration
    if logger.handlers:
        return logger
    
    formatter = logging.Formatter(format_string)
    
    if handler_type == "stream":
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
    
    logger.setLevel(level)
    logger.propagate = False
    
    return logger


def set_level(level: int) -> None:
    """Change the level of the project logger after setup."""
    setup_logging()
    logging.getLogger("avlg_trees").setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.
    
    Args:
        name: Module name (usually __name__)
        
    Returns:
        Logger instance
    """
    if not logging.getLogger("avlg_trees").handlers:
        setup_logging()

    if name == "avlg_trees" or name.startswith("avlg_trees."):
        return logging.getLogger(name)
    return logging.getLogger(f"avlg_trees.{name}")


def get_test_logger(name: str) -> logging.Logger:
    """
    Get a logger for tests with appropriate configuration.
    
    Args:
        name: Test module name
        
    Returns:
        Logger instance for tests
    """
    logger = logging.getLogger(f"Tests.{name}")
    
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    
    return logger
