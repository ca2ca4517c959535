"""
Centralized Logging Configuration

Provides logging for the classification engine with:
- Axis-specific loggers (browser, os, device)
- Consistent formatting
- Match tracing at DEBUG level

Library code only obtains loggers; setup_logging() is called by the
entry point (main.py) or by the host application.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGER CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """
    Configure logging for the entire application.
    
    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs to
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    
    console_formatter = logging.Formatter(
        fmt="%(asctime)s | %(name)-10s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    
    file_formatter = logging.Formatter(
        fmt="%(asctime)s | %(name)s | %(levelname)s | %(filename)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(console_formatter)
    
    root_logger = logging.getLogger()
    
    # Prevent duplicate logs if setup_logging() is called again
    if root_logger.handlers:
        root_logger.handlers.clear()
    
    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)
    
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)


# ═══════════════════════════════════════════════════════════════════════════════
# COMPONENT LOGGERS
# ═══════════════════════════════════════════════════════════════════════════════

logger_browser = logging.getLogger("ua.browser")
logger_os = logging.getLogger("ua.os")
logger_device = logging.getLogger("ua.device")
logger_api = logging.getLogger("ua.api")


# ═══════════════════════════════════════════════════════════════════════════════
# STRUCTURED LOGGING HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

class LogContext:
    """Helper for consistent structured logging"""
    
    @staticmethod
    def format_dict(data: dict) -> str:
        """Format dictionary for logging"""
        return " | ".join(f"{k}={v}" for k, v in data.items())
    
    @staticmethod
    def format_agent(user_agent: str, limit: int = 80) -> str:
        """Shorten a User-Agent for log lines"""
        if len(user_agent) <= limit:
            return user_agent
        return user_agent[:limit] + "..."


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGING UTILITIES
# ═══════════════════════════════════════════════════════════════════════════════

def log_match(logger: logging.Logger, axis: str, label: Optional[str], user_agent: str):
    """Log the outcome of a table scan"""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    context = {
        "axis": axis,
        "label": label,
        "ua": LogContext.format_agent(user_agent)
    }
    logger.debug(f"MATCH | {LogContext.format_dict(context)}")


def log_input_clipped(original_length: int, max_length: int):
    """Log that an oversized User-Agent was cut before matching"""
    context = {"length": original_length, "max": max_length}
    logger_api.warning(f"INPUT_CLIPPED | {LogContext.format_dict(context)}")


def log_device_info(info: dict):
    """Log a comprehensive classification"""
    context = {
        "browser": info.get("browser"),
        "os": info.get("os"),
        "device_type": info.get("device_type"),
        "is_bot": info.get("is_bot")
    }
    logger_api.debug(f"DEVICE_INFO | {LogContext.format_dict(context)}")
