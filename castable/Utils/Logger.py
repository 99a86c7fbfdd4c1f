from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

LogContext = Dict[str, Any]

ROOT_LOGGER_NAME = 'castable'


class CastableLogger:
    """Context-aware logger for the castable package."""
    
    def __init__(self, name: str = ROOT_LOGGER_NAME) -> None:
        self.name = name
        self.logger = logging.getLogger(name)
    
    def debug(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log debug message."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._format_message(message, context))
    
    def info(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log info message."""
        self.logger.info(self._format_message(message, context))
    
    def warning(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log warning message."""
        self.logger.warning(self._format_message(message, context))
    
    def error(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log error message."""
        self.logger.error(self._format_message(message, context))
    
    def _format_message(self, message: str, context: Optional[LogContext] = None) -> str:
        """Format message with context."""
        if context:
            context_str = " | ".join(f"{k}={v!r}" for k, v in context.items())
            return f"{message} | {context_str}"
        return message


def apply_log_level(level: Union[str, int]) -> None:
    """Set the level of the package logger."""
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)


def get_logger(name: Optional[str] = None) -> CastableLogger:
    """Get a castable logger instance."""
    if name is None:
        name = ROOT_LOGGER_NAME
    elif not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return CastableLogger(name)
