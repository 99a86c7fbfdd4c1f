from __future__ import annotations

from .Logger import CastableLogger, get_logger, apply_log_level

__all__ = ['CastableLogger', 'get_logger', 'apply_log_level']
