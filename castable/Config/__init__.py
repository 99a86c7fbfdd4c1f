from __future__ import annotations

from .Settings import CastableSettings, get_settings, configure, reset_settings

__all__ = ['CastableSettings', 'get_settings', 'configure', 'reset_settings']
