"""Castable Configuration

Library-wide defaults for attribute declaration, read from the environment
when the module is imported and validated with pydantic.
"""

from __future__ import annotations

import os
from typing import Any, Dict, List
from pydantic import BaseModel, Field, field_validator, ConfigDict


LOG_LEVELS: List[str] = ['debug', 'info', 'warning', 'error', 'critical']


def _env_flag(key: str, default: str) -> bool:
    return os.getenv(key, default).lower() in ('1', 'true', 'yes', 'on')


class CastableSettings(BaseModel):
    """Castable configuration settings with validation."""
    
    castable_strict: bool = Field(
        default_factory=lambda: _env_flag("CASTABLE_STRICT", "false"),
        description="Default strict mode for newly declared attributes"
    )
    castable_clone_defaults: bool = Field(
        default_factory=lambda: _env_flag("CASTABLE_CLONE_DEFAULTS", "true"),
        description="Deep-copy mutable static defaults for every instance"
    )
    castable_log_level: str = Field(
        default_factory=lambda: os.getenv("CASTABLE_LOG_LEVEL", "warning"),
        validate_default=True,
        description="Level of the castable package logger"
    )
    
    model_config = ConfigDict(validate_assignment=True)
    
    @field_validator('castable_log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level name."""
        level = v.lower()
        if level not in LOG_LEVELS:
            raise ValueError(f'Unsupported log level: {v}')
        return level
    
    def to_array(self) -> Dict[str, Any]:
        """Get the settings as a plain dictionary."""
        return self.model_dump()


# Create global settings instance
castable_settings = CastableSettings()


def get_settings() -> CastableSettings:
    """Get castable settings instance."""
    return castable_settings


def configure(**overrides: Any) -> CastableSettings:
    """Replace the global settings with validated overrides."""
    global castable_settings
    
    values = castable_settings.model_dump()
    values.update(overrides)
    castable_settings = CastableSettings(**values)
    
    from castable.Utils.Logger import apply_log_level
    apply_log_level(castable_settings.castable_log_level)
    
    return castable_settings


def reset_settings() -> CastableSettings:
    """Re-read settings from the environment."""
    global castable_settings
    
    castable_settings = CastableSettings()
    
    from castable.Utils.Logger import apply_log_level
    apply_log_level(castable_settings.castable_log_level)
    
    return castable_settings
