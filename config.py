"""
Central configuration for engine tunables and logging.
Pydantic models give type-safe, validated settings.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


ConfigDict = Dict[str, Any]


class EngineSettings(BaseModel):
    """Move selection configuration settings."""

    default_difficulty: int = Field(default=3, ge=0, description="Difficulty used when the caller gives none (0 = random play)")
    score_bound: int = Field(default=9999, ge=1, description="Magnitude of the root alpha/beta sentinels")
    seed: Optional[int] = Field(default=None, description="Seed for the random-play generator")

    @field_validator('default_difficulty', 'score_bound', mode='before')
    @classmethod
    def validate_int_fields(cls, v):
        return int(v)


class LoggingSettings(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_to_file: bool = Field(default=False, description="Write logs to file")
    log_file_path: str = Field(default="adversary.log", description="Log file path")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class AdversaryConfig(BaseModel):
    """Main configuration model."""

    engine: EngineSettings = Field(default_factory=EngineSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Metadata
    version: str = Field(default="1.0.0", description="Configuration version")
    config_file: Optional[str] = Field(default=None, description="Path to config file")

    @classmethod
    def from_env(cls) -> 'AdversaryConfig':
        """Create configuration from environment variables."""
        seed = os.getenv('ADVERSARY_SEED')
        return cls(
            engine=EngineSettings(
                default_difficulty=int(os.getenv('ADVERSARY_DIFFICULTY', '3')),
                score_bound=int(os.getenv('ADVERSARY_SCORE_BOUND', '9999')),
                seed=int(seed) if seed not in (None, '') else None,
            ),
            logging=LoggingSettings(
                log_level=os.getenv('ADVERSARY_LOG_LEVEL', 'INFO'),
                log_to_file=os.getenv('ADVERSARY_LOG_FILE', 'false').lower() == 'true',
            ),
        )

    def to_dict(self) -> ConfigDict:
        """Convert configuration to dictionary."""
        return {
            'engine': self.engine.model_dump(),
            'logging': self.logging.model_dump(),
            'version': self.version,
            'config_file': self.config_file,
        }

    def save_to_file(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        config_dict = self.to_dict()
        config_dict['config_file'] = filepath

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> 'AdversaryConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls(
            engine=EngineSettings(**data.get('engine', {})),
            logging=LoggingSettings(**data.get('logging', {})),
            version=data.get('version', '1.0.0'),
            config_file=filepath,
        )

    def update_from_dict(self, updates: ConfigDict) -> None:
        """Update configuration from dictionary."""
        for section, settings in updates.items():
            if hasattr(self, section) and isinstance(settings, dict):
                section_model = getattr(self, section)
                for key, value in settings.items():
                    if hasattr(section_model, key):
                        setattr(section_model, key, value)


# Global configuration instance
_config: Optional[AdversaryConfig] = None


def get_config() -> AdversaryConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = AdversaryConfig.from_env()
    return _config


def load_config_from_file(filepath: str) -> AdversaryConfig:
    """Load configuration from file and update global instance."""
    global _config
    _config = AdversaryConfig.load_from_file(filepath)
    return _config


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _config
    _config = None


def get_engine_settings() -> EngineSettings:
    """Get engine configuration settings."""
    return get_config().engine


def get_logging_settings() -> LoggingSettings:
    """Get logging configuration settings."""
    return get_config().logging


def setup_logging() -> None:
    """Configure root logging once, from LoggingSettings (ADVERSARY_LOG_LEVEL or a loaded file)."""
    if getattr(setup_logging, "_configured", False):
        return
    handlers = [logging.StreamHandler()]
    settings = get_logging_settings()
    level: int = getattr(logging, settings.log_level, logging.INFO)
    if settings.log_to_file:
        handlers.append(logging.FileHandler(settings.log_file_path))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
