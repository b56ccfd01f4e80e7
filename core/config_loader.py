import os
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Dict, Any

import yaml
from pydantic import BaseModel, Field

from core.constants import (
    DEFAULT_SPECIALTY_WEIGHT,
    DEFAULT_PROXIMITY_WEIGHT,
    DEFAULT_RATING_WEIGHT,
    MIN_MATCH_SCORE,
    LOCATION_PREFIX_LENGTH,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.yaml"


class DatabaseConfig(BaseModel):
    """Database configuration."""
    url: str = Field(default="sqlite:///./iremodel.db")
    echo: bool = False


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)


class LoggingConfig(BaseModel):
    level: str = "INFO"


class ScorerConfig(BaseModel):
    """
    Configuration for the contractor ScoringEngine.

    total = floor(specialty * specialty_weight
                  + proximity * proximity_weight
                  + rating * rating_weight)
    """
    specialty_weight: float = DEFAULT_SPECIALTY_WEIGHT
    proximity_weight: float = DEFAULT_PROXIMITY_WEIGHT
    rating_weight: float = DEFAULT_RATING_WEIGHT

    # Contractors scoring below this are left out of the results
    min_match_score: int = Field(default=MIN_MATCH_SCORE, ge=0, le=100)

    # Zip codes sharing this many leading characters count as "nearby"
    location_prefix_length: int = Field(default=LOCATION_PREFIX_LENGTH, ge=1)


class MatchingConfig(BaseModel):
    """
    Top-level matching configuration.
    """
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)


class AppConfig(BaseModel):
    """Main application configuration."""
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


def _load_yaml_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML file, or an empty dict if there is none."""
    path = Path(config_path or os.environ.get("IREMODEL_CONFIG", DEFAULT_CONFIG_FILE))

    if not path.exists():
        # Fall back to the project root when running from another directory
        path = get_project_root() / path.name

    if path.exists():
        with open(path, "r") as f:
            return yaml.safe_load(f) or {}

    logger.debug(f"No config file found at {path}, using defaults")
    return {}


def _apply_env_overrides(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration."""
    # Database overrides
    if 'DATABASE_URL' in os.environ:
        config_dict.setdefault('database', {})
        config_dict['database']['url'] = os.environ['DATABASE_URL']

    # Web server overrides
    if 'WEB_HOST' in os.environ:
        config_dict.setdefault('web', {})
        config_dict['web']['host'] = os.environ['WEB_HOST']

    if 'WEB_PORT' in os.environ:
        config_dict.setdefault('web', {})
        config_dict['web']['port'] = int(os.environ['WEB_PORT'])

    if 'LOG_LEVEL' in os.environ:
        config_dict.setdefault('logging', {})
        config_dict['logging']['level'] = os.environ['LOG_LEVEL']

    return config_dict


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load application configuration.

    Reads the YAML file (if present) and applies environment variable
    overrides on top of it.
    """
    raw_config = _load_yaml_config(config_path)
    raw_config = _apply_env_overrides(raw_config)
    return AppConfig(**raw_config)


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Returns:
        AppConfig: The application configuration.
    """
    return load_config()
