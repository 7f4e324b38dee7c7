"""
Runtime settings for betterset.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .log import configure_logging, is_configured


class SetConfig(BaseModel):
    """
    Settings shared by every HashSet operation
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    powerset_limit: Optional[int] = Field(
        default=20, ge=0,
        description="Largest cardinality whose powerset may be built; "
                    "None removes the limit")
    log_level: int = Field(default=15, ge=0)


_settings = SetConfig()


def settings() -> SetConfig:
    """
    Returns the settings currently in effect.
    """
    return _settings


def configure(**overrides: Any) -> SetConfig:
    """
    Validates overrides on top of the current settings and installs them.
    Raises pydantic.ValidationError on unknown keys or bad values.
    """
    global _settings  # pylint: disable=global-statement
    _settings = SetConfig.model_validate(
        {**_settings.model_dump(), **overrides})
    configure_logging(_settings.log_level)
    return _settings


def reset() -> SetConfig:
    """
    Restores the default settings.
    The logger level follows, if configure_logging already ran.
    """
    global _settings  # pylint: disable=global-statement
    _settings = SetConfig()
    if is_configured():
        configure_logging(_settings.log_level)
    return _settings
