"""Configuration system for qselect.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (QSELECT_*) -> .env file -> field defaults.

Per-call overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults. The voting rule is fixed
when a combiner is built and cannot be overridden per call.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from qselect.exceptions import ConfigValidationError

# Fields that can be overridden for a single engine call.
_PER_CALL_FIELDS: frozenset[str] = frozenset(
    {
        "small_threshold",
        "check_finite",
        "voting_quantile",
        "log_level",
        "diagnostic_mode",
    }
)

_LOG_LEVELS: frozenset[str] = frozenset({"none", "summary", "full"})

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class QSelectConfig(BaseSettings):
    """Configuration for qselect.

    Resolution order: init kwargs -> env vars (QSELECT_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="QSELECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Selection engine ---

    small_threshold: int = Field(
        default=10,
        ge=2,
        description="Ranges of at most this many elements are insertion-sorted",
    )
    check_finite: bool = Field(
        default=True,
        description="Reject NaN values in numeric buffers before selecting",
    )

    # --- Ensemble voting ---

    voting_rule: str = Field(
        default="median",
        description="Score combination rule: 'max', 'min', 'mean', 'median', 'quantile'",
    )
    voting_quantile: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Fraction used by the 'quantile' voting rule",
    )

    # --- Logging ---

    log_level: str = Field(
        default="none",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all selection records in memory for analysis",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        if value not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return value


_ALL_FIELDS = frozenset(QSelectConfig.model_fields.keys())


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Check that every key in *overrides* names a per-call field.

    Args:
        overrides: Mapping of config field names to new values.

    Raises:
        ConfigValidationError: If any key is unknown or not overridable.
    """
    for key in overrides:
        if key not in _ALL_FIELDS:
            raise ConfigValidationError(f"Unknown config field: '{key}'")
        if key not in _PER_CALL_FIELDS:
            raise ConfigValidationError(
                f"Field '{key}' is fixed per engine and cannot be overridden per call"
            )


def resolve_config(
    defaults: QSelectConfig,
    overrides: dict[str, Any] | None,
) -> QSelectConfig:
    """Create a new config instance merging defaults with per-call overrides.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Field values to replace for this call.

    Returns:
        A new QSelectConfig with overrides applied, or *defaults* itself
        when there is nothing to override.

    Raises:
        ConfigValidationError: If a key is unknown, not overridable, or its
            value fails validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    # model_copy(update=...) skips validation; model_validate coerces and checks.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return QSelectConfig.model_validate(merged)
    except ValueError as exc:
        raise ConfigValidationError(str(exc)) from exc
