"""
Gatewarden configuration settings using Pydantic.

Settings are loaded from environment variables with the GATEWARDEN_
prefix, or from a .env file in the current directory. Quality gates can be
declared as a JSON list, e.g.::

    GATEWARDEN_QUALITY_GATES='[{"name": "Line coverage", "threshold": 80, "criticality": "failure"}]'
"""

from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gatewarden.gate import QualityGate, QualityGateCriticality


class ConfigurationError(Exception):
    """Raised when configuration is invalid or missing."""

    pass


class QualityGateDefinition(BaseModel):
    """Declarative form of a quality gate."""

    name: str = Field(
        min_length=1,
        description="Display name of the quality gate",
    )
    threshold: float = Field(
        default=0.0,
        description="Threshold, its meaning depends on the metric",
    )
    criticality: QualityGateCriticality = Field(
        default=QualityGateCriticality.UNSTABLE,
        description="Criticality applied when the gate is missed",
    )

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v

    @field_validator("threshold")
    @classmethod
    def threshold_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("threshold must be a finite number")
        return v

    @field_validator("criticality", mode="before")
    @classmethod
    def parse_criticality(cls, v: object) -> object:
        if isinstance(v, str):
            return QualityGateCriticality.from_name(v)
        return v

    def to_quality_gate(self) -> QualityGate:
        return QualityGate(name=self.name, threshold=self.threshold, criticality=self.criticality)


class GatewardenSettings(BaseSettings):
    """Main Gatewarden configuration."""

    model_config = SettingsConfigDict(
        env_prefix="GATEWARDEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_name: str = Field(
        default="Quality Gates",
        description="Prefix of forwarded evaluation log lines",
    )
    quiet: bool = Field(
        default=False,
        description="Suppress forwarding of evaluation log lines",
    )
    quality_gates: list[QualityGateDefinition] = Field(
        default_factory=list,
        description="Quality gates in evaluation order",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.upper()
        return v

    def build_gates(self) -> list[QualityGate]:
        """Create the configured quality gates in declared order."""
        return [definition.to_quality_gate() for definition in self.quality_gates]


def load_settings(**overrides: object) -> GatewardenSettings:
    """
    Load settings from the environment, applying explicit overrides.

    Raises:
        ConfigurationError: If the settings are invalid
    """
    try:
        return GatewardenSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid Gatewarden settings: {e}") from e
