"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class BaselineSettings(BaseModel):
    approval_threshold: int | None = None
    valid_channels: list[str] | None = None
    referral_channel: str | None = None
    referral_bonus: int | None = None

    model_config = ConfigDict(extra="forbid")


class TechnicalSettings(BaseModel):
    assessment_bonus: int | None = None
    certification_bonus: int | None = None
    certification_metadata_key: str | None = None

    model_config = ConfigDict(extra="forbid")


class CulturalSettings(BaseModel):
    interview_bonus: int | None = None
    large_team_threshold: int | None = None
    large_team_bonus: int | None = None
    soft_skills_bonus: int | None = None
    soft_skills_metadata_key: str | None = None

    model_config = ConfigDict(extra="forbid")


class ExtensionSettings(BaseModel):
    technical: TechnicalSettings | None = None
    cultural: CulturalSettings | None = None

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    baseline: BaselineSettings = Field(default_factory=BaselineSettings)
    extensions: ExtensionSettings = Field(default_factory=ExtensionSettings)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        baseline = self.baseline.model_dump(exclude_none=True)
        if baseline:
            settings["baseline"] = baseline
        extensions = self.extensions.model_dump(exclude_none=True)
        extensions = {name: values for name, values in extensions.items() if values}
        if extensions:
            settings["extensions"] = extensions
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
