"""
Configuration Models - Pydantic Models for Type-Safe Settings.

All settings are validated at load time using Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from evidence_pipeline.interfaces.log_sink import LogLevel


class PipelineSettings(BaseModel):
    """Options recognised when constructing a Pipeline."""

    log_level: str = Field(
        default="error",
        alias="logLevel",
        description="Minimum level of the default log sink",
    )
    suppress_process_errors: bool = Field(
        default=False,
        alias="suppressProcessErrors",
        description="If True, process() never re-raises flow element errors",
    )
    use_set_header_properties: bool = Field(
        default=True,
        alias="useSetHeaderProperties",
        description="If True, PipelineBuilder appends a SetHeaderElement",
    )

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        return LogLevel.parse(value).label


class PipelineConfigFile(BaseModel):
    """Root document of a settings file."""

    version: str = "1.0"
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)

    model_config = {"populate_by_name": True}
