"""
Settings Loader - Pipeline Options from YAML.

Reads a settings document and validates its ``pipeline`` section into
PipelineSettings. Flow elements are always constructed by the caller.

Example file:
    version: "1.0"
    pipeline:
      logLevel: warning
      suppressProcessErrors: true
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Union

import yaml

from evidence_pipeline.config.models import PipelineConfigFile, PipelineSettings


def load_settings(config_path: Union[str, Path]) -> PipelineSettings:
    """
    Load pipeline settings from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the settings are invalid
    """
    with open(config_path, encoding="utf-8") as f:
        document = yaml.safe_load(f) or {}
    return settings_from_dict(document)


def settings_from_dict(document: Mapping[str, Any]) -> PipelineSettings:
    """Validate a settings document already parsed into a mapping."""
    return PipelineConfigFile.model_validate(document).pipeline
