"""
Configuration Package - Pipeline Settings.

Components:
    - PipelineSettings: Validated pipeline options
    - load_settings / settings_from_dict: YAML file or mapping to settings
"""

from evidence_pipeline.config.loader import load_settings, settings_from_dict
from evidence_pipeline.config.models import PipelineConfigFile, PipelineSettings

__all__ = [
    "PipelineConfigFile",
    "PipelineSettings",
    "load_settings",
    "settings_from_dict",
]
