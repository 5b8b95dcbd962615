"""
Evidence Pipeline - Request-Scoped Evidence Processing.

A composable chain of pluggable flow elements. Each element reads evidence
(key/value facts about an inbound request, such as headers, cookies and
query parameters) and contributes typed properties to a shared,
per-request FlowData. Enrichment engines such as device detectors plug
into this core.

Architecture:
    - Ports & Adapters: protocols in ``interfaces``, sinks in ``adapters``
    - Fixed, caller-declared element order; single pass per request
    - Per-element error isolation with policy-controlled re-raising
    - Configuration via Pydantic models, loadable from YAML

Main Components:
    - evidence: Evidence store and key filters
    - domain: Result records (ElementData, AspectPropertyValue)
    - pipeline: Pipeline, FlowData, FlowElement, SetHeaderElement
    - adapters: Log sinks
    - config: Settings models and loader

Example:
    >>> from evidence_pipeline import PipelineBuilder
    >>> pipeline = PipelineBuilder().add(MyElement()).build()
    >>> flow_data = pipeline.create_flow_data()
    >>> flow_data.evidence.set("header.user-agent", "Mozilla/5.0")
    >>> flow_data.process()
    >>> flow_data.get("set-headers").get("responseheaderdictionary")

"""

import logging

from evidence_pipeline.adapters.log_sinks import (
    ConsoleLogSink,
    LogSink,
    MemoryLogSink,
    StdlibLogSink,
)
from evidence_pipeline.config.loader import load_settings, settings_from_dict
from evidence_pipeline.config.models import PipelineSettings
from evidence_pipeline.domain.element_data import (
    AspectPropertyValue,
    ElementData,
    ElementDataDictionary,
)
from evidence_pipeline.evidence.key_filter import (
    BasicListEvidenceKeyFilter,
    EvidenceKeyFilter,
)
from evidence_pipeline.evidence.store import ABSENT, Evidence
from evidence_pipeline.exceptions import (
    AlreadyProcessedError,
    ElementNotFoundError,
    InvalidInputError,
    MalformedPropertyError,
    NoSuchResultError,
    NoValueError,
    PipelineError,
    PropertyMissingError,
)
from evidence_pipeline.interfaces.log_sink import LogLevel
from evidence_pipeline.pipeline.builder import PipelineBuilder
from evidence_pipeline.pipeline.flow_data import FlowData
from evidence_pipeline.pipeline.flow_element import FlowElement
from evidence_pipeline.pipeline.pipeline import Pipeline
from evidence_pipeline.pipeline.set_header import SetHeaderElement

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Evidence Pipeline.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import evidence_pipeline
        >>> evidence_pipeline.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("evidence_pipeline").setLevel(level)


__all__ = [
    "ABSENT",
    "AlreadyProcessedError",
    "AspectPropertyValue",
    "BasicListEvidenceKeyFilter",
    "ConsoleLogSink",
    "ElementData",
    "ElementDataDictionary",
    "ElementNotFoundError",
    "Evidence",
    "EvidenceKeyFilter",
    "FlowData",
    "FlowElement",
    "InvalidInputError",
    "LogLevel",
    "LogSink",
    "MalformedPropertyError",
    "MemoryLogSink",
    "NoSuchResultError",
    "NoValueError",
    "Pipeline",
    "PipelineBuilder",
    "PipelineError",
    "PipelineSettings",
    "PropertyMissingError",
    "SetHeaderElement",
    "StdlibLogSink",
    "configure_logging",
    "load_settings",
    "settings_from_dict",
]
