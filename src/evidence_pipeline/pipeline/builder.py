"""
Pipeline Builder - Fluent Pipeline Assembly.

Usage:
    pipeline = (
        PipelineBuilder()
        .add(DeviceElement())
        .add(LocationElement())
        .add_logger(MemoryLogSink("information"))
        .build()
    )

A SetHeaderElement is appended after the caller's elements unless
``use_set_header_properties`` is turned off, so header aggregation always
sees every other element's output.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from evidence_pipeline.config.models import PipelineSettings
from evidence_pipeline.pipeline.pipeline import Pipeline
from evidence_pipeline.pipeline.set_header import SetHeaderElement

if TYPE_CHECKING:
    from evidence_pipeline.interfaces.flow_element import FlowElementProtocol
    from evidence_pipeline.interfaces.log_sink import LogSinkProtocol

logger = logging.getLogger(__name__)


class PipelineBuilder:
    """Collects flow elements and options, then builds a Pipeline."""

    def __init__(self, settings: Optional[PipelineSettings] = None) -> None:
        """
        Initialize builder.

        Args:
            settings: Pipeline options (default: PipelineSettings())
        """
        self._settings = settings or PipelineSettings()
        self._flow_elements: List[FlowElementProtocol] = []
        self._log_sink: Optional[LogSinkProtocol] = None

    @classmethod
    def from_settings(cls, settings: PipelineSettings) -> PipelineBuilder:
        """Create a builder from loaded settings."""
        return cls(settings=settings)

    @property
    def use_set_header_properties(self) -> bool:
        return self._settings.use_set_header_properties

    @use_set_header_properties.setter
    def use_set_header_properties(self, value: bool) -> None:
        self._settings = self._settings.model_copy(
            update={"use_set_header_properties": value}
        )

    def add(self, flow_element: FlowElementProtocol) -> PipelineBuilder:
        """Append a flow element; elements run in the order added."""
        self._flow_elements.append(flow_element)
        return self

    def add_logger(self, log_sink: LogSinkProtocol) -> PipelineBuilder:
        """Use this log sink instead of the default no-op sink."""
        self._log_sink = log_sink
        return self

    def set_suppress_process_errors(self, suppress: bool) -> PipelineBuilder:
        """Choose whether process() re-raises the first element error."""
        self._settings = self._settings.model_copy(
            update={"suppress_process_errors": suppress}
        )
        return self

    def build(self) -> Pipeline:
        """
        Build the Pipeline.

        Returns:
            New Pipeline over the added elements, plus a SetHeaderElement
            when enabled
        """
        elements = list(self._flow_elements)
        if self._settings.use_set_header_properties:
            elements.append(SetHeaderElement())

        logger.debug(f"Building pipeline from {len(elements)} flow elements")
        return Pipeline(elements, settings=self._settings, log_sink=self._log_sink)
