"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from evidence_pipeline.adapters.log_sinks import MemoryLogSink
from evidence_pipeline.config.models import PipelineSettings
from evidence_pipeline.pipeline.builder import PipelineBuilder
from evidence_pipeline.pipeline.pipeline import Pipeline
from tests.fixtures.elements import (
    ErrorElement,
    ExampleFlowElement1,
    ExampleFlowElement2,
    StopElement,
)


@pytest.fixture
def sample_settings_path() -> Path:
    """Path to sample settings file."""
    return Path(__file__).parent / "fixtures" / "sample_settings.yaml"


@pytest.fixture
def memory_sink() -> MemoryLogSink:
    """Log sink that records everything from trace upwards."""
    return MemoryLogSink("trace")


@pytest.fixture
def suppressing_settings() -> PipelineSettings:
    """Settings that keep element errors out of process()."""
    return PipelineSettings(suppress_process_errors=True)


@pytest.fixture
def example_pipeline(memory_sink: MemoryLogSink) -> Pipeline:
    """
    example1 -> stop -> example2 -> error, errors suppressed.

    example2 and error never run because of the stop element.
    """
    return (
        PipelineBuilder()
        .add(ExampleFlowElement1())
        .add(StopElement())
        .add(ExampleFlowElement2())
        .add(ErrorElement())
        .add_logger(memory_sink)
        .set_suppress_process_errors(True)
        .build()
    )


@pytest.fixture
def error_pipeline(memory_sink: MemoryLogSink) -> Pipeline:
    """example1 -> error, no SetHeader element, errors suppressed."""
    return Pipeline(
        [ExampleFlowElement1(), ErrorElement()],
        settings=PipelineSettings(
            suppress_process_errors=True, use_set_header_properties=False
        ),
        log_sink=memory_sink,
    )
