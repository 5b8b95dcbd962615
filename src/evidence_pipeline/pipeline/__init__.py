"""
Pipeline Package - Orchestration and Per-Request Data.

This package contains the core orchestration logic: the pipeline, the
per-request FlowData, the flow element base class, the property metadata
index and the response header aggregation element.

Components:
    - Pipeline: Ordered flow elements, metadata index, log sink
    - PipelineBuilder: Fluent pipeline assembly
    - FlowData: One request's evidence, results and errors
    - FlowElement: Base class for pipeline stages
    - PropertyMetadataIndex: Reverse lookup of properties by metadata
    - SetHeaderElement: Response header aggregation

Design Principles:
    - Elements run strictly in the order given, once per FlowData
    - Element errors are isolated; the pass always completes
    - Pipelines and elements are read-only once built
"""

from evidence_pipeline.pipeline.builder import PipelineBuilder
from evidence_pipeline.pipeline.flow_data import FlowData
from evidence_pipeline.pipeline.flow_element import FlowElement
from evidence_pipeline.pipeline.metadata_index import PropertyMetadataIndex
from evidence_pipeline.pipeline.pipeline import Pipeline
from evidence_pipeline.pipeline.set_header import SetHeaderElement, merge_header_values

__all__ = [
    "FlowData",
    "FlowElement",
    "Pipeline",
    "PipelineBuilder",
    "PropertyMetadataIndex",
    "SetHeaderElement",
    "merge_header_values",
]
