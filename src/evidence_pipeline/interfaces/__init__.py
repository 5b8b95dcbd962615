"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) the
pipeline core depends on. Concrete implementations live in the
``adapters`` package, or are supplied by the engines that plug into a
pipeline.

Protocols:
    - FlowElementProtocol: Contract every flow element fulfils
    - LogSinkProtocol: Leveled log sink with a minimum-level gate
"""

from evidence_pipeline.interfaces.flow_element import FlowElementProtocol
from evidence_pipeline.interfaces.log_sink import LogLevel, LogSinkProtocol

__all__ = [
    "FlowElementProtocol",
    "LogLevel",
    "LogSinkProtocol",
]
