"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the abstract
interfaces defined in the interfaces package.

Log Sinks:
    - LogSink: No-op base sink, the pipeline default
    - StdlibLogSink: Forwards to the stdlib logging module
    - MemoryLogSink: In-memory records for tests
    - ConsoleLogSink: Simple console output
"""

from evidence_pipeline.adapters.log_sinks import (
    ConsoleLogSink,
    LogSink,
    MemoryLogSink,
    StdlibLogSink,
)

__all__ = [
    "ConsoleLogSink",
    "LogSink",
    "MemoryLogSink",
    "StdlibLogSink",
]
