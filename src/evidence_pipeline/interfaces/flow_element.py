"""
Flow Element Protocol.

Defines the abstract interface for flow elements. External engines (device
detection and the like) implement this contract to be hosted by a
Pipeline.

The flow element is responsible for:
    - Declaring which evidence keys it wants
    - Declaring metadata for the properties it produces
    - Writing exactly one result (or raising) when processed

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Elements are shared read-only by every FlowData of a pipeline
    - Per-request state lives on the FlowData, never on the element
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Protocol, runtime_checkable

if TYPE_CHECKING:
    from evidence_pipeline.pipeline.flow_data import FlowData
    from evidence_pipeline.pipeline.pipeline import Pipeline


@runtime_checkable
class FlowElementProtocol(Protocol):
    """Abstract interface for flow elements."""

    @property
    def data_key(self) -> str:
        """Unique, stable key for results and errors of this element."""
        ...

    def on_registration(self, pipeline: Pipeline) -> None:
        """Called once when the element is added to a pipeline."""
        ...

    def get_properties(self) -> Dict[str, Dict[str, Any]]:
        """
        Get the metadata of every property this element produces.

        Returns:
            Mapping of property name to a metadata mapping (at least "type")
        """
        ...

    def filter_evidence_key(self, key: str) -> bool:
        """Check whether this element wants the given evidence key."""
        ...

    def filter_evidence(self, flow_data: FlowData) -> Dict[str, Any]:
        """Get the evidence of a FlowData this element wants."""
        ...

    def process(self, flow_data: FlowData) -> None:
        """
        Process a FlowData.

        Reads evidence from ``flow_data.evidence`` and writes a single result
        via ``flow_data.set_result``. May raise, and may call
        ``flow_data.stop()`` to skip the remaining elements.
        """
        ...
