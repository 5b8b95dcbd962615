"""
Flow Element - Base Class for Pipeline Stages.

Engines subclass FlowElement and implement ``process_internal``. The
base class supplies the rest of FlowElementProtocol: evidence filtering,
property metadata, and registration bookkeeping.

Usage:
    class AgeElement(FlowElement):
        data_key = "age"
        properties = {"years": {"type": "int"}}

        def process_internal(self, flow_data):
            flow_data.set_result(
                ElementDataDictionary(self, {"years": 42})
            )
"""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

from evidence_pipeline.domain.element_data import ElementDataDictionary
from evidence_pipeline.evidence.key_filter import EvidenceKeyFilter

if TYPE_CHECKING:
    from evidence_pipeline.pipeline.flow_data import FlowData
    from evidence_pipeline.pipeline.pipeline import Pipeline

logger = logging.getLogger(__name__)

PropertyMetadata = Dict[str, Any]


class FlowElement:
    """
    Base flow element.

    Class attributes ``data_key`` and ``properties`` may be overridden by
    subclasses, or passed to __init__. Each instance works on its own copy
    of the property metadata, so later edits never leak across instances.
    """

    data_key: str = ""
    properties: Dict[str, PropertyMetadata] = {}

    def __init__(
        self,
        data_key: Optional[str] = None,
        properties: Optional[Mapping[str, PropertyMetadata]] = None,
        evidence_key_filter: Optional[EvidenceKeyFilter] = None,
    ) -> None:
        """
        Initialize flow element.

        Args:
            data_key: Unique key (default: the class attribute)
            properties: Property name -> metadata (default: class attribute)
            evidence_key_filter: Filter for wanted evidence (default: accept all)
        """
        if data_key is not None:
            self.data_key = data_key
        if not self.data_key:
            raise ValueError(f"{type(self).__name__} requires a non-empty data_key")

        source = properties if properties is not None else type(self).properties
        self.properties = copy.deepcopy(dict(source))
        self.evidence_key_filter = evidence_key_filter or EvidenceKeyFilter()
        self.pipelines: List[Pipeline] = []

    def on_registration(self, pipeline: Pipeline) -> None:
        """Hook called once when added to a pipeline. No-op by default."""

    def process(self, flow_data: FlowData) -> None:
        """Process a FlowData; delegates to ``process_internal``."""
        self.process_internal(flow_data)

    def process_internal(self, flow_data: FlowData) -> None:
        raise NotImplementedError(
            f"{type(self).__name__} must implement process_internal()"
        )

    def get_properties(self) -> Dict[str, PropertyMetadata]:
        """
        Get property metadata.

        Each metadata mapping carries a "name" entry holding the property's
        original-case name.

        Returns:
            Property name -> metadata
        """
        result = {}
        for name, meta in self.properties.items():
            entry = dict(meta)
            entry.setdefault("name", name)
            result[name] = entry
        return result

    def filter_evidence_key(self, key: str) -> bool:
        """Check whether this element wants an evidence key."""
        return self.evidence_key_filter.filter_evidence_key(key)

    def filter_evidence(self, flow_data: FlowData) -> Dict[str, Any]:
        """Get the evidence of a FlowData this element wants."""
        return self.evidence_key_filter.filter_evidence(flow_data.evidence.get_all())

    def update_property_list(self) -> None:
        """
        Re-index this element in every pipeline it belongs to.

        Call after changing ``properties`` post-registration, e.g. when
        properties are discovered from a remote service.
        """
        for pipeline in self.pipelines:
            pipeline.reindex_element(self)
        logger.debug(
            f"Re-indexed properties of '{self.data_key}' "
            f"in {len(self.pipelines)} pipeline(s)"
        )

    def make_element_data(self, contents: Mapping[str, Any]) -> ElementDataDictionary:
        """Build a dict-backed result record owned by this element."""
        return ElementDataDictionary(self, contents)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(data_key={self.data_key!r})"
