"""
Evidence - Per-Request Evidence Store.

Holds the flat key/value evidence for one FlowData. Writes are gated by
the evidence key filters of the pipeline's flow elements.

Design Notes:
    - A key is stored when the first element (in pipeline order) accepts it
    - Keys nobody accepts are dropped without error
    - get() never raises; a missing key returns the ABSENT sentinel
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Dict

from evidence_pipeline import messages
from evidence_pipeline.exceptions import InvalidInputError

if TYPE_CHECKING:
    from evidence_pipeline.pipeline.flow_data import FlowData

logger = logging.getLogger(__name__)


class _Absent:
    """Marker for evidence that was never set."""

    _instance = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


class Evidence:
    """Evidence container owned by a single FlowData."""

    def __init__(self, flow_data: FlowData) -> None:
        """
        Initialize evidence store.

        Args:
            flow_data: The FlowData this store belongs to
        """
        self._flow_data = flow_data
        self._evidence: Dict[str, Any] = {}

    def set(self, key: str, value: Any) -> bool:
        """
        Store a piece of evidence if any flow element wants it.

        Args:
            key: Namespaced evidence key, e.g. "header.user-agent"
            value: Evidence value

        Returns:
            True if the evidence was stored
        """
        for element in self._flow_data.pipeline.flow_elements:
            if element.filter_evidence_key(key):
                self._evidence[key] = value
                return True

        logger.debug(f"Evidence '{key}' dropped: no flow element accepts it")
        return False

    def set_many(self, evidence: Mapping[str, Any]) -> None:
        """
        Store several pieces of evidence, in the caller's order.

        A non-mapping argument is recorded as an error on the FlowData under
        the "core" key; nothing is stored in that case.

        Args:
            evidence: Evidence key/value pairs
        """
        if not isinstance(evidence, Mapping):
            self._flow_data.set_error(
                "core",
                InvalidInputError(
                    messages.PASS_KEY_VALUE.format(type_name=type(evidence).__name__)
                ),
            )
            return

        for key, value in evidence.items():
            self.set(key, value)

    def get(self, key: str) -> Any:
        """
        Get a piece of evidence.

        Returns:
            The value, or ABSENT if the key was never stored
        """
        return self._evidence.get(key, ABSENT)

    def get_all(self) -> Dict[str, Any]:
        """Get a snapshot of all stored evidence."""
        return dict(self._evidence)

    def __contains__(self, key: object) -> bool:
        return key in self._evidence

    def __len__(self) -> int:
        return len(self._evidence)

    def __repr__(self) -> str:
        return f"Evidence(keys={sorted(self._evidence)})"
