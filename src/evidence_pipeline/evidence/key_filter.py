"""
Evidence Key Filters.

An evidence key filter tells the pipeline which evidence keys a flow
element is interested in. Evidence nobody wants is never stored, and the
union of all filters describes the evidence a request really depends on
(useful e.g. to decide whether a response can be cached).
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Mapping, Optional

KeyPredicate = Callable[[str], bool]


class EvidenceKeyFilter:
    """
    Predicate over evidence keys.

    Accepts every key unless a predicate is supplied.
    """

    def __init__(self, predicate: Optional[KeyPredicate] = None) -> None:
        """
        Initialize filter.

        Args:
            predicate: Optional callable deciding per key
        """
        self._predicate = predicate

    def filter_evidence_key(self, key: str) -> bool:
        """Check whether the key passes the filter."""
        if self._predicate is not None:
            return bool(self._predicate(key))
        return True

    def filter_evidence(self, evidence: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Get the subset of an evidence mapping whose keys pass the filter.

        Args:
            evidence: Evidence key/value pairs

        Returns:
            New dict with only the accepted keys
        """
        return {
            key: value
            for key, value in evidence.items()
            if self.filter_evidence_key(key)
        }


class BasicListEvidenceKeyFilter(EvidenceKeyFilter):
    """Accepts an explicit list of keys, compared case-insensitively."""

    def __init__(self, keys: Iterable[str]) -> None:
        super().__init__()
        self._keys = frozenset(k.lower() for k in keys)

    @property
    def keys(self) -> frozenset:
        """Accepted keys, lowercased."""
        return self._keys

    def filter_evidence_key(self, key: str) -> bool:
        return key.lower() in self._keys
