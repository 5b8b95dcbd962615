"""
Evidence Package - Request Evidence and Key Filtering.

Components:
    - Evidence: Per-request evidence store gated by element filters
    - EvidenceKeyFilter: Per-element predicate over evidence keys
    - BasicListEvidenceKeyFilter: Filter accepting a fixed list of keys
    - ABSENT: Sentinel returned for evidence that was never set
"""

from evidence_pipeline.evidence.key_filter import (
    BasicListEvidenceKeyFilter,
    EvidenceKeyFilter,
)
from evidence_pipeline.evidence.store import ABSENT, Evidence

__all__ = [
    "ABSENT",
    "BasicListEvidenceKeyFilter",
    "Evidence",
    "EvidenceKeyFilter",
]
