"""
Domain Layer - Result Records.

Components:
    - ElementData: Base result record attributed to a flow element
    - ElementDataDictionary: Dict-backed result record
    - AspectPropertyValue: Value that may be missing, with a reason
"""

from evidence_pipeline.domain.element_data import (
    AspectPropertyValue,
    ElementData,
    ElementDataDictionary,
)

__all__ = [
    "AspectPropertyValue",
    "ElementData",
    "ElementDataDictionary",
]
