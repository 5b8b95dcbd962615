"""
Exceptions raised by the evidence pipeline core.

Errors raised inside a flow element are not wrapped: they are stored
as-is in the FlowData error map. The classes here cover misuse of the
core itself.
"""

from __future__ import annotations

from typing import Optional


class PipelineError(Exception):
    """Base class for all errors raised by the pipeline core."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(PipelineError):
    """Raised when an evidence batch is not a key/value mapping."""


class AlreadyProcessedError(PipelineError):
    """Raised when process() is called on a FlowData a second time."""


class ElementNotFoundError(PipelineError, KeyError):
    """Raised when a pipeline has no flow element with the requested key."""

    def __init__(self, message: str, element_key: Optional[str] = None) -> None:
        super().__init__(message)
        self.element_key = element_key

    def __str__(self) -> str:
        return self.message


class NoSuchResultError(PipelineError, KeyError):
    """
    Raised when a FlowData holds no result for the requested element.

    Attributes:
        element_key: Key that was looked up
        has_results: False when no element has produced data at all yet
    """

    def __init__(self, message: str, element_key: str, has_results: bool) -> None:
        super().__init__(message)
        self.element_key = element_key
        self.has_results = has_results

    def __str__(self) -> str:
        return self.message


class MalformedPropertyError(PipelineError):
    """Raised when a SetHeader property name cannot be turned into a header."""

    def __init__(self, message: str, property_name: str) -> None:
        super().__init__(message)
        self.property_name = property_name


class PropertyMissingError(PipelineError, KeyError):
    """Raised when an element data record has no such property."""

    def __init__(self, message: str, property_name: str) -> None:
        super().__init__(message)
        self.property_name = property_name

    def __str__(self) -> str:
        return self.message


class NoValueError(PipelineError):
    """Raised when reading the value of an AspectPropertyValue that has none."""
