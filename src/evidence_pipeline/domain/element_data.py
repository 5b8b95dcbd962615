"""
Element Data - Typed Result Records.

A flow element writes exactly one ElementData to a FlowData. Property
names are case-insensitive: they are stored and looked up lowercase.

Classes:
    - AspectPropertyValue: Value that may be absent, with a reason
    - ElementData: Base result record attributed to its flow element
    - ElementDataDictionary: Result record backed by a plain dict
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterator, Mapping, Optional

from evidence_pipeline import messages
from evidence_pipeline.exceptions import NoValueError, PropertyMissingError

if TYPE_CHECKING:
    from evidence_pipeline.interfaces.flow_element import FlowElementProtocol

DEFAULT_NO_VALUE_MESSAGE = "No value has been set for this property"

_UNSET = object()


class AspectPropertyValue:
    """
    Property value that may be missing.

    Engines use this to say "we looked, but there is no value" while
    still giving a reason. Reading ``value`` when ``has_value`` is False
    raises NoValueError carrying that reason.
    """

    __slots__ = ("_value", "_no_value_message")

    def __init__(
        self,
        value: Any = _UNSET,
        no_value_message: Optional[str] = None,
    ) -> None:
        """
        Initialize property value.

        Args:
            value: The value; omit it to create a value-less instance
            no_value_message: Reason reported when there is no value
        """
        self._value = value
        self._no_value_message = no_value_message or DEFAULT_NO_VALUE_MESSAGE

    @classmethod
    def no_value(cls, message: Optional[str] = None) -> "AspectPropertyValue":
        """Create an instance without a value."""
        return cls(no_value_message=message)

    @property
    def has_value(self) -> bool:
        return self._value is not _UNSET

    @property
    def value(self) -> Any:
        if not self.has_value:
            raise NoValueError(self._no_value_message)
        return self._value

    @property
    def no_value_message(self) -> Optional[str]:
        """Reason for the missing value, None when a value is present."""
        if self.has_value:
            return None
        return self._no_value_message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AspectPropertyValue):
            return NotImplemented
        return self._value == other._value and (
            self.has_value or self._no_value_message == other._no_value_message
        )

    def __hash__(self) -> int:
        return hash((self.has_value, self._no_value_message if not self.has_value else None))

    def __repr__(self) -> str:
        if self.has_value:
            return f"AspectPropertyValue({self._value!r})"
        return f"AspectPropertyValue(no_value={self._no_value_message!r})"


class ElementData:
    """
    Result record produced by one flow element.

    Subclasses implement ``get_internal`` for a lowercased key.
    """

    def __init__(self, flow_element: FlowElementProtocol) -> None:
        self.flow_element = flow_element

    @property
    def data_key(self) -> str:
        """Data key of the owning flow element."""
        return self.flow_element.data_key

    def get(self, key: str) -> Any:
        """
        Get a property value by name (case-insensitive).

        Raises:
            PropertyMissingError: If the record has no such property
        """
        return self.get_internal(key.lower())

    def get_internal(self, key: str) -> Any:
        raise NotImplementedError

    def get_properties(self) -> Dict[str, Dict[str, Any]]:
        """Property metadata of the owning flow element."""
        return self.flow_element.get_properties()

    def __getitem__(self, key: str) -> Any:
        return self.get(key)


class ElementDataDictionary(ElementData):
    """Result record backed by a dict of property name to value."""

    def __init__(
        self,
        flow_element: FlowElementProtocol,
        contents: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(flow_element)
        self._contents: Dict[str, Any] = {
            key.lower(): value for key, value in (contents or {}).items()
        }

    def get_internal(self, key: str) -> Any:
        try:
            return self._contents[key]
        except KeyError:
            raise PropertyMissingError(
                messages.PROPERTY_NOT_FOUND.format(
                    property=key, key=self.flow_element.data_key
                ),
                property_name=key,
            ) from None

    def as_dict(self) -> Dict[str, Any]:
        """Snapshot of the record's contents."""
        return dict(self._contents)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._contents

    def __iter__(self) -> Iterator[str]:
        return iter(self._contents)

    def __len__(self) -> int:
        return len(self._contents)

    def __repr__(self) -> str:
        return (
            f"ElementDataDictionary(element={self.flow_element.data_key!r}, "
            f"properties={sorted(self._contents)})"
        )
