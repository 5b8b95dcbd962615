"""
Set Header Element - Response Header Aggregation.

Builds response header values from the "SetHeader" properties of other
flow elements. A property named ``SetHeader<Component><HeaderName>``
contributes its value to the response header ``<HeaderName>``, e.g.
``SetHeaderBrowserAccept-CH`` contributes to ``Accept-CH``. Values from
several elements for the same header are joined with commas.

Must run after every element whose properties it reads, so it is
appended last (PipelineBuilder does this).
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Dict, List, Optional

from evidence_pipeline import messages
from evidence_pipeline.domain.element_data import AspectPropertyValue, ElementDataDictionary
from evidence_pipeline.exceptions import MalformedPropertyError, NoSuchResultError
from evidence_pipeline.pipeline.flow_element import FlowElement

if TYPE_CHECKING:
    from evidence_pipeline.pipeline.flow_data import FlowData
    from evidence_pipeline.pipeline.pipeline import Pipeline

logger = logging.getLogger(__name__)

SET_HEADER_PREFIX = "SetHeader"
RESPONSE_HEADER_PROPERTY = "responseheaderdictionary"

# Values engines use to say "nothing to send"
NO_VALUE_MARKERS = ("Unknown", "noValue")

# A run starts at an upper-case letter; an acronym that is not the start of
# a capitalised word stays with the run before it ("AcceptCH" + "UaFull")
_UPPERCASE_RUN = re.compile(r"[A-Z][^A-Z]*(?:[A-Z]+(?![^A-Z]))?")

# element data key -> SetHeader property names
SetHeaderProperties = Dict[str, List[str]]


class SetHeaderElement(FlowElement):
    """Aggregates SetHeader properties into a response header dictionary."""

    data_key = "set-headers"
    properties = {
        RESPONSE_HEADER_PROPERTY: {
            "type": "dict",
            "description": "Response header name -> value to set",
        },
    }

    def __init__(self) -> None:
        super().__init__()
        self._set_header_properties: Optional[SetHeaderProperties] = None

    def process_internal(self, flow_data: FlowData) -> None:
        if self._set_header_properties is None:
            self._set_header_properties = self.get_set_header_properties(
                flow_data.pipeline
            )

        response_headers = self.get_response_header_value(
            flow_data, self._set_header_properties
        )
        flow_data.set_result(
            ElementDataDictionary(self, {RESPONSE_HEADER_PROPERTY: response_headers})
        )

    def get_set_header_properties(self, pipeline: Pipeline) -> SetHeaderProperties:
        """
        Collect the SetHeader properties of every element in a pipeline.

        Args:
            pipeline: Pipeline to scan

        Returns:
            Element data key -> original-case SetHeader property names
        """
        found: SetHeaderProperties = {}
        for element in pipeline.flow_elements:
            names = [
                meta.get("name", key)
                for key, meta in element.get_properties().items()
                if "setheader" in key.lower()
            ]
            if names:
                found[element.data_key] = names

        logger.debug(f"SetHeader properties found: {found}")
        return found

    def get_response_header_value(
        self,
        flow_data: FlowData,
        set_header_properties: SetHeaderProperties,
    ) -> Dict[str, str]:
        """
        Build response header values from a processed FlowData.

        Args:
            flow_data: FlowData holding the SetHeader property values
            set_header_properties: Element data key -> SetHeader property names

        Returns:
            Response header name -> value

        Raises:
            MalformedPropertyError: If a property name has the wrong format
        """
        response_headers: Dict[str, str] = {}

        for element_key, property_names in set_header_properties.items():
            for property_name in property_names:
                header_name = self.get_response_header_name(property_name)
                value = self.get_property_value(flow_data, element_key, property_name)

                if header_name in response_headers:
                    response_headers[header_name] = merge_header_values(
                        response_headers[header_name], value
                    )
                else:
                    response_headers[header_name] = value

        return response_headers

    def get_property_value(
        self,
        flow_data: FlowData,
        element_key: str,
        property_name: str,
    ) -> str:
        """
        Get the value of one SetHeader property.

        Missing element data or a missing property gives an empty string and
        a warning; a "no value" marker gives an empty string and a debug line.

        Args:
            flow_data: Processed FlowData
            element_key: Data key of the element owning the property
            property_name: Name of the SetHeader property

        Returns:
            Property value as a string, or ""
        """
        try:
            element_data = flow_data.get(element_key)
        except NoSuchResultError:
            flow_data.pipeline.log(
                "warning", messages.ELEMENT_DATA_NOT_FOUND.format(key=element_key)
            )
            return ""

        try:
            value = element_data.get(property_name)
        except KeyError:
            flow_data.pipeline.log(
                "warning",
                messages.PROPERTY_NOT_FOUND.format(
                    property=property_name.lower(), key=element_key
                ),
            )
            return ""

        if isinstance(value, AspectPropertyValue):
            value = value.value if value.has_value else None

        if value is None or value in NO_VALUE_MARKERS:
            flow_data.pipeline.log(
                "debug",
                messages.PROPERTY_NO_VALUE.format(
                    property=property_name, key=element_key
                ),
            )
            return ""
        return str(value)

    @staticmethod
    def get_response_header_name(property_name: str) -> str:
        """
        Derive the response header name from a SetHeader property name.

        The "SetHeader" prefix and the component name (the first run that
        starts with an upper-case letter) are removed, so
        "SetHeaderBrowserAccept-CH" gives "Accept-CH" and
        "SetHeaderAcceptCHUaFull" gives "UaFull".

        A header name written entirely in capitals is taken as part of the
        component name, so "SetHeaderBrowserUA" and "SetHeaderDeviceDPR" are
        rejected like "SetHeaderAcceptCH".

        Raises:
            MalformedPropertyError: If the name does not start with
                "SetHeader", has no upper-case component name, or has
                nothing after the component name
        """
        if not property_name.startswith(SET_HEADER_PREFIX):
            raise MalformedPropertyError(
                messages.PROPERTY_NOT_SET_HEADER.format(property=property_name),
                property_name=property_name,
            )

        remainder = property_name[len(SET_HEADER_PREFIX):]
        if not remainder[:1].isupper():
            raise MalformedPropertyError(
                messages.WRONG_PROPERTY_FORMAT.format(property=property_name),
                property_name=property_name,
            )

        parts = _UPPERCASE_RUN.findall(remainder)
        if len(parts) <= 1:
            raise MalformedPropertyError(
                messages.WRONG_PROPERTY_FORMAT.format(property=property_name),
                property_name=property_name,
            )

        return remainder[len(parts[0]):]


def merge_header_values(current: str, addition: str) -> str:
    """
    Join two values of the same response header.

    Empty values contribute nothing: "" + "X" -> "X", "X" + "" -> "X",
    "X" + "Y" -> "X,Y".
    """
    if not current:
        return addition
    if not addition:
        return current
    return f"{current},{addition}"
