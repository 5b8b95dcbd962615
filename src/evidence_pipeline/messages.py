"""
Message templates for errors and log lines raised by the core.

Kept in one place so tests and callers can match on them.
"""

FLOW_DATA_PROCESSED = "FlowData already processed"

PASS_KEY_VALUE = "Must pass a mapping of evidence keys to values, got {type_name}"

NO_ELEMENT_DATA_NULL = (
    "There is no element data for '{key}' in this FlowData. "
    "No element has produced any data yet."
)

NO_ELEMENT_DATA = (
    "There is no element data for '{key}' in this FlowData. "
    "Available element data keys are: '{available}'"
)

ELEMENT_NOT_FOUND = "There is no flow element with key '{key}' in this pipeline"

PROPERTY_NOT_FOUND = "Property '{property}' not found in data for element '{key}'"

ELEMENT_DATA_NOT_FOUND = "Element '{key}' has not produced data, set header value is empty"

PROPERTY_NO_VALUE = (
    "Property '{property}' of element '{key}' has no value, "
    "set header value is empty"
)

PROPERTY_NOT_SET_HEADER = "Property '{property}' does not start with 'SetHeader'"

WRONG_PROPERTY_FORMAT = (
    "Property '{property}' is not in the expected format, i.e. "
    "SetHeader[Component][HeaderName]"
)

DUPLICATE_DATA_KEY = "A flow element with data key '{key}' is already in this pipeline"

PROCESS_ERROR = "Error occurred during processing"
