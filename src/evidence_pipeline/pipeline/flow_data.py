"""
Flow Data - Per-Request Container and Execution State Machine.

A FlowData is created by a Pipeline for one request. It collects the
evidence set by the caller, runs every flow element once in pipeline
order, and keeps each element's result or error.

States:
    Created -> Processed (terminal). A second process() call fails.

Error Model:
    - Errors raised by an element are caught at the element boundary,
      stored under its data key, and logged at "error" level
    - Processing continues with the next element
    - After the pass, the first stored error is re-raised unless the
      pipeline suppresses process errors
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict

from evidence_pipeline import messages
from evidence_pipeline.exceptions import AlreadyProcessedError, NoSuchResultError
from evidence_pipeline.evidence.store import Evidence

if TYPE_CHECKING:
    from evidence_pipeline.domain.element_data import ElementData
    from evidence_pipeline.interfaces.flow_element import FlowElementProtocol
    from evidence_pipeline.pipeline.pipeline import Pipeline

logger = logging.getLogger(__name__)

# Reserved error keys
CORE_ERROR_KEY = "core"
GLOBAL_ERROR_KEY = "global"


class FlowData:
    """One request's evidence, results and errors."""

    def __init__(self, pipeline: Pipeline) -> None:
        """
        Initialize flow data. Use Pipeline.create_flow_data() instead.

        Args:
            pipeline: Owning pipeline
        """
        self.pipeline = pipeline
        self.evidence = Evidence(self)
        self.data: Dict[str, ElementData] = {}
        self.errors: Dict[str, BaseException] = {}
        self._processed = False
        self._stopped = False

    @property
    def processed(self) -> bool:
        return self._processed

    @property
    def stopped(self) -> bool:
        return self._stopped

    def process(self) -> FlowData:
        """
        Run every flow element once, in pipeline order.

        Returns:
            self, for chaining

        Raises:
            AlreadyProcessedError: If this FlowData was processed before
            Exception: The first element error, unless suppressed
        """
        if self._processed:
            # Results and errors of the first pass stay untouched
            self.pipeline.log(
                "error",
                f"{messages.PROCESS_ERROR} of {GLOBAL_ERROR_KEY}. \n"
                f"{messages.FLOW_DATA_PROCESSED}",
            )
            raise AlreadyProcessedError(messages.FLOW_DATA_PROCESSED)

        for element in self.pipeline.flow_elements:
            if self._stopped:
                logger.debug(f"Processing stopped before '{element.data_key}'")
                break
            try:
                element.process(self)
            except Exception as e:
                self.set_error(element.data_key, e)

        self._processed = True

        if self.errors and not self.pipeline.suppress_process_errors:
            raise next(iter(self.errors.values()))

        return self

    def stop(self) -> None:
        """Skip every element after the one currently running."""
        self._stopped = True

    def get(self, key: str) -> ElementData:
        """
        Get the result record of a flow element.

        Args:
            key: Data key of the element

        Raises:
            NoSuchResultError: If the element has not produced a result
        """
        if key in self.data:
            return self.data[key]

        if not self.data:
            message = messages.NO_ELEMENT_DATA_NULL.format(key=key)
        else:
            message = messages.NO_ELEMENT_DATA.format(
                key=key, available=",".join(self.data)
            )
        raise NoSuchResultError(message, element_key=key, has_results=bool(self.data))

    def get_from_element(self, element: FlowElementProtocol) -> ElementData:
        """Get the result record of a flow element by the element itself."""
        return self.get(element.data_key)

    def __getitem__(self, key: str) -> ElementData:
        return self.get(key)

    def get_by_metadata(self, meta_field: str, meta_value: str) -> Dict[str, Any]:
        """
        Get property values whose metadata matches a field/value pair.

        Only elements that produced a result in this FlowData contribute;
        properties that cannot be read are skipped.

        Args:
            meta_field: Metadata field, e.g. "type" (case-insensitive)
            meta_value: Metadata value, e.g. "int" (case-insensitive)

        Returns:
            Property name -> value
        """
        matches = self.pipeline.property_index.find(meta_field, meta_value)

        output: Dict[str, Any] = {}
        for property_name, element_key in matches.items():
            element_data = self.data.get(element_key)
            if element_data is None:
                continue
            try:
                output[property_name] = element_data.get(property_name)
            except Exception as e:
                logger.debug(
                    f"Skipping '{property_name}' of '{element_key}' "
                    f"in metadata query: {e}"
                )
        return output

    def set_result(self, element_data: ElementData) -> None:
        """Store a result record under its element's data key."""
        self.data[element_data.flow_element.data_key] = element_data

    set_element_data = set_result

    def set_error(self, key: str, error: BaseException) -> None:
        """
        Record an error against a key and log it at "error" level.

        Logging happens whether or not the pipeline suppresses errors.
        """
        self.errors[key] = error

        log_message = messages.PROCESS_ERROR
        if key:
            log_message = f"{log_message} of {key}. \n{error}"
        self.pipeline.log("error", log_message)

    def get_evidence_data_key(self) -> Dict[str, Any]:
        """
        Get the evidence the pipeline's elements ask for.

        Unions each element's filtered evidence in pipeline order; later
        elements win on duplicate keys.
        """
        requested: Dict[str, Any] = {}
        for element in self.pipeline.flow_elements:
            requested.update(element.filter_evidence(self))
        return requested

    def __repr__(self) -> str:
        return (
            f"FlowData(processed={self._processed}, stopped={self._stopped}, "
            f"results={list(self.data)}, errors={list(self.errors)})"
        )
