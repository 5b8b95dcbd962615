"""
Pipeline - Ordered Flow Elements and FlowData Factory.

A Pipeline holds an ordered, fixed list of flow elements, the property
metadata index over all of them, and the log sink. It creates FlowData
objects, each carrying one request through the elements.

Thread Safety:
    Construction and reindex_element() take an internal lock. Reads
    (create_flow_data, get_element, FlowData.process) do not; callers must
    not reindex while FlowData objects are being processed.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import TYPE_CHECKING, Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from evidence_pipeline import messages
from evidence_pipeline.adapters.log_sinks import LogSink
from evidence_pipeline.config.models import PipelineSettings
from evidence_pipeline.exceptions import ElementNotFoundError
from evidence_pipeline.interfaces.log_sink import LevelLike, LogSinkProtocol
from evidence_pipeline.pipeline.flow_data import FlowData
from evidence_pipeline.pipeline.metadata_index import PropertyMetadataIndex

if TYPE_CHECKING:
    from evidence_pipeline.interfaces.flow_element import FlowElementProtocol

logger = logging.getLogger(__name__)

SettingsLike = Union[PipelineSettings, Mapping[str, Any], None]


class Pipeline:
    """Ordered flow elements plus the shared metadata index and log sink."""

    def __init__(
        self,
        flow_elements: Iterable[FlowElementProtocol],
        settings: SettingsLike = None,
        log_sink: Optional[LogSinkProtocol] = None,
    ) -> None:
        """
        Build the pipeline and register every element, in order.

        Args:
            flow_elements: Elements in execution order
            settings: PipelineSettings, or a mapping validated into one.
                      A "logSink"/"log_sink" entry in a mapping is used as
                      the log sink when none is passed explicitly.
            log_sink: Log sink (default: no-op sink at settings.log_level)

        Raises:
            ValueError: If two elements share a data key
            ValidationError: If the settings mapping is invalid
        """
        if isinstance(settings, Mapping):
            options = dict(settings)
            sink_option = options.pop("logSink", None)
            sink_option = options.pop("log_sink", None) or sink_option
            log_sink = log_sink or sink_option
            settings = PipelineSettings.model_validate(options)

        self._settings = settings or PipelineSettings()
        self._log_sink = log_sink or LogSink(self._settings.log_level)
        self._property_index = PropertyMetadataIndex()
        self._elements_by_key: Dict[str, FlowElementProtocol] = {}
        self._lock = RLock()

        with self._lock:
            elements = list(flow_elements)
            self._flow_elements: Tuple[FlowElementProtocol, ...] = tuple(elements)

            for element in elements:
                if element.data_key in self._elements_by_key:
                    raise ValueError(
                        messages.DUPLICATE_DATA_KEY.format(key=element.data_key)
                    )
                self._elements_by_key[element.data_key] = element

                back_refs = getattr(element, "pipelines", None)
                if isinstance(back_refs, list):
                    back_refs.append(self)

                element.on_registration(self)
                self.reindex_element(element)

        logger.info(
            f"Pipeline built with {len(self._flow_elements)} flow elements: "
            f"{[e.data_key for e in self._flow_elements]}"
        )

    @property
    def flow_elements(self) -> Tuple[FlowElementProtocol, ...]:
        """Flow elements in execution order."""
        return self._flow_elements

    @property
    def settings(self) -> PipelineSettings:
        return self._settings

    @property
    def suppress_process_errors(self) -> bool:
        """If True, FlowData.process() does not re-raise element errors."""
        return self._settings.suppress_process_errors

    @property
    def log_sink(self) -> LogSinkProtocol:
        return self._log_sink

    @property
    def property_index(self) -> PropertyMetadataIndex:
        """Reverse index of property metadata across all elements."""
        return self._property_index

    def create_flow_data(self) -> FlowData:
        """Create a fresh FlowData for one request."""
        return FlowData(self)

    def get_element(self, key: str) -> FlowElementProtocol:
        """
        Get a flow element by data key.

        Raises:
            ElementNotFoundError: If no element has this key
        """
        try:
            return self._elements_by_key[key]
        except KeyError:
            raise ElementNotFoundError(
                messages.ELEMENT_NOT_FOUND.format(key=key), element_key=key
            ) from None

    def reindex_element(self, element: FlowElementProtocol) -> None:
        """
        Rebuild the metadata index entries of one element.

        Purges everything the element contributed, then re-inserts from its
        current get_properties(). Safe to call repeatedly.
        """
        with self._lock:
            self._property_index.reindex(element.data_key, element.get_properties())

    def log(self, level: LevelLike, message: str) -> None:
        """Log through the pipeline's log sink."""
        self._log_sink.log(level, message)

    def __contains__(self, key: object) -> bool:
        return key in self._elements_by_key

    def __len__(self) -> int:
        return len(self._flow_elements)

    def __repr__(self) -> str:
        return f"Pipeline(elements={[e.data_key for e in self._flow_elements]})"
