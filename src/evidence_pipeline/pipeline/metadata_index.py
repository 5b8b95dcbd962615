"""
Property Metadata Index - Reverse Lookup of Properties by Metadata.

Maps (metadata field, metadata value) to the properties carrying that
metadata and the flow element that owns each of them. Backs
FlowData.get_by_metadata(), e.g. "all properties of type int".

Layout:
    field (lowercase) -> value (lowercase) -> property name -> metadata

Every stored metadata entry carries an extra "flow_element" item with the
owning element's data key.

Design Notes:
    - Only string metadata values are indexed
    - Re-indexing an element purges its entries first, then re-inserts
    - Buckets left empty by a purge are removed, so rebuilds are idempotent
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

logger = logging.getLogger(__name__)

OWNER_FIELD = "flow_element"

IndexEntries = Dict[str, Dict[str, Any]]


class PropertyMetadataIndex:
    """Reverse index from metadata field/value to properties."""

    def __init__(self) -> None:
        self._index: Dict[str, Dict[str, IndexEntries]] = {}

    def reindex(
        self,
        data_key: str,
        properties: Mapping[str, Mapping[str, Any]],
    ) -> None:
        """
        Replace every entry owned by an element with its current properties.

        Args:
            data_key: Data key of the owning element
            properties: Property name -> metadata mapping
        """
        removed = self.purge(data_key)

        added = 0
        for property_name, metadata in properties.items():
            entry = dict(metadata)
            entry[OWNER_FIELD] = data_key
            for meta_field, meta_value in metadata.items():
                if not isinstance(meta_value, str):
                    continue
                field_bucket = self._index.setdefault(meta_field.lower(), {})
                value_bucket = field_bucket.setdefault(meta_value.lower(), {})
                value_bucket[property_name] = entry
                added += 1

        logger.debug(
            f"Indexed '{data_key}': removed {removed}, added {added} entries"
        )

    def purge(self, data_key: str) -> int:
        """
        Remove every entry owned by an element.

        Args:
            data_key: Data key of the owning element

        Returns:
            Number of entries removed
        """
        removed = 0
        for meta_field in list(self._index):
            field_bucket = self._index[meta_field]
            for meta_value in list(field_bucket):
                value_bucket = field_bucket[meta_value]
                for property_name in [
                    name
                    for name, entry in value_bucket.items()
                    if entry[OWNER_FIELD] == data_key
                ]:
                    del value_bucket[property_name]
                    removed += 1
                if not value_bucket:
                    del field_bucket[meta_value]
            if not field_bucket:
                del self._index[meta_field]
        return removed

    def find(self, meta_field: str, meta_value: str) -> Dict[str, str]:
        """
        Find properties carrying a metadata value.

        Args:
            meta_field: Metadata field name (case-insensitive)
            meta_value: Metadata value (case-insensitive)

        Returns:
            Property name -> owning element data key
        """
        bucket = self._index.get(meta_field.lower(), {}).get(str(meta_value).lower(), {})
        return {name: entry[OWNER_FIELD] for name, entry in bucket.items()}

    def get_entries(self, meta_field: str, meta_value: str) -> IndexEntries:
        """Copy of the full metadata entries for a field/value pair."""
        bucket = self._index.get(meta_field.lower(), {}).get(str(meta_value).lower(), {})
        return {name: dict(entry) for name, entry in bucket.items()}

    def snapshot(self) -> Dict[str, Dict[str, IndexEntries]]:
        """Deep copy of the whole index, for inspection and comparison."""
        return {
            meta_field: {
                meta_value: {name: dict(entry) for name, entry in bucket.items()}
                for meta_value, bucket in values.items()
            }
            for meta_field, values in self._index.items()
        }

    def __contains__(self, meta_field: object) -> bool:
        return isinstance(meta_field, str) and meta_field.lower() in self._index

    def __len__(self) -> int:
        return sum(
            len(bucket) for values in self._index.values() for bucket in values.values()
        )
