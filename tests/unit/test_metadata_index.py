"""
Unit Tests for PropertyMetadataIndex.

Test Aspects Covered:
    ✅ Business Logic: Index by field/value, purge-then-rebuild
    ✅ Edge Cases: Non-string metadata, case-insensitive lookup
    ✅ Idempotency: Repeated rebuilds with unchanged properties
"""

from __future__ import annotations

from evidence_pipeline.pipeline.metadata_index import OWNER_FIELD, PropertyMetadataIndex


class TestReindex:
    """Test cases for building the index."""

    def test_indexes_string_metadata(self) -> None:
        """
        SCENARIO: Element with typed properties
        EXPECTED: Properties found by type, attributed to the element
        """
        # Arrange
        index = PropertyMetadataIndex()

        # Act
        index.reindex("device", {"IsMobile": {"type": "Bool"}, "Model": {"type": "string"}})

        # Assert
        assert index.find("type", "bool") == {"IsMobile": "device"}
        assert index.find("TYPE", "STRING") == {"Model": "device"}

    def test_entries_carry_owner(self) -> None:
        """
        SCENARIO: Inspect a stored entry
        EXPECTED: Original metadata plus the owning element key
        """
        index = PropertyMetadataIndex()
        index.reindex("device", {"IsMobile": {"type": "bool", "category": "Device"}})

        entry = index.get_entries("category", "device")["IsMobile"]
        assert entry == {"type": "bool", "category": "Device", OWNER_FIELD: "device"}

    def test_non_string_values_skipped(self) -> None:
        """
        SCENARIO: Metadata with list and int values
        EXPECTED: Only string values indexed
        """
        index = PropertyMetadataIndex()
        index.reindex("e", {"p": {"type": "int", "weight": 3, "tags": ["a"]}})

        assert "type" in index
        assert "weight" not in index
        assert "tags" not in index
        assert len(index) == 1

    def test_missing_field_or_value(self) -> None:
        """
        SCENARIO: Query something never indexed
        EXPECTED: Empty result, no error
        """
        index = PropertyMetadataIndex()
        index.reindex("e", {"p": {"type": "int"}})

        assert index.find("category", "x") == {}
        assert index.find("type", "float") == {}


class TestPurgeAndRebuild:
    """Test cases for purge-then-rebuild."""

    def test_rebuild_replaces_old_entries(self) -> None:
        """
        SCENARIO: Element's property type changes, then re-indexed
        EXPECTED: Old entry gone, new entry present
        """
        # Arrange
        index = PropertyMetadataIndex()
        index.reindex("e", {"p": {"type": "int"}})

        # Act
        index.reindex("e", {"p": {"type": "float"}})

        # Assert
        assert index.find("type", "int") == {}
        assert index.find("type", "float") == {"p": "e"}

    def test_purge_only_touches_owner(self) -> None:
        """
        SCENARIO: Two elements indexed, one purged
        EXPECTED: Other element's entries remain
        """
        index = PropertyMetadataIndex()
        index.reindex("a", {"x": {"type": "int"}})
        index.reindex("b", {"y": {"type": "int"}})

        removed = index.purge("a")

        assert removed == 1
        assert index.find("type", "int") == {"y": "b"}

    def test_rebuild_is_idempotent(self) -> None:
        """
        SCENARIO: Rebuild twice with unchanged properties
        EXPECTED: Index identical to a single rebuild
        """
        # Arrange
        properties = {
            "x": {"type": "int", "category": "numbers"},
            "y": {"type": "string"},
        }
        once = PropertyMetadataIndex()
        once.reindex("a", properties)
        twice = PropertyMetadataIndex()
        twice.reindex("a", properties)

        # Act
        twice.reindex("a", properties)

        # Assert
        assert twice.snapshot() == once.snapshot()
        assert len(twice) == len(once)

    def test_purge_removes_empty_buckets(self) -> None:
        """
        SCENARIO: Only element purged
        EXPECTED: Index empty, no leftover field buckets
        """
        index = PropertyMetadataIndex()
        index.reindex("a", {"x": {"type": "int"}})

        index.purge("a")

        assert index.snapshot() == {}
        assert "type" not in index
