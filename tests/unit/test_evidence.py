"""
Unit Tests for Evidence.

Test Aspects Covered:
    ✅ Business Logic: Filter-gated writes, first-acceptance rule
    ✅ Edge Cases: Falsy values, overwrites, unknown keys
    ✅ Error Handling: Non-mapping batches
    ✅ State: Snapshots are not live views
"""

from __future__ import annotations

from evidence_pipeline.evidence.store import ABSENT
from evidence_pipeline.exceptions import InvalidInputError
from evidence_pipeline.pipeline.pipeline import Pipeline
from tests.fixtures.elements import (
    ExampleFlowElement1,
    ExampleFlowElement2,
    RecordingElement,
)


def _pipeline(*elements) -> Pipeline:
    return Pipeline(list(elements), settings={"suppressProcessErrors": True})


class TestEvidenceSet:
    """Test cases for filter-gated evidence writes."""

    def test_accepted_key_is_stored(self) -> None:
        """
        SCENARIO: Key accepted by an element's filter
        EXPECTED: Value stored and returned by get()
        """
        # Arrange
        flow_data = _pipeline(ExampleFlowElement1()).create_flow_data()

        # Act
        stored = flow_data.evidence.set("header.user-agent", "test")

        # Assert
        assert stored is True
        assert flow_data.evidence.get("header.user-agent") == "test"

    def test_rejected_key_is_dropped(self) -> None:
        """
        SCENARIO: Key no element accepts
        EXPECTED: Silently dropped, absent from get_all()
        """
        # Arrange
        flow_data = _pipeline(ExampleFlowElement1()).create_flow_data()

        # Act
        stored = flow_data.evidence.set("header.other-evidence", "test")

        # Assert
        assert stored is False
        assert flow_data.evidence.get("header.other-evidence") is ABSENT
        assert "header.other-evidence" not in flow_data.evidence.get_all()
        assert not flow_data.errors

    def test_key_accepted_by_any_element(self) -> None:
        """
        SCENARIO: Key accepted only by the second element
        EXPECTED: Stored
        """
        # Arrange
        flow_data = _pipeline(
            ExampleFlowElement1(), ExampleFlowElement2()
        ).create_flow_data()

        # Act
        flow_data.evidence.set("header.accept-language", "en-GB")

        # Assert
        assert flow_data.evidence.get("header.accept-language") == "en-GB"

    def test_first_accepting_element_wins(self) -> None:
        """
        SCENARIO: Two elements accept the same key
        EXPECTED: Filters checked in order, stops at the first acceptance
        """
        # Arrange
        first = RecordingElement("first", accepted_prefix="header.")
        second = RecordingElement("second", accepted_prefix="header.")
        checked = []
        original = second.evidence_key_filter.filter_evidence_key
        second.evidence_key_filter.filter_evidence_key = lambda key: (
            checked.append(key) or original(key)
        )
        flow_data = _pipeline(first, second).create_flow_data()

        # Act
        flow_data.evidence.set("header.user-agent", "test")

        # Assert
        assert flow_data.evidence.get_all() == {"header.user-agent": "test"}
        assert checked == []

    def test_later_set_overwrites(self) -> None:
        """
        SCENARIO: Same key set twice
        EXPECTED: Later value wins
        """
        # Arrange
        flow_data = _pipeline(ExampleFlowElement1()).create_flow_data()

        # Act
        flow_data.evidence.set("header.user-agent", "first")
        flow_data.evidence.set("header.user-agent", "second")

        # Assert
        assert flow_data.evidence.get("header.user-agent") == "second"
        assert len(flow_data.evidence) == 1


class TestEvidenceSetMany:
    """Test cases for batch evidence writes."""

    def test_applies_each_entry(self) -> None:
        """
        SCENARIO: Mapping with accepted and rejected keys
        EXPECTED: Only accepted keys stored
        """
        # Arrange
        flow_data = _pipeline(
            ExampleFlowElement1(), ExampleFlowElement2()
        ).create_flow_data()

        # Act
        flow_data.evidence.set_many(
            {
                "header.user-agent": "test",
                "header.accept-language": "en",
                "cookie.session": "abc",
            }
        )

        # Assert
        assert flow_data.evidence.get_all() == {
            "header.user-agent": "test",
            "header.accept-language": "en",
        }

    def test_non_mapping_records_core_error(self) -> None:
        """
        SCENARIO: A list is passed instead of a mapping
        EXPECTED: InvalidInputError recorded under "core", nothing stored
        """
        # Arrange
        flow_data = _pipeline(ExampleFlowElement1()).create_flow_data()

        # Act
        flow_data.evidence.set_many([("header.user-agent", "test")])

        # Assert
        assert isinstance(flow_data.errors["core"], InvalidInputError)
        assert flow_data.evidence.get_all() == {}


class TestEvidenceGet:
    """Test cases for evidence reads."""

    def test_falsy_value_distinct_from_absent(self) -> None:
        """
        SCENARIO: Evidence value is 0 / empty string
        EXPECTED: get() returns the value, not ABSENT
        """
        # Arrange
        flow_data = _pipeline(RecordingElement("all")).create_flow_data()
        flow_data.evidence.set("query.count", 0)
        flow_data.evidence.set("query.name", "")

        # Act & Assert
        assert flow_data.evidence.get("query.count") == 0
        assert flow_data.evidence.get("query.count") is not ABSENT
        assert flow_data.evidence.get("query.name") == ""
        assert flow_data.evidence.get("query.missing") is ABSENT

    def test_absent_is_falsy_and_not_none(self) -> None:
        """
        SCENARIO: ABSENT sentinel
        EXPECTED: Falsy, not None
        """
        assert not ABSENT
        assert ABSENT is not None

    def test_get_all_is_snapshot(self) -> None:
        """
        SCENARIO: Caller mutates the dict returned by get_all()
        EXPECTED: Store unchanged
        """
        # Arrange
        flow_data = _pipeline(RecordingElement("all")).create_flow_data()
        flow_data.evidence.set("header.user-agent", "test")

        # Act
        snapshot = flow_data.evidence.get_all()
        snapshot["header.injected"] = "x"

        # Assert
        assert "header.injected" not in flow_data.evidence
        assert flow_data.evidence.get_all() == {"header.user-agent": "test"}
