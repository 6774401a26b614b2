"""Tests for loading participant documents."""

from __future__ import annotations

import logging

import pytest

from crossing.config import (
    DEFAULT_PARTICIPANTS,
    DocumentError,
    DocumentNotFoundError,
    DocumentParseError,
    InvalidEntryError,
    LoadStatus,
    ParticipantEntry,
    assign_ids,
    default_participants,
    load_initial_state,
    load_participants,
)
from crossing.errors import ContractViolation


class TestLoadParticipants:
    def test_loads_people_in_document_order(self, write_document):
        path = write_document(
            """
people:
  - name: Slow
    time: 10
  - name: Fast
    time: 1
  - name: Middle
    time: 2.5
"""
        )
        result = load_participants(path)
        assert result.status is LoadStatus.LOADED
        assert not result.is_degraded
        assert [(p.id, p.name, p.crossing_time) for p in result.participants] == [
            (0, "Slow", 10),
            (1, "Fast", 1),
            (2, "Middle", 2.5),
        ]
        assert result.source == str(path)

    def test_duplicate_names_get_distinct_ids(self, write_document):
        path = write_document("people:\n  - {name: Sam, time: 3}\n  - {name: Sam, time: 3}\n")
        first, second = load_participants(path).participants
        assert first.name == second.name
        assert first != second

    def test_json_document(self, write_document):
        path = write_document('{"people": [{"name": "A", "time": 4}]}', name="people.json")
        assert load_participants(path).participants[0].crossing_time == 4

    def test_numeric_name_kept_as_text(self, write_document):
        path = write_document("people:\n  - {name: 7, time: 1}\n")
        assert load_participants(path).participants[0].name == "7"

    def test_initial_state_has_everyone_on_origin(self, write_document):
        path = write_document("people:\n  - {name: A, time: 1}\n  - {name: B, time: 2}\n")
        state = load_initial_state(path)
        assert state.origin.size() == 2
        assert state.bridge.is_empty()
        assert state.destination.is_empty()


class TestDegradedDocuments:
    """Documents that parse but hold nobody are logged, not fatal."""

    def test_empty_document(self, write_document, caplog):
        path = write_document("")
        with caplog.at_level(logging.WARNING):
            result = load_participants(path)
        assert result.status is LoadStatus.EMPTY_DOCUMENT
        assert result.is_degraded
        assert result.participants == []
        assert "is empty" in caplog.text

    def test_missing_people_section(self, write_document, caplog):
        path = write_document("crew:\n  - {name: A, time: 1}\n")
        with caplog.at_level(logging.WARNING):
            result = load_participants(path)
        assert result.status is LoadStatus.MISSING_PEOPLE
        assert result.participants == []
        assert "No people" in caplog.text

    def test_null_people_section(self, write_document):
        path = write_document("people:\n")
        assert load_participants(path).status is LoadStatus.MISSING_PEOPLE

    def test_empty_people_list_is_loaded(self, write_document):
        path = write_document("people: []\n")
        result = load_participants(path)
        assert result.status is LoadStatus.LOADED
        assert result.participants == []


class TestDocumentErrors:
    """Unusable documents abort with a DocumentError."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentNotFoundError):
            load_participants(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, write_document):
        path = write_document("people: [unclosed\n")
        with pytest.raises(DocumentParseError):
            load_participants(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "people.yaml"
        path.write_bytes(b"people:\n  - {name: \xff\xfe, time: 1}\n")
        with pytest.raises(DocumentParseError, match="UTF-8"):
            load_participants(path)

    def test_top_level_not_a_mapping(self, write_document):
        path = write_document("- name: A\n  time: 1\n")
        with pytest.raises(DocumentParseError, match="mapping"):
            load_participants(path)

    @pytest.mark.parametrize(
        "entry",
        [
            "{name: A}",
            "{time: 1}",
            "{name: A, time: 0}",
            "{name: A, time: -3}",
            "{name: A, time: fast}",
            "{name: A, time: .inf}",
            "{name: A, time: .nan}",
        ],
    )
    def test_invalid_entries(self, write_document, entry):
        path = write_document(f"people:\n  - {entry}\n")
        with pytest.raises(InvalidEntryError):
            load_participants(path)

    def test_document_errors_are_not_contract_violations(self):
        assert not issubclass(DocumentError, ContractViolation)


class TestIdsAndDefaults:
    def test_assign_ids_returns_next_id(self):
        entries = [ParticipantEntry(name="A", time=1), ParticipantEntry(name="B", time=2)]
        participants, next_id = assign_ids(entries, start=10)
        assert [p.id for p in participants] == [10, 11]
        assert next_id == 12

    def test_id_counter_is_per_call(self, write_document):
        path = write_document("people:\n  - {name: A, time: 1}\n")
        assert load_participants(path).participants[0].id == 0
        assert load_participants(path).participants[0].id == 0

    def test_default_participants(self):
        people = default_participants()
        assert [(p.id, p.name, p.crossing_time) for p in people] == [
            (0, "A", 1),
            (1, "B", 2),
            (2, "C", 5),
            (3, "D", 10),
        ]
        assert len(DEFAULT_PARTICIPANTS) == 4
