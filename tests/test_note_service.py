from datetime import date

import pytest

from edunotes.services.note_service import NoteRepository
from edunotes.utils.exceptions import ValidationError


def test_empty_store_is_seeded_once(store):
    notes = NoteRepository(store)
    assert [n.id for n in notes.list_all()] == ["1", "2", "3", "4"]

    again = NoteRepository(store)
    assert [n.id for n in again.list_all()] == ["1", "2", "3", "4"]
    assert notes.ensure_seeded() is False


def test_existing_empty_collection_is_not_reseeded(store):
    notes = NoteRepository(store)
    for note_id in ["1", "2", "3", "4"]:
        notes.delete(note_id)

    assert NoteRepository(store).list_all() == []


def test_seed_notes_carry_fixed_metadata(store):
    seeded = {n.id: n for n in NoteRepository(store).list_all()}
    assert seeded["2"].title == "Database Normalization"
    assert seeded["2"].semester == 4
    assert seeded["1"].upload_date == date(2024, 1, 15)
    assert seeded["4"].tags == ["algorithms", "dynamic-programming", "graphs", "advanced"]
    assert seeded["3"].file_url.startswith("data:application/pdf;base64,")


def test_add_prepends_and_round_trips(store, make_note):
    notes = NoteRepository(store)
    note = make_note(description="Scheduling and memory", tags=["cpu", "paging"])
    notes.add(note)

    listed = notes.list_all()
    assert listed[0] == note
    assert len(listed) == 5
    assert notes.get(note.id) == note
    assert notes.get("missing") is None


def test_delete_is_idempotent(store):
    notes = NoteRepository(store)
    assert notes.delete("2") is True
    after_first = notes.list_all()
    assert notes.delete("2") is False
    assert notes.list_all() == after_first
    assert [n.id for n in after_first] == ["1", "3", "4"]


def test_accessible_to_gates_by_semester(store, make_note):
    notes = NoteRepository(store)
    assert [n.id for n in notes.accessible_to(2)] == ["3"]
    assert [n.id for n in notes.accessible_to(3)] == ["1", "3"]
    assert len(notes.accessible_to(8)) == 4

    notes.add(make_note(id="new", semester="3"))
    assert "new" not in [n.id for n in notes.accessible_to(2)]
    assert "new" in [n.id for n in notes.accessible_to(3)]


def test_accessible_to_matches_numeric_comparison(store):
    notes = NoteRepository(store)
    for viewer in range(1, 9):
        visible = {n.id for n in notes.accessible_to(viewer)}
        expected = {n.id for n in notes.list_all() if n.semester <= viewer}
        assert visible == expected


def test_recent_window_and_limit(store, make_note):
    notes = NoteRepository(store)
    today = date(2024, 1, 20)

    assert [n.id for n in notes.recent(days=7, today=today)] == ["1", "2", "3"]
    assert [n.id for n in notes.recent(days=7, limit=2, today=today)] == ["1", "2"]
    assert notes.recent(days=0, today=today) == []

    notes.add(make_note(id="fresh", upload_date=today))
    assert notes.recent(days=0, today=today)[0].id == "fresh"


def test_recent_rejects_negative_arguments(store):
    with pytest.raises(ValidationError):
        NoteRepository(store).recent(days=-1)


def test_unique_subjects_sorted(store, make_note):
    notes = NoteRepository(store)
    notes.add(make_note(subject="Algorithms"))
    assert notes.unique_subjects() == ["Algorithms", "Data Structures", "Database Management", "OOP"]
