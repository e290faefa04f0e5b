from datetime import date

import pytest

from edunotes.core.config import Settings
from edunotes.schemas.note_schema import NoteType
from edunotes.services.file_codec import decode_data_url
from edunotes.services.portal import Portal
from edunotes.utils.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    PayloadTooLargeError,
    UnsupportedMediaTypeError,
    ValidationError,
)

PDF_BYTES = b"%PDF-1.4 lecture slides"


def test_login_checks_admin_code(portal):
    assert portal.admin.login("letmein") is True
    with pytest.raises(AuthenticationError):
        portal.admin.login("admin123")
    with pytest.raises(AuthenticationError):
        portal.admin.login("")


def test_upload_material_adds_note_and_announces_it(portal):
    note = portal.admin.upload_material(
        title=" Graph Theory ",
        subject="Discrete Mathematics",
        semester="3",
        file_name="graphs.pdf",
        content=PDF_BYTES,
        content_type="application/pdf",
        description="",
        tags="graphs, trees,, ",
        today=date(2024, 6, 1),
    )

    assert portal.notes.list_all()[0] == note
    assert note.title == "Graph Theory"
    assert note.semester == 3
    assert note.type == NoteType.PDF
    assert note.file_size == "0.0 MB"
    assert note.description is None
    assert note.tags == ["graphs", "trees"]
    assert note.upload_date == date(2024, 6, 1)
    assert decode_data_url(note.file_url) == (PDF_BYTES, "application/pdf")

    announcement = portal.notifications.list_all()[0]
    assert announcement.title == "New Study Material Available"
    assert announcement.message == "Graph Theory has been uploaded for Discrete Mathematics (Semester 3)"
    assert announcement.target_semester == "3"


def test_upload_word_document_is_doc(portal):
    note = portal.admin.upload_material(
        title="Lab manual",
        subject="Networks",
        semester=5,
        file_name="lab.docx",
        content=b"PK\x03\x04",
    )
    assert note.type == NoteType.DOC
    assert note.tags is None


def test_upload_sanitizes_file_name(portal):
    note = portal.admin.upload_material("Long", "Physics", 1, "../" + "x" * 300 + ".pdf", PDF_BYTES)
    assert len(note.file_name) == 255
    assert note.file_name.endswith(".pdf")
    assert "/" not in note.file_name

    with pytest.raises(ValidationError):
        portal.admin.upload_material("Blank", "Physics", 1, "  ", PDF_BYTES)


def test_upload_rejects_disallowed_extension(portal):
    with pytest.raises(UnsupportedMediaTypeError):
        portal.admin.upload_material("t", "s", 1, "virus.exe", b"MZ")


def test_upload_rejects_oversized_file(store):
    small = Portal(store, Settings(STORAGE_BACKEND="memory", MAX_FILE_SIZE=10))
    with pytest.raises(PayloadTooLargeError):
        small.admin.upload_material("t", "s", 1, "big.pdf", b"x" * 11)
    assert len(small.notes.list_all()) == 4


@pytest.mark.parametrize("semester", ["9", "zero", 0])
def test_upload_rejects_bad_semester(portal, semester):
    with pytest.raises(ValidationError) as exc_info:
        portal.admin.upload_material("t", "s", semester, "a.pdf", PDF_BYTES)
    assert exc_info.value.details["validation_errors"][0]["field"] == "semester"


def test_upload_rejects_blank_title(portal):
    with pytest.raises(ValidationError):
        portal.admin.upload_material("   ", "s", 1, "a.pdf", PDF_BYTES)


def test_send_notification_validates_target(portal):
    sent = portal.admin.send_notification("Holiday", "Campus closed Friday", "all")
    assert portal.notifications.list_all()[0] == sent

    with pytest.raises(ValidationError):
        portal.admin.send_notification("Holiday", "Campus closed Friday", "11")


def test_download_is_gated_by_semester(portal):
    note, content, content_type = portal.download("3", viewer_semester=2)
    assert note.id == "3"
    assert content.startswith(b"%PDF-1.4")
    assert content_type == "application/pdf"

    with pytest.raises(AuthorizationError):
        portal.download("2", viewer_semester=2)
    with pytest.raises(NotFoundError):
        portal.download("missing", viewer_semester=8)

    # admin downloads are not gated
    assert portal.download("4")[0].id == "4"


def test_recent_for_filters_by_viewer(portal):
    portal.admin.upload_material("Fresh", "Algorithms", 6, "fresh.pdf", PDF_BYTES)
    assert [n.title for n in portal.recent_for()] == ["Fresh"]
    assert portal.recent_for(viewer_semester=5) == []
