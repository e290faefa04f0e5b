from datetime import date
from typing import List

from edunotes.schemas.note_schema import Note, NoteType
from edunotes.schemas.notification_schema import Notification
from edunotes.services.file_codec import encode_data_url


def placeholder_pdf(title: str) -> bytes:
    """Single-page PDF showing ``title``, enough for a download to open"""
    text = title.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
    stream = f"BT\n/F1 12 Tf\n72 720 Td\n({text}) Tj\nET\n"
    objects = [
        "<<\n/Type /Catalog\n/Pages 2 0 R\n>>",
        "<<\n/Type /Pages\n/Kids [3 0 R]\n/Count 1\n>>",
        "<<\n/Type /Page\n/Parent 2 0 R\n/MediaBox [0 0 612 792]\n/Contents 4 0 R\n>>",
        f"<<\n/Length {len(stream)}\n>>\nstream\n{stream}endstream",
        "<<\n/Type /Font\n/Subtype /Type1\n/BaseFont /Helvetica\n>>",
    ]

    out = "%PDF-1.4\n"
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n{body}\nendobj\n"

    xref_at = len(out)
    out += f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n"
    out += "".join(f"{offset:010d} 00000 n \n" for offset in offsets)
    out += f"trailer\n<<\n/Size {len(objects) + 1}\n/Root 1 0 R\n>>\nstartxref\n{xref_at}\n%%EOF"
    return out.encode("latin-1")


def _seed_note(**fields) -> Note:
    return Note(
        type=NoteType.PDF,
        file_url=encode_data_url(placeholder_pdf(fields["title"]), "application/pdf"),
        **fields,
    )


def default_notes() -> List[Note]:
    return [
        _seed_note(
            id="1",
            title="Introduction to Data Structures",
            subject="Data Structures",
            semester=3,
            upload_date=date(2024, 1, 15),
            file_size="2.5 MB",
            file_name="intro-data-structures.pdf",
            description="Comprehensive introduction to data structures including arrays, linked lists, and trees",
            tags=["algorithms", "programming", "computer-science"],
        ),
        _seed_note(
            id="2",
            title="Database Normalization",
            subject="Database Management",
            semester=4,
            upload_date=date(2024, 1, 14),
            file_size="1.8 MB",
            file_name="database-normalization.pdf",
            description="Understanding database normalization forms and their applications",
            tags=["database", "sql", "normalization"],
        ),
        _seed_note(
            id="3",
            title="Object Oriented Programming Concepts",
            subject="OOP",
            semester=2,
            upload_date=date(2024, 1, 13),
            file_size="3.2 MB",
            file_name="oop-concepts.pdf",
            description="Fundamental concepts of object-oriented programming including inheritance and polymorphism",
            tags=["oop", "programming", "java", "concepts"],
        ),
        _seed_note(
            id="4",
            title="Advanced Algorithms",
            subject="Algorithms",
            semester=5,
            upload_date=date(2024, 1, 12),
            file_size="4.1 MB",
            file_name="advanced-algorithms.pdf",
            description="Complex algorithmic concepts including dynamic programming and graph algorithms",
            tags=["algorithms", "dynamic-programming", "graphs", "advanced"],
        ),
    ]


def default_notifications(today: date) -> List[Notification]:
    return [
        Notification(
            id="1",
            title="Welcome to EduNotes",
            message="Your digital learning companion is ready! Access all your study materials in one place.",
            date=today,
            is_read=False,
            target_semester="all",
        )
    ]
