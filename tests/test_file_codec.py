import pytest

from edunotes.services.file_codec import (
    content_disposition,
    decode_data_url,
    encode_data_url,
    format_file_size,
    get_content_type,
    sanitize_filename,
    validate_file_type,
)
from edunotes.services.seed_data import placeholder_pdf
from edunotes.utils.exceptions import FileProcessingError, InputValidationError


def test_encode_data_url():
    assert encode_data_url(b"hi", "text/plain") == "data:text/plain;base64,aGk="


def test_decode_plain_data_url():
    assert decode_data_url("data:text/plain,hello%20world") == (b"hello world", "text/plain")
    assert decode_data_url("data:,x") == (b"x", "text/plain")


@pytest.mark.parametrize("url", ["", "http://example.com/a.pdf", "data:application/pdf;base64,@@@"])
def test_decode_rejects_malformed(url):
    with pytest.raises(FileProcessingError):
        decode_data_url(url)


def test_file_type_helpers():
    assert validate_file_type("Notes.PDF", ["pdf"])
    assert not validate_file_type("notes", ["pdf"])
    assert get_content_type("a.docx").endswith("wordprocessingml.document")
    assert get_content_type("a.bin") == "application/octet-stream"
    assert format_file_size(2_621_440) == "2.5 MB"


def test_placeholder_pdf_is_well_formed():
    pdf = placeholder_pdf("Advanced (Graph) Algorithms")
    assert pdf.startswith(b"%PDF-1.4\n")
    assert pdf.endswith(b"%%EOF")
    assert b"(Advanced \\(Graph\\) Algorithms) Tj" in pdf
    xref_at = int(pdf.rsplit(b"startxref\n", 1)[1].split(b"\n")[0])
    assert pdf[xref_at:].startswith(b"xref")


def test_sanitize_filename():
    assert sanitize_filename("  ../../etc/passwd.pdf ") == "etc_passwd.pdf"
    assert sanitize_filename('a"b<c>.pdf') == "a_b_c_.pdf"
    assert sanitize_filename("конспект.pdf") == "конспект.pdf"

    long_name = sanitize_filename("x" * 300 + ".docx")
    assert len(long_name) == 255
    assert long_name.endswith(".docx")

    with pytest.raises(InputValidationError):
        sanitize_filename("   ")


def test_content_disposition_is_latin1_safe():
    header = content_disposition("конспект.pdf")
    header.encode("latin-1")
    assert header == (
        "attachment; filename=\"download.pdf\"; "
        "filename*=UTF-8''%D0%BA%D0%BE%D0%BD%D1%81%D0%BF%D0%B5%D0%BA%D1%82.pdf"
    )

    header = content_disposition("Lecture 1 – Café.pdf")
    header.encode("latin-1")
    assert 'filename="Lecture 1  Cafe.pdf"' in header
    assert "filename*=UTF-8''Lecture%201%20%E2%80%93%20Caf%C3%A9.pdf" in header

    assert content_disposition("notes.pdf").startswith('attachment; filename="notes.pdf"; ')
