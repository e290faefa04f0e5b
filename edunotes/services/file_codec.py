import base64
import binascii
import re
import unicodedata
from typing import List, Optional, Tuple
from urllib.parse import quote, unquote_to_bytes

from edunotes.utils.exceptions import FileProcessingError, InputValidationError

_DATA_URL = re.compile(r"^data:(?P<mime>[^;,]*)(?P<params>(?:;[^;,]*)*),(?P<data>.*)$", re.DOTALL)
MAX_FILENAME_LENGTH = 255

CONTENT_TYPES = {
    'pdf': 'application/pdf',
    'doc': 'application/msword',
    'docx': 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
}


def file_extension(filename: Optional[str]) -> str:
    if not filename or '.' not in filename:
        return ''
    return filename.rsplit('.', 1)[-1].lower()


def validate_file_type(filename: str, allowed_types: List[str]) -> bool:
    """Validate if file type is allowed"""
    if not filename:
        return False
    return file_extension(filename) in allowed_types


def get_content_type(filename: str) -> str:
    """Get content type based on file extension"""
    return CONTENT_TYPES.get(file_extension(filename), "application/octet-stream")


def format_file_size(size_bytes: int) -> str:
    """Size shown next to a note, in megabytes with one decimal"""
    return f"{size_bytes / (1024 * 1024):.1f} MB"


def encode_data_url(content: bytes, content_type: str) -> str:
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{content_type or 'application/octet-stream'};base64,{encoded}"


def decode_data_url(url: str) -> Tuple[bytes, str]:
    """Return the payload and media type held in a data URL"""
    match = _DATA_URL.match(url or "")
    if not match:
        raise FileProcessingError("Stored file is not a data URL")

    content_type = match.group("mime") or "text/plain"
    params = [p for p in match.group("params").split(";") if p]
    data = match.group("data")

    if "base64" in params:
        try:
            return base64.b64decode(data, validate=True), content_type
        except (binascii.Error, ValueError) as e:
            raise FileProcessingError("Stored file has invalid base64 content", details={"reason": str(e)})

    return unquote_to_bytes(data), content_type


def sanitize_filename(filename: Optional[str]) -> str:
    """Sanitize filename for safe storage"""
    filename = (filename or "").strip()
    if not filename:
        raise InputValidationError("Filename cannot be empty", "filename")

    # Remove path traversal attempts
    filename = filename.replace("../", "").replace("..\\", "")

    # Remove or replace dangerous and control characters
    filename = re.sub(r'[<>:"/\\|?*\x00-\x1f\x7f]', '_', filename)

    # Limit length, keeping the extension
    if len(filename) > MAX_FILENAME_LENGTH:
        name, ext = filename.rsplit('.', 1) if '.' in filename else (filename, '')
        keep = MAX_FILENAME_LENGTH - (len(ext) + 1 if ext else 0)
        filename = name[:keep] + ('.' + ext if ext else '')

    return filename.strip()


def content_disposition(filename: str, disposition: str = "attachment") -> str:
    """Content-Disposition value with an ASCII fallback and a UTF-8 ``filename*``.

    Header values go out as latin-1, so the plain ``filename`` parameter only
    ever carries ASCII; clients that understand RFC 6266 use ``filename*``.
    """
    ascii_name = unicodedata.normalize("NFKD", filename).encode("ascii", "ignore").decode("ascii")
    ascii_name = re.sub(r'[^A-Za-z0-9 ._()-]', '_', ascii_name).strip()
    stem = ascii_name.rsplit('.', 1)[0] if '.' in ascii_name else ascii_name
    if not stem.strip("_ ."):
        ext = file_extension(filename)
        ascii_name = f"download.{ext}" if ext.isascii() and ext.isalnum() else "download"

    return f"{disposition}; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename, safe='')}"
