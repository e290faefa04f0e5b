from datetime import datetime, timezone
from typing import Optional, Dict, Any, List
import uuid


class CustomException(Exception):

    def __init__(self,
                 message: str,
                 status_code: int = 500,
                 error_code: str = "INTERNAL_SERVER_ERROR",
                 details: Optional[Dict[str, Any]] = None,
                 user_message: Optional[str] = None,
                 correlation_id: Optional[str] = None,
                 ):
               self.message = message
               self.status_code = status_code
               self.error_code = error_code
               self.details = details or {}
               self.timestamp = datetime.now(timezone.utc)
               self.user_message = user_message or message
               self.correlation_id = correlation_id or str(uuid.uuid4())
               super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        error_dict = {
            "code": self.error_code,
            "message": self.user_message,
            "timestamp": self.timestamp.isoformat(),
            "correlation_id": self.correlation_id,
            "type": "error"
        }

        if self.details:
            error_dict["details"] = self.details
        return {"error": error_dict}

    def get_response_headers(self) -> Dict[str, str]:
        """Get additional response headers for this exception"""
        return {"X-Correlation-ID": self.correlation_id}


class ValidationError(CustomException):
    """Validation error exception"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=422,
            error_code="VALIDATION_ERROR",
            details=details
        )


class AuthenticationError(CustomException):
    """Authentication error exception"""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR"
        )


class AuthorizationError(CustomException):
    """Authorization error exception"""

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR"
        )


class NotFoundError(CustomException):
    """Resource not found exception"""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND"
        )


class FileProcessingError(CustomException):
    """File processing error exception"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=422,
            error_code="FILE_PROCESSING_ERROR",
            details=details
        )


class StorageError(CustomException):
    """Storage operation error exception"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=500,
            error_code="STORAGE_ERROR",
            details=details
        )


class CorruptCollectionError(StorageError):
    """A stored collection could not be decoded"""

    def __init__(self, key: str, reason: str):
        super().__init__(
            message=f"Stored collection '{key}' is malformed: {reason}",
            details={"key": key, "reason": reason}
        )
        self.key = key


class InputValidationError(ValidationError):
    """Input validation error with field-specific details"""

    def __init__(self, message: str, field: str, value: Any = None, allowed_values: Optional[List[str]] = None):
        details = {"field": field}
        if value is not None:
            details["provided_value"] = str(value)
        if allowed_values:
            details["allowed_values"] = allowed_values

        super().__init__(
            message=message,
            details=details
        )


class PayloadTooLargeError(CustomException):
    """Payload too large error"""

    def __init__(self, message: str, max_size: int, actual_size: int):
        super().__init__(
            message=message,
            status_code=413,
            error_code="PAYLOAD_TOO_LARGE",
            user_message="Request size exceeds maximum allowed size",
            details={
                "max_size_bytes": max_size,
                "actual_size_bytes": actual_size,
                "max_size_mb": round(max_size / (1024 * 1024), 2)
            }
        )


class UnsupportedMediaTypeError(CustomException):
    """Unsupported media type error"""

    def __init__(self, message: str, provided_type: str, allowed_types: List[str]):
        super().__init__(
            message=message,
            status_code=415,
            error_code="UNSUPPORTED_MEDIA_TYPE",
            user_message="File type not supported",
            details={
                "provided_type": provided_type,
                "allowed_types": allowed_types
            }
        )
