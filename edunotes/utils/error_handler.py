import uuid
from datetime import datetime, timezone
from typing import Dict, Any, Optional, List
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from edunotes.utils.exceptions import CustomException
from edunotes.core.logging import get_logger

logger = get_logger(__name__)


class ErrorResponseFormatter:
    """error responses with a consistent structure"""

    @staticmethod
    def format_error_response(
            error_code: str,
            message: str,
            status_code: int = 500,
            details: Optional[Dict[str, Any]] = None,
            correlation_id: Optional[str] = None,
            request_path: Optional[str] = None
    ) -> Dict[str, Any]:
        error_response = {
            "error": {
                "code": error_code,
                "message": message,
                "status": status_code,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "correlation_id": correlation_id or str(uuid.uuid4()),
                "type": "error"
            }
        }

        if details:
            error_response["error"]["details"] = details

        if request_path:
            error_response["error"]["path"] = request_path

        return error_response

    @staticmethod
    def format_validation_error_response(
            validation_errors: List[Dict[str, Any]],
            correlation_id: Optional[str] = None,
            request_path: Optional[str] = None
    ) -> Dict[str, Any]:
        """a validation error response with field specific detail"""

        formatted_errors = [
            {
                "field": error.get("loc", ["unknown"])[-1] if error.get("loc") else "unknown",
                "message": error.get("msg", "Validation failed"),
                "type": error.get("type", "validation_error"),
            }
            for error in validation_errors
        ]

        return ErrorResponseFormatter.format_error_response(
            error_code="VALIDATION_ERROR",
            message="Request validation failed",
            status_code=422,
            details={
                "validation_errors": formatted_errors,
                "error_count": len(formatted_errors)
            },
            correlation_id=correlation_id,
            request_path=request_path
        )


class GlobalExceptionHandler:
    """Maps application exceptions to JSON error responses"""

    def __init__(self):
        self.formatter = ErrorResponseFormatter()

    async def handle_custom_exception(self, request: Request, exc: CustomException) -> JSONResponse:
        log_data = {
            "path": request.url.path,
            "method": request.method,
            "error_code": exc.error_code,
            "status_code": exc.status_code
        }

        if exc.status_code >= 500:
            logger.error(f"Server error: {exc.message}", extra=log_data, exc_info=exc)
        else:
            logger.warning(f"Client error: {exc.message}", extra=log_data)

        response_data = exc.to_dict()
        response_data["error"]["path"] = request.url.path

        return JSONResponse(
            status_code=exc.status_code,
            content=jsonable_encoder(response_data),
            headers=exc.get_response_headers()
        )

    async def handle_http_exception(self, request: Request, exc: StarletteHTTPException) -> JSONResponse:
        correlation_id = str(uuid.uuid4())

        logger.warning(
            f"HTTP exception: {exc.detail}",
            extra={"path": request.url.path, "status_code": exc.status_code}
        )

        response_data = self.formatter.format_error_response(
            error_code="HTTP_ERROR",
            message=str(exc.detail),
            status_code=exc.status_code,
            correlation_id=correlation_id,
            request_path=request.url.path
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=response_data,
            headers={"X-Correlation-ID": correlation_id}
        )

    async def handle_validation_exception(self, request: Request, exc: RequestValidationError) -> JSONResponse:
        correlation_id = str(uuid.uuid4())

        logger.warning(
            f"Validation error: {len(exc.errors())} validation failures",
            extra={"path": request.url.path}
        )

        response_data = self.formatter.format_validation_error_response(
            validation_errors=exc.errors(),
            correlation_id=correlation_id,
            request_path=request.url.path
        )

        return JSONResponse(
            status_code=422,
            content=response_data,
            headers={"X-Correlation-ID": correlation_id}
        )


# Global exception handler instance
global_exception_handler = GlobalExceptionHandler()


def setup_exception_handlers(app):
    """Setup all exception handlers for the FastAPI app"""

    @app.exception_handler(CustomException)
    async def custom_exception_handler(request: Request, exc: CustomException):
        return await global_exception_handler.handle_custom_exception(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return await global_exception_handler.handle_http_exception(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return await global_exception_handler.handle_validation_exception(request, exc)
