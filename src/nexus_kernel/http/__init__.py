"""
HTTP boundary helpers
Response envelope and error-to-status translation
"""
from nexus_kernel.http.models import Envelope, ErrorDetail
from nexus_kernel.http.responses import (
    created_response,
    envelope_for_error,
    error_response,
    register_exception_handlers,
    status_for,
    success_response,
)

__all__ = [
    "Envelope",
    "ErrorDetail",
    "created_response",
    "envelope_for_error",
    "error_response",
    "register_exception_handlers",
    "status_for",
    "success_response",
]
